"""
Resources and data sources for PingDirectory configuration objects.

Each module covers one configuration object family. The tuples below are
what the provider registers.
"""

from .base import (
    ConfigResource,
    DefaultConfigResource,
    PlanResult,
    ResourceResult,
    SingletonConfigResource,
)
from .connection_criteria import (
    ConnectionCriteriaDataSource,
    ConnectionCriteriaResource,
    ConnectionCriteriasDataSource,
    DefaultConnectionCriteriaResource,
)
from .data_sources import ConfigDataSource, ConfigListDataSource, ListDataSourceModel
from .global_configuration import (
    DefaultGlobalConfigurationResource,
    GlobalConfigurationDataSource,
)
from .log_field_syntax import DefaultLogFieldSyntaxResource
from .monitoring_endpoint import (
    DefaultMonitoringEndpointResource,
    MonitoringEndpointResource,
)
from .prometheus_monitor_attribute_metric import (
    DefaultPrometheusMonitorAttributeMetricResource,
    PrometheusMonitorAttributeMetricResource,
)
from .token_claim_validation import (
    DefaultTokenClaimValidationResource,
    TokenClaimValidationResource,
)
from .trust_manager_provider import (
    DefaultTrustManagerProviderResource,
    TrustManagerProviderDataSource,
    TrustManagerProviderResource,
    TrustManagerProvidersDataSource,
)

RESOURCE_CLASSES: tuple[type[ConfigResource], ...] = (
    ConnectionCriteriaResource,
    DefaultConnectionCriteriaResource,
    DefaultGlobalConfigurationResource,
    DefaultLogFieldSyntaxResource,
    DefaultMonitoringEndpointResource,
    DefaultPrometheusMonitorAttributeMetricResource,
    DefaultTokenClaimValidationResource,
    DefaultTrustManagerProviderResource,
    MonitoringEndpointResource,
    PrometheusMonitorAttributeMetricResource,
    TokenClaimValidationResource,
    TrustManagerProviderResource,
)

DATA_SOURCE_CLASSES: tuple[type[ConfigDataSource] | type[ConfigListDataSource], ...] = (
    ConnectionCriteriaDataSource,
    ConnectionCriteriasDataSource,
    GlobalConfigurationDataSource,
    TrustManagerProviderDataSource,
    TrustManagerProvidersDataSource,
)

__all__ = [
    "DATA_SOURCE_CLASSES",
    "RESOURCE_CLASSES",
    "ConfigDataSource",
    "ConfigListDataSource",
    "ConfigResource",
    "ConnectionCriteriaDataSource",
    "ConnectionCriteriaResource",
    "ConnectionCriteriasDataSource",
    "DefaultConfigResource",
    "DefaultConnectionCriteriaResource",
    "DefaultGlobalConfigurationResource",
    "DefaultLogFieldSyntaxResource",
    "DefaultMonitoringEndpointResource",
    "DefaultPrometheusMonitorAttributeMetricResource",
    "DefaultTokenClaimValidationResource",
    "DefaultTrustManagerProviderResource",
    "GlobalConfigurationDataSource",
    "ListDataSourceModel",
    "MonitoringEndpointResource",
    "PlanResult",
    "PrometheusMonitorAttributeMetricResource",
    "ResourceResult",
    "SingletonConfigResource",
    "TokenClaimValidationResource",
    "TrustManagerProviderDataSource",
    "TrustManagerProviderResource",
    "TrustManagerProvidersDataSource",
]
