"""
Pydantic models for PingDirectory configuration objects.

This package contains the resource models (one per configuration object
family) and the Configuration API envelope models shared by all of them.
"""

from .api import (
    ErrorResponse,
    ListResponse,
    Messages,
    Operation,
    RequiredAction,
    UpdateRequest,
)
from .base import (
    AttributeInfo,
    AttributeKind,
    ConfigModel,
    NamedConfigModel,
    attributes_of,
)
from .connection_criteria import ConnectionCriteria
from .global_configuration import GlobalConfiguration
from .log_field_syntax import LogFieldSyntax
from .monitoring_endpoint import MonitoringEndpoint
from .prometheus_monitor_attribute_metric import PrometheusMonitorAttributeMetric
from .token_claim_validation import TokenClaimValidation
from .trust_manager_provider import TrustManagerProvider

__all__ = [
    # API envelopes
    "ErrorResponse",
    "ListResponse",
    "Messages",
    "Operation",
    "RequiredAction",
    "UpdateRequest",
    # Base
    "AttributeInfo",
    "AttributeKind",
    "ConfigModel",
    "NamedConfigModel",
    "attributes_of",
    # Resource models
    "ConnectionCriteria",
    "GlobalConfiguration",
    "LogFieldSyntax",
    "MonitoringEndpoint",
    "PrometheusMonitorAttributeMetric",
    "TokenClaimValidation",
    "TrustManagerProvider",
]
