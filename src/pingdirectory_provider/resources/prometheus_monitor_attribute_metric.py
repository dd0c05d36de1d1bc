"""
Prometheus Monitor Attribute Metric resources.

Metrics live below a Prometheus monitoring HTTP servlet extension and are
named by ``metric_name``. They were introduced in PingDirectory 9.2.
"""

from pingdirectory_provider.compatibility import PING_DIRECTORY_9200
from pingdirectory_provider.models.prometheus_monitor_attribute_metric import (
    PROMETHEUS_MONITOR_ATTRIBUTE_METRIC_TYPES,
    PrometheusMonitorAttributeMetric,
)
from pingdirectory_provider.resources.base import ConfigResource, DefaultConfigResource


class PrometheusMonitorAttributeMetricResource(ConfigResource):
    """Create and manage a Prometheus Monitor Attribute Metric."""

    type_name = "prometheus_monitor_attribute_metric"
    display_name = "Prometheus Monitor Attribute Metric"
    description = "Resource to create and manage a Prometheus Monitor Attribute Metric."
    model = PrometheusMonitorAttributeMetric
    schema_name = "prometheus-monitor-attribute-metric"
    collection_path = "prometheus-monitor-attribute-metrics"
    parent_attribute = "http_servlet_extension_name"
    parent_collection_path = "http-servlet-extensions"
    name_attribute = "metric_name"
    type_options = tuple(PROMETHEUS_MONITOR_ATTRIBUTE_METRIC_TYPES)
    min_version = PING_DIRECTORY_9200


class DefaultPrometheusMonitorAttributeMetricResource(
    PrometheusMonitorAttributeMetricResource, DefaultConfigResource
):
    type_name = "default_prometheus_monitor_attribute_metric"
    description = (
        "Resource to manage a Prometheus Monitor Attribute Metric that already exists."
    )
