"""
Prometheus Monitor Attribute Metric model.

Metrics are children of a Prometheus monitoring HTTP servlet extension and
are addressed by their metric name rather than a separate object name.
"""

from pingdirectory_provider.models.base import (
    ConfigModel,
    set_attribute,
    string_attribute,
)

PROMETHEUS_MONITOR_ATTRIBUTE_METRIC_TYPES = ["prometheus-monitor-attribute-metric"]

METRIC_TYPES = ["counter", "gauge", "boolean"]


class PrometheusMonitorAttributeMetric(ConfigModel):
    """Prometheus Monitor Attribute Metric configuration object."""

    http_servlet_extension_name: str | None = string_attribute(
        parent=True,
        required=True,
        requires_replace=True,
        description="Name of the parent HTTP Servlet Extension",
    )
    metric_name: str | None = string_attribute(
        required=True,
        requires_replace=True,
        description="The name that will be used in the metric to be consumed by Prometheus.",
    )
    monitor_attribute_name: str | None = string_attribute(
        required=True,
        description="The name of the monitor attribute that contains the numeric value to be published.",
    )
    monitor_object_class_name: str | None = string_attribute(
        required=True,
        description="The name of the object class for monitor entries that contain the monitor attribute.",
    )
    metric_type: str | None = string_attribute(
        required=True,
        enum=METRIC_TYPES,
        description="The metric type that should be used for the value of the specified monitor attribute.",
    )
    filter: str | None = string_attribute(
        description="A filter that may be used to restrict the set of monitor entries for which the metric should be generated.",
    )
    metric_description: str | None = string_attribute(
        description="A human-readable description that should be published as part of the metric definition.",
    )
    label_name_value_pair: set[str] | None = set_attribute(
        description="A set of name-value pairs for labels that should be included in the published metric for the target attribute.",
    )
