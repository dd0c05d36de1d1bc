"""
Monitoring Endpoint resources.
"""

from pingdirectory_provider.models.monitoring_endpoint import (
    MONITORING_ENDPOINT_TYPES,
    MonitoringEndpoint,
)
from pingdirectory_provider.resources.base import ConfigResource, DefaultConfigResource


class MonitoringEndpointResource(ConfigResource):
    """Create and manage a Monitoring Endpoint."""

    type_name = "monitoring_endpoint"
    display_name = "Monitoring Endpoint"
    description = "Resource to create and manage a Monitoring Endpoint."
    model = MonitoringEndpoint
    schema_name = "monitoring-endpoint"
    collection_path = "monitoring-endpoints"
    type_options = tuple(MONITORING_ENDPOINT_TYPES)


class DefaultMonitoringEndpointResource(
    MonitoringEndpointResource, DefaultConfigResource
):
    type_name = "default_monitoring_endpoint"
    description = "Resource to manage a Monitoring Endpoint that already exists."
