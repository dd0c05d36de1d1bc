"""
Connection Criteria resources and data sources.
"""

from pingdirectory_provider.models.connection_criteria import (
    CONNECTION_CRITERIA_TYPES,
    ConnectionCriteria,
)
from pingdirectory_provider.resources.base import ConfigResource, DefaultConfigResource
from pingdirectory_provider.resources.data_sources import (
    ConfigDataSource,
    ConfigListDataSource,
)


class ConnectionCriteriaResource(ConfigResource):
    """Create and manage a Connection Criteria."""

    type_name = "connection_criteria"
    display_name = "Connection Criteria"
    description = "Resource to create and manage a Connection Criteria."
    model = ConnectionCriteria
    schema_name = "connection-criteria"
    collection_path = "connection-criteria"
    type_options = tuple(CONNECTION_CRITERIA_TYPES)


class DefaultConnectionCriteriaResource(
    ConnectionCriteriaResource, DefaultConfigResource
):
    type_name = "default_connection_criteria"
    description = "Resource to manage a Connection Criteria that already exists."


class ConnectionCriteriaDataSource(ConfigDataSource):
    type_name = "connection_criteria"
    resource_class = ConnectionCriteriaResource


class ConnectionCriteriasDataSource(ConfigListDataSource):
    type_name = "connection_criterias"
    resource_class = ConnectionCriteriaResource
