"""Unit tests for single-object and list data sources."""

import pytest

from pingdirectory_provider.constants import CONFIG_SCHEMA_URN_PREFIX, SINGLETON_ID
from pingdirectory_provider.errors import PingDirectoryAPIError
from pingdirectory_provider.models import (
    ConnectionCriteria,
    GlobalConfiguration,
    ListResponse,
)
from pingdirectory_provider.resources import (
    ConnectionCriteriaDataSource,
    GlobalConfigurationDataSource,
    ListDataSourceModel,
    TrustManagerProvidersDataSource,
)


def trust_manager_urn(resource_type):
    return f"{CONFIG_SCHEMA_URN_PREFIX}trust-manager-provider:{resource_type}"


class TestConfigDataSource:
    """Tests for ConfigDataSource."""

    def test_metadata_and_schema(self, resource_configuration):
        """Test that lookup keys are required and everything else computed."""
        data_source = ConnectionCriteriaDataSource(resource_configuration)
        schema = data_source.schema()
        assert data_source.metadata() == "pingdirectory_connection_criteria"
        assert schema["name"].required
        assert schema["type"].computed
        assert schema["included_protocol"].computed
        assert not schema["included_protocol"].optional

    @pytest.mark.asyncio
    async def test_read(self, resource_configuration, api_client):
        """Test reading one object by name."""
        api_client.get_config_object.return_value = {
            "schemas": [f"{CONFIG_SCHEMA_URN_PREFIX}connection-criteria:simple"],
            "id": "Internal",
            "includedProtocol": ["internal"],
        }
        data_source = ConnectionCriteriaDataSource(resource_configuration)

        result = await data_source.read(ConnectionCriteria(name="Internal"))

        api_client.get_config_object.assert_awaited_once_with("connection-criteria/Internal")
        assert result.state.name == "Internal"
        assert result.state.type == "simple"
        assert result.state.included_protocol == {"internal"}

    @pytest.mark.asyncio
    async def test_name_required(self, resource_configuration, api_client):
        """Test that the lookup name must be set."""
        data_source = ConnectionCriteriaDataSource(resource_configuration)

        result = await data_source.read(ConnectionCriteria())

        assert result.state is None
        assert result.diagnostics.errors[0].detail == "Attribute 'name' is required"
        api_client.get_config_object.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_not_found(self, resource_configuration, api_client):
        """Test that a missing object is an error for data sources."""
        api_client.get_config_object.side_effect = PingDirectoryAPIError(
            "404 Not Found", status_code=404
        )
        data_source = ConnectionCriteriaDataSource(resource_configuration)

        result = await data_source.read(ConnectionCriteria(name="Nope"))

        assert result.diagnostics.errors[0].summary == (
            "An error occurred while getting the Connection Criteria"
        )

    @pytest.mark.asyncio
    async def test_singleton(self, resource_configuration, api_client):
        """Test reading the global configuration without a name."""
        api_client.get_config_object.return_value = {
            "schemas": [f"{CONFIG_SCHEMA_URN_PREFIX}global-configuration"],
            "sizeLimit": 1000,
        }
        data_source = GlobalConfigurationDataSource(resource_configuration)

        result = await data_source.read(GlobalConfiguration())

        api_client.get_config_object.assert_awaited_once_with("global-configuration")
        assert result.state.id == SINGLETON_ID
        assert result.state.size_limit == 1000


class TestConfigListDataSource:
    """Tests for ConfigListDataSource."""

    @pytest.mark.asyncio
    async def test_list(self, resource_configuration, api_client):
        """Test that listed objects are returned with their types."""
        api_client.list_config_objects.return_value = ListResponse(
            resources=[
                {"schemas": [trust_manager_urn("blind")], "id": "Blind Trust"},
                {"schemas": [trust_manager_urn("jvm-default")], "id": "JVM-Default"},
                {"schemas": [trust_manager_urn("unknown-kind")], "id": "Skipped"},
            ]
        )
        data_source = TrustManagerProvidersDataSource(resource_configuration)

        result = await data_source.read()

        api_client.list_config_objects.assert_awaited_once_with(
            "trust-manager-providers", None
        )
        state = result.state
        assert state.id == SINGLETON_ID
        assert state.filter is None
        assert [(o.id, o.type) for o in state.objects] == [
            ("Blind Trust", "blind"),
            ("JVM-Default", "jvm-default"),
        ]

    @pytest.mark.asyncio
    async def test_filter(self, resource_configuration, api_client):
        """Test that the filter is passed to the server and kept in state."""
        api_client.list_config_objects.return_value = ListResponse()
        data_source = TrustManagerProvidersDataSource(resource_configuration)

        result = await data_source.read(ListDataSourceModel(filter='enabled eq "true"'))

        api_client.list_config_objects.assert_awaited_once_with(
            "trust-manager-providers", 'enabled eq "true"'
        )
        assert result.state.filter == 'enabled eq "true"'
        assert result.state.objects == []

    @pytest.mark.asyncio
    async def test_error(self, resource_configuration, api_client):
        """Test that list failures are reported."""
        api_client.list_config_objects.side_effect = PingDirectoryAPIError(
            "400 Bad Request",
            status_code=400,
            response_body='{"detail": "Invalid filter"}',
        )
        data_source = TrustManagerProvidersDataSource(resource_configuration)

        result = await data_source.read(ListDataSourceModel(filter="bad"))

        assert result.state is None
        error = result.diagnostics.errors[0]
        assert error.summary == (
            "An error occurred while listing the Trust Manager Provider objects"
        )
        assert error.detail == "400 Bad Request - Detail: Invalid filter"

    def test_schema(self, resource_configuration):
        """Test the list data source schema."""
        data_source = TrustManagerProvidersDataSource(resource_configuration)
        schema = data_source.schema()
        assert data_source.metadata() == "pingdirectory_trust_manager_providers"
        assert schema["filter"].optional
        assert schema["objects"].computed
