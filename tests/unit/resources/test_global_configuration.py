"""
Unit tests for the global configuration singleton.

Covers singleton addressing, attribute version gates and values the
server stores in its own format.
"""

import logging

import pytest

from pingdirectory_provider.constants import CONFIG_SCHEMA_URN_PREFIX, SINGLETON_ID
from pingdirectory_provider.models import GlobalConfiguration
from pingdirectory_provider.resources import DefaultGlobalConfigurationResource

GLOBAL_URN = f"{CONFIG_SCHEMA_URN_PREFIX}global-configuration"


def global_response(**properties):
    body = {
        "schemas": [GLOBAL_URN],
        "instanceName": "pd1",
        "sizeLimit": 1000,
        "timeLimit": "60 s",
        "writabilityMode": "enabled",
    }
    body.update(properties)
    return body


@pytest.fixture
def resource(resource_configuration):
    return DefaultGlobalConfigurationResource(resource_configuration)


class TestSingleton:
    """Tests for singleton addressing."""

    def test_metadata(self, resource):
        """Test the provider type name."""
        assert resource.metadata() == "pingdirectory_default_global_configuration"

    def test_object_url(self, resource):
        """Test that the singleton is addressed by its collection path."""
        assert resource.object_url(GlobalConfiguration()) == "global-configuration"

    def test_plan_id(self, resource):
        """Test that the plan carries the fixed singleton id."""
        plan = resource.modify_plan(GlobalConfiguration(size_limit=500)).plan
        assert plan.id == SINGLETON_ID
        assert plan.size_limit == 500
        assert "time_limit" not in plan.model_fields_set

    def test_import(self, resource):
        """Test that any import id resolves to the singleton."""
        result = resource.import_state("whatever")
        assert result.state.id == SINGLETON_ID

    def test_no_name_required(self, resource):
        """Test that an empty configuration is valid."""
        assert len(resource.validate_config(GlobalConfiguration())) == 0

    @pytest.mark.asyncio
    async def test_create_and_read(self, resource, api_client):
        """Test adopting the singleton and refreshing it."""
        api_client.get_config_object.return_value = global_response()
        api_client.update_config_object.return_value = global_response(sizeLimit=500)
        plan = resource.modify_plan(GlobalConfiguration(size_limit=500)).plan

        result = await resource.create(plan)

        api_client.get_config_object.assert_awaited_once_with("global-configuration")
        state = result.state
        assert state.id == SINGLETON_ID
        assert state.type == "global-configuration"
        assert state.size_limit == 500
        assert state.instance_name == "pd1"
        assert state.location == ""

        api_client.get_config_object.return_value = global_response(sizeLimit=700)
        refreshed = await resource.read(state)
        assert refreshed.state.size_limit == 700

    @pytest.mark.asyncio
    async def test_delete_leaves_server(self, resource, api_client):
        """Test that deleting the resource sends nothing."""
        await resource.delete(resource.import_state("id").state)
        api_client.delete_config_object.assert_not_awaited()


class TestVersionGates:
    """Tests for attributes introduced in later releases."""

    def test_new_attribute_rejected_on_old_server(self, configuration_factory):
        """Test that 9.2 attributes are rejected against 9.1."""
        resource = DefaultGlobalConfigurationResource(configuration_factory("9.1.0.0"))

        result = resource.modify_plan(GlobalConfiguration(unauthenticated_size_limit=10))

        error = result.diagnostics.errors[0]
        assert error.summary == (
            "Attribute 'unauthenticated_size_limit' not supported by PingDirectory "
            "version 9.1.0.0"
        )
        assert error.attribute == "unauthenticated_size_limit"

    def test_unset_attribute_allowed_on_old_server(self, configuration_factory):
        """Test that gated attributes are fine when not configured."""
        resource = DefaultGlobalConfigurationResource(configuration_factory("9.1.0.0"))
        result = resource.modify_plan(GlobalConfiguration(size_limit=10))
        assert len(result.diagnostics) == 0

    def test_empty_string_not_counted(self, configuration_factory):
        """Test that an empty gated string is treated as not configured."""
        resource = DefaultGlobalConfigurationResource(configuration_factory("9.1.0.0"))
        result = resource.modify_plan(GlobalConfiguration(unauthenticated_time_limit=""))
        assert len(result.diagnostics) == 0

    def test_new_attribute_accepted_on_new_server(self, configuration_factory):
        """Test that 10.0 attributes are accepted against 10.0."""
        resource = DefaultGlobalConfigurationResource(configuration_factory("10.0.0.0"))
        result = resource.modify_plan(
            GlobalConfiguration(use_shared_database_cache_across_all_local_db_backends=True)
        )
        assert len(result.diagnostics) == 0


class TestFormattedValues:
    """Tests for values PingDirectory re-formats."""

    @pytest.mark.asyncio
    async def test_equivalent_value_keeps_plan(self, resource, api_client):
        """Test that "1s" stays "1s" when the server stores "1 s"."""
        api_client.get_config_object.return_value = global_response()
        api_client.update_config_object.return_value = global_response(timeLimit="1 s")
        plan = resource.modify_plan(GlobalConfiguration(time_limit="1s")).plan

        result = await resource.create(plan)

        request = api_client.update_config_object.await_args.args[1]
        assert [(op.path, op.value) for op in request.operations] == [
            ("time-limit", "1s")
        ]
        assert result.state.time_limit == "1s"
        assert result.diagnostics.warnings == []

    @pytest.mark.asyncio
    async def test_case_difference_keeps_plan(self, resource, api_client):
        """Test that size units differing only in case keep the planned value."""
        api_client.get_config_object.return_value = global_response()
        api_client.update_config_object.return_value = global_response(
            maximumServerOutLogFileSize="100 mb"
        )
        plan = resource.modify_plan(
            GlobalConfiguration(maximum_server_out_log_file_size="100 MB")
        ).plan

        result = await resource.create(plan)

        assert result.state.maximum_server_out_log_file_size == "100 MB"

    @pytest.mark.asyncio
    async def test_different_value_warns(self, resource, api_client):
        """Test that a non-equivalent server value is reported and kept."""
        api_client.get_config_object.return_value = global_response()
        api_client.update_config_object.return_value = global_response(
            timeLimit="60 s"
        )
        plan = resource.modify_plan(GlobalConfiguration(time_limit="1 m")).plan

        result = await resource.create(plan)

        assert result.state.time_limit == "60 s"
        warning = result.diagnostics.warnings[0]
        assert warning.summary == "Mismatched PingDirectory formatted value"
        assert warning.attribute == "time_limit"

    @pytest.mark.asyncio
    async def test_apply_logs_operation(self, resource, api_client, caplog):
        """Test that apply logs the start and completion of the operation."""
        api_client.get_config_object.return_value = global_response()

        with caplog.at_level(logging.INFO):
            result = await resource.apply(GlobalConfiguration())

        assert not result.diagnostics.has_error()
        assert "Starting apply for pingdirectory_default_global_configuration" in caplog.text
        assert "Completed create for pingdirectory_default_global_configuration" in caplog.text
