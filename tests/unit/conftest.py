"""Shared pytest fixtures for provider unit tests."""

from unittest.mock import AsyncMock

import pytest

from pingdirectory_provider.configuration import (
    ProviderConfiguration,
    ResourceConfiguration,
)
from pingdirectory_provider.utils.config_api import ConfigurationAPIClient


def make_configuration(
    product_version: str = "10.2.0.0",
) -> ResourceConfiguration:
    """Build a resource configuration whose API client methods are AsyncMocks."""
    api_client = object.__new__(ConfigurationAPIClient)
    api_client.add_config_object = AsyncMock()
    api_client.get_config_object = AsyncMock()
    api_client.update_config_object = AsyncMock()
    api_client.delete_config_object = AsyncMock(return_value=None)
    api_client.list_config_objects = AsyncMock()
    return ResourceConfiguration(
        provider_config=ProviderConfiguration(
            https_host="https://localhost:1443",
            username="cn=administrator",
            password="2FederateM0re",
            product_version=product_version,
        ),
        api_client=api_client,
    )


@pytest.fixture
def resource_configuration():
    """Resource configuration for the newest supported server version."""
    return make_configuration()


@pytest.fixture
def api_client(resource_configuration):
    """The mocked API client inside ``resource_configuration``."""
    return resource_configuration.api_client


@pytest.fixture
def configuration_factory():
    """Factory for resource configurations targeting a given product version."""
    return make_configuration
