"""
Trust Manager Provider resources and data sources.

The trust store PIN is never returned by the Configuration API; state
keeps the planned value.
"""

from pingdirectory_provider.models.trust_manager_provider import (
    TRUST_MANAGER_PROVIDER_TYPES,
    TrustManagerProvider,
)
from pingdirectory_provider.resources.base import ConfigResource, DefaultConfigResource
from pingdirectory_provider.resources.data_sources import (
    ConfigDataSource,
    ConfigListDataSource,
)


class TrustManagerProviderResource(ConfigResource):
    """Create and manage a Trust Manager Provider."""

    type_name = "trust_manager_provider"
    display_name = "Trust Manager Provider"
    description = "Resource to create and manage a Trust Manager Provider."
    model = TrustManagerProvider
    schema_name = "trust-manager-provider"
    collection_path = "trust-manager-providers"
    type_options = tuple(TRUST_MANAGER_PROVIDER_TYPES)


class DefaultTrustManagerProviderResource(
    TrustManagerProviderResource, DefaultConfigResource
):
    type_name = "default_trust_manager_provider"
    description = "Resource to manage a Trust Manager Provider that already exists."


class TrustManagerProviderDataSource(ConfigDataSource):
    type_name = "trust_manager_provider"
    resource_class = TrustManagerProviderResource


class TrustManagerProvidersDataSource(ConfigListDataSource):
    type_name = "trust_manager_providers"
    resource_class = TrustManagerProviderResource
