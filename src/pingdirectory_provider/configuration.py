"""
Configuration handed from the provider to its resources and data sources.
"""

from dataclasses import dataclass, field

from pingdirectory_provider.utils.config_api import ConfigurationAPIClient


@dataclass
class ProviderConfiguration:
    """Resolved provider settings shared by all resources."""

    https_host: str
    username: str
    password: str = field(repr=False)
    product_version: str


@dataclass
class ResourceConfiguration:
    """What every resource and data source receives once the provider is configured."""

    provider_config: ProviderConfiguration
    api_client: ConfigurationAPIClient
