"""
Global Configuration resource and data source.

There is exactly one global configuration object. It has no name and can
only be modified; removing the resource leaves the server untouched.
"""

from pingdirectory_provider.models.global_configuration import (
    GLOBAL_CONFIGURATION_TYPES,
    GlobalConfiguration,
)
from pingdirectory_provider.resources.base import SingletonConfigResource
from pingdirectory_provider.resources.data_sources import ConfigDataSource


class DefaultGlobalConfigurationResource(SingletonConfigResource):
    type_name = "default_global_configuration"
    display_name = "Global Configuration"
    description = "Manages the Global Configuration."
    model = GlobalConfiguration
    schema_name = "global-configuration"
    collection_path = "global-configuration"
    type_options = tuple(GLOBAL_CONFIGURATION_TYPES)


class GlobalConfigurationDataSource(ConfigDataSource):
    type_name = "global_configuration"
    resource_class = DefaultGlobalConfigurationResource
