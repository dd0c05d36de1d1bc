"""
Read-only data sources over configuration objects.

A single-object data source looks up one object by name and exposes every
attribute as computed. A list data source returns the id and type of every
object in a collection, optionally narrowed by a SCIM filter.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, Field

from pingdirectory_provider.configuration import ResourceConfiguration
from pingdirectory_provider.constants import RESOURCE_NAME_PREFIX, SINGLETON_ID
from pingdirectory_provider.diagnostics import Diagnostics
from pingdirectory_provider.errors import PingDirectoryAPIError
from pingdirectory_provider.observability.logging import ProviderLogger
from pingdirectory_provider.resources.base import ConfigResource, ResourceResult
from pingdirectory_provider.schema import (
    Schema,
    build_data_source_schema,
    build_list_data_source_schema,
)
from pingdirectory_provider.types import is_defined, is_non_empty_string, value_of
from pingdirectory_provider.utils.http_errors import report_http_error


class ListedObject(BaseModel):
    """Identity of one object returned by a list data source."""

    id: str
    type: str


class ListDataSourceModel(BaseModel):
    """Configuration and state of a list data source."""

    id: str | None = None
    filter: str | None = Field(
        None, description="SCIM filter used when searching the configuration"
    )
    objects: list[ListedObject] | None = None


class ConfigDataSource:
    """Data source reading a single configuration object."""

    type_name: ClassVar[str]
    resource_class: ClassVar[type[ConfigResource]]

    def __init__(self, configuration: ResourceConfiguration):
        self.resource = self.resource_class(configuration)
        self.logger = ProviderLogger(f"{__name__}.{self.type_name}")

    def metadata(self) -> str:
        return f"{RESOURCE_NAME_PREFIX}{self.type_name}"

    def schema(self) -> Schema:
        return build_data_source_schema(
            self.resource_class.model,
            description=f"Describes a {self.resource_class.display_name}.",
            named=self.resource_class.name_attribute == "name",
        )

    async def read(self, config: BaseModel) -> ResourceResult:
        """
        Read the configuration object identified by a data source config.

        Args:
            config: Model carrying the lookup attributes (name and parent)

        Returns:
            ResourceResult with the object's state, or errors
        """
        diagnostics = Diagnostics()
        resource = self.resource
        for key in (resource.name_attribute, resource.parent_attribute):
            if key is not None and not is_non_empty_string(value_of(config, key)):
                diagnostics.add_error(
                    "Missing required attribute",
                    f"Attribute '{key}' is required",
                    attribute=key,
                )
        if diagnostics.has_error():
            return ResourceResult(None, diagnostics)

        try:
            response = await resource.api_client.get_config_object(
                resource.object_url(config)
            )
        except PingDirectoryAPIError as e:
            report_http_error(
                diagnostics,
                f"An error occurred while getting the {resource.display_name}",
                e,
            )
            return ResourceResult(None, diagnostics)

        state = resource.read_response(response, diagnostics, expected=config)
        return ResourceResult(state, diagnostics)


class ConfigListDataSource:
    """Data source listing the objects of a configuration collection."""

    type_name: ClassVar[str]
    resource_class: ClassVar[type[ConfigResource]]

    def __init__(self, configuration: ResourceConfiguration):
        self.resource = self.resource_class(configuration)
        self.logger = ProviderLogger(f"{__name__}.{self.type_name}")

    def metadata(self) -> str:
        return f"{RESOURCE_NAME_PREFIX}{self.type_name}"

    def schema(self) -> Schema:
        return build_list_data_source_schema(
            f"Lists {self.resource_class.display_name} objects in the server configuration."
        )

    async def read(self, config: ListDataSourceModel | None = None) -> ResourceResult:
        """List the collection, applying the configured filter if any."""
        diagnostics = Diagnostics()
        config = config or ListDataSourceModel()
        resource = self.resource
        filter = config.filter if is_defined(config.filter) else None

        try:
            response = await resource.api_client.list_config_objects(
                resource.collection_path, filter
            )
        except PingDirectoryAPIError as e:
            report_http_error(
                diagnostics,
                f"An error occurred while listing the {resource.display_name} objects",
                e,
            )
            return ResourceResult(None, diagnostics)

        objects = []
        for item in response.resources:
            resource_type = resource.type_from_schemas(item.get("schemas") or [])
            if resource_type is None:
                self.logger.debug(
                    f"Skipping listed object {item.get('id')} with schemas "
                    f"{item.get('schemas')}"
                )
                continue
            objects.append(ListedObject(id=item.get("id", ""), type=resource_type))

        state = ListDataSourceModel(id=SINGLETON_ID, filter=filter, objects=objects)
        return ResourceResult(state, diagnostics)
