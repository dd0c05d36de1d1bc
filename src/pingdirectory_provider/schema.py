"""
Attribute schemas for the provider, its resources and data sources.

Resource schemas are generated from model field metadata so that the
attribute list, descriptions and flags live in one place: the model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from pingdirectory_provider.models.base import attributes_of


@dataclass
class SchemaAttribute:
    """Description of one attribute in a schema."""

    name: str
    kind: str
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    default: Any = None
    requires_replace: bool = False
    enum: tuple[str, ...] | None = None


@dataclass
class Schema:
    """Attributes accepted or produced by a provider object."""

    description: str
    attributes: dict[str, SchemaAttribute] = field(default_factory=dict)

    def __getitem__(self, name: str) -> SchemaAttribute:
        return self.attributes[name]

    def __contains__(self, name: str) -> bool:
        return name in self.attributes

    def add(self, attribute: SchemaAttribute) -> None:
        self.attributes[attribute.name] = attribute


def _common_computed_attributes(schema: Schema) -> None:
    schema.add(
        SchemaAttribute(
            "id", "string", "The ID of this resource.", computed=True
        )
    )
    schema.add(
        SchemaAttribute(
            "notifications",
            "string_set",
            "Notifications returned by the PingDirectory Configuration API.",
            computed=True,
        )
    )
    schema.add(
        SchemaAttribute(
            "required_actions",
            "list",
            "Required actions returned by the PingDirectory Configuration API.",
            computed=True,
        )
    )


def build_resource_schema(
    model: type[BaseModel],
    *,
    description: str,
    type_options: tuple[str, ...],
    named: bool = True,
    is_default: bool = False,
    name_attribute: str | None = None,
) -> Schema:
    """
    Build the schema of a managed resource from its model.

    Default resources manage objects that already exist on the server, so
    every attribute becomes optional and computed and no defaults apply.
    The ``type`` attribute is only configurable on non-default resources.
    Parent attributes and the ``name_attribute`` stay required everywhere
    since they address the object.
    """
    schema = Schema(description)
    _common_computed_attributes(schema)

    if named:
        schema.add(
            SchemaAttribute(
                "name",
                "string",
                "Name of this config object.",
                required=True,
                requires_replace=True,
            )
        )

    if is_default:
        schema.add(
            SchemaAttribute(
                "type",
                "string",
                "The type of the config object.",
                computed=True,
                enum=type_options,
            )
        )
    elif len(type_options) > 1:
        schema.add(
            SchemaAttribute(
                "type",
                "string",
                "The type of the config object. Options are "
                + str(list(type_options)),
                required=True,
                requires_replace=True,
                enum=type_options,
            )
        )
    else:
        schema.add(
            SchemaAttribute(
                "type",
                "string",
                "The type of the config object.",
                optional=True,
                computed=True,
                default=type_options[0],
                enum=type_options,
            )
        )

    for name, info in attributes_of(model).items():
        if info.parent or (is_default and name == name_attribute):
            attribute = SchemaAttribute(
                name,
                info.kind.value,
                info.description,
                required=True,
                requires_replace=True,
            )
        elif is_default:
            attribute = SchemaAttribute(
                name,
                info.kind.value,
                info.description,
                optional=True,
                computed=True,
                sensitive=info.sensitive,
                enum=info.enum,
            )
        else:
            attribute = SchemaAttribute(
                name,
                info.kind.value,
                info.description,
                required=info.required,
                optional=not info.required,
                computed=info.computed,
                sensitive=info.sensitive,
                default=info.default,
                requires_replace=info.requires_replace,
                enum=info.enum,
            )
        schema.add(attribute)
    return schema


def build_data_source_schema(
    model: type[BaseModel], *, description: str, named: bool = True
) -> Schema:
    """Build the schema of a single-object data source: lookup keys required, all else computed."""
    schema = Schema(description)
    _common_computed_attributes(schema)
    schema.add(
        SchemaAttribute(
            "type", "string", "The type of the config object.", computed=True
        )
    )
    if named:
        schema.add(
            SchemaAttribute(
                "name", "string", "Name of this config object.", required=True
            )
        )
    for name, info in attributes_of(model).items():
        schema.add(
            SchemaAttribute(
                name,
                info.kind.value,
                info.description,
                required=info.parent,
                computed=not info.parent,
                sensitive=info.sensitive,
            )
        )
    return schema


def build_list_data_source_schema(description: str) -> Schema:
    schema = Schema(description)
    schema.add(
        SchemaAttribute("id", "string", "The ID of this data source.", computed=True)
    )
    schema.add(
        SchemaAttribute(
            "filter",
            "string",
            "SCIM filter used when searching the configuration.",
            optional=True,
        )
    )
    schema.add(
        SchemaAttribute(
            "objects",
            "list",
            "Objects found in the configuration, each with an id and a type.",
            computed=True,
        )
    )
    return schema
