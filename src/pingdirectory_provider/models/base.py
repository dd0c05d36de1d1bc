"""
Base model for PingDirectory configuration objects.

Every resource model is a pydantic model whose fields mirror the properties
of a configuration object. Field names are the provider attribute names;
aliases are the camelCase property names used on the wire. Provider-level
behavior (which types an attribute applies to, defaults, sensitivity,
version gates) is attached to each field with the ``*_attribute`` helpers
below and read back through :func:`attributes_of`.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from functools import cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pingdirectory_provider.models.api import RequiredAction

ATTRIBUTE_METADATA_KEY = "pingdirectory"


class AttributeKind(str, Enum):
    """Value kinds supported by configuration attributes."""

    STRING = "string"
    BOOL = "bool"
    INT64 = "int64"
    FLOAT64 = "float64"
    STRING_SET = "string_set"


@dataclass(frozen=True)
class AttributeInfo:
    """Provider metadata for one configuration attribute."""

    name: str
    alias: str
    kind: AttributeKind
    description: str = ""
    types: tuple[str, ...] | None = None
    required_for: tuple[str, ...] = ()
    default: Any = None
    defaults: dict[str, Any] = field(default_factory=dict)
    computed: bool = False
    required: bool = False
    sensitive: bool = False
    requires_replace: bool = False
    enum: tuple[str, ...] | None = None
    parent: bool = False
    min_version: str | None = None
    pd_formatted: bool = False

    @property
    def path(self) -> str:
        """Kebab-case property name used in update operations."""
        return self.name.replace("_", "-")

    @property
    def is_set(self) -> bool:
        return self.kind == AttributeKind.STRING_SET

    def applies_to(self, resource_type: str | None) -> bool:
        if self.types is None or resource_type is None:
            return True
        return resource_type in self.types

    def default_for(self, resource_type: str | None) -> Any:
        """Return the default value for a type, or None when there is none."""
        if resource_type in self.defaults:
            value = self.defaults[resource_type]
        else:
            value = self.default
        if value is None:
            return None
        if self.is_set:
            return set(value)
        return copy.copy(value)

    def empty_value(self) -> Any:
        """Null value for this attribute in a plan or state."""
        return set() if self.is_set else None


def _attribute(
    kind: AttributeKind,
    *,
    description: str = "",
    alias: str | None = None,
    types: list[str] | None = None,
    required_for: list[str] | None = None,
    default: Any = None,
    defaults: dict[str, Any] | None = None,
    computed: bool = False,
    required: bool = False,
    sensitive: bool = False,
    requires_replace: bool = False,
    enum: list[str] | None = None,
    parent: bool = False,
    min_version: str | None = None,
    pd_formatted: bool = False,
) -> Any:
    metadata = {
        "kind": kind.value,
        "types": types,
        "required_for": required_for or [],
        "default": default,
        "defaults": defaults or {},
        # Anything with a default is filled in by the provider when unset
        "computed": computed or default is not None or bool(defaults),
        "required": required,
        "sensitive": sensitive,
        "requires_replace": requires_replace,
        "enum": enum,
        "parent": parent,
        "min_version": min_version,
        "pd_formatted": pd_formatted,
    }
    return Field(
        default=None,
        alias=alias,
        description=description,
        json_schema_extra={ATTRIBUTE_METADATA_KEY: metadata},
    )


def string_attribute(**kwargs: Any) -> Any:
    return _attribute(AttributeKind.STRING, **kwargs)


def bool_attribute(**kwargs: Any) -> Any:
    return _attribute(AttributeKind.BOOL, **kwargs)


def int64_attribute(**kwargs: Any) -> Any:
    return _attribute(AttributeKind.INT64, **kwargs)


def float64_attribute(**kwargs: Any) -> Any:
    return _attribute(AttributeKind.FLOAT64, **kwargs)


def set_attribute(*, default: list[str] | None = None, **kwargs: Any) -> Any:
    """Declare a string set attribute.

    Optional sets default to the empty set unless the caller passes
    ``computed=True`` (the server decides) or explicit per-type defaults.
    """
    if default is None and not kwargs.get("computed") and not kwargs.get("defaults"):
        if not kwargs.get("required"):
            default = []
    return _attribute(AttributeKind.STRING_SET, default=default, **kwargs)


class ConfigModel(BaseModel):
    """
    Common fields of every configuration object.

    ``id`` is the identifier returned by the server, ``type`` the concrete
    kind taken from the object's schema URN. Notifications and required
    actions come from the messages block of every response.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str | None = Field(None, description="Identifier of this object on the server")
    type: str | None = Field(None, description="Concrete type of this object")
    notifications: set[str] | None = Field(
        None, description="Notifications returned by the Configuration API"
    )
    required_actions: list[RequiredAction] | None = Field(
        None, description="Required actions returned by the Configuration API"
    )


class NamedConfigModel(ConfigModel):
    """Configuration object addressed by a ``name`` chosen by the user."""

    name: str | None = Field(None, description="Name of this config object")


@cache
def attributes_of(model: type[BaseModel]) -> dict[str, AttributeInfo]:
    """
    Collect provider metadata for every configuration attribute of a model.

    Fields declared without one of the ``*_attribute`` helpers (``id``,
    ``name``, ``type`` and the messages fields) are not included.
    """
    result: dict[str, AttributeInfo] = {}
    for name, info in model.model_fields.items():
        extra = info.json_schema_extra
        if not isinstance(extra, dict) or ATTRIBUTE_METADATA_KEY not in extra:
            continue
        meta = extra[ATTRIBUTE_METADATA_KEY]
        result[name] = AttributeInfo(
            name=name,
            alias=info.alias or to_camel(name),
            kind=AttributeKind(meta["kind"]),
            description=info.description or "",
            types=tuple(meta["types"]) if meta["types"] is not None else None,
            required_for=tuple(meta["required_for"]),
            default=meta["default"],
            defaults=dict(meta["defaults"]),
            computed=meta["computed"],
            required=meta["required"],
            sensitive=meta["sensitive"],
            requires_replace=meta["requires_replace"],
            enum=tuple(meta["enum"]) if meta["enum"] is not None else None,
            parent=meta["parent"],
            min_version=meta["min_version"],
            pd_formatted=meta["pd_formatted"],
        )
    return result
