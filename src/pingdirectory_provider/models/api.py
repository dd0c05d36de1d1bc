"""
Configuration API envelope models.

These models describe the generic documents exchanged with the
PingDirectory Configuration API regardless of the configuration object
involved: update requests, list responses, error documents and the
messages block attached to every object.
"""

from typing import Literal

from pydantic import BaseModel, Field

from pingdirectory_provider.constants import LIST_RESPONSE_RESOURCES_KEY


class Operation(BaseModel):
    """A single modification in a PATCH-style update request."""

    model_config = {"populate_by_name": True}

    op: Literal["add", "remove", "replace"] = Field(
        ..., description="Kind of modification"
    )
    path: str = Field(..., description="Kebab-case name of the property to modify")
    value: str | None = Field(None, description="Value to add or replace")


class UpdateRequest(BaseModel):
    """Body of a PATCH request against a configuration object."""

    model_config = {"populate_by_name": True}

    operations: list[Operation] = Field(default_factory=list)


class RequiredAction(BaseModel):
    """Action the server says must be taken for a change to take effect."""

    model_config = {"populate_by_name": True}

    property_name: str | None = Field(
        None, alias="property", description="Property that triggered the action"
    )
    type: str | None = Field(None, description="Kind of action, e.g. a restart")
    synopsis: str | None = Field(None, description="Human-readable summary")


class Messages(BaseModel):
    """Messages block returned with configuration objects."""

    model_config = {"populate_by_name": True}

    notifications: list[str] = Field(default_factory=list)
    required_actions: list[RequiredAction] = Field(
        default_factory=list, alias="requiredActions"
    )


class ListResponse(BaseModel):
    """Response of a list request against a configuration collection."""

    model_config = {"populate_by_name": True, "extra": "ignore"}

    schemas: list[str] = Field(default_factory=list)
    total_results: int | None = Field(None, alias="totalResults")
    resources: list[dict] = Field(
        default_factory=list, alias=LIST_RESPONSE_RESOURCES_KEY
    )


class ErrorResponse(BaseModel):
    """Error document returned by the Configuration API."""

    model_config = {"populate_by_name": True, "extra": "ignore"}

    schemas: list[str] = Field(default_factory=list)
    status: str | int | None = Field(None, description="HTTP status as reported by the server")
    scim_type: str | None = Field(None, alias="scimType")
    detail: str | None = Field(None, description="Explanation of the failure")


__all__ = [
    "ErrorResponse",
    "ListResponse",
    "Messages",
    "Operation",
    "RequiredAction",
    "UpdateRequest",
]
