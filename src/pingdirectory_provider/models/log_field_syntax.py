"""
Log Field Syntax model.

Log field syntaxes always exist on the server and can only be edited.
"""

from pingdirectory_provider.models.base import (
    NamedConfigModel,
    set_attribute,
    string_attribute,
)

LOG_FIELD_SYNTAX_TYPES = ["json", "attribute-based", "generic"]


class LogFieldSyntax(NamedConfigModel):
    """Log Field Syntax configuration object."""

    included_sensitive_attribute: set[str] | None = set_attribute(
        types=["attribute-based"],
        computed=True,
        description="The set of attribute types that will be considered sensitive.",
    )
    excluded_sensitive_attribute: set[str] | None = set_attribute(
        types=["attribute-based"],
        computed=True,
        description="The set of attribute types that will not be considered sensitive.",
    )
    included_sensitive_field: set[str] | None = set_attribute(
        types=["json"],
        computed=True,
        description="The names of the JSON fields that will be considered sensitive.",
    )
    excluded_sensitive_field: set[str] | None = set_attribute(
        types=["json"],
        computed=True,
        description="The names of the JSON fields that will not be considered sensitive.",
    )
    description: str | None = string_attribute(
        computed=True,
        description="A description for this Log Field Syntax",
    )
    default_behavior: str | None = string_attribute(
        computed=True,
        description="The default behavior that the server should exhibit when logging fields with this syntax. This may be overridden on a per-field basis.",
    )
