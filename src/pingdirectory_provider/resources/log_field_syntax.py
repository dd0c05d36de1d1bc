"""
Log Field Syntax resource.

Log field syntaxes are built into the server and can only be modified.
"""

from pingdirectory_provider.models.log_field_syntax import (
    LOG_FIELD_SYNTAX_TYPES,
    LogFieldSyntax,
)
from pingdirectory_provider.resources.base import DefaultConfigResource


class DefaultLogFieldSyntaxResource(DefaultConfigResource):
    type_name = "default_log_field_syntax"
    display_name = "Log Field Syntax"
    description = "Resource to manage a Log Field Syntax that already exists."
    model = LogFieldSyntax
    schema_name = "log-field-syntax"
    collection_path = "log-field-syntaxes"
    type_options = tuple(LOG_FIELD_SYNTAX_TYPES)
