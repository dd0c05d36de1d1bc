"""
Conversion of Configuration API errors into diagnostics.

The server describes failures in a small JSON document whose ``detail``
field is far more useful than the HTTP status line. When the body parses,
the detail is appended to the error message.
"""

import json
import logging

from pydantic import ValidationError as PydanticValidationError

from pingdirectory_provider.diagnostics import Diagnostics
from pingdirectory_provider.errors import PingDirectoryAPIError
from pingdirectory_provider.models.api import ErrorResponse

logger = logging.getLogger(__name__)


def error_detail(error: PingDirectoryAPIError) -> str:
    """
    Build the diagnostic detail for an API error.

    Returns:
        ``"<error> - Detail: <detail>"`` when the response body is a
        PingDirectory error document with a detail, otherwise the error text
    """
    message = error.message
    if not error.response_body:
        return message
    try:
        parsed = ErrorResponse.model_validate(json.loads(error.response_body))
    except (ValueError, PydanticValidationError):
        logger.debug("Error response body is not a Configuration API error document")
        return message
    if parsed.detail:
        return f"{message} - Detail: {parsed.detail}"
    return message


def report_http_error(
    diagnostics: Diagnostics, summary: str, error: PingDirectoryAPIError
) -> None:
    """Add an error diagnostic for a failed Configuration API call."""
    diagnostics.add_error(summary, error_detail(error))


def report_http_error_as_warning(
    diagnostics: Diagnostics, summary: str, error: PingDirectoryAPIError
) -> None:
    """Add a warning diagnostic for a Configuration API call that may fail safely."""
    diagnostics.add_warning(summary, error_detail(error))
