"""Unit tests for API error reporting and Configuration API messages."""

import json
import logging

from pingdirectory_provider.constants import MESSAGES_SCHEMA_URN
from pingdirectory_provider.diagnostics import Diagnostics, Severity
from pingdirectory_provider.errors import PingDirectoryAPIError, ProviderError
from pingdirectory_provider.utils.http_errors import (
    error_detail,
    report_http_error,
    report_http_error_as_warning,
)
from pingdirectory_provider.utils.messages import read_messages


class TestErrorDetail:
    """Tests for error_detail."""

    def test_detail_from_error_document(self):
        """Test that the server's detail is appended to the message."""
        error = PingDirectoryAPIError(
            "400 Bad Request",
            status_code=400,
            response_body=json.dumps(
                {
                    "schemas": ["urn:ietf:params:scim:api:messages:2.0:Error"],
                    "status": "400",
                    "scimType": "invalidValue",
                    "detail": "The value 'x' is not valid for property 'enabled'",
                }
            ),
        )
        assert error_detail(error) == (
            "400 Bad Request - Detail: The value 'x' is not valid for property 'enabled'"
        )

    def test_unparseable_body_keeps_message(self):
        """Test that a non-JSON body leaves the message untouched."""
        error = PingDirectoryAPIError(
            "502 Bad Gateway", status_code=502, response_body="<html>proxy</html>"
        )
        assert error_detail(error) == "502 Bad Gateway"

    def test_document_without_detail(self):
        """Test that an error document without detail keeps the message."""
        error = PingDirectoryAPIError(
            "500 Internal Server Error", status_code=500, response_body='{"status": 500}'
        )
        assert error_detail(error) == "500 Internal Server Error"

    def test_no_body(self):
        """Test that transport errors without a body keep the message."""
        error = PingDirectoryAPIError("API request failed: timed out")
        assert error_detail(error) == "API request failed: timed out"


class TestReportHttpError:
    """Tests for report_http_error and report_http_error_as_warning."""

    def test_error(self):
        """Test that an error diagnostic is added."""
        diagnostics = Diagnostics()
        report_http_error(
            diagnostics, "An error occurred", PingDirectoryAPIError("404 Not Found")
        )
        assert diagnostics.has_error()
        assert diagnostics.errors[0].summary == "An error occurred"
        assert diagnostics.errors[0].detail == "404 Not Found"

    def test_warning(self):
        """Test that a warning diagnostic is added."""
        diagnostics = Diagnostics()
        report_http_error_as_warning(
            diagnostics, "Object missing", PingDirectoryAPIError("404 Not Found")
        )
        assert not diagnostics.has_error()
        assert diagnostics.warnings[0].severity == Severity.WARNING


class TestProviderErrors:
    """Tests for the error hierarchy."""

    def test_user_action_in_string(self):
        """Test that the suggested action is part of the string form."""
        error = ProviderError("broken", category="api", user_action="Fix it")
        assert str(error) == "broken\nAction required: Fix it"

    def test_retryable(self):
        """Test that client errors are not retryable and server errors are."""
        assert not PingDirectoryAPIError("x", status_code=409).retryable
        assert PingDirectoryAPIError("x", status_code=503).retryable
        assert PingDirectoryAPIError("x").retryable

    def test_body_preview_truncates(self):
        """Test that long bodies are truncated for logs."""
        error = PingDirectoryAPIError("x", response_body="a" * 10)
        assert error.body_preview(limit=4) == "aaaa...<truncated>"
        assert PingDirectoryAPIError("x").body_preview() is None


class TestReadMessages:
    """Tests for read_messages."""

    def test_notifications_and_required_actions(self, caplog):
        """Test that messages are parsed and logged as warnings."""
        response = {
            "id": "cc",
            MESSAGES_SCHEMA_URN: {
                "notifications": ["The server must be restarted"],
                "requiredActions": [
                    {
                        "property": "enabled",
                        "type": "component-restart",
                        "synopsis": "Restart the component",
                    }
                ],
            },
        }

        with caplog.at_level(logging.WARNING):
            notifications, actions = read_messages(response)

        assert notifications == {"The server must be restarted"}
        assert len(actions) == 1
        assert actions[0].property_name == "enabled"
        assert actions[0].type == "component-restart"
        assert "Configuration API Notification: The server must be restarted" in caplog.text
        assert "Configuration API RequiredAction with property: enabled" in caplog.text

    def test_no_messages(self):
        """Test that a response without messages yields empty values."""
        assert read_messages({"id": "cc"}) == (set(), [])
