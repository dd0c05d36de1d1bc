"""
Unit tests for structured logging and metrics.

Tests cover:
- JSON log formatting with structured fields
- Correlation ID propagation
- Resource operation logging and metrics
"""

import json
import logging
import sys
from unittest.mock import patch

import pytest

from pingdirectory_provider.observability.logging import (
    ConsoleFormatter,
    CorrelationIDFilter,
    ProviderLogger,
    StructuredFormatter,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from pingdirectory_provider.observability.metrics import (
    record_resource_operation,
    render_metrics,
)


def make_record(message="hello", **extra):
    record = logging.LogRecord(
        name="pingdirectory_provider.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def test_basic_fields(self):
        """Test that the core fields are always present."""
        output = json.loads(StructuredFormatter().format(make_record(correlation_id="abc")))
        assert output["level"] == "INFO"
        assert output["logger"] == "pingdirectory_provider.test"
        assert output["message"] == "hello"
        assert output["correlation_id"] == "abc"
        assert "timestamp" in output

    def test_structured_fields(self):
        """Test that extra= values are copied into the output."""
        record = make_record(
            resource_type="pingdirectory_connection_criteria",
            operation="create_success",
            duration=0.5,
            unrelated="dropped",
        )
        output = json.loads(StructuredFormatter().format(record))
        assert output["resource_type"] == "pingdirectory_connection_criteria"
        assert output["operation"] == "create_success"
        assert output["duration"] == 0.5
        assert "unrelated" not in output

    def test_exception(self):
        """Test that exception text is included."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()
        output = json.loads(StructuredFormatter().format(record))
        assert "ValueError: boom" in output["exception"]


class TestConsoleFormatter:
    """Tests for ConsoleFormatter."""

    def test_plain_record(self):
        """Test that records without resource fields are unchanged."""
        formatter = ConsoleFormatter("%(levelname)s %(message)s")
        assert formatter.format(make_record()) == "INFO hello"

    def test_resource_suffix(self):
        """Test that the resource type and name are appended."""
        formatter = ConsoleFormatter("%(levelname)s %(message)s")
        record = make_record(
            resource_type="pingdirectory_connection_criteria", resource_name="cc"
        )
        assert formatter.format(record) == (
            "INFO hello (pingdirectory_connection_criteria cc)"
        )


class TestCorrelationIDs:
    """Tests for correlation ID helpers."""

    def test_generate(self):
        """Test that generated ids are short and unique."""
        first, second = generate_correlation_id(), generate_correlation_id()
        assert len(first) == 8
        assert first != second

    def test_set_and_get(self):
        """Test that the current id can be set and read back."""
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"

    def test_filter_adds_id(self):
        """Test that the filter stamps the current id on records."""
        set_correlation_id("req-2")
        record = make_record()
        assert CorrelationIDFilter().filter(record)
        assert record.correlation_id == "req-2"

    def test_scope_restores_previous_id(self):
        """Test that a correlation scope resets the id on exit."""
        set_correlation_id("outer")
        with correlation_scope() as corr_id:
            assert get_correlation_id() == corr_id
            assert corr_id != "outer"
        assert get_correlation_id() == "outer"

    def test_scope_with_explicit_id(self):
        """Test that an explicit id is used as is."""
        with correlation_scope("req-3") as corr_id:
            assert corr_id == "req-3"
            assert get_correlation_id() == "req-3"


class TestProviderLogger:
    """Tests for ProviderLogger."""

    def test_operation_start_sets_correlation_id(self, caplog):
        """Test that starting an operation logs and sets a correlation id."""
        logger = ProviderLogger("pingdirectory_provider.test")

        with caplog.at_level(logging.INFO):
            corr_id = logger.log_operation_start(
                "pingdirectory_connection_criteria", "cc", "apply"
            )

        assert get_correlation_id() == corr_id
        record = caplog.records[-1]
        assert record.getMessage() == (
            "Starting apply for pingdirectory_connection_criteria cc"
        )
        assert record.operation == "apply_start"

    def test_operation_error(self, caplog):
        """Test that failures are logged at error level with the duration."""
        logger = ProviderLogger("pingdirectory_provider.test")

        with caplog.at_level(logging.INFO):
            logger.log_operation_error(
                "pingdirectory_connection_criteria", "cc", "create", "boom", 1.5
            )

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.getMessage() == (
            "Create failed for pingdirectory_connection_criteria cc: boom"
        )
        assert record.duration == 1.5


class TestMetrics:
    """Tests for resource operation metrics."""

    def test_record_resource_operation(self):
        """Test that the counter and histogram are labelled by operation."""
        with (
            patch(
                "pingdirectory_provider.observability.metrics.RESOURCE_OPERATIONS_TOTAL"
            ) as total,
            patch(
                "pingdirectory_provider.observability.metrics.RESOURCE_OPERATION_DURATION"
            ) as duration,
        ):
            record_resource_operation(
                "pingdirectory_trust_manager_provider", "update", "success", 0.25
            )

        total.labels.assert_called_once_with(
            resource_type="pingdirectory_trust_manager_provider",
            operation="update",
            result="success",
        )
        total.labels.return_value.inc.assert_called_once()
        duration.labels.return_value.observe.assert_called_once_with(0.25)

    def test_render_metrics(self):
        """Test that recorded operations appear in the exposition output."""
        record_resource_operation("pingdirectory_render_test", "create", "error", 0.1)

        output = render_metrics()

        assert isinstance(output, str)
        assert "pingdirectory_provider_resource_operations_total" in output
        assert 'resource_type="pingdirectory_render_test"' in output

    @pytest.mark.asyncio
    async def test_apply_records_metrics(self, resource_configuration):
        """Test that apply records one operation outcome."""
        from pingdirectory_provider.models import GlobalConfiguration
        from pingdirectory_provider.resources import DefaultGlobalConfigurationResource

        resource_configuration.api_client.get_config_object.return_value = {
            "schemas": ["urn:pingidentity:schemas:configuration:2.0:global-configuration"],
        }
        resource = DefaultGlobalConfigurationResource(resource_configuration)

        with patch(
            "pingdirectory_provider.resources.base.record_resource_operation"
        ) as record:
            await resource.apply(GlobalConfiguration())

        args = record.call_args.args
        assert args[:3] == ("pingdirectory_default_global_configuration", "create", "success")
