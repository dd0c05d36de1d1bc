"""
Unit tests for update operation builders.

Tests cover:
- Scalar replace/remove decisions, including empty string handling
- Set add/remove diffs
- Building operations from resource models
- Redaction of sensitive values in debug logs
"""

import logging

from pingdirectory_provider.models import (
    ConnectionCriteria,
    MonitoringEndpoint,
    Operation,
    TrustManagerProvider,
    UpdateRequest,
)
from pingdirectory_provider.operations import (
    add_bool_operation_if_necessary,
    add_float64_operation_if_necessary,
    add_int64_operation_if_necessary,
    add_int64_set_operations_if_necessary,
    add_string_operation_if_necessary,
    add_string_set_operations_if_necessary,
    create_operations,
    log_update_operations,
)
from pingdirectory_provider.resources.base import build_model
from pingdirectory_provider.types import UNKNOWN


def _as_tuples(ops: list[Operation]) -> list[tuple]:
    return [(op.op, op.path, op.value) for op in ops]


class TestStringOperations:
    """Tests for add_string_operation_if_necessary."""

    def test_changed_value_is_replaced(self):
        """Test that a changed value produces a replace."""
        ops = []
        add_string_operation_if_necessary(ops, "new", "old", "description")
        assert _as_tuples(ops) == [("replace", "description", "new")]

    def test_null_plan_removes(self):
        """Test that clearing a value produces a remove without a value."""
        ops = []
        add_string_operation_if_necessary(ops, None, "old", "description")
        assert _as_tuples(ops) == [("remove", "description", None)]

    def test_empty_string_removes(self):
        """Test that an empty plan value is treated as null."""
        ops = []
        add_string_operation_if_necessary(ops, "", "old", "description")
        assert _as_tuples(ops) == [("remove", "description", None)]

    def test_empty_string_equals_null(self):
        """Test that empty string and null are equal."""
        ops = []
        add_string_operation_if_necessary(ops, "", None, "description")
        add_string_operation_if_necessary(ops, None, "", "description")
        assert ops == []

    def test_unchanged_and_unknown_produce_nothing(self):
        """Test that equal values and unknown plans produce no operation."""
        ops = []
        add_string_operation_if_necessary(ops, "same", "same", "description")
        add_string_operation_if_necessary(ops, UNKNOWN, "old", "description")
        assert ops == []


class TestScalarOperations:
    """Tests for boolean and numeric operation builders."""

    def test_bool_rendered_as_lowercase_string(self):
        """Test booleans are sent as 'true' and 'false'."""
        ops = []
        add_bool_operation_if_necessary(ops, True, False, "enabled")
        add_bool_operation_if_necessary(ops, False, True, "enabled")
        assert _as_tuples(ops) == [
            ("replace", "enabled", "true"),
            ("replace", "enabled", "false"),
        ]

    def test_bool_unchanged(self):
        """Test that an unchanged boolean produces nothing."""
        ops = []
        add_bool_operation_if_necessary(ops, False, False, "enabled")
        assert ops == []

    def test_int64_rendered_as_decimal(self):
        """Test integers are sent as decimal strings."""
        ops = []
        add_int64_operation_if_necessary(ops, 8126, 8125, "server-port")
        assert _as_tuples(ops) == [("replace", "server-port", "8126")]

    def test_int64_removed(self):
        """Test that a cleared integer is removed."""
        ops = []
        add_int64_operation_if_necessary(ops, None, 10, "size-limit")
        assert _as_tuples(ops) == [("remove", "size-limit", None)]

    def test_float64_rendering(self):
        """Test floats drop a trailing .0."""
        ops = []
        add_float64_operation_if_necessary(ops, 0.5, None, "ratio")
        add_float64_operation_if_necessary(ops, 2.0, None, "ratio")
        assert [op.value for op in ops] == ["0.5", "2"]


class TestSetOperations:
    """Tests for set operation builders."""

    def test_added_and_removed_values(self):
        """Test one add per new value and one remove per dropped value."""
        ops = []
        add_string_set_operations_if_necessary(
            ops, {"b", "d", "c"}, {"a", "b"}, "included-protocol"
        )
        assert _as_tuples(ops) == [
            ("add", "included-protocol", "c"),
            ("add", "included-protocol", "d"),
            ("remove", "included-protocol", "a"),
        ]

    def test_null_plan_is_empty_set(self):
        """Test that a null plan removes every state value."""
        ops = []
        add_string_set_operations_if_necessary(ops, None, {"a"}, "path")
        assert _as_tuples(ops) == [("remove", "path", "a")]

    def test_unknown_plan_produces_nothing(self):
        """Test that an unknown set is left alone."""
        ops = []
        add_string_set_operations_if_necessary(ops, UNKNOWN, {"a"}, "path")
        assert ops == []

    def test_int64_sets(self):
        """Test integer sets are diffed and rendered as strings."""
        ops = []
        add_int64_set_operations_if_necessary(ops, {1, 3}, {1, 2}, "port")
        assert _as_tuples(ops) == [("add", "port", "3"), ("remove", "port", "2")]


class TestCreateOperations:
    """Tests for create_operations."""

    def test_only_changed_attributes(self):
        """Test that operations are built only for changed attributes."""
        state = build_model(
            MonitoringEndpoint,
            {
                "name": "statsd",
                "type": "statsd",
                "hostname": "old.example.com",
                "server_port": 8125,
                "connection_type": "unencrypted-udp",
                "additional_tags": {"env:dev"},
                "enabled": True,
            },
        )
        plan = build_model(
            MonitoringEndpoint,
            {
                "name": "statsd",
                "type": "statsd",
                "hostname": "new.example.com",
                "server_port": 8125,
                "connection_type": "unencrypted-udp",
                "additional_tags": {"env:prod"},
                "enabled": False,
            },
        )

        ops = create_operations(plan, state)

        assert _as_tuples(ops) == [
            ("replace", "hostname", "new.example.com"),
            ("add", "additional-tags", "env:prod"),
            ("remove", "additional-tags", "env:dev"),
            ("replace", "enabled", "false"),
        ]

    def test_attributes_of_other_types_are_skipped(self):
        """Test that attributes not applicable to the planned type are ignored."""
        state = build_model(
            ConnectionCriteria,
            {"name": "cc", "type": "simple", "extension_argument": {"a=b"}},
        )
        plan = build_model(
            ConnectionCriteria,
            {"name": "cc", "type": "simple", "extension_argument": set()},
        )
        assert create_operations(plan, state) == []

    def test_unknown_plan_values_are_skipped(self):
        """Test that attributes missing from the plan produce no operations."""
        state = build_model(
            MonitoringEndpoint, {"name": "statsd", "hostname": "host", "enabled": True}
        )
        plan = build_model(MonitoringEndpoint, {"name": "statsd"})
        assert create_operations(plan, state) == []

    def test_update_request_wire_shape(self):
        """Test the serialized form of an update request."""
        request = UpdateRequest(
            operations=[
                Operation(op="replace", path="enabled", value="true"),
                Operation(op="remove", path="description"),
            ]
        )
        assert request.model_dump(exclude_none=True, by_alias=True) == {
            "operations": [
                {"op": "replace", "path": "enabled", "value": "true"},
                {"op": "remove", "path": "description"},
            ]
        }


class TestLogUpdateOperations:
    """Tests for log_update_operations."""

    def test_sensitive_values_are_redacted(self, caplog):
        """Test that values of sensitive paths never reach the log."""
        state = build_model(
            TrustManagerProvider,
            {"name": "tmp", "type": "file-based", "trust_store_pin": "old-pin"},
        )
        plan = build_model(
            TrustManagerProvider,
            {"name": "tmp", "type": "file-based", "trust_store_pin": "new-pin"},
        )
        ops = create_operations(plan, state)

        with caplog.at_level(logging.DEBUG, logger="pingdirectory_provider.operations"):
            log_update_operations(ops, ["trust-store-pin"])

        assert "new-pin" not in caplog.text
        assert "<redacted>" in caplog.text
        assert "path=trust-store-pin" in caplog.text
