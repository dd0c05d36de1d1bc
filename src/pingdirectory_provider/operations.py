"""
Update operation builders.

Updates to configuration objects are sent as a list of operations, one per
changed property. The helpers in this module compare a planned value with
the current state value and append the operations needed to move the
server from one to the other. Empty strings and null are equivalent, and an
unknown plan value never produces an operation.
"""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from pingdirectory_provider.constants import (
    OPERATION_ADD,
    OPERATION_REMOVE,
    OPERATION_REPLACE,
)
from pingdirectory_provider.models.api import Operation
from pingdirectory_provider.models.base import AttributeKind, attributes_of
from pingdirectory_provider.types import is_defined, is_unknown, value_of

logger = logging.getLogger(__name__)

REDACTED_VALUE = "<redacted>"


def _normalize_string(value: str | None) -> str | None:
    return None if value == "" else value


def add_string_operation_if_necessary(
    ops: list[Operation], plan: Any, state: Any, path: str
) -> None:
    """Append a replace or remove operation when a string attribute changed."""
    if is_unknown(plan):
        return
    plan_value = _normalize_string(plan)
    state_value = None if is_unknown(state) else _normalize_string(state)
    if plan_value == state_value:
        return
    if plan_value is None:
        ops.append(Operation(op=OPERATION_REMOVE, path=path))
    else:
        ops.append(Operation(op=OPERATION_REPLACE, path=path, value=plan_value))


def _add_scalar_operation_if_necessary(
    ops: list[Operation], plan: Any, state: Any, path: str, render
) -> None:
    if is_unknown(plan):
        return
    state_value = None if is_unknown(state) else state
    if plan == state_value:
        return
    if plan is None:
        ops.append(Operation(op=OPERATION_REMOVE, path=path))
    else:
        ops.append(Operation(op=OPERATION_REPLACE, path=path, value=render(plan)))


def add_bool_operation_if_necessary(
    ops: list[Operation], plan: Any, state: Any, path: str
) -> None:
    _add_scalar_operation_if_necessary(
        ops, plan, state, path, lambda v: "true" if v else "false"
    )


def add_int64_operation_if_necessary(
    ops: list[Operation], plan: Any, state: Any, path: str
) -> None:
    _add_scalar_operation_if_necessary(ops, plan, state, path, lambda v: str(int(v)))


def _render_float(value: Any) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def add_float64_operation_if_necessary(
    ops: list[Operation], plan: Any, state: Any, path: str
) -> None:
    _add_scalar_operation_if_necessary(ops, plan, state, path, _render_float)


def _add_set_operations_if_necessary(
    ops: list[Operation],
    plan: Iterable[Any] | None,
    state: Iterable[Any] | None,
    path: str,
    render,
) -> None:
    if is_unknown(plan):
        return
    plan_values = set(plan or ())
    state_values = set() if is_unknown(state) else set(state or ())
    for value in sorted(plan_values - state_values):
        ops.append(Operation(op=OPERATION_ADD, path=path, value=render(value)))
    for value in sorted(state_values - plan_values):
        ops.append(Operation(op=OPERATION_REMOVE, path=path, value=render(value)))


def add_string_set_operations_if_necessary(
    ops: list[Operation], plan: Any, state: Any, path: str
) -> None:
    """Append one add per new value and one remove per dropped value."""
    _add_set_operations_if_necessary(ops, plan, state, path, str)


def add_int64_set_operations_if_necessary(
    ops: list[Operation], plan: Any, state: Any, path: str
) -> None:
    _add_set_operations_if_necessary(ops, plan, state, path, lambda v: str(int(v)))


_OPERATION_BUILDERS = {
    AttributeKind.STRING: add_string_operation_if_necessary,
    AttributeKind.BOOL: add_bool_operation_if_necessary,
    AttributeKind.INT64: add_int64_operation_if_necessary,
    AttributeKind.FLOAT64: add_float64_operation_if_necessary,
    AttributeKind.STRING_SET: add_string_set_operations_if_necessary,
}


def create_operations(plan: BaseModel, state: BaseModel) -> list[Operation]:
    """
    Build the operations needed to make a configuration object match a plan.

    Attributes that do not apply to the planned type and parent path
    attributes are skipped.

    Args:
        plan: Planned resource model
        state: Current resource model

    Returns:
        Operations in attribute declaration order
    """
    ops: list[Operation] = []
    resource_type = value_of(plan, "type")
    if not is_defined(resource_type):
        resource_type = None
    for name, info in attributes_of(type(plan)).items():
        if info.parent or not info.applies_to(resource_type):
            continue
        _OPERATION_BUILDERS[info.kind](
            ops, value_of(plan, name), value_of(state, name), info.path
        )
    return ops


def log_update_operations(
    ops: list[Operation], sensitive_paths: Iterable[str] = ()
) -> None:
    """Log each update operation at debug level, hiding sensitive values."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    hidden = set(sensitive_paths)
    for op in ops:
        value = op.value
        if value is not None and op.path in hidden:
            value = REDACTED_VALUE
        message = f"Update operation: op={op.op} path={op.path}"
        if value is not None:
            message += f" value={value}"
        logger.debug(message)
