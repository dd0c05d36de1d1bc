"""
Helpers for plan, state and configuration values.

Attribute values are plain Python values. ``None`` is null and the
:data:`UNKNOWN` sentinel marks a computed value that will only be known
once the server has responded. On resource models, an attribute missing
from ``model_fields_set`` is unknown.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel


class _Unknown:
    """Sentinel for values that are not known until after apply."""

    _instance: _Unknown | None = None

    def __new__(cls) -> _Unknown:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<unknown>"

    def __bool__(self) -> bool:
        return False


UNKNOWN: Any = _Unknown()


def is_unknown(value: Any) -> bool:
    return value is UNKNOWN


def is_defined(value: Any) -> bool:
    """Return True when the value is neither null nor unknown."""
    return value is not None and value is not UNKNOWN


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def is_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value == ""


def string_or_none(value: str | None, use_empty_string_for_none: bool) -> str | None:
    """
    Convert a string returned by the API into a state value.

    A missing value becomes ``""`` rather than null when the caller expected
    an empty string, so that an explicit empty plan value round-trips.
    """
    if value is None:
        return "" if use_empty_string_for_none else None
    return value


def get_string_set(values: Iterable[Any] | None) -> set[str]:
    """Build a string set from an API list, treating null as empty."""
    if not values:
        return set()
    return {str(v) for v in values}


def bool_or_none(value: Any) -> bool | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def int_or_none(value: Any) -> int | None:
    if value is None:
        return None
    return int(value)


def float_or_none(value: Any) -> float | None:
    if value is None:
        return None
    return float(value)


def value_of(model: BaseModel, field: str) -> Any:
    """Return a model attribute, or UNKNOWN when it was never set."""
    if field not in model.model_fields_set:
        return UNKNOWN
    return getattr(model, field)


def is_configured(model: BaseModel, field: str) -> bool:
    """Return True when a configuration model sets the attribute to a non-null value."""
    return is_defined(value_of(model, field))
