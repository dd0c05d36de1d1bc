"""
Diagnostics returned from provider operations.

Every provider and resource operation returns an ordered list of
diagnostics instead of raising. An operation failed when the list holds at
least one error.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic."""

    ERROR = "Error"
    WARNING = "Warning"


@dataclass
class Diagnostic:
    """A single error or warning reported back to the user."""

    severity: Severity
    summary: str
    detail: str = ""
    attribute: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR

    def __str__(self) -> str:
        prefix = f"{self.severity.value}: {self.summary}"
        if self.attribute:
            prefix = f"{prefix} (attribute '{self.attribute}')"
        if self.detail:
            return f"{prefix}: {self.detail}"
        return prefix


@dataclass
class Diagnostics:
    """Ordered collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=list)

    def add_error(
        self, summary: str, detail: str = "", attribute: str | None = None
    ) -> None:
        self.items.append(Diagnostic(Severity.ERROR, summary, detail, attribute))

    def add_warning(
        self, summary: str, detail: str = "", attribute: str | None = None
    ) -> None:
        self.items.append(Diagnostic(Severity.WARNING, summary, detail, attribute))

    def extend(self, other: Diagnostics) -> None:
        self.items.extend(other.items)

    def has_error(self) -> bool:
        return any(d.is_error for d in self.items)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.items if d.is_error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.items if not d.is_error]

    @property
    def error_summary(self) -> str:
        """Get a summary of all errors for exception messages."""
        return "; ".join(d.summary for d in self.errors)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
