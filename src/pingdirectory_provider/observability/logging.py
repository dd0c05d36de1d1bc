"""
Structured logging for the PingDirectory provider.

Every resource operation runs under a correlation ID, so the Configuration
API requests logged by the client can be tied back to the create, update or
delete that issued them. Output is either JSON (one object per line) or a
plain console format that appends the resource being worked on.
"""

import json
import logging
import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

# Record attributes copied into structured output when present
STRUCTURED_FIELDS = (
    "resource_type",
    "resource_name",
    "operation",
    "duration",
    "error_type",
    "http_method",
    "http_status",
    "endpoint",
    "response_body",
    "product_version",
)

CONSOLE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
CONSOLE_FORMAT_WITH_ID = (
    "%(asctime)s %(levelname)-7s [%(correlation_id)s] %(name)s: %(message)s"
)


def generate_correlation_id() -> str:
    """Return a new short correlation ID."""
    return uuid.uuid4().hex[:8]


def set_correlation_id(corr_id: str) -> str:
    correlation_id.set(corr_id)
    return corr_id


def get_correlation_id() -> str:
    return correlation_id.get()


@contextmanager
def correlation_scope(corr_id: str | None = None) -> Iterator[str]:
    """
    Run a block under a correlation ID, restoring the previous one afterwards.

    Args:
        corr_id: ID to use; a new one is generated when omitted

    Yields:
        The correlation ID in effect inside the block
    """
    token = correlation_id.set(corr_id or generate_correlation_id())
    try:
        yield correlation_id.get()
    finally:
        correlation_id.reset(token)


class CorrelationIDFilter(logging.Filter):
    """Stamp the current correlation ID on each record, creating one if unset."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or set_correlation_id(
            generate_correlation_id()
        )
        return True


class StructuredFormatter(logging.Formatter):
    """Render records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        document: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": getattr(record, "correlation_id", ""),
        }
        # extra= values land on the record as plain attributes
        document.update(
            (field, getattr(record, field))
            for field in STRUCTURED_FIELDS
            if hasattr(record, field)
        )
        if record.exc_info:
            document["exception"] = self.formatException(record.exc_info)
        return json.dumps(document, default=str)


class ConsoleFormatter(logging.Formatter):
    """Plain text formatter that appends the resource a record concerns."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        resource_type = getattr(record, "resource_type", None)
        if resource_type is None:
            return text
        resource_name = getattr(record, "resource_name", "")
        return f"{text} ({resource_type} {resource_name})".rstrip()


def setup_structured_logging(
    log_level: str = "INFO",
    enable_json_formatting: bool = True,
    correlation_id_enabled: bool = True,
) -> None:
    """
    Replace the root handlers with one stderr handler for the provider.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR)
        enable_json_formatting: Emit JSON instead of console text
        correlation_id_enabled: Attach correlation IDs to every record
    """
    handler = logging.StreamHandler()
    if enable_json_formatting:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(
            ConsoleFormatter(
                CONSOLE_FORMAT_WITH_ID if correlation_id_enabled else CONSOLE_FORMAT
            )
        )
    if correlation_id_enabled:
        handler.addFilter(CorrelationIDFilter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Request lines are already logged by the Configuration API client
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


class ProviderLogger:
    """
    Logger bound to one resource or data source class.

    The ``log_operation_*`` methods record the lifecycle of an apply with
    the resource type, object name and operation phase as structured fields.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    @staticmethod
    def _operation_extra(
        resource_type: str,
        resource_name: str,
        operation: str,
        phase: str,
        duration: float | None = None,
    ) -> dict[str, Any]:
        extra: dict[str, Any] = {
            "resource_type": resource_type,
            "resource_name": resource_name,
            "operation": f"{operation}_{phase}",
        }
        if duration is not None:
            extra["duration"] = duration
        return extra

    def log_operation_start(
        self,
        resource_type: str,
        resource_name: str,
        operation: str,
        correlation_id: str | None = None,
    ) -> str:
        """
        Log the start of an operation and make its correlation ID current.

        Returns:
            The correlation ID used for the operation
        """
        corr_id = set_correlation_id(correlation_id or generate_correlation_id())
        self.logger.info(
            f"Starting {operation} for {resource_type} {resource_name}",
            extra=self._operation_extra(resource_type, resource_name, operation, "start"),
        )
        return corr_id

    def log_operation_success(
        self, resource_type: str, resource_name: str, operation: str, duration: float
    ) -> None:
        self.logger.info(
            f"Completed {operation} for {resource_type} {resource_name}",
            extra=self._operation_extra(
                resource_type, resource_name, operation, "success", duration
            ),
        )

    def log_operation_error(
        self,
        resource_type: str,
        resource_name: str,
        operation: str,
        error: str,
        duration: float,
    ) -> None:
        """Log a failed operation; ``error`` is usually the diagnostics summary."""
        self.logger.error(
            f"{operation.capitalize()} failed for {resource_type} {resource_name}: {error}",
            extra=self._operation_extra(
                resource_type, resource_name, operation, "error", duration
            ),
        )

    def debug(self, message: str, **kwargs) -> None:
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs) -> None:
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs) -> None:
        self.logger.error(message, exc_info=exc_info, extra=kwargs)
