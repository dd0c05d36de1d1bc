"""
Prometheus metrics for the PingDirectory provider.

This module counts and times Configuration API requests and resource
operations. Metrics live on a dedicated registry so that embedding
applications can expose them alongside their own.
"""

import time
from contextlib import contextmanager

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Global metrics registry
_metrics_registry: CollectorRegistry | None = None

API_REQUESTS_TOTAL = Counter(
    "pingdirectory_provider_api_requests_total",
    "Total number of Configuration API requests",
    ["method", "endpoint", "status"],
    registry=None,
)

API_REQUEST_DURATION = Histogram(
    "pingdirectory_provider_api_request_duration_seconds",
    "Time spent waiting on Configuration API requests",
    ["method", "endpoint"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
    registry=None,
)

RESOURCE_OPERATIONS_TOTAL = Counter(
    "pingdirectory_provider_resource_operations_total",
    "Total number of resource operations",
    ["resource_type", "operation", "result"],
    registry=None,
)

RESOURCE_OPERATION_DURATION = Histogram(
    "pingdirectory_provider_resource_operation_duration_seconds",
    "Time spent on resource operations",
    ["resource_type", "operation"],
    buckets=[0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0],
    registry=None,
)


def get_metrics_registry() -> CollectorRegistry:
    """Get or create the global metrics registry."""
    global _metrics_registry

    if _metrics_registry is None:
        _metrics_registry = CollectorRegistry()
        for metric in [
            API_REQUESTS_TOTAL,
            API_REQUEST_DURATION,
            RESOURCE_OPERATIONS_TOTAL,
            RESOURCE_OPERATION_DURATION,
        ]:
            _metrics_registry.register(metric)

    return _metrics_registry


def render_metrics() -> str:
    """Render all provider metrics as Prometheus exposition text."""
    return generate_latest(get_metrics_registry()).decode("utf-8")


@contextmanager
def track_api_request(method: str, endpoint: str):
    """
    Context manager to count and time a single Configuration API request.

    Yields a dict; the caller stores the HTTP status under ``"status"``.
    Requests that never produced a response are recorded with status
    ``"error"``.

    Args:
        method: HTTP method
        endpoint: Top-level configuration collection (e.g. ``connection-criteria``)
    """
    outcome = {"status": "error"}
    start_time = time.time()
    try:
        yield outcome
    finally:
        API_REQUESTS_TOTAL.labels(
            method=method, endpoint=endpoint, status=str(outcome["status"])
        ).inc()
        API_REQUEST_DURATION.labels(method=method, endpoint=endpoint).observe(
            time.time() - start_time
        )


def record_resource_operation(
    resource_type: str, operation: str, result: str, duration: float
) -> None:
    """
    Record the outcome of a resource operation.

    Args:
        resource_type: Provider type name of the resource
        operation: Operation performed (create, read, update, delete, replace)
        result: ``success`` or ``error``
        duration: Operation duration in seconds
    """
    RESOURCE_OPERATIONS_TOTAL.labels(
        resource_type=resource_type, operation=operation, result=result
    ).inc()
    RESOURCE_OPERATION_DURATION.labels(
        resource_type=resource_type, operation=operation
    ).observe(duration)
