"""
Observability utilities for the PingDirectory provider.

This module provides metrics and structured logging capabilities for
tracing Configuration API traffic.
"""

from .logging import ProviderLogger, setup_structured_logging
from .metrics import get_metrics_registry, render_metrics

__all__ = [
    "get_metrics_registry",
    "render_metrics",
    "ProviderLogger",
    "setup_structured_logging",
]
