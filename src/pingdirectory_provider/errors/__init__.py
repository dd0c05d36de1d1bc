"""
Error handling module for the PingDirectory provider.

This module provides the error hierarchy used by the API client, the
compatibility checks and provider configuration.
"""

from .provider_errors import (
    ConfigurationError,
    PingDirectoryAPIError,
    ProviderError,
    UnsupportedVersionError,
    ValidationError,
)

__all__ = [
    "ProviderError",
    "ValidationError",
    "ConfigurationError",
    "UnsupportedVersionError",
    "PingDirectoryAPIError",
]
