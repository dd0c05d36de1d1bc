"""
PingDirectory version compatibility.

The provider is configured with the product version of the server it talks
to. Resources and attributes introduced in later releases are rejected while
planning instead of failing at the Configuration API.
"""

from .versions import (
    PING_DIRECTORY_9200,
    PING_DIRECTORY_10000,
    SUPPORTED_VERSIONS,
    check_attribute_supported,
    check_resource_supported,
    compare,
    is_at_least,
    parse,
)

__all__ = [
    "PING_DIRECTORY_9200",
    "PING_DIRECTORY_10000",
    "SUPPORTED_VERSIONS",
    "check_attribute_supported",
    "check_resource_supported",
    "compare",
    "is_at_least",
    "parse",
]
