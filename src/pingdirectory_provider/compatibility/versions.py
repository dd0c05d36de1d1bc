"""
PingDirectory product version handling.

Versions are four dotted numbers (``10.1.0.0``). Shorter strings are padded
with zeros. Resources and attributes that only exist on newer servers carry a
minimum version which is checked against the configured product version
while planning.
"""

from __future__ import annotations

import logging

from pingdirectory_provider.diagnostics import Diagnostics
from pingdirectory_provider.errors import UnsupportedVersionError

logger = logging.getLogger(__name__)

PING_DIRECTORY_9100 = "9.1.0.0"
PING_DIRECTORY_9101 = "9.1.0.1"
PING_DIRECTORY_9102 = "9.1.0.2"
PING_DIRECTORY_9200 = "9.2.0.0"
PING_DIRECTORY_9201 = "9.2.0.1"
PING_DIRECTORY_9202 = "9.2.0.2"
PING_DIRECTORY_9300 = "9.3.0.0"
PING_DIRECTORY_9301 = "9.3.0.1"
PING_DIRECTORY_9302 = "9.3.0.2"
PING_DIRECTORY_10000 = "10.0.0.0"
PING_DIRECTORY_10001 = "10.0.0.1"
PING_DIRECTORY_10100 = "10.1.0.0"
PING_DIRECTORY_10200 = "10.2.0.0"

# Ordered oldest to newest
SUPPORTED_VERSIONS: tuple[str, ...] = (
    PING_DIRECTORY_9100,
    PING_DIRECTORY_9101,
    PING_DIRECTORY_9102,
    PING_DIRECTORY_9200,
    PING_DIRECTORY_9201,
    PING_DIRECTORY_9202,
    PING_DIRECTORY_9300,
    PING_DIRECTORY_9301,
    PING_DIRECTORY_9302,
    PING_DIRECTORY_10000,
    PING_DIRECTORY_10001,
    PING_DIRECTORY_10100,
    PING_DIRECTORY_10200,
)

VERSION_PARTS = 4


def _to_tuple(version: str) -> tuple[int, ...]:
    """Parse version string to tuple for comparison."""
    parts = version.strip().split(".")
    if not 2 <= len(parts) <= VERSION_PARTS:
        raise ValueError(
            f"'{version}' is not a valid PingDirectory version, expected a value like 10.1.0.0"
        )
    try:
        numbers = [int(part) for part in parts]
    except ValueError as e:
        raise ValueError(
            f"'{version}' is not a valid PingDirectory version, expected a value like 10.1.0.0"
        ) from e
    if any(n < 0 for n in numbers):
        raise ValueError(f"'{version}' is not a valid PingDirectory version")
    numbers.extend([0] * (VERSION_PARTS - len(numbers)))
    return tuple(numbers)


def _to_string(version: tuple[int, ...]) -> str:
    return ".".join(str(n) for n in version)


def parse(version: str) -> str:
    """
    Normalize a product version and check that it can be managed.

    Args:
        version: Version string with two to four components

    Returns:
        Supported four-part version string

    Raises:
        UnsupportedVersionError: If no supported release matches the version
        ValueError: If the string is not a version at all
    """
    normalized = _to_string(_to_tuple(version))
    if normalized in SUPPORTED_VERSIONS:
        return normalized

    # Unknown patch of a known release line behaves like its newest known patch
    major_minor = _to_tuple(normalized)[:2]
    same_line = [v for v in SUPPORTED_VERSIONS if _to_tuple(v)[:2] == major_minor]
    if same_line:
        resolved = same_line[-1]
        logger.warning(
            f"PingDirectory version {normalized} is not a known release, "
            f"assuming behavior of version {resolved}"
        )
        return resolved

    raise UnsupportedVersionError(normalized, list(SUPPORTED_VERSIONS))


def compare(version: str, other: str) -> int:
    """
    Compare two versions.

    Returns:
        -1 if version is older than other, 0 if equal, 1 if newer
    """
    left = _to_tuple(version)
    right = _to_tuple(other)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def is_at_least(version: str, minimum: str) -> bool:
    return compare(version, minimum) >= 0


def check_resource_supported(
    diagnostics: Diagnostics,
    min_version: str,
    actual_version: str,
    resource_name: str,
) -> bool:
    """
    Add an error when a resource requires a newer server.

    Args:
        diagnostics: Diagnostics to append to
        min_version: First version supporting the resource
        actual_version: Configured product version
        resource_name: Name used in the error, usually the provider type name

    Returns:
        True when the resource is supported
    """
    try:
        supported = is_at_least(actual_version, min_version)
    except ValueError as e:
        diagnostics.add_error("Failed to compare PingDirectory versions", str(e))
        return False
    if not supported:
        diagnostics.add_error(
            "Resource not supported",
            f"{resource_name} is not supported by PingDirectory version "
            f"{actual_version}. The minimum supported version is {min_version}.",
        )
    return supported


def check_attribute_supported(
    diagnostics: Diagnostics,
    attribute: str,
    min_version: str,
    actual_version: str,
) -> bool:
    """Add an error when a configured attribute requires a newer server."""
    try:
        supported = is_at_least(actual_version, min_version)
    except ValueError as e:
        diagnostics.add_error("Failed to compare PingDirectory versions", str(e))
        return False
    if not supported:
        diagnostics.add_error(
            f"Attribute '{attribute}' not supported by PingDirectory version {actual_version}",
            attribute=attribute,
        )
    return supported
