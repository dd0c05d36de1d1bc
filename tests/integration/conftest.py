"""
Pytest configuration and fixtures for integration tests.

These tests run against a real PingDirectory server. They are skipped
unless PINGDIRECTORY_PROVIDER_HTTPS_HOST is set; the remaining connection
settings are read from the usual PINGDIRECTORY_PROVIDER_* variables.
"""

import os
import uuid
from collections.abc import AsyncGenerator

import pytest

from pingdirectory_provider.constants import ENV_HTTPS_HOST
from pingdirectory_provider.provider import PingDirectoryProvider


def pytest_collection_modifyitems(config, items):
    """Skip integration tests when no server is configured."""
    if os.environ.get(ENV_HTTPS_HOST):
        return
    skip = pytest.mark.skip(reason=f"{ENV_HTTPS_HOST} is not set")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
async def provider() -> AsyncGenerator[PingDirectoryProvider, None]:
    """Provider configured from the environment."""
    provider = PingDirectoryProvider()
    configuration, diagnostics = provider.configure()
    if configuration is None:
        pytest.fail(f"Provider configuration failed: {diagnostics.error_summary}")
    yield provider
    await provider.close()


@pytest.fixture
def unique_name() -> str:
    """Object name that does not collide with parallel runs."""
    return f"it-{uuid.uuid4().hex[:8]}"
