"""Pytest configuration shared by all tests.

This configuration ensures:
1. Settings load with the testing environment
2. The cached logger is rebuilt between tests that patch settings
"""

import os

os.environ.setdefault("UTILBOX_ENVIRONMENT", "testing")

import pytest  # noqa: E402

from utilbox.core.container import get_logger  # noqa: E402


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop the cached logger after each test.

    Tests that patch settings or the adapter must not leak a mocked logger
    into later tests.
    """
    yield
    get_logger.cache_clear()
