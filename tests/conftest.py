"""
Pytest configuration and shared fixtures for divvi-referral tests.

Provides:
- Address fixtures (via ``fixtures.addresses``)
- Logging configuration
- Automatic ``unit`` marker for tests under ``tests/unit``
"""

import logging

import pytest


pytest_plugins = ["fixtures.addresses"]


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
