"""Canonical addresses shared across the codec and model tests.

Usage: Registered via ``pytest_plugins`` in the root ``conftest.py``;
constants are imported directly (``from fixtures.addresses import CONSUMER``).
"""

from __future__ import annotations

import pytest


CONSUMER = "0x1234567890123456789012345678901234567890"
USER = "0xabcdefabcdefabcdefabcdefabcdefabcdefabcd"
PROVIDER_A = "0x0987654321098765432109876543210987654321"
PROVIDER_B = "0xBa9655677f4E42DD289F5b7888170bC0c7dA8Cdc"

BAD_ADDRESSES = [
    "",
    "0x1234",
    "1234567890123456789012345678901234567890",
    "0X1234567890123456789012345678901234567890",
    "0x123456789012345678901234567890123456789g",
    "0x12345678901234567890123456789012345678901",
    " 0x1234567890123456789012345678901234567890",
    "0x1234567890123456789012345678901234567890\n",
]


@pytest.fixture
def consumer() -> str:
    return CONSUMER


@pytest.fixture
def user() -> str:
    return USER


@pytest.fixture
def providers() -> list[str]:
    """Two providers, the second in mixed case."""
    return [PROVIDER_A, PROVIDER_B]
