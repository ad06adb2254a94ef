"""
Syntactic validation of 20-byte hex account identifiers.

Only the shape is checked: ``0x`` followed by exactly 40 hex digits, either
case. Mixed-case checksums are not verified and invalid input is never
repaired; callers decide what a failed check means.
"""

from __future__ import annotations

import re


_ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")


def is_valid_address(value: object) -> bool:
    """Return True if *value* is a ``0x``-prefixed 40-hex-digit string.

    Total over any input: non-string values return False.

    Examples:
        ```python
        is_valid_address("0x1234567890123456789012345678901234567890")  # True
        is_valid_address("0xBa9655677f4E42DD289F5b7888170bC0c7dA8Cdc")  # True
        is_valid_address("0x1234")                                      # False
        is_valid_address("1234567890123456789012345678901234567890")    # False
        ```
    """
    return isinstance(value, str) and _ADDRESS_PATTERN.fullmatch(value) is not None


def normalize_address(value: str) -> str:
    """Return the canonical lowercase form of a valid address.

    Raises:
        ValueError: If *value* is not a valid address.
    """
    if not is_valid_address(value):
        raise ValueError(f"Invalid address: {value!r}")
    return value.lower()
