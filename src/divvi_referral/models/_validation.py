"""Shared validation helpers for frozen dataclass models.

Private module, not part of the public API. Used by ``__post_init__``
methods in sibling model modules so invalid instances never escape their
constructor.
"""

from __future__ import annotations

import re
from typing import Any

from .address import is_valid_address


_HEX_32_BYTES = re.compile(r"0x[0-9a-fA-F]{64}")
_HEX_BYTES = re.compile(r"0x(?:[0-9a-fA-F]{2})+")


def validate_instance(value: Any, expected: type, name: str) -> None:
    """Raise ``TypeError`` if *value* is not an instance of *expected*."""
    if not isinstance(value, expected):
        article = "an" if expected.__name__[0] in "AEIOUaeiou" else "a"
        raise TypeError(f"{name} must be {article} {expected.__name__}, got {type(value).__name__}")


def validate_chain_id(value: Any, name: str) -> None:
    """Raise if *value* is not a positive ``int`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value <= 0:
        raise ValueError(f"{name} must be positive")


def validate_str_not_empty(value: Any, name: str) -> None:
    """Raise if *value* is not a non-empty ``str`` without null bytes."""
    validate_instance(value, str, name)
    if "\x00" in value:
        raise ValueError(f"{name} contains null bytes")
    if not value:
        raise ValueError(f"{name} must not be empty")


def validate_tx_hash(value: Any, name: str) -> None:
    """Raise if *value* is not ``0x`` followed by 64 hex digits."""
    validate_instance(value, str, name)
    if not _HEX_32_BYTES.fullmatch(value):
        raise ValueError(f"{name} must be a 0x-prefixed 32-byte hex string")


def validate_hex_bytes(value: Any, name: str) -> None:
    """Raise if *value* is not a non-empty ``0x``-prefixed whole-byte hex string."""
    validate_instance(value, str, name)
    if not _HEX_BYTES.fullmatch(value):
        raise ValueError(f"{name} must be a 0x-prefixed hex string")


def validate_normalized_address(value: Any, name: str) -> None:
    """Raise if *value* is not a valid, already-lowercased address."""
    validate_instance(value, str, name)
    if not is_valid_address(value) or value != value.lower():
        raise ValueError(f"{name} must be a lowercase 0x-prefixed address, got {value!r}")


def validate_optional_url(value: Any, name: str) -> None:
    """Raise if *value* is neither ``None`` nor an ``http(s)://`` URL."""
    if value is None:
        return
    validate_str_not_empty(value, name)
    if not value.startswith(("http://", "https://")):
        raise ValueError(f"{name} must be an http(s) URL, got {value!r}")
