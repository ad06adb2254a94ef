"""
ABI-style primitives for addresses and address arrays.

Every value occupies one 32-byte word. An ``address`` is right-aligned in its
word; an ``address[]`` that follows ``n`` static address fields is written as

```text
head:  address_1 ... address_n  offset
tail:  count  element_1 ... element_count
```

where ``offset`` is the byte size of the head, ``32 * (n + 1)``. All values
are handled as lowercase hex strings without ``0x``; the encoders assume
their input already passed [require_address()][divvi_referral.codec.abi.require_address].
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from divvi_referral.core.exceptions import InvalidAddressError, TagDecodeError
from divvi_referral.models.address import normalize_address
from divvi_referral.models.constants import ADDRESS_SIZE, WORD_SIZE


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


_WORD_HEX = WORD_SIZE * 2
_PADDING_HEX = (WORD_SIZE - ADDRESS_SIZE) * 2
_HEX_PATTERN = re.compile(r"(?:[0-9a-f]{2})*")


def require_address(value: object) -> str:
    """Return the lowercase form of *value*, or raise if it is not an address.

    Raises:
        InvalidAddressError: Carrying *value* unchanged.
    """
    try:
        return normalize_address(value)  # type: ignore[arg-type]
    except ValueError:
        raise InvalidAddressError(value) from None


def require_addresses(values: Iterable[str]) -> list[str]:
    """Validate every element of *values*, preserving order and duplicates.

    Raises:
        TypeError: If *values* is a single string instead of a sequence.
        InvalidAddressError: On the first invalid element.
    """
    if isinstance(values, str | bytes):
        raise TypeError("providers must be a sequence of addresses, not a single string")
    return [require_address(value) for value in values]


def to_hex(data: str | bytes) -> str:
    """Normalize tag input to lowercase hex without ``0x``.

    Accepts raw bytes or a hex string with or without the ``0x`` prefix.

    Raises:
        TagDecodeError: If the string is not whole-byte hex.
    """
    if isinstance(data, bytes | bytearray):
        return bytes(data).hex()
    if not isinstance(data, str):
        raise TypeError(f"data must be str or bytes, got {type(data).__name__}")
    text = data[2:] if data[:2] in ("0x", "0X") else data
    text = text.lower()
    if not _HEX_PATTERN.fullmatch(text):
        raise TagDecodeError("Input is not a whole-byte hex string")
    return text


def encode_uint(value: int, size: int = WORD_SIZE) -> str:
    """Encode a non-negative integer as big-endian hex of exactly *size* bytes.

    Raises:
        ValueError: If *value* is negative or does not fit in *size* bytes.
    """
    if value < 0 or value >= 1 << (8 * size):
        raise ValueError(f"{value} does not fit in {size} bytes")
    return f"{value:0{size * 2}x}"


def encode_address(address: str) -> str:
    """Encode one address as a right-aligned 32-byte word (64 hex chars)."""
    return address[2:].lower().rjust(_WORD_HEX, "0")


def encode_address_array(addresses: Sequence[str], offset: int) -> str:
    """Encode an ``address[]`` as its offset word followed by its tail.

    Args:
        addresses: Validated addresses, encoded in the given order.
        offset: Byte offset of the tail, measured from the start of the
            enclosing payload. Callers pass their format's fixed constant.
    """
    elements = "".join(encode_address(address) for address in addresses)
    return encode_uint(offset) + encode_uint(len(addresses)) + elements


def array_offset(static_fields: int) -> int:
    """Offset of an ``address[]`` placed after *static_fields* address words."""
    return WORD_SIZE * (static_fields + 1)


# -----------------------------------------------------------------------------
# Decoding
# -----------------------------------------------------------------------------


def decode_address(word: str) -> str:
    """Decode a 32-byte address word back to a ``0x``-prefixed address.

    Raises:
        TagDecodeError: If the word is not 64 hex chars or its 12 padding
            bytes are not zero.
    """
    if len(word) != _WORD_HEX:
        raise TagDecodeError(f"Address word must be {WORD_SIZE} bytes, got {len(word) // 2}")
    if word[:_PADDING_HEX].strip("0"):
        raise TagDecodeError("Address word has non-zero padding")
    return "0x" + word[_PADDING_HEX:].lower()


def decode_head_and_array(payload: str, static_fields: int) -> tuple[list[str], list[str]]:
    """Decode ``static_fields`` addresses followed by one ``address[]``.

    The payload must contain exactly the words the layout implies: trailing
    bytes, a short tail, or an offset other than
    [array_offset()][divvi_referral.codec.abi.array_offset] are rejected.

    Args:
        payload: Lowercase hex of the ABI payload only.
        static_fields: Number of address words before the array offset.

    Returns:
        The static addresses and the array elements, both in wire order.

    Raises:
        TagDecodeError: If the payload does not match the layout.
    """
    if len(payload) % _WORD_HEX:
        raise TagDecodeError("Payload is not a whole number of 32-byte words")
    words = [payload[i : i + _WORD_HEX] for i in range(0, len(payload), _WORD_HEX)]
    if len(words) < static_fields + 2:
        raise TagDecodeError("Payload is truncated")

    statics = [decode_address(word) for word in words[:static_fields]]

    offset = int(words[static_fields], 16)
    expected = array_offset(static_fields)
    if offset != expected:
        raise TagDecodeError(f"Array offset must be {expected:#x}, got {offset:#x}")

    count = int(words[static_fields + 1], 16)
    elements = words[static_fields + 2 :]
    if count != len(elements):
        raise TagDecodeError(f"Array announces {count} elements, payload holds {len(elements)}")

    return statics, [decode_address(word) for word in elements]
