"""
Format registry lookups and calldata-suffix layouts.

A calldata suffix comes in two variants that share the magic prefix and the
trailing total-length field:

```text
legacy:   magic | payload | length
current:  magic | format  | payload | length
```

Each variant is a [SuffixLayout][divvi_referral.codec.formats.SuffixLayout].
Decoders pick the layout from the byte right after the magic prefix: ``00``
can only be the first padding byte of a legacy payload, any other value must
be a registered format byte. New layouts are added by registering a new
``FormatID`` in ``FORMAT_ID_BYTES``; existing entries never change.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from divvi_referral.core.exceptions import TagDecodeError, TagEncodeError, UnsupportedFormatError
from divvi_referral.models.constants import (
    FORMAT_BYTE_SIZE,
    FORMAT_ID_BYTES,
    MAGIC_PREFIX,
    MAGIC_PREFIX_SIZE,
    RESERVED_FORMAT_BYTE,
    SUFFIX_LENGTH_SIZE,
    FormatID,
)

from .abi import encode_uint


if TYPE_CHECKING:
    from collections.abc import Mapping


_FORMAT_IDS_BY_BYTE: Mapping[str, FormatID] = MappingProxyType(
    {byte: format_id for format_id, byte in FORMAT_ID_BYTES.items()}
)

_MAGIC_HEX = MAGIC_PREFIX_SIZE * 2
_FORMAT_HEX = FORMAT_BYTE_SIZE * 2
_SUFFIX_LENGTH_HEX = SUFFIX_LENGTH_SIZE * 2


def format_byte_for(format_id: FormatID | str) -> str:
    """Return the registered wire byte (two hex chars) for *format_id*.

    Raises:
        ValueError: If *format_id* does not name a ``FormatID``.
    """
    return FORMAT_ID_BYTES[FormatID(format_id)]


def format_id_for_byte(format_byte: str) -> FormatID:
    """Resolve a wire format byte back to its ``FormatID``.

    Raises:
        UnsupportedFormatError: If the byte is not registered.
    """
    try:
        return _FORMAT_IDS_BY_BYTE[format_byte.lower()]
    except KeyError:
        raise UnsupportedFormatError(f"Unsupported format byte: {format_byte!r}") from None


def check_magic(blob: str) -> None:
    """Raise ``TagDecodeError`` unless *blob* starts with the magic prefix."""
    if not blob.startswith(MAGIC_PREFIX):
        raise TagDecodeError(f"Missing magic prefix {MAGIC_PREFIX}")


@dataclass(frozen=True, slots=True)
class SuffixLayout:
    """One calldata-suffix wire variant.

    Attributes:
        format_id: The format this layout implements, ``None`` for legacy.
        format_byte: Hex of the format byte written after the magic prefix,
            empty for legacy.
    """

    format_id: FormatID | None
    format_byte: str

    @property
    def header(self) -> str:
        return MAGIC_PREFIX + self.format_byte

    def frame(self, payload: str) -> str:
        """Wrap an ABI payload with the header and the trailing total length.

        The length counts the whole suffix, the length field included, and is
        measured from the produced hex.

        Raises:
            TagEncodeError: If the total does not fit in the length field.
        """
        total = (len(self.header) + len(payload) + _SUFFIX_LENGTH_HEX) // 2
        try:
            length = encode_uint(total, SUFFIX_LENGTH_SIZE)
        except ValueError as e:
            raise TagEncodeError(f"Data suffix too large: {total} bytes") from e
        return self.header + payload + length

    def unframe(self, blob: str) -> str:
        """Strip header and length field from a suffix, returning the payload.

        Raises:
            TagDecodeError: If the header is missing or the trailing length
                disagrees with the measured size of *blob*.
        """
        if not blob.startswith(self.header):
            raise TagDecodeError("Suffix header does not match its layout")
        if len(blob) < len(self.header) + _SUFFIX_LENGTH_HEX:
            raise TagDecodeError("Data suffix is truncated")
        announced = int(blob[-_SUFFIX_LENGTH_HEX:], 16)
        if announced * 2 != len(blob):
            raise TagDecodeError(
                f"Length field announces {announced} bytes, suffix has {len(blob) // 2}"
            )
        return blob[len(self.header) : -_SUFFIX_LENGTH_HEX]


LEGACY_SUFFIX_LAYOUT = SuffixLayout(format_id=None, format_byte="")

SUFFIX_LAYOUTS: Mapping[str, SuffixLayout] = MappingProxyType(
    {
        RESERVED_FORMAT_BYTE: LEGACY_SUFFIX_LAYOUT,
        **{
            byte: SuffixLayout(format_id=format_id, format_byte=byte)
            for format_id, byte in FORMAT_ID_BYTES.items()
        },
    }
)
"""Leading byte after the magic prefix to the layout that owns it."""


def suffix_layout_for(format_id: FormatID | str | None) -> SuffixLayout:
    """Return the layout used to encode *format_id* (``None`` selects legacy)."""
    if format_id is None:
        return LEGACY_SUFFIX_LAYOUT
    return SUFFIX_LAYOUTS[format_byte_for(format_id)]


def resolve_suffix_layout(blob: str) -> SuffixLayout:
    """Pick the layout of an encoded suffix from the byte after the magic prefix.

    Raises:
        TagDecodeError: If the magic prefix is missing or the blob ends there.
        UnsupportedFormatError: If the byte names no registered layout.
    """
    check_magic(blob)
    leading = blob[_MAGIC_HEX : _MAGIC_HEX + _FORMAT_HEX]
    if len(leading) < _FORMAT_HEX:
        raise TagDecodeError("Data suffix is truncated")
    layout = SUFFIX_LAYOUTS.get(leading)
    if layout is None:
        raise UnsupportedFormatError(f"Unsupported format byte: {leading!r}")
    return layout
