"""Wire constants shared by the codec and the decoded tag models.

The format registry is read-only at runtime and append-only across releases:
a new wire layout gets a new ``FormatID`` member and a new byte, an existing
byte is never reassigned. Byte ``00`` is reserved because it is the first
byte of every legacy calldata suffix payload (a left-padded address).

See Also:
    [divvi_referral.codec.formats][]: Resolves format bytes read from the wire
        back to a ``FormatID`` and a suffix layout.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Mapping


MAGIC_PREFIX = "6decb85d"
"""First four bytes of ``keccak256("divvi")``, hex encoded."""

MAGIC_PREFIX_SIZE = 4
FORMAT_BYTE_SIZE = 1
WORD_SIZE = 32
ADDRESS_SIZE = 20

SUFFIX_LENGTH_SIZE = 4
"""Trailing total-length field of a calldata suffix, in bytes."""

REFERRAL_LENGTH_SIZE = 2
"""Leading payload-length field of a referral tag, in bytes."""

RESERVED_FORMAT_BYTE = "00"


class FormatID(StrEnum):
    """Named wire layout versions of an attribution tag.

    Attributes:
        DEFAULT: Current layout. Calldata suffixes carry a format byte after
            the magic prefix; referral tags always do.
    """

    DEFAULT = "default"


FORMAT_ID_BYTES: Mapping[FormatID, str] = MappingProxyType(
    {
        FormatID.DEFAULT: "01",
    }
)
"""Format identifier to its one-byte wire code (two lowercase hex chars)."""
