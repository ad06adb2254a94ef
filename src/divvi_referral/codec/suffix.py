"""
Calldata suffix: consumer and providers appended to a transaction's calldata.

```text
magic(4) [format(1)] address(consumer) offset(0x40) count address(provider)... length(4)
```

The trailing ``length`` is the byte size of the whole suffix, itself
included, so a reader can take the last four bytes of arbitrary calldata and
walk back exactly that far to find the tag. The legacy layout omits the
format byte; both layouts are decoded.

Examples:
    ```python
    suffix = get_data_suffix("0x1234567890123456789012345678901234567890", [])
    suffix[:8]    # '6decb85d'
    suffix[-8:]   # '00000069'
    decode_data_suffix(suffix).providers   # ()
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from divvi_referral.core.exceptions import TagDecodeError
from divvi_referral.models.constants import (
    MAGIC_PREFIX_SIZE,
    SUFFIX_LENGTH_SIZE,
    FormatID,
)
from divvi_referral.models.tag import DataSuffix

from .abi import (
    decode_head_and_array,
    encode_address,
    encode_address_array,
    require_address,
    require_addresses,
    to_hex,
)
from .formats import resolve_suffix_layout, suffix_layout_for


if TYPE_CHECKING:
    from collections.abc import Iterable


SUFFIX_ARRAY_OFFSET = 0x40
"""Offset word of the providers array: one consumer word plus the offset word
itself. Older documentation calls it the "element length" (64 hex chars per
address); the value is fixed by deployed decoders and must not change unless
the head gains fields, which requires a new format."""

_MIN_SUFFIX_SIZE = MAGIC_PREFIX_SIZE + SUFFIX_LENGTH_SIZE


def get_data_suffix(
    consumer: str,
    providers: Iterable[str] = (),
    format_id: FormatID | str | None = FormatID.DEFAULT,
) -> str:
    """Build the calldata suffix for *consumer* and *providers*.

    Args:
        consumer: Address of the integrating application.
        providers: Referring provider addresses, kept in order, duplicates
            allowed, may be empty.
        format_id: Layout to emit. ``None`` emits the legacy layout without a
            format byte.

    Returns:
        Lowercase hex without ``0x``; prefix it when embedding in calldata.

    Raises:
        InvalidAddressError: If the consumer or any provider is malformed.
            Nothing is encoded in that case.
        TagEncodeError: If the suffix exceeds the 4-byte length field.
    """
    consumer = require_address(consumer)
    provider_list = require_addresses(providers)
    layout = suffix_layout_for(format_id)

    payload = encode_address(consumer) + encode_address_array(provider_list, SUFFIX_ARRAY_OFFSET)
    return layout.frame(payload)


def decode_data_suffix(data: str | bytes) -> DataSuffix:
    """Decode a calldata suffix in either layout.

    Args:
        data: The suffix alone, as hex (``0x`` optional) or bytes.

    Raises:
        TagDecodeError: If the magic prefix, the length field, or the ABI
            payload is malformed.
        UnsupportedFormatError: If the format byte is not registered.
    """
    blob = to_hex(data)
    layout = resolve_suffix_layout(blob)
    payload = layout.unframe(blob)
    (consumer,), providers = decode_head_and_array(payload, 1)
    return DataSuffix(
        consumer=consumer,
        providers=tuple(providers),
        format_id=layout.format_id,
        length=len(blob) // 2,
    )


def split_calldata(calldata: str | bytes) -> tuple[str, DataSuffix]:
    """Separate a trailing data suffix from transaction calldata.

    Reads the last four bytes as the suffix length and decodes that many
    trailing bytes.

    Returns:
        The calldata preceding the suffix (lowercase hex, no ``0x``) and the
        decoded suffix.

    Raises:
        TagDecodeError: If the calldata does not end with a valid suffix.
    """
    blob = to_hex(calldata)
    length_hex = SUFFIX_LENGTH_SIZE * 2
    if len(blob) < _MIN_SUFFIX_SIZE * 2:
        raise TagDecodeError("Calldata is too short to carry a data suffix")

    total = int(blob[-length_hex:], 16)
    if total < _MIN_SUFFIX_SIZE or total * 2 > len(blob):
        raise TagDecodeError(f"Trailing length {total} does not fit the calldata")

    start = len(blob) - total * 2
    return blob[:start], decode_data_suffix(blob[start:])
