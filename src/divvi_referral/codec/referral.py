"""
Referral tag: user, consumer, and providers, for calldata or signed messages.

```text
magic(4) format(1) payload_length(2) address(user) address(consumer) offset(0x60) count address(provider)...
```

Unlike the calldata suffix, the length is a two-byte prefix that counts the
ABI payload only. Existing decoders read each framing at its exact byte
offsets.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from divvi_referral.core.exceptions import TagDecodeError, TagEncodeError
from divvi_referral.models.constants import (
    FORMAT_BYTE_SIZE,
    MAGIC_PREFIX,
    MAGIC_PREFIX_SIZE,
    REFERRAL_LENGTH_SIZE,
    FormatID,
)
from divvi_referral.models.tag import ReferralTag

from .abi import (
    decode_head_and_array,
    encode_address,
    encode_address_array,
    encode_uint,
    require_address,
    require_addresses,
    to_hex,
)
from .formats import check_magic, format_byte_for, format_id_for_byte


if TYPE_CHECKING:
    from collections.abc import Iterable


REFERRAL_ARRAY_OFFSET = 0x60
"""Offset word of the providers array: user and consumer words plus the
offset word itself. Changes only together with a new format."""

MAX_REFERRAL_PAYLOAD = (1 << (8 * REFERRAL_LENGTH_SIZE)) - 1

_HEADER_HEX = (MAGIC_PREFIX_SIZE + FORMAT_BYTE_SIZE + REFERRAL_LENGTH_SIZE) * 2
_FORMAT_START = MAGIC_PREFIX_SIZE * 2
_LENGTH_START = (MAGIC_PREFIX_SIZE + FORMAT_BYTE_SIZE) * 2


def get_referral_tag(
    user: str,
    consumer: str,
    providers: Iterable[str] = (),
    format_id: FormatID | str = FormatID.DEFAULT,
) -> str:
    """Build the referral tag for *user*, *consumer* and *providers*.

    Args:
        user: Address of the end user performing the attributed action.
        consumer: Address of the integrating application.
        providers: Referring provider addresses, kept in order, may be empty.
        format_id: Registered format to emit.

    Returns:
        Lowercase hex without ``0x``.

    Raises:
        InvalidAddressError: If any address is malformed (user, then consumer,
            then providers in order). Nothing is encoded in that case.
        TagEncodeError: If the payload exceeds 65535 bytes (more than 2043
            providers).
    """
    user = require_address(user)
    consumer = require_address(consumer)
    provider_list = require_addresses(providers)
    format_byte = format_byte_for(format_id)

    payload = (
        encode_address(user)
        + encode_address(consumer)
        + encode_address_array(provider_list, REFERRAL_ARRAY_OFFSET)
    )
    size = len(payload) // 2
    if size > MAX_REFERRAL_PAYLOAD:
        raise TagEncodeError(f"Referral tag payload too large: {size} bytes")

    return (
        MAGIC_PREFIX
        + format_byte
        + encode_uint(size, REFERRAL_LENGTH_SIZE)
        + payload
    )


def decode_referral_tag(data: str | bytes) -> ReferralTag:
    """Decode a referral tag.

    Args:
        data: The tag alone, as hex (``0x`` optional) or bytes.

    Raises:
        TagDecodeError: If the magic prefix is missing, the payload length
            disagrees with the bytes present, or the ABI payload is malformed.
        UnsupportedFormatError: If the format byte is not registered.
    """
    blob = to_hex(data)
    check_magic(blob)
    if len(blob) < _HEADER_HEX:
        raise TagDecodeError("Referral tag is truncated")

    format_id = format_id_for_byte(blob[_FORMAT_START:_LENGTH_START])
    announced = int(blob[_LENGTH_START:_HEADER_HEX], 16)
    payload = blob[_HEADER_HEX:]
    if announced * 2 != len(payload):
        raise TagDecodeError(
            f"Length field announces {announced} payload bytes, tag has {len(payload) // 2}"
        )

    (user, consumer), providers = decode_head_and_array(payload, 2)
    return ReferralTag(
        user=user,
        consumer=consumer,
        providers=tuple(providers),
        format_id=format_id,
        payload_length=announced,
    )
