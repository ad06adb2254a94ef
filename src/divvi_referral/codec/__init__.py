"""Attribution tag codec.

Pure, synchronous, stateless functions: safe to call concurrently from any
number of call sites. Every encoder validates all addresses before producing
any output and returns lowercase hex without ``0x``.

Attributes:
    get_data_suffix: Calldata suffix (consumer + providers), trailing
        total-length framing. See [suffix][divvi_referral.codec.suffix].
    decode_data_suffix: Inverse of ``get_data_suffix`` for both the legacy
        and the current layout.
    split_calldata: Locate and decode the suffix at the end of calldata.
    get_referral_tag: Referral tag (user + consumer + providers), leading
        payload-length framing. See [referral][divvi_referral.codec.referral].
    decode_referral_tag: Inverse of ``get_referral_tag``.
"""

from .abi import (
    decode_address,
    decode_head_and_array,
    encode_address,
    encode_address_array,
    require_address,
)
from .formats import SUFFIX_LAYOUTS, SuffixLayout, format_byte_for, format_id_for_byte
from .referral import REFERRAL_ARRAY_OFFSET, decode_referral_tag, get_referral_tag
from .suffix import SUFFIX_ARRAY_OFFSET, decode_data_suffix, get_data_suffix, split_calldata


__all__ = [
    "REFERRAL_ARRAY_OFFSET",
    "SUFFIX_ARRAY_OFFSET",
    "SUFFIX_LAYOUTS",
    "SuffixLayout",
    "decode_address",
    "decode_data_suffix",
    "decode_head_and_array",
    "decode_referral_tag",
    "encode_address",
    "encode_address_array",
    "format_byte_for",
    "format_id_for_byte",
    "get_data_suffix",
    "get_referral_tag",
    "require_address",
    "split_calldata",
]
