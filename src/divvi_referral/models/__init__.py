"""Pure frozen dataclasses and wire constants with zero I/O.

The models layer sits at the bottom of the package and depends only on the
standard library. Every model uses ``@dataclass(frozen=True, slots=True)``
and validates in ``__post_init__`` so invalid instances never escape the
constructor.

Attributes:
    FormatID: Registered tag wire layouts, with ``FORMAT_ID_BYTES`` mapping
        each to its one-byte code.
    MAGIC_PREFIX: Four-byte marker that starts every attribution tag.
    DataSuffix: Decoded calldata suffix (consumer + providers).
    ReferralTag: Decoded referral tag (user + consumer + providers).
    TransactionAttribution: Tracking event proven by a transaction hash.
    MessageAttribution: Tracking event proven by a signed message.
    is_valid_address: Syntactic check for 20-byte hex account identifiers.
"""

from .address import is_valid_address, normalize_address
from .constants import FORMAT_ID_BYTES, MAGIC_PREFIX, FormatID
from .event import AttributionEvent, MessageAttribution, TransactionAttribution
from .tag import DataSuffix, ReferralTag


__all__ = [
    "FORMAT_ID_BYTES",
    "MAGIC_PREFIX",
    "AttributionEvent",
    "DataSuffix",
    "FormatID",
    "MessageAttribution",
    "ReferralTag",
    "TransactionAttribution",
    "is_valid_address",
    "normalize_address",
]
