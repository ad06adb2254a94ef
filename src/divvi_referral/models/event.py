"""
Attribution events submitted to the tracking service.

An event is the off-chain proof that a tagged transaction or signed message
exists: either the hash of a broadcast transaction, or a message together
with its signature. Events are built once, posted once, and discarded.

See Also:
    [AttributionReporter][divvi_referral.reporter.reporter.AttributionReporter]:
        Posts ``to_payload()`` as the JSON request body.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ._validation import (
    validate_chain_id,
    validate_hex_bytes,
    validate_optional_url,
    validate_str_not_empty,
    validate_tx_hash,
)


@dataclass(frozen=True, slots=True)
class TransactionAttribution:
    """Proof by transaction: the tag was appended to the transaction's calldata.

    Attributes:
        tx_hash: ``0x``-prefixed 32-byte transaction hash.
        chain_id: Chain the transaction was sent on.
        base_url: Optional endpoint override for this event.

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If the hash is malformed, the chain id is not positive,
            or ``base_url`` is not an http(s) URL.

    Examples:
        ```python
        event = TransactionAttribution(tx_hash="0x" + "ab" * 32, chain_id=42220)
        event.to_payload()
        # {'txHash': '0xabab...', 'chainId': 42220}
        ```
    """

    tx_hash: str
    chain_id: int
    base_url: str | None = None

    def __post_init__(self) -> None:
        validate_tx_hash(self.tx_hash, "tx_hash")
        validate_chain_id(self.chain_id, "chain_id")
        validate_optional_url(self.base_url, "base_url")

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON request body."""
        return {"txHash": self.tx_hash, "chainId": self.chain_id}


@dataclass(frozen=True, slots=True)
class MessageAttribution:
    """Proof by signed message: the tag was embedded in a message the user signed.

    Attributes:
        message: The exact message text that was signed.
        signature: ``0x``-prefixed hex signature over ``message``.
        chain_id: Chain the attribution is credited on.
        base_url: Optional endpoint override for this event.
    """

    message: str
    signature: str
    chain_id: int
    base_url: str | None = None

    def __post_init__(self) -> None:
        validate_str_not_empty(self.message, "message")
        validate_hex_bytes(self.signature, "signature")
        validate_chain_id(self.chain_id, "chain_id")
        validate_optional_url(self.base_url, "base_url")

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON request body."""
        return {
            "message": self.message,
            "signature": self.signature,
            "chainId": self.chain_id,
        }


AttributionEvent = TransactionAttribution | MessageAttribution
