"""
Decoded attribution tags.

Both types are produced by the decoders in ``divvi_referral.codec`` and hold
lowercase addresses only. Providers are stored as a tuple so a decoded tag
is hashable and cannot be mutated after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ._validation import validate_instance, validate_normalized_address
from .constants import FormatID


def _freeze_providers(instance: object, providers: Any) -> None:
    if not isinstance(providers, (list, tuple)):
        raise TypeError(f"providers must be a list or tuple, got {type(providers).__name__}")
    frozen = tuple(providers)
    for i, provider in enumerate(frozen):
        validate_normalized_address(provider, f"providers[{i}]")
    object.__setattr__(instance, "providers", frozen)


@dataclass(frozen=True, slots=True)
class DataSuffix:
    """A decoded calldata suffix (consumer + providers).

    Attributes:
        consumer: Address of the integrating application.
        providers: Referring providers, in wire order. May be empty.
        format_id: Resolved format, or ``None`` for the legacy layout that
            carries no format byte.
        length: Total byte length announced by (and measured for) the suffix,
            including the magic prefix and the trailing length field.

    Examples:
        ```python
        suffix = decode_data_suffix(get_data_suffix(consumer, []))
        suffix.providers   # ()
        suffix.format_id   # FormatID.DEFAULT
        suffix.length      # 105
        ```
    """

    consumer: str
    providers: tuple[str, ...]
    format_id: FormatID | None
    length: int

    def __post_init__(self) -> None:
        validate_normalized_address(self.consumer, "consumer")
        _freeze_providers(self, self.providers)
        if self.format_id is not None:
            validate_instance(self.format_id, FormatID, "format_id")
        validate_instance(self.length, int, "length")

    @property
    def is_legacy(self) -> bool:
        """True if the suffix uses the layout without a format byte."""
        return self.format_id is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "kind": "data_suffix",
            "format": self.format_id.value if self.format_id is not None else "legacy",
            "consumer": self.consumer,
            "providers": list(self.providers),
            "length": self.length,
        }


@dataclass(frozen=True, slots=True)
class ReferralTag:
    """A decoded referral tag (user + consumer + providers).

    Attributes:
        user: Address of the end user who performed the attributed action.
        consumer: Address of the integrating application.
        providers: Referring providers, in wire order. May be empty.
        format_id: Resolved format.
        payload_length: Byte length of the ABI payload, as announced by the
            leading length field.
    """

    user: str
    consumer: str
    providers: tuple[str, ...]
    format_id: FormatID
    payload_length: int

    def __post_init__(self) -> None:
        validate_normalized_address(self.user, "user")
        validate_normalized_address(self.consumer, "consumer")
        _freeze_providers(self, self.providers)
        validate_instance(self.format_id, FormatID, "format_id")
        validate_instance(self.payload_length, int, "payload_length")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "kind": "referral_tag",
            "format": self.format_id.value,
            "user": self.user,
            "consumer": self.consumer,
            "providers": list(self.providers),
            "payload_length": self.payload_length,
        }
