r"""divvi-referral -- referral attribution tags for transactions and signed messages.

Encodes a referral relationship (end user, consuming application, referring
providers) into a compact binary tag appended to calldata or embedded in a
signed message, and reports the resulting transaction or signature to the
tracking service.

Imports flow strictly downward:

```text
            __main__            CLI
               |
            reporter            HTTP submission (aiohttp)
            /      \
        codec      utils        Tag encode/decode, bounded HTTP reads
            \      /
              core              Exceptions, logging, YAML
               |
             models             Frozen dataclasses and wire constants (zero I/O)
```

Note:
    Top-level imports (``from divvi_referral import get_data_suffix``) use
    lazy loading and resolve on first access, so importing the package does
    not pull in ``aiohttp`` or ``pydantic`` until the reporter is used.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("divvi-referral")

__all__ = [
    "AttributionReporter",
    "ClientError",
    "DataSuffix",
    "DivviError",
    "FormatID",
    "InvalidAddressError",
    "MessageAttribution",
    "ReferralTag",
    "ReporterConfig",
    "RetryableServerError",
    "TransactionAttribution",
    "decode_data_suffix",
    "decode_referral_tag",
    "get_data_suffix",
    "get_referral_tag",
    "is_valid_address",
    "split_calldata",
    "submit_attribution_event",
    "submit_referral",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ClientError": ("divvi_referral.core", "ClientError"),
    "DivviError": ("divvi_referral.core", "DivviError"),
    "InvalidAddressError": ("divvi_referral.core", "InvalidAddressError"),
    "RetryableServerError": ("divvi_referral.core", "RetryableServerError"),
    "DataSuffix": ("divvi_referral.models", "DataSuffix"),
    "FormatID": ("divvi_referral.models", "FormatID"),
    "MessageAttribution": ("divvi_referral.models", "MessageAttribution"),
    "ReferralTag": ("divvi_referral.models", "ReferralTag"),
    "TransactionAttribution": ("divvi_referral.models", "TransactionAttribution"),
    "is_valid_address": ("divvi_referral.models", "is_valid_address"),
    "decode_data_suffix": ("divvi_referral.codec", "decode_data_suffix"),
    "decode_referral_tag": ("divvi_referral.codec", "decode_referral_tag"),
    "get_data_suffix": ("divvi_referral.codec", "get_data_suffix"),
    "get_referral_tag": ("divvi_referral.codec", "get_referral_tag"),
    "split_calldata": ("divvi_referral.codec", "split_calldata"),
    "AttributionReporter": ("divvi_referral.reporter", "AttributionReporter"),
    "ReporterConfig": ("divvi_referral.reporter", "ReporterConfig"),
    "submit_attribution_event": ("divvi_referral.reporter", "submit_attribution_event"),
    "submit_referral": ("divvi_referral.reporter", "submit_referral"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'divvi_referral' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
