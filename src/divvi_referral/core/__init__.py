"""Core layer: exceptions, structured logging, and YAML loading.

Depends only on the standard library and ``pyyaml``; imported by
``divvi_referral.codec``, ``divvi_referral.reporter`` and the CLI.

Attributes:
    DivviError: Root of the exception hierarchy.
        See [exceptions][divvi_referral.core.exceptions].
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][divvi_referral.core.logger.Logger].
    load_yaml: Safe YAML loading.
        See [load_yaml()][divvi_referral.core.yaml.load_yaml].
"""

from .exceptions import (
    ClientError,
    ConfigurationError,
    DivviError,
    InvalidAddressError,
    RetryableServerError,
    SubmissionError,
    TagDecodeError,
    TagEncodeError,
    TagError,
    UnsupportedFormatError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "ClientError",
    "ConfigurationError",
    "DivviError",
    "InvalidAddressError",
    "Logger",
    "RetryableServerError",
    "StructuredFormatter",
    "SubmissionError",
    "TagDecodeError",
    "TagEncodeError",
    "TagError",
    "UnsupportedFormatError",
    "format_kv_pairs",
    "load_yaml",
]
