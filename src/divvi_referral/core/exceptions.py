"""divvi-referral exception hierarchy.

Separates local, deterministic failures (bad addresses, malformed tags) from
the outcome of a tracking-service submission, so callers can decide whether a
request is worth retrying without inspecting messages.

Exception hierarchy:

```text
DivviError (base -- never raised directly)
├── ConfigurationError         -- config validation, missing keys, bad YAML
├── InvalidAddressError        -- malformed account identifier
├── TagError                   -- tag codec failures
│   ├── TagEncodeError         -- length field overflow
│   └── TagDecodeError         -- bad magic, length, or ABI payload
│       └── UnsupportedFormatError -- unregistered format byte
└── SubmissionError            -- tracking endpoint rejected the request
    ├── ClientError            -- 4xx, do not retry unchanged
    └── RetryableServerError   -- any other non-2xx, retry later
```

Transport failures (``aiohttp.ClientError``, ``OSError``) are not part of
this tree: the reporter lets them propagate unchanged.

See Also:
    [require_address()][divvi_referral.codec.abi.require_address]: Raises
        [InvalidAddressError][divvi_referral.core.exceptions.InvalidAddressError].
    [AttributionReporter][divvi_referral.reporter.reporter.AttributionReporter]:
        Raises the [SubmissionError][divvi_referral.core.exceptions.SubmissionError]
        subclasses.
"""

from __future__ import annotations


class DivviError(Exception):
    """Base exception for all divvi-referral errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(DivviError):
    """Invalid or missing configuration (YAML, CLI flags)."""


# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------


class InvalidAddressError(DivviError):
    """An identity address is not ``0x`` followed by 40 hex digits.

    Raised before any tag bytes are produced, so a failed encode never
    yields a partial tag.

    Attributes:
        address: The offending value, exactly as supplied by the caller.
    """

    def __init__(self, address: object) -> None:
        self.address = address
        super().__init__(f"Invalid Ethereum address: {address}")


class TagError(DivviError):
    """Base for attribution tag encode/decode failures."""


class TagEncodeError(TagError):
    """The produced payload does not fit the format's length field."""


class TagDecodeError(TagError):
    """A blob is not a well-formed attribution tag.

    Covers a missing magic prefix, a length field that disagrees with the
    measured byte count, non-hex input, and ABI payloads that violate the
    layout (non-zero address padding, wrong array offset, truncated words).
    """


class UnsupportedFormatError(TagDecodeError):
    """The format byte following the magic prefix is not registered."""


# ---------------------------------------------------------------------------
# Submission
# ---------------------------------------------------------------------------


class SubmissionError(DivviError):
    """The tracking endpoint answered with a non-2xx status.

    Attributes:
        status: HTTP status code.
        status_text: HTTP reason phrase (may be empty).
    """

    def __init__(self, message: str, status: int, status_text: str) -> None:
        self.status = status
        self.status_text = status_text
        super().__init__(message)


class ClientError(SubmissionError):
    """4xx response. The request itself is wrong; do not retry it unchanged.

    Attributes:
        body: Response body text, as returned by the server.
    """

    def __init__(self, status: int, status_text: str, body: str) -> None:
        self.body = body
        message = f"Client error: {status} {status_text}".rstrip()
        if body:
            message = f"{message}: {body}"
        super().__init__(message, status, status_text)


class RetryableServerError(SubmissionError):
    """Non-2xx, non-4xx response (typically 5xx). The caller should retry."""

    def __init__(self, status: int, status_text: str) -> None:
        message = f"Server error: {status} {status_text}".rstrip()
        super().__init__(f"{message}. Please retry the request later.", status, status_text)
