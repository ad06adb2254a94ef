"""Helpers with third-party I/O dependencies.

Attributes:
    read_limited_text: Bounded, lossy text read of an ``aiohttp`` response.
        See [read_limited_text][divvi_referral.utils.http.read_limited_text].
    read_text: Whole-body text read of an ``aiohttp`` response.
    response_charset: Codec name of a response, UTF-8 when unknown.
"""

from .http import TRUNCATION_MARKER, read_limited_text, read_text, response_charset


__all__ = [
    "TRUNCATION_MARKER",
    "read_limited_text",
    "read_text",
    "response_charset",
]
