"""HTTP utilities.

Response body reading with a charset that always resolves. Error pages are
read with a size bound; success bodies are read whole.

Note:
    Depends only on the standard library and ``aiohttp``; importable from
    ``divvi_referral.reporter`` and the CLI.

See Also:
    [AttributionReporter][divvi_referral.reporter.reporter.AttributionReporter]:
        Reads 2xx bodies through [read_text][divvi_referral.utils.http.read_text]
        and every other body through
        [read_limited_text][divvi_referral.utils.http.read_limited_text].
"""

from __future__ import annotations

import codecs
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    import aiohttp


TRUNCATION_MARKER = "...<truncated>"
_DEFAULT_CHARSET = "utf-8"


def response_charset(response: aiohttp.ClientResponse) -> str:
    """Return the codec name for *response*.

    A missing charset, or one Python has no codec for, resolves to UTF-8.
    """
    charset = response.charset
    if not charset:
        return _DEFAULT_CHARSET
    try:
        return codecs.lookup(charset).name
    except LookupError:
        return _DEFAULT_CHARSET


async def _read_up_to(response: aiohttp.ClientResponse, max_size: int) -> tuple[bytes, bool]:
    """Read at most *max_size* bytes of a response body.

    Accumulates chunks until EOF or the limit. A single
    ``response.content.read(n)`` may return fewer bytes than requested under
    chunked transfer-encoding, so reads are repeated.

    Returns:
        The bytes read and whether more data remained after the limit.
    """
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await response.content.read(max_size + 1 - total)
        if not chunk:
            return b"".join(chunks), False
        total += len(chunk)
        chunks.append(chunk)
        if total > max_size:
            return b"".join(chunks)[:max_size], True


async def read_limited_text(response: aiohttp.ClientResponse, max_size: int) -> str:
    """Read a response body as text, truncated to *max_size* bytes.

    Undecodable bytes are replaced rather than raising, since the body is
    only ever surfaced for diagnostics.

    Args:
        response: An aiohttp response whose body has not yet been consumed.
        max_size: Maximum number of body bytes to keep.

    Returns:
        The decoded body, with ``TRUNCATION_MARKER`` appended when the body
        was longer than *max_size*.
    """
    data, truncated = await _read_up_to(response, max_size)
    text = data.decode(response_charset(response), errors="replace")
    return text + TRUNCATION_MARKER if truncated else text


async def read_text(response: aiohttp.ClientResponse) -> str:
    """Read a whole response body as text, unaltered apart from decoding.

    Uses [response_charset()][divvi_referral.utils.http.response_charset];
    undecodable bytes are replaced.
    """
    chunks: list[bytes] = []
    while chunk := await response.content.read(-1):
        chunks.append(chunk)
    return b"".join(chunks).decode(response_charset(response), errors="replace")
