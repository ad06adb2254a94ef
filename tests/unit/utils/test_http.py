"""Unit tests for utils.http module.

Tests:
- _read_up_to() internal helper
  - Single-read and chunked responses
  - Limit enforcement across chunks
  - EOF handling
- response_charset() resolution of missing and unknown charsets
- read_limited_text() async function
  - Decoding with the response charset
  - Truncation marker on oversized bodies
  - Undecodable bytes replaced
- read_text() async function
  - Whole body returned without a size bound
"""

from fixtures.http import make_response

from divvi_referral.utils.http import (
    TRUNCATION_MARKER,
    _read_up_to,
    read_limited_text,
    read_text,
    response_charset,
)


class TestReadUpTo:
    async def test_single_chunk(self):
        data, truncated = await _read_up_to(make_response(200, b"hello"), 100)
        assert data == b"hello"
        assert truncated is False

    async def test_multiple_chunks(self):
        data, truncated = await _read_up_to(make_response(200, b"ab", b"cd", b"ef"), 100)
        assert data == b"abcdef"
        assert truncated is False

    async def test_empty_body(self):
        data, truncated = await _read_up_to(make_response(200), 100)
        assert data == b""
        assert truncated is False

    async def test_exact_limit(self):
        data, truncated = await _read_up_to(make_response(200, b"12345"), 5)
        assert data == b"12345"
        assert truncated is False

    async def test_over_limit(self):
        data, truncated = await _read_up_to(make_response(200, b"123", b"456"), 5)
        assert data == b"12345"
        assert truncated is True

    async def test_requests_one_byte_past_limit(self):
        resp = make_response(200, b"abc")
        await _read_up_to(resp, 10)
        assert resp.content.read.await_args_list[0].args == (11,)
        assert resp.content.read.await_args_list[1].args == (8,)


class TestReadLimitedText:
    async def test_decodes(self):
        assert await read_limited_text(make_response(200, b'{"ok":true}'), 100) == '{"ok":true}'

    async def test_truncated(self):
        text = await read_limited_text(make_response(500, b"x" * 20), 8)
        assert text == "x" * 8 + TRUNCATION_MARKER

    async def test_uses_response_charset(self):
        resp = make_response(200, "é".encode("latin-1"), charset="latin-1")
        assert await read_limited_text(resp, 100) == "é"

    async def test_defaults_to_utf8(self):
        resp = make_response(200, "é".encode(), charset=None)
        assert await read_limited_text(resp, 100) == "é"

    async def test_replaces_undecodable(self):
        resp = make_response(400, b"bad \xff byte")
        assert await read_limited_text(resp, 100) == "bad \ufffd byte"

    async def test_unknown_charset_falls_back_to_utf8(self):
        resp = make_response(500, "é".encode(), charset="x-bogus")
        assert await read_limited_text(resp, 100) == "é"


class TestResponseCharset:
    def test_known(self):
        assert response_charset(make_response(charset="ISO-8859-1")) == "iso8859-1"

    def test_missing(self):
        assert response_charset(make_response(charset=None)) == "utf-8"

    def test_empty(self):
        assert response_charset(make_response(charset="")) == "utf-8"

    def test_unknown(self):
        assert response_charset(make_response(charset="x-bogus")) == "utf-8"


class TestReadText:
    async def test_whole_body_beyond_any_limit(self):
        body = b'{"items":"' + b"x" * 70_000 + b'"}'
        resp = make_response(200, body[:30_000], body[30_000:])
        text = await read_text(resp)
        assert text == body.decode()
        assert not text.endswith(TRUNCATION_MARKER)

    async def test_empty_body(self):
        assert await read_text(make_response(204)) == ""

    async def test_unknown_charset(self):
        resp = make_response(200, b'{"ok":true}', charset="x-bogus")
        assert await read_text(resp) == '{"ok":true}'

    async def test_uses_response_charset(self):
        resp = make_response(200, "é".encode("latin-1"), charset="latin-1")
        assert await read_text(resp) == "é"
