"""
Unit tests for codec.formats module.

Tests:
- format_byte_for() / format_id_for_byte() registry lookups
- SUFFIX_LAYOUTS registry shape
- SuffixLayout.frame() / unframe() length framing
- resolve_suffix_layout() variant detection
"""

import pytest

from divvi_referral.codec.formats import (
    LEGACY_SUFFIX_LAYOUT,
    SUFFIX_LAYOUTS,
    SuffixLayout,
    format_byte_for,
    format_id_for_byte,
    resolve_suffix_layout,
    suffix_layout_for,
)
from divvi_referral.core.exceptions import TagDecodeError, TagEncodeError, UnsupportedFormatError
from divvi_referral.models.constants import FORMAT_ID_BYTES, MAGIC_PREFIX, FormatID


class TestRegistryLookups:
    def test_byte_for_default(self):
        assert format_byte_for(FormatID.DEFAULT) == "01"

    def test_byte_for_string(self):
        assert format_byte_for("default") == "01"

    def test_byte_for_unknown(self):
        with pytest.raises(ValueError):
            format_byte_for("nope")

    def test_id_for_byte(self):
        assert format_id_for_byte("01") is FormatID.DEFAULT

    def test_id_for_unknown_byte(self):
        with pytest.raises(UnsupportedFormatError, match="'ff'"):
            format_id_for_byte("ff")

    def test_id_for_reserved_byte(self):
        with pytest.raises(UnsupportedFormatError):
            format_id_for_byte("00")


class TestSuffixLayouts:
    def test_legacy_under_reserved_byte(self):
        assert SUFFIX_LAYOUTS["00"] is LEGACY_SUFFIX_LAYOUT

    def test_every_format_has_layout(self):
        for format_id, byte in FORMAT_ID_BYTES.items():
            assert SUFFIX_LAYOUTS[byte].format_id is format_id

    def test_layout_for_none_is_legacy(self):
        assert suffix_layout_for(None) is LEGACY_SUFFIX_LAYOUT

    def test_layout_for_default(self):
        assert suffix_layout_for(FormatID.DEFAULT).header == MAGIC_PREFIX + "01"

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            SUFFIX_LAYOUTS["02"] = LEGACY_SUFFIX_LAYOUT  # type: ignore[index]


class TestFrame:
    def test_legacy_total_length(self):
        framed = LEGACY_SUFFIX_LAYOUT.frame("ab" * 96)
        assert framed == MAGIC_PREFIX + "ab" * 96 + "00000068"

    def test_current_total_length(self):
        framed = suffix_layout_for(FormatID.DEFAULT).frame("ab" * 96)
        assert framed == MAGIC_PREFIX + "01" + "ab" * 96 + "00000069"

    def test_length_counts_whole_blob(self):
        framed = suffix_layout_for(FormatID.DEFAULT).frame("cd" * 10)
        assert int(framed[-8:], 16) * 2 == len(framed)

    def test_overflow(self):
        layout = SuffixLayout(format_id=None, format_byte="")

        class HugePayload(str):
            def __len__(self) -> int:
                return 2 * (1 << 32)

        with pytest.raises(TagEncodeError, match="too large"):
            layout.frame(HugePayload(""))


class TestUnframe:
    def test_returns_payload(self):
        layout = suffix_layout_for(FormatID.DEFAULT)
        assert layout.unframe(layout.frame("ab" * 4)) == "ab" * 4

    def test_rejects_length_mismatch(self):
        layout = LEGACY_SUFFIX_LAYOUT
        framed = layout.frame("ab" * 4)
        with pytest.raises(TagDecodeError, match="announces"):
            layout.unframe(framed[:-8] + "00000099")

    def test_rejects_wrong_header(self):
        with pytest.raises(TagDecodeError, match="header"):
            suffix_layout_for(FormatID.DEFAULT).unframe(MAGIC_PREFIX + "00" + "0000000d")

    def test_rejects_truncated(self):
        with pytest.raises(TagDecodeError, match="truncated"):
            LEGACY_SUFFIX_LAYOUT.unframe(MAGIC_PREFIX + "0000")


class TestResolveSuffixLayout:
    def test_legacy(self):
        assert resolve_suffix_layout(MAGIC_PREFIX + "00" * 40) is LEGACY_SUFFIX_LAYOUT

    def test_current(self):
        layout = resolve_suffix_layout(MAGIC_PREFIX + "01" + "00" * 40)
        assert layout.format_id is FormatID.DEFAULT

    def test_unknown_byte(self):
        with pytest.raises(UnsupportedFormatError):
            resolve_suffix_layout(MAGIC_PREFIX + "7f" + "00" * 40)

    def test_missing_magic(self):
        with pytest.raises(TagDecodeError, match="magic"):
            resolve_suffix_layout("deadbeef01" + "00" * 40)

    def test_ends_after_magic(self):
        with pytest.raises(TagDecodeError, match="truncated"):
            resolve_suffix_layout(MAGIC_PREFIX)
