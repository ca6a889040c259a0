"""Tests for md2html.tags and md2html.header."""

from __future__ import annotations

import pytest

from md2html.header import header_level
from md2html.tags import (
    MAX_TAG_LENGTH,
    TAGS,
    encode,
    escape,
    longest_tag,
    lookup,
    matching,
    read_char,
)


class TestTagTable:
    def test_lookup_known(self) -> None:
        assert lookup("*") == "em"
        assert lookup("__") == "strong"
        assert lookup("--") == "s"
        assert lookup("~") == "mark"
        assert lookup("`") == "code"

    def test_lookup_unknown(self) -> None:
        assert lookup("-") is None
        assert lookup("#") is None

    def test_max_length(self) -> None:
        assert MAX_TAG_LENGTH == 2
        assert all(len(symbol) <= MAX_TAG_LENGTH for symbol in TAGS)


class TestLongestTag:
    def test_prefers_double(self) -> None:
        assert longest_tag("**a", 0) == "**"

    def test_falls_back_to_single(self) -> None:
        assert longest_tag("*a", 0) == "*"

    def test_single_hyphen_is_not_a_tag(self) -> None:
        assert longest_tag("-a", 0) is None

    def test_double_hyphen(self) -> None:
        assert longest_tag("a--b", 1) == "--"

    def test_at_end_of_text(self) -> None:
        assert longest_tag("x*", 1) == "*"

    def test_no_tag(self) -> None:
        assert longest_tag("abc", 1) is None


class TestMatching:
    @pytest.mark.parametrize("a,b", [("(", ")"), ("[", "]")])
    def test_pairs(self, a: str, b: str) -> None:
        assert matching(a) == b
        assert matching(b) == a


class TestCodec:
    def test_encode_reserved(self) -> None:
        assert encode("<") == "&lt;"
        assert encode(">") == "&gt;"
        assert encode("&") == "&amp;"
        assert encode("'") == "&apos;"
        assert encode('"') == "&quot;"

    def test_encode_plain(self) -> None:
        assert encode("a") == "a"

    def test_escape(self) -> None:
        assert escape("a<b & 'c'") == "a&lt;b &amp; &apos;c&apos;"

    def test_read_plain(self) -> None:
        assert read_char("ab", 1) == "b"

    def test_read_escaped_marker(self) -> None:
        assert read_char("\\*", 0) == "*"

    def test_read_escaped_reserved(self) -> None:
        assert read_char("\\<", 0) == "&lt;"

    def test_trailing_backslash_is_dropped(self) -> None:
        assert read_char("ab\\", 2) == ""


class TestHeaderLevel:
    def test_level_one(self) -> None:
        assert header_level("# Title") == 1

    def test_level_six(self) -> None:
        assert header_level("###### Title") == 6

    def test_seven_markers(self) -> None:
        assert header_level("####### Title") == 0

    def test_no_space(self) -> None:
        assert header_level("#Title") == 0

    def test_markers_only(self) -> None:
        assert header_level("###") == 0

    def test_empty(self) -> None:
        assert header_level("") == 0

    def test_leading_space(self) -> None:
        assert header_level(" # Title") == 0

    def test_plain_text(self) -> None:
        assert header_level("Title") == 0

    def test_empty_heading(self) -> None:
        assert header_level("## ") == 2
