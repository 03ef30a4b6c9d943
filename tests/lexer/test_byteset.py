"""Tests for ByteSet pattern parsing and membership."""

from __future__ import annotations

import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from codewalk.lexer import HSPACE, KEYWORD_CHARS, ByteSet


class TestPatternParsing:
    """Verify ranges, literals and hyphen placement."""

    def test_range(self) -> None:
        digits = ByteSet("0-9")
        assert all(digits.contains(c) for c in string.digits)
        assert not digits.contains("a")
        assert len(digits) == 10

    def test_multiple_ranges_and_literals(self) -> None:
        ident = ByteSet("0-9A-Za-z_")
        assert ident.contains("_")
        assert ident.contains("Q")
        assert not ident.contains("-")
        assert len(ident) == 63

    def test_leading_hyphen_is_literal(self) -> None:
        s = ByteSet("-a")
        assert s.contains("-")
        assert s.contains("a")
        assert len(s) == 2

    def test_trailing_hyphen_is_literal(self) -> None:
        s = ByteSet("a-")
        assert s.contains("-")
        assert s.contains("a")
        assert not s.contains("b")

    def test_hyphen_after_range_is_literal(self) -> None:
        s = ByteSet("a-c-")
        assert s.contains("-")
        assert s.contains("b")
        assert len(s) == 4

    def test_empty_pattern(self) -> None:
        s = ByteSet("")
        assert len(s) == 0
        assert not s.contains("a")

    def test_non_byte_pattern_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-byte"):
            ByteSet("a-z日")


class TestMembership:
    """Verify contains() and the ``in`` operator."""

    def test_keyword_chars(self) -> None:
        assert all(c in KEYWORD_CHARS for c in "go:func")
        assert all(c in KEYWORD_CHARS for c in "endUp")
        assert " " not in KEYWORD_CHARS
        assert "-" not in KEYWORD_CHARS

    def test_hspace(self) -> None:
        assert " " in HSPACE
        assert "\t" in HSPACE
        assert "\n" not in HSPACE

    def test_characters_above_byte_range(self) -> None:
        assert not KEYWORD_CHARS.contains("日")
        assert "é" not in KEYWORD_CHARS

    def test_in_operator_rejects_non_characters(self) -> None:
        assert "ab" not in KEYWORD_CHARS
        assert 97 not in KEYWORD_CHARS

    def test_repr(self) -> None:
        assert repr(ByteSet("a-z")) == "ByteSet('a-z')"


class TestByteSetProperties:
    """Property-based checks for literal-only patterns."""

    @given(pattern=st.text(alphabet=string.ascii_letters + string.digits + "_:.", max_size=30))
    def test_literal_pattern_membership(self, pattern: str) -> None:
        s = ByteSet(pattern)
        for code in range(128):
            assert s.contains(chr(code)) == (chr(code) in pattern)
