"""Tests for recognizing escapes already present in text."""

import pytest

from uniescape.codec.detect import TOKEN_PATTERNS, TOKEN_STARTS, detect_token


class TestDetectToken:
    @pytest.mark.parametrize("notation,text,expected", [
        ("named", "&eacute;x", "&eacute;"),
        ("named", "&#x00E9;", "&#x00E9;"),
        ("named", "&#x1F600;", "&#x1F600;"),
        ("named", "&nbsp;", "&nbsp;"),
        ("hex", "&#x00E9;", "&#x00E9;"),
        ("hex", "&#x26;", "&#x26;"),
        ("hex", "&#x3c;", "&#x3c;"),
        ("decimal", "&#233;", "&#233;"),
        ("decimal", "&#38;", "&#38;"),
        ("javascript", "\\u00e9", "\\u00e9"),
        ("javascript", "\\U0001F600", "\\U0001F600"),
        ("css", "\\00E9 x", "\\00E9 "),
        ("css", "\\01F600", "\\01F600"),
        ("code_point", "U+00E9", "U+00E9"),
        ("code_point", "u+1F600", "u+1F600"),
        ("es6", "\\u{E9}", "\\u{E9}"),
        ("pcre", "\\x{1F600}", "\\x{1F600}"),
        ("hex_code_point", "0xE9", "0xE9"),
        ("hex_code_point", "0x1100x111", "0x110"),
        ("hex_code_point", "0x1F6000x42", "0x1F600"),
    ])
    def test_recognized(self, notation, text, expected):
        assert detect_token(text, 0, notation) == expected

    @pytest.mark.parametrize("notation,text", [
        ("named", "&foo;"),
        ("named", "&#xE9;"),
        ("named", "& amp;"),
        ("hex", "&#x41;"),
        ("hex", "&#233;"),
        ("decimal", "&#x41;"),
        ("decimal", "&#;"),
        ("javascript", "\\u00G9"),
        ("javascript", "\\U1F600"),
        ("css", "\\E9"),
        ("code_point", "U+E9"),
        ("es6", "\\u{}"),
        ("pcre", "\\x{E9"),
        ("hex_code_point", "0xZ"),
        ("hex_code_point", "1x41"),
    ])
    def test_not_recognized(self, notation, text):
        assert detect_token(text, 0, notation) is None

    def test_offset(self):
        assert detect_token("ab&amp;", 2, "named") == "&amp;"
        assert detect_token("ab&amp;", 1, "named") is None

    def test_position_past_end(self):
        assert detect_token("&amp;", 5, "named") is None

    def test_unknown_notation(self):
        with pytest.raises(KeyError):
            detect_token("x", 0, "rot13")


class TestTokenTables:
    def test_every_notation_has_a_pattern_and_starts(self):
        assert set(TOKEN_PATTERNS) == set(TOKEN_STARTS)
        assert len(TOKEN_PATTERNS) == 9
