"""Tests for the Sanitize plugin and the text cleanup helpers."""

import pytest

from uniescape.codec.sanitize import (
    TRIM_CHARACTERS,
    clean_text,
    remove_empty_lines,
    remove_leading_trailing_whitespace,
    remove_non_printable_characters,
)
from uniescape.plugins.sanitize import (
    CleanTextTransformer,
    RemoveEmptyLinesTransformer,
    RemoveNonPrintableTransformer,
    SanitizePlugin,
    TrimLinesTransformer,
)

ZWSP = chr(0x200B)
NBSP = chr(0xA0)
EM_DASH = chr(0x2014)
EN_DASH = chr(0x2013)
MINUS = chr(0x2212)
SOFT_HYPHEN = chr(0xAD)
BOM = chr(0xFEFF)
RLO = chr(0x202E)
GRINNING_FACE = chr(0x1F600)


# ── Helper function tests ──────────────────────────────────────────────────


class TestRemoveNonPrintable:
    def test_controls_and_zero_width(self):
        assert remove_non_printable_characters("Hello" + chr(0) + " World" + ZWSP + "!") == "Hello World!"

    def test_keeps_tab_newline_carriage_return(self):
        assert remove_non_printable_characters("a\tb\nc\r\n") == "a\tb\nc\r\n"

    def test_drops_c1_and_delete(self):
        assert remove_non_printable_characters("a" + chr(0x7F) + chr(0x85) + chr(0x9F) + "b") == "ab"

    def test_drops_exotic_spaces(self):
        assert remove_non_printable_characters("a" + NBSP + chr(0x2003) + chr(0x3000) + "b") == "ab"

    def test_keeps_visible_text(self):
        text = "caf" + chr(0xE9) + " " + GRINNING_FACE
        assert remove_non_printable_characters(text) == text

    def test_non_string(self):
        assert remove_non_printable_characters(None) is None


class TestCleanText:
    def test_defaults(self):
        text = "a" + EM_DASH + "b" + NBSP + "c" + ZWSP + SOFT_HYPHEN + BOM + RLO + chr(1) + "d"
        assert clean_text(text) == "a-b cd"

    def test_minus_sign_is_kept(self):
        assert clean_text("5 " + MINUS + " 3") == "5 " + MINUS + " 3"

    def test_dashes_only(self):
        text = EN_DASH + NBSP + ZWSP
        assert clean_text(text, normalize_spaces=False, remove_invisible=False) == "-" + NBSP + ZWSP

    def test_spaces_only(self):
        text = EN_DASH + NBSP
        assert clean_text(text, normalize_dashes=False) == EN_DASH + " "

    def test_keep_controls(self):
        assert clean_text("a" + chr(1) + "b", remove_controls=False) == "a" + chr(1) + "b"

    def test_keeps_line_breaks(self):
        assert clean_text("a\r\n\tb") == "a\r\n\tb"

    def test_line_separator_removed(self):
        assert clean_text("a" + chr(0x2028) + "b" + chr(0xFFFC)) == "ab"

    def test_surrogate_pairs_stay_intact(self):
        pair = chr(0xD83D) + chr(0xDE00)
        assert clean_text(pair + EM_DASH) == pair + "-"

    def test_non_string(self):
        assert clean_text(42) == 42


class TestRemoveLeadingTrailingWhitespace:
    def test_lines(self):
        assert remove_leading_trailing_whitespace("  Line 1  \n\tLine 2\t\n  Line 3  ") == "Line 1\nLine 2\nLine 3"

    def test_whitespace_only_lines(self):
        assert remove_leading_trailing_whitespace("  \n\t\n  ") == "\n\n"

    def test_empty(self):
        assert remove_leading_trailing_whitespace("") == ""

    def test_non_string(self):
        assert remove_leading_trailing_whitespace(None) is None

    def test_trims_what_javascript_trims(self):
        padding = NBSP + BOM + chr(0x3000) + chr(0x2028) + "\x0b\x0c"
        assert remove_leading_trailing_whitespace(padding + "x" + padding) == "x"

    @pytest.mark.parametrize("cp", [0x1C, 0x1D, 0x1E, 0x1F, 0x85])
    def test_keeps_separators_javascript_does_not_trim(self, cp):
        text = chr(cp) + "x" + chr(cp)
        assert remove_leading_trailing_whitespace(text) == text

    def test_trim_set(self):
        assert chr(0xFEFF) in TRIM_CHARACTERS
        assert chr(0x85) not in TRIM_CHARACTERS
        assert chr(0x200B) not in TRIM_CHARACTERS


class TestRemoveEmptyLines:
    def test_empty_lines(self):
        assert remove_empty_lines("a\n\nb\n\n\nc") == "a\nb\nc"

    def test_whitespace_lines_are_empty_by_default(self):
        assert remove_empty_lines("a\n  \t\nb\n" + NBSP + "\nc") == "a\nb\nc"

    def test_whitespace_lines_kept_when_disabled(self):
        text = "a\n  \n\nb"
        assert remove_empty_lines(text, consider_whitespace_empty=False) == "a\n  \nb"

    def test_keeps_line_break_style(self):
        assert remove_empty_lines("a\r\n\r\nb\r\rc") == "a\r\nb\rc"

    def test_leading_and_trailing(self):
        assert remove_empty_lines("\n\na\nb\n\n") == "a\nb\n"

    def test_only_blank_lines(self):
        assert remove_empty_lines(" \n\t\n") == ""
        assert remove_empty_lines(" \n\t\n", consider_whitespace_empty=False) == " \n\t\n"

    def test_no_change(self):
        assert remove_empty_lines("a\nb") == "a\nb"
        assert remove_empty_lines("") == ""

    def test_non_string(self):
        assert remove_empty_lines(None) is None


# ── Transformer class tests ────────────────────────────────────────────────


class TestSanitizeTransformers:
    def test_remove_non_printable(self):
        t = RemoveNonPrintableTransformer("remove_non_printable")
        assert t.transform("a" + ZWSP + "b").value == "ab"

    def test_clean_text_flags(self):
        t = CleanTextTransformer("clean_text", normalize_dashes=False)
        assert t.transform(EM_DASH + NBSP).value == EM_DASH + " "

    def test_trim_lines(self):
        t = TrimLinesTransformer("trim_lines")
        assert t.transform(" a \n b ").value == "a\nb"

    def test_remove_empty_lines(self):
        t = RemoveEmptyLinesTransformer("remove_empty_lines")
        assert t.transform("a\n \nb").value == "a\nb"

    def test_remove_empty_lines_strict(self):
        t = RemoveEmptyLinesTransformer("remove_empty_lines", consider_whitespace_empty=False)
        assert t.transform("a\n \n\nb").value == "a\n \nb"

    def test_rejects_non_string(self):
        assert TrimLinesTransformer("trim_lines").transform(42).failed


# ── Plugin tests ───────────────────────────────────────────────────────────


class TestSanitizePlugin:
    def test_transformers(self):
        assert set(SanitizePlugin().transformers) == {
            "remove_non_printable", "clean_text", "trim_lines", "remove_empty_lines",
        }

    def test_manifest(self):
        manifest = SanitizePlugin().manifest
        assert manifest.name == "sanitize"
        assert manifest.group == "Text"

    def test_factory_defaults(self):
        t = SanitizePlugin().transformers["clean_text"]({})
        assert t.normalize_dashes and t.normalize_spaces and t.remove_invisible and t.remove_controls

    def test_remove_empty_lines_default(self):
        assert SanitizePlugin().transformers["remove_empty_lines"]({}).consider_whitespace_empty


# ── Pipeline tests ─────────────────────────────────────────────────────────


class TestSanitizePipeline:
    def test_clean_text_with_params(self, transformer):
        steps = [{"function": "clean_text", "remove_invisible": False}]
        assert transformer.transform("a" + ZWSP + EM_DASH, steps) == "a" + ZWSP + "-"

    @pytest.mark.parametrize("text,expected", [
        ("  x  ", "x"),
        ("x\n  y", "x\ny"),
    ])
    def test_trim_lines(self, transformer, text, expected):
        assert transformer.transform(text, ["trim_lines"]) == expected

    @pytest.mark.parametrize("flag,expected", [
        (True, "a\nb"),
        (False, "a\n   \nb"),
    ])
    def test_remove_empty_lines(self, transformer, flag, expected):
        steps = [{"function": "remove_empty_lines", "consider_whitespace_empty": flag}]
        assert transformer.transform("a\n\n   \nb", steps) == expected
