"""Tests for code point iteration and surrogate handling."""

import pytest

from uniescape.codec.scanner import (
    MAX_CODE_POINT,
    code_point_at,
    combine_surrogates,
    is_high_surrogate,
    is_lone_surrogate,
    is_low_surrogate,
    is_surrogate,
    iter_code_points,
)

GRINNING_FACE = chr(0x1F600)
HIGH = chr(0xD83D)
LOW = chr(0xDE00)


class TestSurrogateHelpers:
    def test_ranges(self):
        assert is_high_surrogate(0xD800)
        assert is_high_surrogate(0xDBFF)
        assert not is_high_surrogate(0xDC00)
        assert is_low_surrogate(0xDC00)
        assert is_low_surrogate(0xDFFF)
        assert not is_low_surrogate(0xDBFF)

    @pytest.mark.parametrize("value", [0xD800, 0xDB7F, 0xDC00, 0xDFFF])
    def test_is_surrogate(self, value):
        assert is_surrogate(value)

    @pytest.mark.parametrize("value", [0xD7FF, 0xE000, 0x41, 0x1F600])
    def test_not_surrogate(self, value):
        assert not is_surrogate(value)

    def test_combine(self):
        assert combine_surrogates(0xD83D, 0xDE00) == 0x1F600
        assert combine_surrogates(0xD800, 0xDC00) == 0x10000
        assert combine_surrogates(0xDBFF, 0xDFFF) == MAX_CODE_POINT


class TestCodePointAt:
    def test_ascii(self):
        assert code_point_at("A", 0) == (0x41, 1)

    def test_astral_character(self):
        assert code_point_at(GRINNING_FACE, 0) == (0x1F600, 1)

    def test_paired_surrogates_are_combined(self):
        assert code_point_at(HIGH + LOW, 0) == (0x1F600, 2)

    def test_lone_high_surrogate(self):
        assert code_point_at(HIGH + "A", 0) == (0xD83D, 1)

    def test_lone_high_surrogate_at_end(self):
        assert code_point_at("A" + HIGH, 1) == (0xD83D, 1)

    def test_low_before_high_is_not_a_pair(self):
        assert code_point_at(LOW + HIGH, 0) == (0xDE00, 1)

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            code_point_at("", 0)


class TestIterCodePoints:
    def test_empty(self):
        assert list(iter_code_points("")) == []

    def test_mixed(self):
        text = "a" + HIGH + LOW + "b" + GRINNING_FACE
        assert list(iter_code_points(text)) == [
            (0, 0x61, 1),
            (1, 0x1F600, 2),
            (3, 0x62, 1),
            (4, 0x1F600, 1),
        ]

    def test_lone_surrogate_yields_single_unit(self):
        assert list(iter_code_points(LOW + "x")) == [(0, 0xDE00, 1), (1, 0x78, 1)]


class TestIsLoneSurrogate:
    def test_lone(self):
        assert is_lone_surrogate(0xD800, 1)

    def test_combined_pair_is_not_lone(self):
        assert not is_lone_surrogate(0x1F600, 2)

    def test_regular_character(self):
        assert not is_lone_surrogate(0x41, 1)
