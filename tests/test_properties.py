"""Property-based tests for the codec.

Round trip, idempotence and ASCII identity over generated text.
"""

import pytest
from hypothesis import event, example, given
from hypothesis import strategies as st

from uniescape.codec import NOTATIONS, REPLACEMENT_CHARACTER, decode, encode

ALL_NOTATIONS = list(NOTATIONS)
HTML_NOTATIONS = ["named", "hex", "decimal"]

# NUL and the BMP noncharacters decode to U+FFFD.
_UNDECODABLE = chr(0) + chr(0xFFFE) + chr(0xFFFF)

# Text that never contains a token of any notation.
_PLAIN_TEXT = st.text(
    st.characters(exclude_categories=("Cs",), exclude_characters=_UNDECODABLE + "\\&+xX"),
    max_size=40,
)

# Anything decodable, tokens included.
_ANY_TEXT = st.text(
    st.characters(exclude_categories=("Cs",), exclude_characters=_UNDECODABLE),
    max_size=40,
)

_ASCII_NO_SPECIALS = st.text(
    st.characters(min_codepoint=0x01, max_codepoint=0x7F, exclude_characters="&<>\"'\\"),
    max_size=40,
)


class TestRoundTrip:
    @pytest.mark.parametrize("notation", ALL_NOTATIONS)
    @given(text=_PLAIN_TEXT)
    @example(text="A" + chr(0x1F600) + "B")
    @example(text=chr(0x10FFFF))
    def test_decode_inverts_encode(self, notation, text):
        event(f"notation={notation}")
        assert decode(encode(text, notation), notation) == text

    @pytest.mark.parametrize("notation", ["code_point", "hex_code_point"])
    @given(text=_PLAIN_TEXT)
    @example(text="a b ")
    def test_decode_inverts_separated_encode(self, notation, text):
        assert decode(encode(text, notation, separate=True), notation) == text

    @pytest.mark.parametrize("notation", ALL_NOTATIONS)
    @given(text=_ANY_TEXT)
    @example(text="&amp;")
    @example(text="\\u00E9")
    @example(text="U+00E9 0x41")
    def test_double_encode_round_trip(self, notation, text):
        assert decode(encode(text, notation, double_encode=True), notation) == text


class TestIdempotence:
    @pytest.mark.parametrize("notation", ALL_NOTATIONS)
    @given(text=_ANY_TEXT)
    @example(text="caf" + chr(0xE9) + " & co")
    def test_encode_twice_equals_encode_once(self, notation, text):
        once = encode(text, notation)
        assert encode(once, notation) == once


class TestAsciiIdentity:
    @pytest.mark.parametrize("notation", HTML_NOTATIONS)
    @given(text=_ASCII_NO_SPECIALS)
    def test_ascii_without_specials_is_unchanged(self, notation, text):
        assert encode(text, notation) == text


class TestDecodeTotality:
    @pytest.mark.parametrize("notation", ALL_NOTATIONS)
    @given(text=st.text(max_size=60))
    def test_decode_never_raises(self, notation, text):
        assert isinstance(decode(text, notation), str)

    @given(value=st.integers(min_value=0, max_value=0x10FFFF + 0x1000))
    def test_hex_entity_decodes_to_char_or_replacement(self, value):
        decoded = decode(f"&#x{value:X};", "hex")
        if value == 0 or 0xD800 <= value <= 0xDFFF or value in (0xFFFE, 0xFFFF) or value > 0x10FFFF:
            assert decoded == REPLACEMENT_CHARACTER
        else:
            assert decoded == chr(value)
