"""Encoders from raw text to each escape notation.

Every encoder walks the input one code point at a time:

1. unless ``double_encode`` is set, an escape of the target notation that is
   already present is copied through verbatim;
2. the HTML-sensitive characters get their fixed token in the HTML notations;
3. ASCII is copied raw, except in the ``U+`` and ``0x`` notations which escape
   everything;
4. anything else is formatted by the notation.

Lone surrogates are copied through unescaped.  Non-string input is returned
unchanged.
"""

from typing import Any, List, Optional

from .detect import TOKEN_STARTS, detect_token
from .entities import NamedEntityTable
from .notations import get_notation
from .scanner import code_point_at, is_lone_surrogate


def encode(
    text: Any,
    notation: str,
    double_encode: bool = False,
    separate: bool = False,
    table: Optional[NamedEntityTable] = None,
) -> Any:
    """
    Encode *text* into *notation*.

    Args:
        text: Text to encode.
        notation: Notation key, see :data:`~uniescape.codec.notations.NOTATIONS`.
        double_encode: Escape existing tokens of the notation as well.  A
            character that opens such a token is escaped even when it is
            ASCII, so decoding the result gives back *text*.
        separate: Put a space between tokens (``code_point`` and
            ``hex_code_point`` only; ignored elsewhere).
        table: Entity table for the ``named`` notation.

    Raises:
        KeyError: If *notation* is unknown.
    """
    rules = get_notation(notation)
    if not isinstance(text, str):
        return text

    starts = TOKEN_STARTS[notation]
    separate = separate and rules.separable
    units: List[str] = []
    index = 0
    length = len(text)

    while index < length:
        char = text[index]

        if char in starts:
            token = detect_token(text, index, notation, table)
            if token is not None:
                if double_encode:
                    units.append(rules.format(ord(char), table))
                    index += 1
                    continue
                units.append(token)
                index += len(token)
                # The separator written after a copied token is not part of the text.
                if separate and text.startswith(" ", index):
                    index += 1
                continue

        code_point, width = code_point_at(text, index)
        if is_lone_surrogate(code_point, width):
            units.append(char)
        elif code_point <= 0x7F and not rules.escapes_ascii and code_point not in rules.specials:
            units.append(char)
        else:
            units.append(rules.format(code_point, table))
        index += width

    if rules.separable:
        return (" " if separate else "").join(units).rstrip()
    return "".join(units)


def encode_named_html_entities(
    text: Any,
    double_encode: bool = False,
    table: Optional[NamedEntityTable] = None,
) -> Any:
    """Encode to ``&name;`` entities, falling back to ``&#xHHHH;`` for unnamed characters."""
    return encode(text, "named", double_encode=double_encode, table=table)


def encode_html_hex_entities(text: Any, double_encode: bool = False) -> Any:
    """Encode to ``&#xHHHH;`` character references."""
    return encode(text, "hex", double_encode=double_encode)


def encode_html_decimal_entities(text: Any, double_encode: bool = False) -> Any:
    """Encode to ``&#DDD;`` character references."""
    return encode(text, "decimal", double_encode=double_encode)


def encode_javascript_utf16_escape_sequence(text: Any, double_encode: bool = False) -> Any:
    r"""Encode to ``\uXXXX``, using ``\UXXXXXXXX`` above the BMP."""
    return encode(text, "javascript", double_encode=double_encode)


def encode_css_unicode_escape(text: Any, double_encode: bool = False) -> Any:
    r"""Encode to CSS ``\XXXX `` / ``\XXXXXX `` escapes."""
    return encode(text, "css", double_encode=double_encode)


def encode_unicode_code_point_notation(
    text: Any,
    double_encode: bool = False,
    separate: bool = False,
) -> Any:
    """Encode every character, ASCII included, to ``U+XXXX``."""
    return encode(text, "code_point", double_encode=double_encode, separate=separate)


def encode_unicode_code_point_escape_sequence(text: Any, double_encode: bool = False) -> Any:
    r"""Encode to ES6 ``\u{...}`` escapes."""
    return encode(text, "es6", double_encode=double_encode)


def encode_pcre_unicode_hexadecimal_escape(text: Any, double_encode: bool = False) -> Any:
    r"""Encode to PCRE ``\x{...}`` escapes."""
    return encode(text, "pcre", double_encode=double_encode)


def encode_hex_code_points(
    text: Any,
    double_encode: bool = False,
    separate: bool = False,
) -> Any:
    """Encode every character, ASCII included, to bare ``0x`` hex."""
    return encode(text, "hex_code_point", double_encode=double_encode, separate=separate)


__all__ = [
    "encode",
    "encode_css_unicode_escape",
    "encode_hex_code_points",
    "encode_html_decimal_entities",
    "encode_html_hex_entities",
    "encode_javascript_utf16_escape_sequence",
    "encode_named_html_entities",
    "encode_pcre_unicode_hexadecimal_escape",
    "encode_unicode_code_point_escape_sequence",
    "encode_unicode_code_point_notation",
]
