"""Formatting rules for every supported escape notation."""

from dataclasses import dataclass, field
from typing import Callable, Dict, Mapping, Optional

from .entities import NamedEntityTable, get_entity_table

NAMED_SPECIALS = {
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord('"'): "&quot;",
    ord("'"): "&apos;",
}

HEX_SPECIALS = {
    ord("&"): "&#x26;",
    ord("<"): "&#x3C;",
    ord(">"): "&#x3E;",
    ord('"'): "&#x22;",
    ord("'"): "&#x27;",
}

DECIMAL_SPECIALS = {
    ord("&"): "&#38;",
    ord("<"): "&#60;",
    ord(">"): "&#62;",
    ord('"'): "&#34;",
    ord("'"): "&#39;",
}


def format_hex_entity(code_point: int, table: Optional[NamedEntityTable] = None) -> str:
    return f"&#x{code_point:04X};"


def format_decimal_entity(code_point: int, table: Optional[NamedEntityTable] = None) -> str:
    return f"&#{code_point};"


def format_named_entity(code_point: int, table: Optional[NamedEntityTable] = None) -> str:
    """``&name;`` when the table has a canonical name, the hex entity otherwise."""
    name = (table or get_entity_table()).name_for(code_point)
    if name is None:
        return format_hex_entity(code_point)
    return f"&{name};"


def format_javascript_escape(code_point: int, table: Optional[NamedEntityTable] = None) -> str:
    # Supplementary characters use the 8-digit form, never a surrogate pair.
    if code_point <= 0xFFFF:
        return f"\\u{code_point:04X}"
    return f"\\U{code_point:08X}"


def format_css_escape(code_point: int, table: Optional[NamedEntityTable] = None) -> str:
    # The trailing space terminates the escape.
    if code_point <= 0xFFFF:
        return f"\\{code_point:04X} "
    return f"\\{code_point:06X} "


def format_code_point(code_point: int, table: Optional[NamedEntityTable] = None) -> str:
    return f"U+{code_point:04X}"


def format_es6_escape(code_point: int, table: Optional[NamedEntityTable] = None) -> str:
    return f"\\u{{{code_point:X}}}"


def format_pcre_escape(code_point: int, table: Optional[NamedEntityTable] = None) -> str:
    return f"\\x{{{code_point:X}}}"


def format_hex_code_point(code_point: int, table: Optional[NamedEntityTable] = None) -> str:
    return f"0x{code_point:X}"


@dataclass(frozen=True)
class Notation:
    """
    How one notation renders a code point.

    Attributes:
        key: Notation key used by the generic ``encode``/``decode`` functions.
        title: Human readable name.
        formatter: ``(code_point, table) -> token``.
        escapes_ascii: When False, ASCII characters are copied through raw.
        separable: Whether ``separate=True`` is meaningful for this notation.
        specials: Fixed tokens for the HTML-sensitive characters.
    """

    key: str
    title: str
    formatter: Callable[[int, Optional[NamedEntityTable]], str]
    escapes_ascii: bool = False
    separable: bool = False
    specials: Mapping[int, str] = field(default_factory=dict)

    def format(self, code_point: int, table: Optional[NamedEntityTable] = None) -> str:
        special = self.specials.get(code_point)
        if special is not None:
            return special
        return self.formatter(code_point, table)

    @property
    def example(self) -> str:
        """Rendering of U+00E9 in this notation, for listings."""
        return self.format(0xE9)


NOTATIONS: Dict[str, Notation] = {
    notation.key: notation
    for notation in (
        Notation("named", "HTML named entities", format_named_entity, specials=NAMED_SPECIALS),
        Notation("hex", "HTML hexadecimal entities", format_hex_entity, specials=HEX_SPECIALS),
        Notation("decimal", "HTML decimal entities", format_decimal_entity, specials=DECIMAL_SPECIALS),
        Notation("javascript", "JavaScript UTF-16 escapes", format_javascript_escape),
        Notation("css", "CSS escapes", format_css_escape),
        Notation("code_point", "U+ code point notation", format_code_point,
                 escapes_ascii=True, separable=True),
        Notation("es6", "ES6 code point escapes", format_es6_escape),
        Notation("pcre", "PCRE hexadecimal escapes", format_pcre_escape),
        Notation("hex_code_point", "0x hexadecimal code points", format_hex_code_point,
                 escapes_ascii=True, separable=True),
    )
}


def get_notation(key: str) -> Notation:
    """
    Look up a notation by key.

    Raises:
        KeyError: If *key* does not name a notation.
    """
    try:
        return NOTATIONS[key]
    except KeyError:
        raise KeyError(f"Unknown notation: {key!r} (choose from {', '.join(NOTATIONS)})") from None


__all__ = [
    "DECIMAL_SPECIALS",
    "HEX_SPECIALS",
    "NAMED_SPECIALS",
    "NOTATIONS",
    "Notation",
    "get_notation",
]
