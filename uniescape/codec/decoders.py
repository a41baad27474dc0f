"""Decoders from each escape notation back to raw text.

Each notation is decoded by a single global regular expression substitution.
Numeric escapes go through :mod:`~uniescape.codec.validator`: a legal code
point becomes its character, anything else becomes U+FFFD.  An ``&name;``
whose name is not in the entity table is left exactly as written.  Text that
does not match a token passes through untouched, and non-string input decodes
to the empty string.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional

from .detect import HEX_CODE_POINT_TOKEN
from .entities import NamedEntityTable, get_entity_table
from .scanner import combine_surrogates
from .validator import code_point_to_char, is_valid_code_point, parse_code_point


@dataclass(frozen=True)
class EscapeToken:
    """One escape found in a string.

    ``value`` is the parsed code point (``None`` when the digits are too long
    to be one, or for an unknown entity name); ``name`` is set for ``&name;``.
    """

    notation: str
    text: str
    start: int
    end: int
    value: Optional[int]
    name: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.value is not None and is_valid_code_point(self.value)

    @property
    def decoded(self) -> str:
        """Replacement text for this token."""
        if self.name is not None and self.value is None:
            return self.text
        return code_point_to_char(self.value)


def _parse_value(groups: Dict[str, Optional[str]], table: Optional[NamedEntityTable]) -> Optional[int]:
    if groups.get("name") is not None:
        return (table or get_entity_table()).code_point_for(groups["name"])
    if groups.get("high") is not None:
        return combine_surrogates(int(groups["high"], 16), int(groups["low"], 16))
    if groups.get("dec") is not None:
        return parse_code_point(groups["dec"], 10)
    digits = groups.get("hex")
    if digits is None:
        digits = groups.get("long")
    return parse_code_point(digits, 16)


def _single_token(
    match: re.Match, notation: str, table: Optional[NamedEntityTable]
) -> Iterator[EscapeToken]:
    groups = match.groupdict()
    yield EscapeToken(
        notation=notation,
        text=match.group(0),
        start=match.start(),
        end=match.end(),
        value=_parse_value(groups, table),
        name=groups.get("name"),
    )


def _token_run(token_pattern: re.Pattern) -> Callable[..., Iterator[EscapeToken]]:
    """Split a whitespace separated run of tokens into its tokens."""
    def parse(match: re.Match, notation: str, table: Optional[NamedEntityTable]) -> Iterator[EscapeToken]:
        for token in token_pattern.finditer(match.string, match.start(), match.end()):
            yield from _single_token(token, notation, table)
    return parse


@dataclass(frozen=True)
class _DecodeRule:
    pattern: re.Pattern
    parse: Callable[[re.Match, str, Optional[NamedEntityTable]], Iterator[EscapeToken]] = _single_token


_CODE_POINT_TOKEN = r"[Uu]\+(?P<hex>[0-9A-Fa-f]{4,6})"
_HEX_CODE_POINT_TOKEN = HEX_CODE_POINT_TOKEN.replace("([", "(?P<hex>[", 1)

_RULES: Dict[str, _DecodeRule] = {
    "named": _DecodeRule(re.compile(
        r"&(?:#[xX](?P<hex>[0-9A-Fa-f]{1,8})|#(?P<dec>[0-9]+)|(?P<name>[A-Za-z][A-Za-z0-9]{0,31}));"
    )),
    "hex": _DecodeRule(re.compile(r"&#(?:[xX](?P<hex>[0-9A-Fa-f]{1,8})|(?P<dec>[0-9]+));")),
    "decimal": _DecodeRule(re.compile(r"&#(?P<dec>[0-9]+);")),
    "javascript": _DecodeRule(re.compile(
        r"\\u(?P<high>[Dd][89ABab][0-9A-Fa-f]{2})\\u(?P<low>[Dd][C-Fc-f][0-9A-Fa-f]{2})"
        r"|\\U(?P<long>[0-9A-Fa-f]{8})"
        r"|\\u(?P<hex>[0-9A-Fa-f]{4})"
    )),
    "css": _DecodeRule(re.compile(r"\\(?P<hex>[0-9A-Fa-f]{4,6})[ \t\r\n\f]?")),
    "code_point": _DecodeRule(
        re.compile(_CODE_POINT_TOKEN + r"(?:\s*" + _CODE_POINT_TOKEN.replace("?P<hex>", "") + r")*"),
        _token_run(re.compile(_CODE_POINT_TOKEN)),
    ),
    "es6": _DecodeRule(re.compile(r"\\u\{(?P<hex>[0-9A-Fa-f]+)\}")),
    "pcre": _DecodeRule(re.compile(r"\\x\{(?P<hex>[0-9A-Fa-f]+)\}")),
    "hex_code_point": _DecodeRule(
        re.compile(HEX_CODE_POINT_TOKEN + r"(?:\s*" + HEX_CODE_POINT_TOKEN + r")*"),
        _token_run(re.compile(_HEX_CODE_POINT_TOKEN)),
    ),
}


def _get_rule(notation: str) -> _DecodeRule:
    try:
        return _RULES[notation]
    except KeyError:
        raise KeyError(f"Unknown notation: {notation!r} (choose from {', '.join(_RULES)})") from None


def iter_tokens(
    text: Any,
    notation: str,
    table: Optional[NamedEntityTable] = None,
) -> Iterator[EscapeToken]:
    """
    Yield every *notation* escape in *text*, in order.

    Raises:
        KeyError: If *notation* is unknown.
    """
    rule = _get_rule(notation)
    if not isinstance(text, str):
        return
    for match in rule.pattern.finditer(text):
        yield from rule.parse(match, notation, table)


def decode(text: Any, notation: str, table: Optional[NamedEntityTable] = None) -> str:
    """
    Decode every *notation* escape in *text*.

    Raises:
        KeyError: If *notation* is unknown.
    """
    rule = _get_rule(notation)
    if not isinstance(text, str):
        return ""

    def replace(match: re.Match) -> str:
        return "".join(token.decoded for token in rule.parse(match, notation, table))

    return rule.pattern.sub(replace, text)


def decode_named_html_entities(text: Any, table: Optional[NamedEntityTable] = None) -> str:
    """Decode ``&name;``, ``&#xH;`` and ``&#D;``; unknown names stay as written."""
    return decode(text, "named", table=table)


def decode_html_hex_entities(text: Any) -> str:
    return decode(text, "hex")


def decode_html_decimal_entities(text: Any) -> str:
    return decode(text, "decimal")


def decode_javascript_utf16_escape_sequence(text: Any) -> str:
    r"""Decode ``\uXXXX`` and ``\UXXXXXXXX``; an escaped surrogate pair is combined."""
    return decode(text, "javascript")


def decode_css_unicode_escape(text: Any) -> str:
    return decode(text, "css")


def decode_unicode_code_point_notation(text: Any) -> str:
    """Decode ``U+XXXX`` runs, dropping the whitespace between tokens of a run."""
    return decode(text, "code_point")


def decode_unicode_code_point_escape_sequence(text: Any) -> str:
    return decode(text, "es6")


def decode_pcre_unicode_hexadecimal_escape(text: Any) -> str:
    return decode(text, "pcre")


def decode_hex_code_points(text: Any) -> str:
    """Decode bare ``0x`` hex, splitting where the next ``0x`` begins."""
    return decode(text, "hex_code_point")


__all__ = [
    "EscapeToken",
    "decode",
    "decode_css_unicode_escape",
    "decode_hex_code_points",
    "decode_html_decimal_entities",
    "decode_html_hex_entities",
    "decode_javascript_utf16_escape_sequence",
    "decode_named_html_entities",
    "decode_pcre_unicode_hexadecimal_escape",
    "decode_unicode_code_point_escape_sequence",
    "decode_unicode_code_point_notation",
    "iter_tokens",
]
