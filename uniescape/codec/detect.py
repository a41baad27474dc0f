"""Recognize escape tokens that are already present in the input.

Encoders consult these patterns before escaping a character so that text
which already contains an escape of the target notation is not escaped a
second time (the double-encode guard).  Each pattern is applied with
``Pattern.match(text, pos)``, i.e. anchored at the current offset.
"""

import re
from typing import Dict, Optional

from .entities import NamedEntityTable, get_entity_table

# Exact two-digit tokens the hex encoder emits for the HTML-sensitive characters.
_HEX_SPECIALS = r"26|3[Cc]|3[Ee]|22|27"

# A bare 0x token ends right before the next 0x token or at the first non-hex character.
HEX_CODE_POINT_TOKEN = r"0[xX]([0-9A-Fa-f]+?)(?=0[xX][0-9A-Fa-f]|(?![0-9A-Fa-f]))"

TOKEN_PATTERNS: Dict[str, re.Pattern] = {
    "named": re.compile(r"&(?:([A-Za-z][A-Za-z0-9]{0,31})|#[xX][0-9A-Fa-f]{4,8});"),
    "hex": re.compile(r"&#[xX](?:[0-9A-Fa-f]{4,8}|" + _HEX_SPECIALS + r");"),
    "decimal": re.compile(r"&#[0-9]+;"),
    "javascript": re.compile(r"\\(?:u[0-9A-Fa-f]{4}|U[0-9A-Fa-f]{8})"),
    "css": re.compile(r"\\[0-9A-Fa-f]{4,6}[ \t\r\n\f]?"),
    "code_point": re.compile(r"[Uu]\+[0-9A-Fa-f]{4,6}"),
    "es6": re.compile(r"\\u\{[0-9A-Fa-f]+\}"),
    "pcre": re.compile(r"\\x\{[0-9A-Fa-f]+\}"),
    "hex_code_point": re.compile(HEX_CODE_POINT_TOKEN),
}

# Characters that can open a token; anything else is never checked.
TOKEN_STARTS: Dict[str, str] = {
    "named": "&",
    "hex": "&",
    "decimal": "&",
    "javascript": "\\",
    "css": "\\",
    "code_point": "Uu",
    "es6": "\\",
    "pcre": "\\",
    "hex_code_point": "0",
}


def detect_token(
    text: str,
    pos: int,
    notation: str,
    table: Optional[NamedEntityTable] = None,
) -> Optional[str]:
    """
    Return the well-formed *notation* token that begins at *pos*, if any.

    For the ``named`` notation an ``&name;`` token only counts when the
    entity table knows the name; numeric ``&#x...;`` tokens always count.

    Raises:
        KeyError: If *notation* is not a known notation key.
    """
    pattern = TOKEN_PATTERNS[notation]
    if pos >= len(text) or text[pos] not in TOKEN_STARTS[notation]:
        return None

    match = pattern.match(text, pos)
    if match is None:
        return None

    if notation == "named" and match.group(1) is not None:
        table = table or get_entity_table()
        if not table.is_known_name(match.group(1)):
            return None

    return match.group(0)


__all__ = [
    "HEX_CODE_POINT_TOKEN",
    "TOKEN_PATTERNS",
    "TOKEN_STARTS",
    "detect_token",
]
