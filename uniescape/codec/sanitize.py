"""Text cleanup helpers: dash/space normalization and removal of invisible characters."""

import re
from typing import Any

from .scanner import iter_code_points

# Dash-like characters normalized to U+002D.  U+2212 MINUS SIGN is kept.
DASH_CHARACTERS = frozenset((
    0x2010,  # HYPHEN
    0x2011,  # NON-BREAKING HYPHEN
    0x2012,  # FIGURE DASH
    0x2013,  # EN DASH
    0x2014,  # EM DASH
    0x2015,  # HORIZONTAL BAR
    0x2053,  # SWUNG DASH
    0x207B,  # SUPERSCRIPT MINUS
    0x208B,  # SUBSCRIPT MINUS
    0x2E3A,  # TWO-EM DASH
    0x2E3B,  # THREE-EM DASH
    0xFE58,  # SMALL EM DASH
    0xFE63,  # SMALL HYPHEN-MINUS
    0xFF0D,  # FULLWIDTH HYPHEN-MINUS
))

# Space characters normalized to U+0020.
SPACE_CHARACTERS = frozenset((0x00A0, 0x1680, *range(0x2000, 0x200B), 0x202F, 0x205F, 0x3000))

# ZWNJ, word joiner and the Mongolian vowel separator are left alone.
INVISIBLE_CHARACTERS = frozenset((0x200B, 0xFEFF))

SOFT_HYPHEN_MARKS = frozenset((0x00AD,))

SPECIAL_REMOVE_CHARACTERS = frozenset((0x2028, 0x2029, 0xFFF9, 0xFFFA, 0xFFFB, 0xFFFC))

BIDI_OVERRIDE_CHARACTERS = frozenset(range(0x202A, 0x202F))

# C0 except tab, LF and CR; DEL; C1.
CONTROL_CHARACTERS = frozenset(
    [cp for cp in range(0x20) if cp not in (0x09, 0x0A, 0x0D)] + list(range(0x7F, 0xA0))
)

# Everything remove_non_printable_characters drops.
NON_PRINTABLE_CHARACTERS = CONTROL_CHARACTERS | frozenset((
    0x200B, 0x200C, 0x200D, 0x200E, 0x200F, 0x2028, 0x2029, 0xFEFF,
    0x00A0, 0x1680, 0x180E, *range(0x2000, 0x200B), 0x202F, 0x205F, 0x3000,
))


# What JavaScript's String.prototype.trim() removes: tab, LF, VT, FF, CR,
# space, NBSP, ZWNBSP, the Zs spaces and the line/paragraph separators.
# Unlike str.strip() this keeps U+001C..U+001F and U+0085.
TRIM_CHARACTERS = "".join(chr(cp) for cp in (
    0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0xA0, 0x1680,
    *range(0x2000, 0x200B), 0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF,
))

_LINE_BREAK = re.compile(r"(\r\n|\r|\n)")


def remove_non_printable_characters(text: Any) -> Any:
    """
    Drop control characters and zero-width or invisible spaces.

    Tab, line feed and carriage return are kept.  Non-string input is
    returned unchanged.
    """
    if not isinstance(text, str):
        return text
    return "".join(char for char in text if ord(char) not in NON_PRINTABLE_CHARACTERS)


def clean_text(
    text: Any,
    normalize_dashes: bool = True,
    normalize_spaces: bool = True,
    remove_invisible: bool = True,
    remove_controls: bool = True,
) -> Any:
    """
    Normalize dashes and spaces and strip characters that do not render.

    Args:
        text: Text to clean; non-string input is returned unchanged.
        normalize_dashes: Replace dash variants with ``-``.
        normalize_spaces: Replace space variants with a plain space.
        remove_invisible: Drop zero-width characters, soft hyphens, line and
            paragraph separators, interlinear annotation marks and bidi
            embedding/override characters.
        remove_controls: Drop C0/C1 controls other than tab, LF and CR.
    """
    if not isinstance(text, str):
        return text

    removed = set()
    if remove_invisible:
        removed |= INVISIBLE_CHARACTERS | SOFT_HYPHEN_MARKS | SPECIAL_REMOVE_CHARACTERS | BIDI_OVERRIDE_CHARACTERS
    if remove_controls:
        removed |= CONTROL_CHARACTERS

    parts = []
    for index, code_point, units in iter_code_points(text):
        if code_point in removed:
            continue
        if normalize_dashes and code_point in DASH_CHARACTERS:
            parts.append("-")
        elif normalize_spaces and code_point in SPACE_CHARACTERS:
            parts.append(" ")
        else:
            parts.append(text[index:index + units])
    return "".join(parts)


def remove_leading_trailing_whitespace(text: Any) -> Any:
    """Trim every ``\\n``-separated line using :data:`TRIM_CHARACTERS`."""
    if not isinstance(text, str):
        return text
    return "\n".join(line.strip(TRIM_CHARACTERS) for line in text.split("\n"))


def remove_empty_lines(text: Any, consider_whitespace_empty: bool = True) -> Any:
    """
    Delete empty lines together with their line break.

    Lines end at CRLF, CR or LF.  With *consider_whitespace_empty* a line
    holding only :data:`TRIM_CHARACTERS` counts as empty too.  Removing a
    final empty line leaves the preceding line break in place.
    """
    if not isinstance(text, str):
        return text

    parts = _LINE_BREAK.split(text)
    kept = []
    for index in range(0, len(parts), 2):
        line = parts[index]
        line_break = parts[index + 1] if index + 1 < len(parts) else ""
        content = line.strip(TRIM_CHARACTERS) if consider_whitespace_empty else line
        if content:
            kept.append(line + line_break)
    return "".join(kept)


__all__ = [
    "BIDI_OVERRIDE_CHARACTERS",
    "CONTROL_CHARACTERS",
    "DASH_CHARACTERS",
    "INVISIBLE_CHARACTERS",
    "NON_PRINTABLE_CHARACTERS",
    "SOFT_HYPHEN_MARKS",
    "SPACE_CHARACTERS",
    "SPECIAL_REMOVE_CHARACTERS",
    "TRIM_CHARACTERS",
    "clean_text",
    "remove_empty_lines",
    "remove_leading_trailing_whitespace",
    "remove_non_printable_characters",
]
