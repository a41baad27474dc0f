"""Code point iteration over Python strings.

Python strings are already sequences of code points, but text that went
through a UTF-16 round trip (``surrogatepass``, JSON from some producers,
Windows clipboard data) can still carry a supplementary character as two
surrogate code points.  The scanner pairs such halves back into a single
code point so that every encoder sees one logical character.
"""

from typing import Iterator, Tuple

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF

SUPPLEMENTARY_START = 0x10000
MAX_CODE_POINT = 0x10FFFF


def is_high_surrogate(value: int) -> bool:
    return HIGH_SURROGATE_START <= value <= HIGH_SURROGATE_END


def is_low_surrogate(value: int) -> bool:
    return LOW_SURROGATE_START <= value <= LOW_SURROGATE_END


def is_surrogate(value: int) -> bool:
    """Return True for any value in the surrogate block U+D800..U+DFFF."""
    return HIGH_SURROGATE_START <= value <= LOW_SURROGATE_END


def combine_surrogates(high: int, low: int) -> int:
    """Combine a high/low surrogate pair into its supplementary code point."""
    return SUPPLEMENTARY_START + ((high - HIGH_SURROGATE_START) << 10) + (low - LOW_SURROGATE_START)


def code_point_at(text: str, index: int) -> Tuple[int, int]:
    """
    Read the code point starting at *index*.

    Returns:
        ``(code_point, units)`` where *units* is 2 when a high surrogate at
        *index* is immediately followed by a low surrogate (the pair is
        combined), otherwise 1.  A lone surrogate is returned as-is with
        ``units == 1``; callers decide what to do with it.

    Raises:
        IndexError: If *index* is outside the string.
    """
    value = ord(text[index])
    if is_high_surrogate(value) and index + 1 < len(text):
        following = ord(text[index + 1])
        if is_low_surrogate(following):
            return combine_surrogates(value, following), 2
    return value, 1


def iter_code_points(text: str) -> Iterator[Tuple[int, int, int]]:
    """Yield ``(index, code_point, units)`` for each logical character of *text*."""
    index = 0
    length = len(text)
    while index < length:
        value, units = code_point_at(text, index)
        yield index, value, units
        index += units


def is_lone_surrogate(value: int, units: int) -> bool:
    """True when the scanner returned an unpaired surrogate half."""
    return units == 1 and is_surrogate(value)


__all__ = [
    "MAX_CODE_POINT",
    "SUPPLEMENTARY_START",
    "code_point_at",
    "combine_surrogates",
    "is_high_surrogate",
    "is_lone_surrogate",
    "is_low_surrogate",
    "is_surrogate",
    "iter_code_points",
]
