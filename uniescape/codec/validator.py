"""Code point legality rules shared by every decoder."""

from logging import getLogger
from typing import Optional

from .scanner import MAX_CODE_POINT, is_surrogate

logger = getLogger(__name__)

REPLACEMENT_CHARACTER = chr(0xFFFD)

# Only the two plane-final noncharacters of the BMP are rejected;
# U+FDD0..U+FDEF and the per-plane xFFFE/xFFFF pairs above the BMP decode.
NONCHARACTERS = frozenset((0xFFFE, 0xFFFF))

# Longest digit strings that can still spell a value <= 0x10FFFF
# (leading zeros allowed up to these widths by the token patterns).
_MAX_DIGITS = {16: 8, 10: 8}


def is_valid_code_point(value: int) -> bool:
    """
    Return True when *value* may be produced by a decoder.

    Invalid values: anything below 1 (NUL included), above U+10FFFF, in the
    surrogate block, or one of the noncharacters U+FFFE / U+FFFF.
    """
    if value < 1 or value > MAX_CODE_POINT:
        return False
    if is_surrogate(value):
        return False
    return value not in NONCHARACTERS


def parse_code_point(digits: str, base: int = 16) -> Optional[int]:
    """
    Parse *digits* in *base*, refusing digit strings too long to be a code point.

    Returns None for empty or oversized input so callers treat it as invalid
    without converting arbitrarily long numbers.
    """
    if not digits:
        return None
    stripped = digits.lstrip("0") or "0"
    if len(stripped) > _MAX_DIGITS.get(base, 8):
        return None
    return int(stripped, base)


def code_point_to_char(value: Optional[int]) -> str:
    """Return the character for *value*, or U+FFFD when it fails validation."""
    if value is None or not is_valid_code_point(value):
        logger.debug("Invalid code point %r replaced with U+FFFD", value)
        return REPLACEMENT_CHARACTER
    return chr(value)


__all__ = [
    "NONCHARACTERS",
    "REPLACEMENT_CHARACTER",
    "code_point_to_char",
    "is_valid_code_point",
    "parse_code_point",
]
