"""Unicode code point codec: escape notations, entity table and text cleanup."""

from .decoders import (
    EscapeToken,
    decode,
    decode_css_unicode_escape,
    decode_hex_code_points,
    decode_html_decimal_entities,
    decode_html_hex_entities,
    decode_javascript_utf16_escape_sequence,
    decode_named_html_entities,
    decode_pcre_unicode_hexadecimal_escape,
    decode_unicode_code_point_escape_sequence,
    decode_unicode_code_point_notation,
    iter_tokens,
)
from .detect import detect_token
from .encoders import (
    encode,
    encode_css_unicode_escape,
    encode_hex_code_points,
    encode_html_decimal_entities,
    encode_html_hex_entities,
    encode_javascript_utf16_escape_sequence,
    encode_named_html_entities,
    encode_pcre_unicode_hexadecimal_escape,
    encode_unicode_code_point_escape_sequence,
    encode_unicode_code_point_notation,
)
from .entities import NamedEntityTable, get_entity_table
from .notations import NOTATIONS, Notation, get_notation
from .sanitize import (
    clean_text,
    remove_empty_lines,
    remove_leading_trailing_whitespace,
    remove_non_printable_characters,
)
from .validator import REPLACEMENT_CHARACTER, code_point_to_char, is_valid_code_point

__all__ = [
    # Generic entry points
    'encode',
    'decode',
    'iter_tokens',
    'detect_token',
    'EscapeToken',
    # Notations
    'NOTATIONS',
    'Notation',
    'get_notation',
    # Encoders
    'encode_named_html_entities',
    'encode_html_hex_entities',
    'encode_html_decimal_entities',
    'encode_javascript_utf16_escape_sequence',
    'encode_css_unicode_escape',
    'encode_unicode_code_point_notation',
    'encode_unicode_code_point_escape_sequence',
    'encode_pcre_unicode_hexadecimal_escape',
    'encode_hex_code_points',
    # Decoders
    'decode_named_html_entities',
    'decode_html_hex_entities',
    'decode_html_decimal_entities',
    'decode_javascript_utf16_escape_sequence',
    'decode_css_unicode_escape',
    'decode_unicode_code_point_notation',
    'decode_unicode_code_point_escape_sequence',
    'decode_pcre_unicode_hexadecimal_escape',
    'decode_hex_code_points',
    # Entity table & validation
    'NamedEntityTable',
    'get_entity_table',
    'REPLACEMENT_CHARACTER',
    'code_point_to_char',
    'is_valid_code_point',
    # Cleanup
    'clean_text',
    'remove_empty_lines',
    'remove_leading_trailing_whitespace',
    'remove_non_printable_characters',
]
