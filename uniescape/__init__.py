"""uniescape - Unicode escape notation codec with a transformer plugin system."""

from .transformers import UniescapeTransformer
from .base import BaseTransformer, ChainableTransformer, CompositeTransformer
from .plugins.base import TransformerPlugin, PluginRegistry
from .exceptions import TransformerError, ValidationError, TransformationError
from .types import CodecOptions, TransformContext, TransformOptions, TransformResult
from .manifest import PluginManifest
from .codec import (
    NOTATIONS,
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
    iter_tokens,
)

__version__ = '0.1.0'

__all__ = [
    # Core
    'UniescapeTransformer',
    'BaseTransformer',
    'ChainableTransformer',
    'CompositeTransformer',
    # Plugin system
    'TransformerPlugin',
    'PluginRegistry',
    'PluginManifest',
    # Errors & types
    'TransformerError',
    'ValidationError',
    'TransformationError',
    'CodecOptions',
    'TransformContext',
    'TransformOptions',
    'TransformResult',
    # Codec
    'NOTATIONS',
    'EscapeToken',
    'encode',
    'decode',
    'iter_tokens',
    'encode_named_html_entities',
    'decode_named_html_entities',
    'encode_html_hex_entities',
    'decode_html_hex_entities',
    'encode_html_decimal_entities',
    'decode_html_decimal_entities',
    'encode_javascript_utf16_escape_sequence',
    'decode_javascript_utf16_escape_sequence',
    'encode_css_unicode_escape',
    'decode_css_unicode_escape',
    'encode_unicode_code_point_notation',
    'decode_unicode_code_point_notation',
    'encode_unicode_code_point_escape_sequence',
    'decode_unicode_code_point_escape_sequence',
    'encode_pcre_unicode_hexadecimal_escape',
    'decode_pcre_unicode_hexadecimal_escape',
    'encode_hex_code_points',
    'decode_hex_code_points',
]
