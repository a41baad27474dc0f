"""Code point escape plugin.

One ``encode_*`` and one ``decode_*`` transformer per escape notation, all
backed by :mod:`uniescape.codec`.  Encoders accept ``double_encode`` and, for
the ``U+`` and ``0x`` notations, ``separate``.
"""

from typing import Dict, Optional

from ...base import ChainableTransformer
from ...codec import NOTATIONS, decode, encode
from ...types import CodecOptions, TransformContext
from ...plugins.base import TransformerPlugin, register_transformer


class EncodeTransformer(ChainableTransformer[str, str]):
    """Encode text into the notation named by the ``notation`` class attribute."""

    notation: str = ""

    def __init__(
        self,
        name: str = "",
        double_encode: bool = False,
        separate: bool = False,
        options: Optional[CodecOptions] = None,
    ):
        super().__init__(name, options=options or CodecOptions(double_encode=double_encode, separate=separate))

    def _validate_options(self) -> None:
        if not isinstance(self.options, CodecOptions):
            raise TypeError(f"{self.__class__.__name__} expects CodecOptions, got {type(self.options).__name__}")

    def _transform(self, value: str, context: Optional[TransformContext] = None) -> str:
        return encode(
            value,
            self.notation,
            double_encode=self.options.double_encode,
            separate=self.options.separate,
        )


class DecodeTransformer(ChainableTransformer[str, str]):
    """Decode the notation named by the ``notation`` class attribute."""

    notation: str = ""

    def _transform(self, value: str, context: Optional[TransformContext] = None) -> str:
        return decode(value, self.notation)


# ---------------------------------------------------------------------------
# HTML entities
# ---------------------------------------------------------------------------

@register_transformer("encode_named_entities", double_encode=False)
class EncodeNamedEntitiesTransformer(EncodeTransformer):
    """``é`` -> ``&eacute;``; characters without a name become ``&#xHHHH;``."""
    notation = "named"


@register_transformer("decode_named_entities")
class DecodeNamedEntitiesTransformer(DecodeTransformer):
    """Decode named and numeric entities; unknown names are left as written."""
    notation = "named"


@register_transformer("encode_hex_entities", double_encode=False)
class EncodeHexEntitiesTransformer(EncodeTransformer):
    notation = "hex"


@register_transformer("decode_hex_entities")
class DecodeHexEntitiesTransformer(DecodeTransformer):
    notation = "hex"


@register_transformer("encode_decimal_entities", double_encode=False)
class EncodeDecimalEntitiesTransformer(EncodeTransformer):
    notation = "decimal"


@register_transformer("decode_decimal_entities")
class DecodeDecimalEntitiesTransformer(DecodeTransformer):
    notation = "decimal"


# ---------------------------------------------------------------------------
# Backslash escapes
# ---------------------------------------------------------------------------

@register_transformer("encode_js_escapes", double_encode=False)
class EncodeJsEscapesTransformer(EncodeTransformer):
    r"""BMP characters as ``\uXXXX``, anything above as ``\UXXXXXXXX``."""
    notation = "javascript"


@register_transformer("decode_js_escapes")
class DecodeJsEscapesTransformer(DecodeTransformer):
    notation = "javascript"


@register_transformer("encode_css_escapes", double_encode=False)
class EncodeCssEscapesTransformer(EncodeTransformer):
    notation = "css"


@register_transformer("decode_css_escapes")
class DecodeCssEscapesTransformer(DecodeTransformer):
    notation = "css"


@register_transformer("encode_es6_escapes", double_encode=False)
class EncodeEs6EscapesTransformer(EncodeTransformer):
    notation = "es6"


@register_transformer("decode_es6_escapes")
class DecodeEs6EscapesTransformer(DecodeTransformer):
    notation = "es6"


@register_transformer("encode_pcre_escapes", double_encode=False)
class EncodePcreEscapesTransformer(EncodeTransformer):
    notation = "pcre"


@register_transformer("decode_pcre_escapes")
class DecodePcreEscapesTransformer(DecodeTransformer):
    notation = "pcre"


# ---------------------------------------------------------------------------
# Code point listings
# ---------------------------------------------------------------------------

@register_transformer("encode_code_points", double_encode=False, separate=False)
class EncodeCodePointsTransformer(EncodeTransformer):
    """Every character, ASCII included, as ``U+XXXX``."""
    notation = "code_point"


@register_transformer("decode_code_points")
class DecodeCodePointsTransformer(DecodeTransformer):
    notation = "code_point"


@register_transformer("encode_hex_code_points", double_encode=False, separate=False)
class EncodeHexCodePointsTransformer(EncodeTransformer):
    """Every character, ASCII included, as bare ``0x`` hex."""
    notation = "hex_code_point"


@register_transformer("decode_hex_code_points")
class DecodeHexCodePointsTransformer(DecodeTransformer):
    notation = "hex_code_point"


# ---------------------------------------------------------------------------
# Plugin class
# ---------------------------------------------------------------------------

class CodepointPlugin(TransformerPlugin):
    """Plugin providing the escape notation encoders and decoders."""

    def __init__(self):
        super().__init__("codepoint")

    @property
    def transformers(self) -> Dict[str, callable]:
        return self._auto_transformers()

    @property
    def manifest(self):
        from ...manifest import PluginManifest
        return PluginManifest(
            name="codepoint",
            display_name="Code Points",
            description="Encode and decode HTML entities, JS/CSS/ES6/PCRE escapes, U+ and 0x notation.",
            group="Codec",
            notations=list(NOTATIONS),
        )
