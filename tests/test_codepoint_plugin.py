"""Tests for the Codepoint plugin."""

import pytest

from uniescape.codec import NOTATIONS
from uniescape.plugins.codepoint import (
    CodepointPlugin,
    DecodeCodePointsTransformer,
    DecodeCssEscapesTransformer,
    DecodeNamedEntitiesTransformer,
    EncodeCodePointsTransformer,
    EncodeHexCodePointsTransformer,
    EncodeJsEscapesTransformer,
    EncodeNamedEntitiesTransformer,
    EncodePcreEscapesTransformer,
)
from uniescape.exceptions import ValidationError
from uniescape.types import CodecOptions, TransformOptions

E_ACUTE = chr(0xE9)
GRINNING_FACE = chr(0x1F600)

TRANSFORMER_NAMES = {
    f"{direction}_{suffix}"
    for direction in ("encode", "decode")
    for suffix in (
        "named_entities", "hex_entities", "decimal_entities", "js_escapes", "css_escapes",
        "es6_escapes", "pcre_escapes", "code_points", "hex_code_points",
    )
}


# ── Transformer class tests ────────────────────────────────────────────────


class TestEncodeTransformers:
    def test_named(self):
        t = EncodeNamedEntitiesTransformer("encode_named_entities")
        assert t.transform(E_ACUTE + " & " + GRINNING_FACE).value == "&eacute; &amp; &#x1F600;"

    def test_js(self):
        t = EncodeJsEscapesTransformer("encode_js_escapes")
        assert t.transform(E_ACUTE).value == "\\u00E9"

    def test_pcre(self):
        t = EncodePcreEscapesTransformer("encode_pcre_escapes")
        assert t.transform(GRINNING_FACE).value == "\\x{1F600}"

    def test_separate(self):
        t = EncodeHexCodePointsTransformer("encode_hex_code_points", separate=True)
        assert t.transform("A" + GRINNING_FACE + "B").value == "0x41 0x1F600 0x42"

    def test_double_encode(self):
        t = EncodeNamedEntitiesTransformer("encode_named_entities", double_encode=True)
        assert t.transform("&eacute;").value == "&amp;eacute;"

    def test_options_object(self):
        t = EncodeCodePointsTransformer("encode_code_points", options=CodecOptions(separate=True))
        assert t.options.separate
        assert t.transform("AB").value == "U+0041 U+0042"

    def test_wrong_options_type(self):
        with pytest.raises(TypeError):
            EncodeCodePointsTransformer("encode_code_points", options=TransformOptions())

    def test_rejects_non_string(self):
        result = EncodeJsEscapesTransformer("encode_js_escapes").transform(None)
        assert result.failed


class TestDecodeTransformers:
    def test_named(self):
        t = DecodeNamedEntitiesTransformer("decode_named_entities")
        assert t.transform("&eacute; &foo; &#xD800;").value == E_ACUTE + " &foo; " + chr(0xFFFD)

    def test_css(self):
        t = DecodeCssEscapesTransformer("decode_css_escapes")
        assert t.transform("caf\\00E9 !").value == "caf" + E_ACUTE + "!"

    def test_code_points(self):
        t = DecodeCodePointsTransformer("decode_code_points")
        assert t.transform("U+0048 U+0069").value == "Hi"

    def test_chain_encode_decode(self):
        t = EncodeCodePointsTransformer("enc").chain(DecodeCodePointsTransformer("dec"))
        assert t.transform("caf" + E_ACUTE).value == "caf" + E_ACUTE


# ── Plugin tests ───────────────────────────────────────────────────────────


class TestCodepointPlugin:
    def test_registers_every_notation(self):
        assert set(CodepointPlugin().transformers) == TRANSFORMER_NAMES

    def test_manifest(self):
        manifest = CodepointPlugin().manifest
        assert manifest.name == "codepoint"
        assert manifest.group == "Codec"
        assert manifest.notations == list(NOTATIONS)

    def test_factory_binds_params(self):
        factory = CodepointPlugin().transformers["encode_code_points"]
        t = factory({"separate": True})
        assert isinstance(t, EncodeCodePointsTransformer)
        assert t.name == "encode_code_points"
        assert t.options == CodecOptions(double_encode=False, separate=True)

    def test_every_transformer_handles_empty_string(self):
        for name, factory in CodepointPlugin().transformers.items():
            assert factory({}).transform("").value == "", name


# ── Pipeline tests ─────────────────────────────────────────────────────────


class TestCodepointPipeline:
    @pytest.mark.parametrize("step,expected", [
        ("encode_named_entities", "caf&eacute;"),
        ("encode_hex_entities", "caf&#x00E9;"),
        ("encode_decimal_entities", "caf&#233;"),
        ("encode_js_escapes", "caf\\u00E9"),
        ("encode_css_escapes", "caf\\00E9 "),
        ("encode_es6_escapes", "caf\\u{E9}"),
        ("encode_pcre_escapes", "caf\\x{E9}"),
        ("encode_code_points", "U+0063U+0061U+0066U+00E9"),
        ("encode_hex_code_points", "0x630x610x660xE9"),
    ])
    def test_encode(self, transformer, step, expected):
        assert transformer.transform("caf" + E_ACUTE, [step]) == expected

    def test_unknown_step_is_rejected(self, transformer):
        with pytest.raises(ValidationError, match="Unknown transformer: hex_entities"):
            transformer.transform(E_ACUTE, ["hex_entities"])
