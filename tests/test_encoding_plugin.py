"""Tests for the Encoding plugin."""

import re

import pytest

from uniescape.exceptions import TransformationError
from uniescape.plugins.encoding import (
    BASE64_MAX_LENGTH,
    GUID_FORMATS,
    Base64DecodeTransformer,
    Base64EncodeTransformer,
    EncodingPlugin,
    GenerateGuidTransformer,
    UrlDecodeTransformer,
    UrlEncodeTransformer,
    generate_guid,
    is_valid_base64,
)

PARTY_POPPER = chr(0x1F389)
GUID = r"[0-9A-F]{8}-[0-9A-F]{4}-4[0-9A-F]{3}-[89AB][0-9A-F]{3}-[0-9A-F]{12}"


# ── Transformer class tests ────────────────────────────────────────────────


class TestUrlEncodeTransformer:
    def test_basic_encode(self):
        t = UrlEncodeTransformer("url_encode")
        result = t.transform("hello world")
        assert result.value == "hello%20world"

    def test_encode_component(self):
        t = UrlEncodeTransformer("url_encode")
        result = t.transform("Search for & stuff?")
        assert result.value == "Search%20for%20%26%20stuff%3F"

    def test_encode_slash_by_default(self):
        t = UrlEncodeTransformer("url_encode")
        result = t.transform("https://example.com/path")
        assert result.value == "https%3A%2F%2Fexample.com%2Fpath"

    def test_unreserved_marks_are_kept(self):
        t = UrlEncodeTransformer("url_encode")
        result = t.transform("a-b_c.d~e!f*g'h(i)")
        assert result.value == "a-b_c.d~e!f*g'h(i)"

    def test_encode_with_safe_slash(self):
        t = UrlEncodeTransformer("url_encode", safe="/")
        result = t.transform("a/b c")
        assert result.value == "a/b%20c"

    def test_encode_empty_string(self):
        t = UrlEncodeTransformer("url_encode")
        result = t.transform("")
        assert result.value == ""

    def test_encode_unicode(self):
        t = UrlEncodeTransformer("url_encode")
        result = t.transform("hello caf" + chr(0xE9))
        assert result.value == "hello%20caf%C3%A9"


class TestUrlDecodeTransformer:
    def test_basic_decode(self):
        t = UrlDecodeTransformer("url_decode")
        result = t.transform("hello%20world")
        assert result.value == "hello world"

    def test_decode_special_chars(self):
        t = UrlDecodeTransformer("url_decode")
        result = t.transform("Search%20for%20%26%20stuff%3F")
        assert result.value == "Search for & stuff?"

    def test_decode_unicode(self):
        t = UrlDecodeTransformer("url_decode")
        result = t.transform("hello%20caf%C3%A9")
        assert result.value == "hello caf" + chr(0xE9)

    def test_plus_is_not_a_space(self):
        t = UrlDecodeTransformer("url_decode")
        assert t.transform("a+b").value == "a+b"


class TestBase64Transformers:
    def test_encode(self):
        t = Base64EncodeTransformer("base64_encode")
        assert t.transform("Hello").value == "SGVsbG8="

    def test_round_trip(self):
        original = "Playful Sparkle " + PARTY_POPPER
        encoded = Base64EncodeTransformer("base64_encode").transform(original).value
        assert Base64DecodeTransformer("base64_decode").transform(encoded).value == original

    @pytest.mark.parametrize("text", ["Not Base64!", "Invalid==Chars_", "SGVsbG8", "SGVsbG8==="])
    def test_invalid_input_is_unchanged(self, text):
        assert Base64DecodeTransformer("base64_decode").transform(text).value == text

    def test_oversized_input_is_unchanged(self):
        text = "QUFB" * (BASE64_MAX_LENGTH // 4 + 1)
        assert Base64DecodeTransformer("base64_decode").transform(text).value == text

    def test_invalid_utf8_is_replaced(self):
        # 0xFF on its own is not UTF-8.
        assert Base64DecodeTransformer("base64_decode").transform("/w==").value == chr(0xFFFD)

    def test_empty(self):
        assert Base64DecodeTransformer("base64_decode").transform("").value == ""


class TestIsValidBase64:
    def test_valid(self):
        assert is_valid_base64("SGVsbG8=")
        assert is_valid_base64("SGVsbG8h")

    @pytest.mark.parametrize("text", ["SGVsbG8", "SGVsbG8===", "SGVsbG8$"])
    def test_invalid(self, text):
        assert not is_valid_base64(text)


class TestGenerateGuid:
    @pytest.mark.parametrize("fmt,pattern", [
        ("plain", GUID),
        ("braces", r"\{" + GUID + r"\}"),
        ("csharp", r"\[Guid\(\"" + GUID + r"\"\)\]"),
        ("vb", r"<Guid\(\"" + GUID + r"\"\)>"),
    ])
    def test_formats(self, fmt, pattern):
        assert re.fullmatch(pattern, generate_guid(fmt))

    def test_every_format_is_covered(self):
        assert set(GUID_FORMATS) == {"plain", "braces", "csharp", "vb"}

    def test_unique(self):
        assert len({generate_guid() for _ in range(50)}) == 50

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown GUID format: xml"):
            generate_guid("xml")

    def test_transformer_ignores_input(self):
        t = GenerateGuidTransformer("generate_guid", fmt="braces")
        for value in ("", "text", 42):
            result = t.transform(value)
            assert result.success
            assert re.fullmatch(r"\{" + GUID + r"\}", result.value)


# ── Plugin tests ───────────────────────────────────────────────────────────


class TestEncodingPlugin:
    def test_transformers(self):
        assert set(EncodingPlugin().transformers) == {
            "base64_encode", "base64_decode", "url_encode", "url_decode", "generate_guid",
        }

    def test_url_encode_default_safe(self):
        t = EncodingPlugin().transformers["url_encode"]({})
        assert t.safe == "!*'()"

    def test_manifest(self):
        manifest = EncodingPlugin().manifest
        assert manifest.name == "encoding"
        assert manifest.group == "Text"


# ── Pipeline tests ─────────────────────────────────────────────────────────


class TestEncodingPipeline:
    def test_url_round_trip(self, transformer):
        text = "Search for & stuff?"
        assert transformer.transform(text, ["url_encode", "url_decode"]) == text

    def test_url_encode_with_safe(self, transformer):
        steps = [{"function": "url_encode", "safe": "/"}]
        assert transformer.transform("a/b", steps) == "a/b"

    def test_escape_then_base64(self, transformer):
        steps = ["encode_hex_entities", "base64_encode", "base64_decode", "decode_hex_entities"]
        text = "caf" + chr(0xE9)
        assert transformer.transform(text, steps) == text

    def test_generate_guid_step(self, transformer):
        assert re.fullmatch(GUID, transformer.transform("ignored", ["generate_guid"]))

    def test_generate_guid_unknown_format(self, transformer):
        with pytest.raises(TransformationError, match="Unknown GUID format"):
            transformer.transform("", [{"function": "generate_guid", "fmt": "xml"}])
