"""Base64 and URL encoding plugin, plus GUID generation.

Pure stdlib.  ``base64_decode`` leaves anything that is not well-formed
Base64 (or is longer than :data:`BASE64_MAX_LENGTH`) untouched.
"""

import base64
import binascii
import re
import urllib.parse
import uuid
from typing import Any, Dict, Optional

from ...base import ChainableTransformer
from ...types import TransformContext
from ...plugins.base import TransformerPlugin, register_transformer

BASE64_MAX_LENGTH = 10000

BASE64_PATTERN = re.compile(r"^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?$")

# Characters encodeURIComponent leaves alone besides letters, digits and "-_.~".
URI_COMPONENT_SAFE = "!*'()"


def is_valid_base64(text: str) -> bool:
    return BASE64_PATTERN.match(text) is not None


# Wrappers around an upper-case GUID, keyed by format name.
GUID_FORMATS = {
    "plain": "{}",
    "braces": "{{{}}}",
    "csharp": '[Guid("{}")]',
    "vb": '<Guid("{}")>',
}


def generate_guid(fmt: str = "plain") -> str:
    """Return a random (version 4) GUID in upper case, wrapped per :data:`GUID_FORMATS`.

    Raises:
        ValueError: If *fmt* is not a known format.
    """
    if fmt not in GUID_FORMATS:
        raise ValueError(f"Unknown GUID format: {fmt}")
    return GUID_FORMATS[fmt].format(str(uuid.uuid4()).upper())


@register_transformer("base64_encode")
class Base64EncodeTransformer(ChainableTransformer[str, str]):
    """Base64-encode the UTF-8 bytes of a string."""

    def _transform(self, value: str, context: Optional[TransformContext] = None) -> str:
        return base64.b64encode(value.encode("utf-8")).decode("ascii")


@register_transformer("base64_decode")
class Base64DecodeTransformer(ChainableTransformer[str, str]):
    """Decode Base64 to text; invalid or oversized input is returned unchanged.

    Bytes that are not valid UTF-8 decode to U+FFFD.
    """

    def _transform(self, value: str, context: Optional[TransformContext] = None) -> str:
        if len(value) > BASE64_MAX_LENGTH or not is_valid_base64(value):
            return value
        try:
            raw = base64.b64decode(value, validate=True)
        except binascii.Error:
            return value
        return raw.decode("utf-8", errors="replace")


@register_transformer("url_encode", safe=URI_COMPONENT_SAFE)
class UrlEncodeTransformer(ChainableTransformer[str, str]):
    """Percent-encode a string the way ``encodeURIComponent`` does.

    Pass *safe* to preserve further characters (e.g. ``"/"``).
    """

    def __init__(self, name: str, safe: str = URI_COMPONENT_SAFE):
        super().__init__(name)
        self.safe = safe

    def _transform(self, value: str, context: Optional[TransformContext] = None) -> str:
        return urllib.parse.quote(value, safe=self.safe)


@register_transformer("url_decode")
class UrlDecodeTransformer(ChainableTransformer[str, str]):
    """Decode a percent-encoded string."""

    def _transform(self, value: str, context: Optional[TransformContext] = None) -> str:
        return urllib.parse.unquote(value)


@register_transformer("generate_guid", fmt="plain")
class GenerateGuidTransformer(ChainableTransformer[Any, str]):
    """Produce a new GUID. Input value is ignored."""

    def __init__(self, name: str, fmt: str = "plain"):
        super().__init__(name)
        self.fmt = fmt

    def validate(self, value: Any) -> bool:
        return True

    def _transform(self, value: Any, context: Optional[TransformContext] = None) -> str:
        return generate_guid(self.fmt)


class EncodingPlugin(TransformerPlugin):
    """Plugin providing Base64 and URL encoding."""

    def __init__(self):
        super().__init__("encoding")

    @property
    def transformers(self) -> Dict[str, callable]:
        return self._auto_transformers()

    @property
    def manifest(self):
        from ...manifest import PluginManifest
        return PluginManifest(
            name="encoding",
            display_name="Encoding",
            description="Base64 and URL (percent) encoding and decoding, GUID generation.",
            group="Text",
        )
