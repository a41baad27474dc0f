"""Text cleanup plugin: invisible characters, exotic dashes and spaces, line trimming and blank lines."""

from typing import Dict, Optional

from ...base import ChainableTransformer
from ...codec.sanitize import (
    clean_text,
    remove_empty_lines,
    remove_leading_trailing_whitespace,
    remove_non_printable_characters,
)
from ...types import TransformContext
from ...plugins.base import TransformerPlugin, register_transformer


@register_transformer("remove_non_printable")
class RemoveNonPrintableTransformer(ChainableTransformer[str, str]):
    """Drop control characters and zero-width or invisible spaces (tab, LF and CR stay)."""

    def _transform(self, value: str, context: Optional[TransformContext] = None) -> str:
        return remove_non_printable_characters(value)


@register_transformer(
    "clean_text",
    normalize_dashes=True,
    normalize_spaces=True,
    remove_invisible=True,
    remove_controls=True,
)
class CleanTextTransformer(ChainableTransformer[str, str]):
    """Normalize dashes and spaces, then strip characters that do not render.

    Each step can be switched off independently.
    """

    def __init__(
        self,
        name: str,
        normalize_dashes: bool = True,
        normalize_spaces: bool = True,
        remove_invisible: bool = True,
        remove_controls: bool = True,
    ):
        super().__init__(name)
        self.normalize_dashes = normalize_dashes
        self.normalize_spaces = normalize_spaces
        self.remove_invisible = remove_invisible
        self.remove_controls = remove_controls

    def _transform(self, value: str, context: Optional[TransformContext] = None) -> str:
        return clean_text(
            value,
            normalize_dashes=self.normalize_dashes,
            normalize_spaces=self.normalize_spaces,
            remove_invisible=self.remove_invisible,
            remove_controls=self.remove_controls,
        )


@register_transformer("trim_lines")
class TrimLinesTransformer(ChainableTransformer[str, str]):
    """Strip leading and trailing whitespace from every line."""

    def _transform(self, value: str, context: Optional[TransformContext] = None) -> str:
        return remove_leading_trailing_whitespace(value)


@register_transformer("remove_empty_lines", consider_whitespace_empty=True)
class RemoveEmptyLinesTransformer(ChainableTransformer[str, str]):
    """Delete blank lines; whitespace-only lines count as blank unless disabled."""

    def __init__(self, name: str, consider_whitespace_empty: bool = True):
        super().__init__(name)
        self.consider_whitespace_empty = consider_whitespace_empty

    def _transform(self, value: str, context: Optional[TransformContext] = None) -> str:
        return remove_empty_lines(value, self.consider_whitespace_empty)


class SanitizePlugin(TransformerPlugin):
    """Plugin providing text cleanup transformations."""

    def __init__(self):
        super().__init__("sanitize")

    @property
    def transformers(self) -> Dict[str, callable]:
        return self._auto_transformers()

    @property
    def manifest(self):
        from ...manifest import PluginManifest
        return PluginManifest(
            name="sanitize",
            display_name="Sanitize",
            description="Remove invisible and control characters, normalize dashes and spaces, trim lines, drop empty lines.",
            group="Text",
        )
