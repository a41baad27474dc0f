"""Plugin system for uniescape transformers."""

import importlib
from typing import Iterator, Tuple, Type

from .base import TransformerPlugin, PluginRegistry


# ---------------------------------------------------------------------------
# Lazy built-in plugin loading
# ---------------------------------------------------------------------------

_BUILTIN_PLUGIN_PATHS = {
    'codepoint': ('uniescape.plugins.codepoint', 'CodepointPlugin'),
    'sanitize': ('uniescape.plugins.sanitize', 'SanitizePlugin'),
    'encoding': ('uniescape.plugins.encoding', 'EncodingPlugin'),
}


class _LazyBuiltinPlugins:
    """Dict-like object that imports plugin classes on first access.

    ``import uniescape`` stays cheap; the entity table and the plugin
    modules are only loaded when a plugin is actually requested.
    """

    def __init__(self):
        self._loaded: dict = {}

    def _load(self, key: str) -> Type[TransformerPlugin]:
        if key not in self._loaded:
            module_path, class_name = _BUILTIN_PLUGIN_PATHS[key]
            module = importlib.import_module(module_path)
            self._loaded[key] = getattr(module, class_name)
        return self._loaded[key]

    def __getitem__(self, key: str) -> Type[TransformerPlugin]:
        if key not in _BUILTIN_PLUGIN_PATHS:
            raise KeyError(key)
        return self._load(key)

    def __contains__(self, key: object) -> bool:
        return key in _BUILTIN_PLUGIN_PATHS

    def __iter__(self) -> Iterator[str]:
        return iter(_BUILTIN_PLUGIN_PATHS)

    def __len__(self) -> int:
        return len(_BUILTIN_PLUGIN_PATHS)

    def keys(self):
        return _BUILTIN_PLUGIN_PATHS.keys()

    def items(self) -> Iterator[Tuple[str, Type[TransformerPlugin]]]:
        for key in _BUILTIN_PLUGIN_PATHS:
            yield key, self[key]

    def get(self, key: str, default=None):
        if key in _BUILTIN_PLUGIN_PATHS:
            return self._load(key)
        return default


BUILTIN_PLUGINS = _LazyBuiltinPlugins()


__all__ = [
    'TransformerPlugin',
    'PluginRegistry',
    'BUILTIN_PLUGINS',
]
