"""Process-wide PluginRegistry.

Components that need a registry call :func:`get_shared_registry` instead of
creating their own :class:`PluginRegistry`.  The shared registry is filled
with the built-in plugins on first access.
"""

from typing import Optional
from logging import getLogger

from .plugins.base import PluginRegistry

logger = getLogger(__name__)

_shared_registry: Optional[PluginRegistry] = None


def get_shared_registry() -> PluginRegistry:
    """Return the shared :class:`PluginRegistry`, creating it on first call."""
    global _shared_registry
    if _shared_registry is None:
        _shared_registry = PluginRegistry()
        _load_builtin_plugins(_shared_registry)
    return _shared_registry


def _load_builtin_plugins(registry: PluginRegistry) -> None:
    """Load every built-in plugin into *registry*."""
    from .plugins import BUILTIN_PLUGINS

    for name in BUILTIN_PLUGINS.keys():
        try:
            plugin_class = BUILTIN_PLUGINS[name]
        except ImportError as e:
            logger.debug("Skipped built-in plugin %s: %s", name, e)
            continue
        registry.register(plugin_class())


def reset_shared_registry() -> None:
    """Discard the current shared registry (mainly useful for tests)."""
    global _shared_registry
    _shared_registry = None
