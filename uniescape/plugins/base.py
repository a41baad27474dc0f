"""Plugin base class, the ``register_transformer`` decorator and the registry."""

from abc import ABC, abstractmethod
import inspect
import sys
from typing import TYPE_CHECKING, Dict, Optional
from logging import getLogger

if TYPE_CHECKING:
    from ..manifest import PluginManifest

logger = getLogger(__name__)


def register_transformer(name: str, **default_params):
    """Mark a transformer class for discovery by ``TransformerPlugin._auto_transformers``.

    Usage::

        @register_transformer("encode_code_points", separate=False)
        class EncodeCodePointsTransformer(EncodeTransformer):
            ...

    ``name`` is stored as ``_uniescape_name`` and the keyword defaults as
    ``_uniescape_defaults``.
    """
    def decorator(cls):
        cls._uniescape_name = name
        cls._uniescape_defaults = default_params
        return cls
    return decorator


class TransformerPlugin(ABC):
    """
    A named group of transformer factories.

    Subclasses return ``{transformer_name: factory}`` from ``transformers``;
    a factory takes a params dict and returns a configured transformer.
    """

    def __init__(self, name: str):
        self.name = name

    @property
    @abstractmethod
    def transformers(self) -> Dict[str, callable]:
        """Map of transformer name to ``factory(params)``."""
        return {}

    def initialize(self) -> None:
        """Hook run after the plugin is registered."""
        logger.info(f"Initializing plugin: {self.name}")

    def cleanup(self) -> None:
        """Hook run after the plugin is unregistered."""
        logger.info(f"Cleaning up plugin: {self.name}")

    @property
    def manifest(self) -> "PluginManifest":
        """Descriptive metadata; defaults to a manifest carrying only ``name``."""
        from ..manifest import PluginManifest

        return PluginManifest(name=self.name)

    def _auto_transformers(self) -> Dict[str, callable]:
        """Collect factories for the ``@register_transformer`` classes in this plugin's module.

        Each factory passes a params key through to ``__init__`` when the
        constructor accepts it, falling back to the decorator defaults.
        Unknown keys are ignored.
        """
        module = sys.modules.get(self.__class__.__module__)
        if module is None:
            return {}

        factories: Dict[str, callable] = {}
        for attr in dir(module):
            cls = getattr(module, attr, None)
            if not (isinstance(cls, type) and hasattr(cls, '_uniescape_name')):
                continue

            accepted = [
                p for p in inspect.signature(cls.__init__).parameters
                if p not in ('self', 'name')
            ]
            factories[cls._uniescape_name] = _bind_factory(
                cls, cls._uniescape_name, cls._uniescape_defaults, accepted
            )

        return factories


def _bind_factory(cls, name: str, defaults: dict, accepted):
    def factory(params):
        kwargs = {}
        for key in accepted:
            if key in params:
                kwargs[key] = params[key]
            elif key in defaults:
                kwargs[key] = defaults[key]
        return cls(name, **kwargs)
    return factory


class PluginRegistry:
    """
    Flat registry of plugins and the transformer factories they provide.

    Plugin names are unique.  Transformer names are shared across plugins:
    the most recently registered plugin provides a name, and unregistering
    a plugin only drops the factories it still owns.
    """

    def __init__(self):
        self._plugins: Dict[str, TransformerPlugin] = {}
        self._transformers: Dict[str, callable] = {}
        # transformer name -> name of the plugin whose factory is active
        self._owners: Dict[str, str] = {}

    def register(self, plugin: TransformerPlugin) -> None:
        """
        Add a plugin and its transformers.

        Raises:
            ValueError: If a plugin with the same name is already registered.
        """
        if plugin.name in self._plugins:
            raise ValueError(f"Plugin already registered: {plugin.name}")

        logger.info(f"Registering plugin: {plugin.name}")
        factories = plugin.transformers
        for name, factory in factories.items():
            previous = self._owners.get(name)
            if previous is not None:
                logger.warning(
                    "Transformer '%s' from plugin '%s' replaced by plugin '%s'",
                    name, previous, plugin.name,
                )
            self._transformers[name] = factory
            self._owners[name] = plugin.name

        self._plugins[plugin.name] = plugin
        plugin.initialize()

    def unregister(self, name: str) -> None:
        """Remove a plugin and the transformers it owns; unknown names are ignored."""
        plugin = self._plugins.pop(name, None)
        if plugin is None:
            return

        logger.info(f"Unregistering plugin: {name}")
        owned = [key for key, owner in self._owners.items() if owner == name]
        for key in owned:
            del self._owners[key]
            del self._transformers[key]
        plugin.cleanup()

    def get_transformer(self, name: str) -> Optional[callable]:
        """Return the factory registered under *name*, or None."""
        return self._transformers.get(name)

    def get_plugin(self, name: str) -> Optional[TransformerPlugin]:
        return self._plugins.get(name)

    def get_owner(self, transformer_name: str) -> Optional[str]:
        """Name of the plugin that currently provides *transformer_name*."""
        return self._owners.get(transformer_name)

    @property
    def plugins(self) -> Dict[str, TransformerPlugin]:
        """Get all registered plugins."""
        return self._plugins.copy()

    @property
    def transformers(self) -> Dict[str, callable]:
        """Get all registered transformers."""
        return self._transformers.copy()
