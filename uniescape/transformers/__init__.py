"""Pipeline entry point that runs registered transformers by name."""

from typing import Any, Dict, List, Optional, Union
from logging import getLogger

from ..exceptions import ValidationError, TransformationError
from ..plugins.base import PluginRegistry
from ..registry import get_shared_registry

logger = getLogger(__name__)

class UniescapeTransformer:
    """
    Main entry point of the library.

    Looks transformers up by name in a plugin registry and applies them in
    sequence, e.g. ``["clean_text", "encode_named_entities"]``.
    """

    def __init__(self, registry: Optional[PluginRegistry] = None):
        """Initialize the transformer.

        Args:
            registry: Optional plugin registry.  If *None* (the default),
                the process-wide shared registry is used.
        """
        self.registry = registry if registry is not None else get_shared_registry()

    def register_plugin(self, plugin):
        """
        Register a custom plugin.

        Args:
            plugin: The plugin to register
        """
        self.registry.register(plugin)

    def unregister_plugin(self, name: str):
        """
        Unregister a plugin.

        Args:
            name: Name of the plugin to unregister
        """
        self.registry.unregister(name)

    def transform(self, value: Any, transforms: List[Union[str, Dict[str, Any]]]) -> Any:
        """
        Transform a value using a sequence of transformations.

        Args:
            value: The value to transform
            transforms: List of transformations to apply. Each item can be:
                - a string (the transformer name)
                - a dict with 'function' key and additional parameters,
                  e.g. ``{"function": "encode_code_points", "separate": True}``

        Returns:
            The transformed value

        Raises:
            ValidationError: If a transformer name is unknown or rejects its input
            TransformationError: If any transformation fails
        """
        context: Dict[str, Any] = {}
        current_value = value

        for transform in transforms:
            if current_value is None:
                break

            if isinstance(transform, dict):
                func_name = transform.get('function')
                params = {k: v for k, v in transform.items() if k != 'function'}
            else:
                func_name = transform
                params = {}

            factory = self.registry.get_transformer(func_name)
            if not factory:
                raise ValidationError(f"Unknown transformer: {func_name}")

            transformer = factory(params)
            logger.debug(f"Pipeline step {func_name} with params {params}")

            result = transformer.transform(current_value, context)
            if result.failed:
                error = result.error
                if isinstance(error, (ValidationError, TransformationError)):
                    raise error
                raise TransformationError(
                    f"Transformation '{func_name}' failed: {str(error)}",
                    current_value,
                    func_name,
                )
            current_value = result.value

        return current_value


__all__ = ['UniescapeTransformer']
