"""Transformer classes every encode, decode and cleanup step is built on."""

from abc import ABC, abstractmethod
import typing
from typing import Any, Generic, List, Optional
from logging import getLogger

from .types import TransformContext, TransformOptions, TransformResult, T, U
from .exceptions import TransformerError, ValidationError, TransformationError

logger = getLogger(__name__)


class BaseTransformer(Generic[T, U], ABC):
    """
    One named text operation, such as ``encode_hex_entities``.

    Subclasses implement ``_transform``.  ``transform`` checks the input
    type, runs the step and reports the outcome as a :class:`TransformResult`;
    it does not raise.  The accepted input type is read from the generic
    parameters, so ``ChainableTransformer[str, str]`` only takes strings
    unless ``validate`` is overridden.
    """

    def __init__(self, name: str = "", options: Optional[TransformOptions] = None):
        self.name = name or self.__class__.__name__
        self.options = options or TransformOptions()
        self._input_type = self._resolve_input_type()
        self._validate_options()

    def _resolve_input_type(self):
        for base in getattr(self.__class__, '__orig_bases__', []):
            args = getattr(base, '__args__', None)
            if args:
                if args[0] is typing.Any:
                    return None
                if isinstance(args[0], type):
                    return args[0]
        return None

    def _validate_options(self) -> None:
        """Hook for subclasses that need to check ``self.options``."""

    def validate(self, value: T) -> bool:
        if self._input_type is None:
            return True
        return isinstance(value, self._input_type)

    @abstractmethod
    def _transform(self, value: T, context: Optional[TransformContext] = None) -> U:
        raise NotImplementedError

    def transform(self, value: T, context: Optional[TransformContext] = None, **kwargs) -> TransformResult[U]:
        """Run the step; failures come back in ``TransformResult.error``."""
        try:
            if not self.validate(value):
                raise ValidationError(f"Invalid input for transformer {self.name}", value)

            result = self._transform(value, context)
            logger.debug("%s: %r -> %r", self.name, value, result)
            return TransformResult(value=result)

        except TransformerError as e:
            logger.error(f"{self.name} rejected its input: {e}")
            return TransformResult(error=e)
        except Exception as e:
            logger.exception(f"Unexpected error in transformer {self.name}")
            error = TransformationError(
                f"Unexpected error in transformer {self.name}: {e}",
                value,
                self.name
            )
            return TransformResult(error=error)

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"

    def __repr__(self) -> str:
        return self.__str__()


class ChainableTransformer(BaseTransformer[T, U]):
    """
    A transformer that hands its output to a follow-up step.

    ``EncodeCodePointsTransformer("enc").chain(DecodeCodePointsTransformer("dec"))``
    runs both; the first failure stops the chain.
    """

    def __init__(
        self,
        name: str = "",
        next_transformer: Optional[BaseTransformer] = None,
        options: Optional[TransformOptions] = None
    ):
        super().__init__(name, options)
        self.next_transformer = next_transformer

    def chain(self, next_transformer: BaseTransformer) -> 'ChainableTransformer':
        self.next_transformer = next_transformer
        return self

    def transform(self, value: T, context: Optional[TransformContext] = None, **kwargs) -> TransformResult:
        result = super().transform(value, context, **kwargs)

        if result.failed or not self.next_transformer:
            return result

        return self.next_transformer.transform(result.value, context, **kwargs)


class CompositeTransformer(BaseTransformer[T, U]):
    """Several transformers run in order as one step, sharing a context dict."""

    def __init__(
        self,
        name: str = "",
        transformers: Optional[List[BaseTransformer]] = None,
        options: Optional[TransformOptions] = None
    ):
        super().__init__(name, options)
        self.transformers = transformers or []

    def validate(self, value: Any) -> bool:
        # Only the first step sees the raw input.
        if not self.transformers:
            return True
        return self.transformers[0].validate(value)

    def _transform(self, value: Any, context: Optional[TransformContext] = None) -> Any:
        current_value = value
        current_context = context if context is not None else {}

        for transformer in self.transformers:
            result = transformer.transform(current_value, current_context)
            if result.failed:
                raise result.error
            current_value = result.value

        return current_value
