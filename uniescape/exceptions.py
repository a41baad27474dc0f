"""Exceptions raised by the transformer layer.

The codec functions themselves never raise for malformed text; these errors
come from input-type checks, failing pipeline steps and misconfiguration.
"""

from typing import Any, Optional


class TransformerError(Exception):
    """Base class for every transformer failure.

    Args:
        message: Human readable description.
        value: The input that was being transformed, if any.
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.message = message
        self.value = value

    def __str__(self) -> str:
        return self.message


class ValidationError(TransformerError):
    """The input is not something the transformer accepts (usually a type mismatch)."""


class TransformationError(TransformerError):
    """An unexpected failure while a transformer was running."""

    def __init__(self, message: str, value: Any = None, transformer_name: Optional[str] = None):
        super().__init__(message, value)
        self.transformer_name = transformer_name


__all__ = [
    "TransformerError",
    "ValidationError",
    "TransformationError",
]
