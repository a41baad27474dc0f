from typing import Any, Dict, Optional, Generic, TypeVar
from dataclasses import dataclass

# Type variables for generic transformers
T = TypeVar('T')  # Input type
U = TypeVar('U')  # Output type

TransformContext = Dict[str, Any]

class TransformResult(Generic[T]):
    """
    Description:
        Container for a transformation outcome: either a value or an error.

    Type Parameters:
        T: The type of the transformed value

    Methods:
        __init__(value: Optional[T] = None, error: Optional[Exception] = None):
            Initialize a new TransformResult with an optional value or error.

        failed: bool
            Property indicating if the transformation failed.
    """

    def __init__(self, value: Optional[T] = None, error: Optional[Exception] = None):
        self.value = value
        self.error = error
        self.success = error is None

    @property
    def failed(self) -> bool:
        return not self.success

    def __str__(self) -> str:
        if self.success:
            return f"TransformResult(value={self.value!r})"
        return f"TransformResult(error={self.error})"

    __repr__ = __str__

@dataclass
class TransformOptions:
    """
    Description:
        Base class for transformer options.
    """
    pass

@dataclass
class CodecOptions(TransformOptions):
    """
    Description:
        Options shared by the code point encoders.

    Attributes:
        double_encode: Escape tokens that are already present in the input.
        separate: Put a space between tokens (``U+`` and ``0x`` notations).
    """
    double_encode: bool = False
    separate: bool = False
