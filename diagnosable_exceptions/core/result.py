"""Result types for railway-oriented programming.

This module implements the Result pattern to handle operations that can fail
without using exceptions for control flow. Example factories and documentation
methods are invoked through this seam so that failures are translated
explicitly into documentation errors instead of leaking arbitrary exceptions.

Usage:
    def invoke(factory: Callable[[], T]) -> Result[T, str]:
        try:
            return Success(value=factory())
        except Exception as exc:
            return Failure(error=str(exc))

    result = invoke(lambda: 42)
    match result:
        case Success(value=value):
            print(f"Result: {value}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
