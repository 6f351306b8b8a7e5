"""Mutable accumulator for ErrorContext.

Exceptions receive a fresh builder in their ``configure_context`` callback,
fill it and the exception freezes it into an ErrorContext. The builder is not
thread-safe; one call chain owns it.
"""

from typing import Any, TypeVar

from diagnosable_exceptions.domain.context.error_context import ErrorContext
from diagnosable_exceptions.domain.value_objects.context_key import ContextKey

T = TypeVar("T")


class ErrorContextBuilder:
    """Collect context entries, last write wins per key."""

    def __init__(self) -> None:
        self._values: dict[ContextKey[Any], Any] = {}

    def add(self, key: ContextKey[T], value: T | None) -> "ErrorContextBuilder":
        """Store ``value`` under ``key``, replacing any previous value.

        Args:
            key: Registered context key.
            value: Value of the key's type, or None.

        Returns:
            This builder, for chaining.

        Raises:
            TypeError: If ``key`` is not a ContextKey, or ``value`` is neither
                None nor an instance of the key's value type.
        """
        if not isinstance(key, ContextKey):
            raise TypeError(f"key must be a ContextKey, got {type(key).__name__}")
        if value is not None and not key.accepts(value):
            raise TypeError(
                f"Context key '{key.name}' expects {getattr(key.value_type, '__name__', key.value_type)}, "
                f"got {type(value).__name__}"
            )
        self._values[key] = value
        return self

    def build(self) -> ErrorContext:
        """Freeze the current entries. Later ``add`` calls do not affect the result."""
        if not self._values:
            return ErrorContext.EMPTY
        return ErrorContext(self._values)
