"""Immutable snapshot of diagnostic data attached to one error occurrence.

An ErrorContext maps ContextKey to value. It is built once (usually through
ErrorContextBuilder) and never changes afterwards: the constructor copies the
mapping it receives, so mutating the source later has no visible effect.

A key stored with a None value is present (``key in context`` is True) but
``try_get`` reports it as not found, since there is no typed value to return.

Usage:
    from diagnosable_exceptions.domain.context import ErrorContextBuilder

    context = ErrorContextBuilder().add(USER_ID, "u-1").build()
    found, user_id = context.try_get(USER_ID)
    context.to_name_dict()  # {'UserId': 'u-1'}
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, ClassVar, TypeVar

from diagnosable_exceptions.domain.value_objects.context_key import ContextKey

T = TypeVar("T")


class ErrorContext:
    """Read-only mapping of context keys to raw values.

    Iteration yields keys in insertion order.
    """

    __slots__ = ("_values",)

    EMPTY: ClassVar["ErrorContext"]

    def __init__(self, values: Mapping[ContextKey[Any], Any] | None = None) -> None:
        """Snapshot ``values``.

        Raises:
            TypeError: If a key is not a ContextKey.
        """
        copied = dict(values or {})
        for key in copied:
            if not isinstance(key, ContextKey):
                raise TypeError(f"key must be a ContextKey, got {type(key).__name__}")
        self._values: Mapping[ContextKey[Any], Any] = MappingProxyType(copied)

    @property
    def values(self) -> Mapping[ContextKey[Any], Any]:
        """Read-only view of the entries."""
        return self._values

    @property
    def is_empty(self) -> bool:
        return not self._values

    def try_get(self, key: ContextKey[T]) -> tuple[bool, T | None]:
        """Look up a typed, non-None value.

        Args:
            key: Key to look up.

        Returns:
            ``(True, value)`` when the key is present, its value is not None
            and is an instance of the key's value type; ``(False, None)``
            otherwise. Never raises for a missing or mistyped entry.
        """
        value = self._values.get(key)
        if value is None or not key.accepts(value):
            return False, None
        return True, value

    def to_name_dict(self) -> dict[str, Any]:
        """New dict from key name to raw value, built on every call."""
        return {key.name: value for key, value in self._values.items()}

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[ContextKey[Any]]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorContext):
            return NotImplemented
        return dict(self._values) == dict(other._values)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ErrorContext({self.to_name_dict()!r})"


ErrorContext.EMPTY = ErrorContext()
