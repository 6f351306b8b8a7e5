"""Named, typed slot for contextual diagnostic data.

A ContextKey defines one piece of information that can be attached to an
error occurrence (``UserId``, ``CorrelationId``, ``TransactionDate``). Keys are
declared once, usually as module-level constants, and form the shared
diagnostic vocabulary of a system.

Identity is the name alone: two keys cannot share a name even when their
value types differ. The value type is carried for validation (the context
builder rejects mismatching values) and for documentation.

Usage:
    from datetime import date
    from diagnosable_exceptions.domain.value_objects import ContextKey

    TRANSACTION_DATE = ContextKey.create(
        "TransactionDate", date, "Booking date of the rejected transaction."
    )
"""

from typing import Any, Final, Generic, TypeVar, get_origin

from diagnosable_exceptions.core.registry import NameRegistry

T = TypeVar("T")

_CREATION_TOKEN: Final = object()


class ContextKey(Generic[T]):
    """Registered context key bound to a value type.

    Attributes:
        name: Unique, stable name of the key.
        value_type: Expected runtime type of values stored under this key.
        description: Optional human-readable meaning of the key.
    """

    __slots__ = ("_name", "_value_type", "_description")

    _registry: NameRegistry["ContextKey[Any]"] = NameRegistry("context key")

    def __init__(
        self,
        name: str,
        value_type: type[T],
        description: str | None,
        *,
        _token: object = None,
    ) -> None:
        if _token is not _CREATION_TOKEN:
            raise TypeError("ContextKey instances are obtained through ContextKey.create().")
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_value_type", value_type)
        object.__setattr__(self, "_description", description)

    @classmethod
    def create(
        cls, name: str, value_type: type[T], description: str | None = None
    ) -> "ContextKey[T]":
        """Register a new key.

        Args:
            name: Unique key name.
            value_type: Type of the values stored under the key. Generic
                aliases such as ``list[str]`` are accepted.
            description: Optional meaning of the key, used in documentation.

        Returns:
            The registered key.

        Raises:
            ValueError: If ``name`` is None, empty or whitespace.
            TypeError: If ``value_type`` is not a type.
            AlreadyRegisteredError: If a key with this name already exists,
                whatever its value type.
        """
        if name is None or not isinstance(name, str) or not name.strip():
            raise ValueError("Context key name cannot be None, empty or whitespace.")
        if not isinstance(get_origin(value_type) or value_type, type):
            raise TypeError(f"value_type must be a type, got {value_type!r}")
        return cls._registry.register(
            name, lambda: cls(name, value_type, description, _token=_CREATION_TOKEN)
        )

    @classmethod
    def registered_keys(cls) -> tuple["ContextKey[Any]", ...]:
        """Snapshot of every registered key, in registration order."""
        return cls._registry.registered()

    @classmethod
    def reset_for_tests(cls) -> None:
        """Forget every registered key. Tests only."""
        cls._registry.reset_for_tests()

    @property
    def name(self) -> str:
        return self._name

    @property
    def value_type(self) -> type[T]:
        return self._value_type

    @property
    def description(self) -> str | None:
        return self._description

    def accepts(self, value: object) -> bool:
        """Whether ``value`` is a non-None instance of the key's value type."""
        if value is None:
            return False
        return isinstance(value, get_origin(self._value_type) or self._value_type)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ContextKey is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContextKey):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"ContextKey({self._name!r}, {getattr(self._value_type, '__name__', self._value_type)})"
