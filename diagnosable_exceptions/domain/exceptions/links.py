"""Documentation links between exception factories and their documentation.

Two links tie the code that raises an error to the code that describes it:

- ``@documented_by("method_name")`` on a factory method names the method of
  the same class that returns the factory's ErrorDocumentation.
- ``@provides_errors_for(OwnerType)`` on an exception class names the type the
  errors are about (the "error source", e.g. ``Temperature`` for
  ``InvalidTemperatureException``).

Both are recorded in an explicit link table when the class is defined, so
discovery reads a table instead of scanning arbitrary attributes.

Usage:
    @provides_errors_for(Temperature)
    class InvalidTemperatureException(DomainException):
        @staticmethod
        @documented_by("below_absolute_zero_documentation")
        def below_absolute_zero(value, unit):
            ...

        @staticmethod
        def below_absolute_zero_documentation():
            return describe_error("Temperature below absolute zero")...
"""

from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock
from typing import Any, Final, TypeVar

DOCUMENTED_BY_ATTRIBUTE: Final = "__documented_by__"

F = TypeVar("F")
C = TypeVar("C", bound=type)


def _unwrap(member: Any) -> Any:
    """Underlying function of a staticmethod/classmethod, or the member itself."""
    if isinstance(member, (staticmethod, classmethod)):
        return member.__func__
    return member


def documented_by(documentation_method_name: str) -> Callable[[F], F]:
    """Link a factory method to the method that documents its error.

    Works on plain functions, staticmethods and classmethods, whichever
    decorator is applied first.

    Args:
        documentation_method_name: Name of a zero-argument method on the same
            exception class returning an ErrorDocumentation.

    Returns:
        Decorator returning the factory unchanged, only marked.

    Raises:
        ValueError: If the name is None, empty or whitespace.
    """
    if (
        documentation_method_name is None
        or not isinstance(documentation_method_name, str)
        or not documentation_method_name.strip()
    ):
        raise ValueError("Documentation method name cannot be None, empty or whitespace.")

    def decorator(factory: F) -> F:
        setattr(_unwrap(factory), DOCUMENTED_BY_ATTRIBUTE, documentation_method_name.strip())
        return factory

    return decorator


def provides_errors_for(error_source: type) -> Callable[[C], C]:
    """Declare which type the errors of an exception class are about.

    Args:
        error_source: The type whose operations raise this exception.

    Raises:
        TypeError: If ``error_source`` is not a class.
    """
    if not isinstance(error_source, type):
        raise TypeError(f"error_source must be a class, got {error_source!r}")

    def decorator(exception_type: C) -> C:
        DOCUMENTATION_LINKS.set_error_source(exception_type, error_source)
        return exception_type

    return decorator


@dataclass(frozen=True, slots=True)
class DocumentedFactory:
    """One factory method linked to its documentation method.

    Attributes:
        exception_type: Class declaring the factory.
        factory_name: Attribute name of the factory on that class.
        documentation_method_name: Attribute name of the documentation method.
    """

    exception_type: type
    factory_name: str
    documentation_method_name: str


class DocumentationLinkTable:
    """Lock-guarded record of documented factories and error sources.

    Entries are kept in class-definition order.
    """

    def __init__(self) -> None:
        self._factories: list[DocumentedFactory] = []
        self._error_sources: dict[type, type] = {}
        self._lock = Lock()

    def record_factories(self, exception_type: type) -> tuple[DocumentedFactory, ...]:
        """Record every documented factory declared directly on ``exception_type``.

        Inherited factories are not recorded again: they belong to the class
        that declares them.

        Returns:
            The entries recorded for this class.
        """
        found = tuple(
            DocumentedFactory(
                exception_type=exception_type,
                factory_name=name,
                documentation_method_name=getattr(_unwrap(member), DOCUMENTED_BY_ATTRIBUTE),
            )
            for name, member in vars(exception_type).items()
            if isinstance(getattr(_unwrap(member), DOCUMENTED_BY_ATTRIBUTE, None), str)
        )
        if found:
            with self._lock:
                self._factories.extend(found)
        return found

    def set_error_source(self, exception_type: type, error_source: type) -> None:
        with self._lock:
            self._error_sources[exception_type] = error_source

    def error_source_for(self, exception_type: type) -> type | None:
        """Error source declared on ``exception_type`` or its nearest base."""
        with self._lock:
            for klass in exception_type.__mro__:
                if klass in self._error_sources:
                    return self._error_sources[klass]
        return None

    def factories(self) -> tuple[DocumentedFactory, ...]:
        """Snapshot of every documented factory."""
        with self._lock:
            return tuple(self._factories)

    def factories_for(self, exception_type: type) -> tuple[DocumentedFactory, ...]:
        with self._lock:
            return tuple(f for f in self._factories if f.exception_type is exception_type)


DOCUMENTATION_LINKS: Final = DocumentationLinkTable()
