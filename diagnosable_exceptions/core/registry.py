"""Process-wide name registry.

A NameRegistry is the single seam through which identifiers that must be
unique for the lifetime of the process (error codes, context key names) are
claimed. Check-and-insert happens under one lock, so concurrent attempts to
claim the same name yield exactly one winner; everyone else gets
AlreadyRegisteredError.

The lock only ever guards dictionary operations and the construction of a
plain value object. No logging, I/O or user callback runs while it is held.

Usage:
    _CODES: NameRegistry[ErrorCode] = NameRegistry("error code")

    code = _CODES.register("PAYMENT_DECLINED", lambda: ErrorCode(...))
    _CODES.reset_for_tests()  # tests only
"""

from collections.abc import Callable
from threading import Lock
from typing import Generic, TypeVar

from diagnosable_exceptions.core.errors import AlreadyRegisteredError

T = TypeVar("T")


class NameRegistry(Generic[T]):
    """Thread-safe registry of unique names.

    Names are compared ordinally (plain string equality, case-sensitive).

    Args:
        kind: Human-readable label used in error messages ("error code").
    """

    def __init__(self, kind: str) -> None:
        """Initialize an empty registry.

        Args:
            kind: Human-readable label used in error messages.
        """
        self._kind = kind
        self._entries: dict[str, T] = {}
        self._lock = Lock()

    @property
    def kind(self) -> str:
        """Label of the identifiers held by this registry."""
        return self._kind

    def register(self, name: str, factory: Callable[[], T]) -> T:
        """Claim ``name`` and store the value built by ``factory``.

        Args:
            name: Name to claim.
            factory: Zero-argument constructor of the registered value. It must
                not block; it runs while the registry lock is held.

        Returns:
            The newly registered value.

        Raises:
            AlreadyRegisteredError: If ``name`` was already claimed.
        """
        with self._lock:
            if name in self._entries:
                raise AlreadyRegisteredError(kind=self._kind, name=name)
            value = factory()
            self._entries[name] = value
            return value

    def registered(self) -> tuple[T, ...]:
        """Snapshot of every registered value, in registration order."""
        with self._lock:
            return tuple(self._entries.values())

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def reset_for_tests(self) -> None:
        """Forget every registered name.

        Test-only: production code never calls this. Values handed out before
        the reset stay valid; only the uniqueness bookkeeping is cleared.
        """
        with self._lock:
            self._entries.clear()
