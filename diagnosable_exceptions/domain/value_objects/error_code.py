"""Stable identifier of an error type.

An ErrorCode names a kind of error (``PAYMENT_DECLINED``), not one occurrence
of it. Every code is claimed once per process through ErrorCode.create, which
is the only way to obtain an instance; declaring the same code twice fails
fast instead of silently merging two different errors under one name.

Usage:
    from diagnosable_exceptions.domain.value_objects import ErrorCode

    class Code:
        CURRENCY_MISMATCH = ErrorCode.create("AMOUNT_CURRENCY_MISMATCH")

    str(Code.CURRENCY_MISMATCH)  # 'AMOUNT_CURRENCY_MISMATCH'
"""

from typing import Final

from diagnosable_exceptions.core.registry import NameRegistry

_CREATION_TOKEN: Final = object()


class ErrorCode:
    """Registered, immutable error code.

    Equality and hashing use the underlying string (ordinal comparison).
    An ErrorCode never compares equal to a bare ``str``; use ``.value``.
    """

    __slots__ = ("_value",)

    _registry: NameRegistry["ErrorCode"] = NameRegistry("error code")

    def __init__(self, value: str, *, _token: object = None) -> None:
        if _token is not _CREATION_TOKEN:
            raise TypeError("ErrorCode instances are obtained through ErrorCode.create().")
        object.__setattr__(self, "_value", value)

    @classmethod
    def create(cls, code: str) -> "ErrorCode":
        """Register ``code`` and return its ErrorCode.

        Args:
            code: Code string, e.g. ``"TEMPERATURE_BELOW_ABSOLUTE_ZERO"``.

        Returns:
            The new ErrorCode.

        Raises:
            ValueError: If ``code`` is None, empty or whitespace.
            AlreadyRegisteredError: If ``code`` was already created.
        """
        if code is None or not isinstance(code, str) or not code.strip():
            raise ValueError("Error code cannot be None, empty or whitespace.")
        return cls._registry.register(code, lambda: cls(code, _token=_CREATION_TOKEN))

    @classmethod
    def reset_for_tests(cls) -> None:
        """Forget every registered code. Tests only."""
        cls._registry.reset_for_tests()

    @property
    def value(self) -> str:
        """The code string."""
        return self._value

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCode is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCode):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"ErrorCode({self._value!r})"
