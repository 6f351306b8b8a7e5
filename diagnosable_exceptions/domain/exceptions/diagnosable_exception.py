"""Base type of every documented exception.

A DiagnosableException carries what is needed to identify, trace and
document one failure:

- ``error_code``: stable ErrorCode shared by every occurrence of the error.
- ``instance_id``: time-ordered UUIDv7 unique to this occurrence.
- ``occurred_at``: UTC capture time.
- ``short_message``: optional UI-oriented message.
- ``context``: ErrorContext, empty when nothing was attached.
- ``causes``: exceptions that contributed to this one, in order.

Concrete exceptions expose factory methods (one per error) and mark them with
``@documented_by``; defining the class records those links.

Abstract intermediate bases are declared with ``abstract=True`` and cannot be
instantiated directly.

Usage:
    class InvalidAmountOperationException(DomainException):
        @staticmethod
        @documented_by("currency_mismatch_documentation")
        def currency_mismatch(left, right):
            return InvalidAmountOperationException(
                Code.CURRENCY_MISMATCH,
                f"Cannot add {left} and {right}: currencies differ.",
                configure_context=lambda ctx: ctx.add(LEFT_CURRENCY, left.currency),
            )
"""

from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from uuid_extensions import uuid7

from diagnosable_exceptions.domain.context import ErrorContext, ErrorContextBuilder
from diagnosable_exceptions.domain.exceptions.links import DOCUMENTATION_LINKS
from diagnosable_exceptions.domain.value_objects.error_code import ErrorCode

ContextConfigurator = Callable[[ErrorContextBuilder], Any]


def _as_causes(causes: BaseException | Iterable[BaseException] | None) -> tuple[BaseException, ...]:
    if causes is None:
        return ()
    if isinstance(causes, BaseException):
        return (causes,)
    collected = tuple(causes)
    for index, cause in enumerate(collected):
        if not isinstance(cause, BaseException):
            raise TypeError(f"Cause at index {index} is not an exception: {cause!r}")
    return collected


class DiagnosableException(Exception):
    """Abstract base of diagnosable exceptions.

    Args:
        error_code: Registered error code.
        message: Detailed, developer-oriented message. Must not be blank.
        short_message: Optional short, UI-oriented message.
        causes: One exception or an iterable of exceptions that caused this
            one. A single cause is also chained as ``__cause__``.
        configure_context: Callable receiving an ErrorContextBuilder to fill.

    Raises:
        TypeError: If the class is abstract, ``error_code`` is not an
            ErrorCode, ``short_message`` is not a str, or a cause is not an
            exception.
        ValueError: If ``message`` is None, empty or whitespace.
    """

    _abstract = True

    def __init_subclass__(cls, *, abstract: bool = False, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._abstract = abstract
        DOCUMENTATION_LINKS.record_factories(cls)

    @classmethod
    def is_abstract(cls) -> bool:
        """Whether the class was declared with ``abstract=True``."""
        return cls._abstract

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        *,
        short_message: str | None = None,
        causes: BaseException | Iterable[BaseException] | None = None,
        configure_context: ContextConfigurator | None = None,
    ) -> None:
        if type(self).is_abstract():
            raise TypeError(f"Cannot instantiate abstract exception {type(self).__name__}")
        if not isinstance(error_code, ErrorCode):
            raise TypeError(f"error_code must be an ErrorCode, got {type(error_code).__name__}")
        if message is None or not isinstance(message, str) or not message.strip():
            raise ValueError("Exception message cannot be None, empty or whitespace.")
        if short_message is not None and not isinstance(short_message, str):
            raise TypeError(
                f"short_message must be a str or None, got {type(short_message).__name__}"
            )

        super().__init__(message)
        self.instance_id: UUID = uuid7()
        self.error_code = error_code
        self.occurred_at = datetime.now(UTC)
        self.message = message
        self.short_message = short_message
        self.causes = _as_causes(causes)
        if len(self.causes) == 1:
            self.__cause__ = self.causes[0]

        if configure_context is None:
            self.context = ErrorContext.EMPTY
        else:
            builder = ErrorContextBuilder()
            configure_context(builder)
            self.context = builder.build()

    @property
    def has_causes(self) -> bool:
        return bool(self.causes)

    @property
    def is_transient(self) -> bool | None:
        """Whether retrying may help. None when unknown."""
        return None

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.error_code.value!r}, {self.message!r})"
