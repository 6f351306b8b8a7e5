"""Technical and environmental failures.

InfrastructureException covers failures outside the domain's control: I/O,
network, malformed external input. Whether a retry may help is carried as a
tri-state flag:

- ``True``: the failure is temporary, retrying may succeed.
- ``False``: retrying with the same input will fail again.
- ``None``: unknown.

Adapter exceptions further say on which side of the application boundary the
failure happened (see FlowDirection).
"""

from collections.abc import Iterable

from diagnosable_exceptions.domain.enums import FlowDirection
from diagnosable_exceptions.domain.exceptions.diagnosable_exception import (
    ContextConfigurator,
    DiagnosableException,
)
from diagnosable_exceptions.domain.value_objects.error_code import ErrorCode


class InfrastructureException(DiagnosableException, abstract=True):
    """Abstract base of technical failures.

    Args:
        error_code: Registered error code.
        message: Detailed message.
        is_transient: Tri-state retry hint, None when unknown.
        short_message: Optional short message.
        causes: Contributing exception(s).
        configure_context: Callable filling the error context.
    """

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        *,
        is_transient: bool | None = None,
        short_message: str | None = None,
        causes: BaseException | Iterable[BaseException] | None = None,
        configure_context: ContextConfigurator | None = None,
    ) -> None:
        super().__init__(
            error_code,
            message,
            short_message=short_message,
            causes=causes,
            configure_context=configure_context,
        )
        self._is_transient = is_transient

    @property
    def is_transient(self) -> bool | None:
        return self._is_transient


class PrimaryAdapterException(InfrastructureException, abstract=True):
    """Failure at an inbound adapter (request handler, file reader, consumer)."""

    flow_direction = FlowDirection.INBOUND


class SecondaryAdapterException(InfrastructureException, abstract=True):
    """Failure at an outbound adapter (database, HTTP client, message publisher)."""

    flow_direction = FlowDirection.OUTBOUND
