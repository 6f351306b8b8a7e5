"""Documentation records produced by describing one error.

All records are frozen, slotted dataclasses holding tuples, so two
documentations of the same error definition compare equal field by field.

Records:
    ErrorDiagnostic: A plausible cause and where to look for it.
    ErrorDescription: One example occurrence (detailed and short message).
    ContextEntryDocumentation: One context key observed across the examples.
    ErrorDocumentation: The complete record of one error type.
"""

from dataclasses import dataclass
from typing import Any

from diagnosable_exceptions.domain.enums import ErrorCauseType


def _required_text(value: str | None, field_name: str) -> str:
    if value is None:
        raise ValueError(f"{field_name} cannot be None.")
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field_name} cannot be empty or whitespace.")
    return value.strip()


@dataclass(frozen=True, slots=True)
class ErrorDiagnostic:
    """One documented plausible cause of an error.

    A diagnostic orients an investigation. The analysis lead says where to
    look, never what to fix.

    Attributes:
        cause: What may have happened. Trimmed, never blank.
        type: Most likely origin of the cause.
        analysis_lead: Where to start investigating. Trimmed, never blank.

    Raises:
        ValueError: If ``cause`` or ``analysis_lead`` is None or blank.
        TypeError: If ``type`` is not an ErrorCauseType.
    """

    cause: str
    type: ErrorCauseType
    analysis_lead: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "cause", _required_text(self.cause, "cause"))
        if not isinstance(self.type, ErrorCauseType):
            raise TypeError(f"type must be an ErrorCauseType, got {self.type!r}")
        object.__setattr__(
            self, "analysis_lead", _required_text(self.analysis_lead, "analysis_lead")
        )


@dataclass(frozen=True, slots=True)
class ErrorDescription:
    """One example occurrence of an error.

    Attributes:
        detailed_message: Developer-oriented message. Trimmed, never blank.
        short_message: UI-oriented message, trimmed; None when blank.

    Raises:
        ValueError: If ``detailed_message`` is None or blank.
        TypeError: If ``short_message`` is neither None nor a str.
    """

    detailed_message: str
    short_message: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "detailed_message", _required_text(self.detailed_message, "detailed_message")
        )
        short = self.short_message
        if short is not None and not isinstance(short, str):
            raise TypeError(f"short_message must be a str or None, got {type(short).__name__}")
        object.__setattr__(
            self, "short_message", short.strip() if short and short.strip() else None
        )


@dataclass(frozen=True, slots=True)
class ContextEntryDocumentation:
    """A context key as observed across every example of one error.

    Attributes:
        key: Key name.
        description: Declared meaning of the key, if any.
        value_type: Declared value type of the key.
        example_values: Distinct non-None values observed, in first-seen order.
    """

    key: str
    description: str | None
    value_type: type
    example_values: tuple[Any, ...] = ()


@dataclass(frozen=True, slots=True)
class ErrorDocumentation:
    """Complete documentation of one error type.

    The text fields come from the author; ``code``, ``examples`` and
    ``context`` are derived from live example exceptions. The provenance
    fields are stamped by catalog discovery and stay None for a
    documentation built directly.

    Attributes:
        code: Error code shared by every example.
        title: Short title.
        explanation: What the error means.
        business_rule: Rule the error enforces, None when there is none.
        diagnostics: Plausible causes, in authoring order.
        examples: One description per example factory, in factory order.
        context: One entry per context key seen in the examples.
        exception_type: Exception class declaring the documented factory.
        error_source: Type the error is about (``@provides_errors_for``).
        factory_method_name: Name of the documented factory.
    """

    code: str
    title: str
    explanation: str
    business_rule: str | None
    diagnostics: tuple[ErrorDiagnostic, ...] = ()
    examples: tuple[ErrorDescription, ...] = ()
    context: tuple[ContextEntryDocumentation, ...] = ()
    exception_type: type | None = None
    error_source: type | None = None
    factory_method_name: str | None = None

    def __str__(self) -> str:
        return self.code
