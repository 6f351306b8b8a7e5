"""Staged builder describing one error.

The author writes the static part of the documentation (title, explanation,
rule, diagnostics) and hands over example factories. The builder calls every
factory and derives the rest from the live exceptions:

- ``code``: error code of the first example; every other example must share it.
- ``examples``: detailed and short message of each example, in factory order.
- ``context``: every context key seen in the examples, with the distinct
  non-None values observed, in first-seen order.

Each stage is a distinct immutable object, so a partially built description
can be reused as the common prefix of several documentations.

Usage:
    from diagnosable_exceptions.domain.documentation import describe_error

    documentation = (
        describe_error("Temperature below absolute zero")
        .with_description("Raised when a temperature below 0 K is created.")
        .with_rule("Temperature cannot go below absolute zero.")
        .with_diagnostic(
            "The value was computed by a faulty conversion.",
            ErrorCauseType.SYSTEM,
            "Check the unit conversion applied before construction.",
        )
        .with_examples(
            lambda: InvalidTemperatureException.below_absolute_zero(-1, "K"),
            lambda: InvalidTemperatureException.below_absolute_zero(-280, "C"),
        )
    )
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any

from diagnosable_exceptions.core.result import Failure, Result, Success
from diagnosable_exceptions.domain.documentation.models import (
    ContextEntryDocumentation,
    ErrorDescription,
    ErrorDiagnostic,
    ErrorDocumentation,
)
from diagnosable_exceptions.domain.documentation.stages import (
    ErrorDescriptionStage,
    ExampleFactory,
)
from diagnosable_exceptions.domain.enums import ErrorCauseType
from diagnosable_exceptions.domain.errors import ErrorDocumentationError
from diagnosable_exceptions.domain.exceptions.diagnosable_exception import (
    DiagnosableException,
)
from diagnosable_exceptions.domain.value_objects.context_key import ContextKey


@dataclass(frozen=True, slots=True)
class _Draft:
    title: str
    explanation: str = ""
    business_rule: str | None = None
    diagnostics: tuple[ErrorDiagnostic, ...] = ()


def _text(value: str | None, name: str, *, allow_empty: bool) -> str:
    if value is None:
        raise ValueError(f"{name} cannot be None.")
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    if not allow_empty and not value.strip():
        raise ValueError(f"{name} cannot be empty or whitespace.")
    return value.strip()


def invoke_example(
    index: int, factory: ExampleFactory | None
) -> Result[DiagnosableException, ErrorDocumentationError]:
    """Call one example factory and translate every way it can fail.

    Args:
        index: Position of the factory, reported in errors.
        factory: Zero-argument callable returning a DiagnosableException.

    Returns:
        Success with the example, or Failure with the documentation error
        describing what went wrong.
    """
    if factory is None:
        return Failure(error=ErrorDocumentationError.example_factory_is_null(index))
    if not callable(factory):
        return Failure(error=ErrorDocumentationError.example_factory_not_callable(index, factory))
    try:
        example = factory()
    except Exception as exc:
        return Failure(error=ErrorDocumentationError.example_factory_threw(index, exc))
    if example is None:
        return Failure(error=ErrorDocumentationError.null_example(index))
    if not isinstance(example, DiagnosableException):
        return Failure(error=ErrorDocumentationError.example_not_diagnosable(index, example))
    return Success(value=example)


def collect_examples(
    factories: Sequence[ExampleFactory | None],
) -> list[DiagnosableException]:
    """Invoke every factory in order and check they agree on the error code.

    Raises:
        ErrorDocumentationError: On the first factory that fails, or the first
            example whose code differs from the first example's.
    """
    if not factories:
        raise ErrorDocumentationError.at_least_one_example_required()

    examples: list[DiagnosableException] = []
    for index, factory in enumerate(factories):
        match invoke_example(index, factory):
            case Failure(error=error):
                raise error
            case Success(value=example):
                if examples and example.error_code != examples[0].error_code:
                    raise ErrorDocumentationError.inconsistent_error_code(
                        index, examples[0].error_code.value, example.error_code.value
                    )
                examples.append(example)
    return examples


def aggregate_context(
    examples: Iterable[DiagnosableException],
) -> tuple[ContextEntryDocumentation, ...]:
    """Merge the context of every example into one entry per key name.

    A key appears as soon as one example carries it, even with a None value;
    only distinct non-None values are kept as example values.
    """
    groups: dict[str, tuple[ContextKey[Any], list[Any]]] = {}
    for example in examples:
        for key, value in example.context.values.items():
            _, values = groups.setdefault(key.name, (key, []))
            # Equality, not hashing: context values need not be hashable.
            if value is not None and value not in values:
                values.append(value)

    return tuple(
        ContextEntryDocumentation(
            key=name,
            description=key.description,
            value_type=key.value_type,
            example_values=tuple(values),
        )
        for name, (key, values) in groups.items()
    )


class _ExamplesStage:
    __slots__ = ("_draft",)

    def __init__(self, draft: _Draft) -> None:
        self._draft = draft

    def with_examples(self, *factories: ExampleFactory) -> ErrorDocumentation:
        """Build the documentation from live examples.

        Args:
            *factories: Zero-argument callables each returning an example
                exception of the documented error.

        Returns:
            The complete ErrorDocumentation.

        Raises:
            ErrorDocumentationError: If no factory is given, a factory is None
                or not callable, raises, returns None or a non-diagnosable
                object, or the examples disagree on their error code.
        """
        examples = collect_examples(factories)
        return ErrorDocumentation(
            code=examples[0].error_code.value,
            title=self._draft.title,
            explanation=self._draft.explanation,
            business_rule=self._draft.business_rule,
            diagnostics=self._draft.diagnostics,
            examples=tuple(
                ErrorDescription(example.message, example.short_message)
                for example in examples
            ),
            context=aggregate_context(examples),
        )


class _ExamplesOrDiagnosticsStage(_ExamplesStage):
    __slots__ = ()

    def and_diagnostic(
        self, cause: str, type: ErrorCauseType, analysis_lead: str
    ) -> "_ExamplesOrDiagnosticsStage":
        diagnostic = ErrorDiagnostic(cause, type, analysis_lead)
        return _ExamplesOrDiagnosticsStage(
            replace(self._draft, diagnostics=self._draft.diagnostics + (diagnostic,))
        )


class _DiagnosticsStage:
    __slots__ = ("_draft",)

    def __init__(self, draft: _Draft) -> None:
        self._draft = draft

    def with_diagnostics(self, *diagnostics: ErrorDiagnostic) -> _ExamplesStage:
        """Set every diagnostic at once, replacing any pending one."""
        for index, diagnostic in enumerate(diagnostics):
            if not isinstance(diagnostic, ErrorDiagnostic):
                raise TypeError(
                    f"Diagnostic at index {index} must be an ErrorDiagnostic, "
                    f"got {type(diagnostic).__name__}"
                )
        return _ExamplesStage(replace(self._draft, diagnostics=tuple(diagnostics)))

    def with_diagnostic(
        self, cause: str, type: ErrorCauseType, analysis_lead: str
    ) -> _ExamplesOrDiagnosticsStage:
        diagnostic = ErrorDiagnostic(cause, type, analysis_lead)
        return _ExamplesOrDiagnosticsStage(
            replace(self._draft, diagnostics=self._draft.diagnostics + (diagnostic,))
        )

    def without_diagnostic(self) -> _ExamplesStage:
        return _ExamplesStage(self._draft)


class _RuleStage:
    __slots__ = ("_draft",)

    def __init__(self, draft: _Draft) -> None:
        self._draft = draft

    def with_rule(self, rule: str) -> _DiagnosticsStage:
        """Record the business rule the error enforces.

        Raises:
            ValueError: If ``rule`` is None.
        """
        return _DiagnosticsStage(
            replace(self._draft, business_rule=_text(rule, "rule", allow_empty=True))
        )

    def without_rule(self) -> _DiagnosticsStage:
        return _DiagnosticsStage(self._draft)


class _DescriptionStage:
    __slots__ = ("_draft",)

    def __init__(self, draft: _Draft) -> None:
        self._draft = draft

    def with_description(self, explanation: str) -> _RuleStage:
        """Record what the error means.

        Raises:
            ValueError: If ``explanation`` is None.
        """
        return _RuleStage(
            replace(self._draft, explanation=_text(explanation, "explanation", allow_empty=True))
        )


class ErrorDocumentationBuilder:
    """Start stage of the documentation builder."""

    __slots__ = ()

    def with_title(self, title: str) -> ErrorDescriptionStage:
        """Record the title.

        Raises:
            ValueError: If ``title`` is None, empty or whitespace.
        """
        return _DescriptionStage(_Draft(title=_text(title, "title", allow_empty=False)))


def describe_error(title: str) -> ErrorDescriptionStage:
    """Shortcut for ``ErrorDocumentationBuilder().with_title(title)``."""
    return ErrorDocumentationBuilder().with_title(title)
