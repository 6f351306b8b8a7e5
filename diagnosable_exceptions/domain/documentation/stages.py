"""Stage contracts of the error documentation builder.

Each stage exposes only the operations legal at that point, so an error is
always described in the same order:

    title -> description -> rule -> diagnostics -> examples

A type checker rejects a skipped or reordered step; at runtime the step is
simply missing from the returned object (AttributeError).
"""

from collections.abc import Callable
from typing import Protocol

from diagnosable_exceptions.domain.documentation.models import (
    ErrorDiagnostic,
    ErrorDocumentation,
)
from diagnosable_exceptions.domain.enums import ErrorCauseType
from diagnosable_exceptions.domain.exceptions.diagnosable_exception import (
    DiagnosableException,
)

type ExampleFactory = Callable[[], DiagnosableException]


class ErrorTitleStage(Protocol):
    def with_title(self, title: str) -> "ErrorDescriptionStage": ...


class ErrorDescriptionStage(Protocol):
    def with_description(self, explanation: str) -> "ErrorRuleStage": ...


class ErrorRuleStage(Protocol):
    """Business rule step. Opting out is explicit."""

    def with_rule(self, rule: str) -> "ErrorDiagnosticsStage": ...

    def without_rule(self) -> "ErrorDiagnosticsStage": ...


class ErrorDiagnosticsStage(Protocol):
    """Diagnostics step.

    ``with_diagnostics`` sets the whole list at once, ``with_diagnostic``
    starts a chain continued by ``and_diagnostic``, ``without_diagnostic``
    opts out.
    """

    def with_diagnostics(self, *diagnostics: ErrorDiagnostic) -> "ErrorExamplesStage": ...

    def with_diagnostic(
        self, cause: str, type: ErrorCauseType, analysis_lead: str
    ) -> "ErrorExamplesOrDiagnosticsStage": ...

    def without_diagnostic(self) -> "ErrorExamplesStage": ...


class ErrorExamplesStage(Protocol):
    def with_examples(self, *factories: ExampleFactory) -> ErrorDocumentation: ...


class ErrorExamplesOrDiagnosticsStage(ErrorExamplesStage, Protocol):
    def and_diagnostic(
        self, cause: str, type: ErrorCauseType, analysis_lead: str
    ) -> "ErrorExamplesOrDiagnosticsStage": ...
