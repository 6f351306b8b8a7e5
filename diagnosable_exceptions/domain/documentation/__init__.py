"""Error documentation: records, stage contracts and the staged builder.

Usage:
    from diagnosable_exceptions.domain.documentation import (
        ErrorDocumentation,
        describe_error,
    )
"""

from diagnosable_exceptions.domain.documentation.builder import (
    ErrorDocumentationBuilder,
    aggregate_context,
    collect_examples,
    describe_error,
    invoke_example,
)
from diagnosable_exceptions.domain.documentation.models import (
    ContextEntryDocumentation,
    ErrorDescription,
    ErrorDiagnostic,
    ErrorDocumentation,
)
from diagnosable_exceptions.domain.documentation.stages import (
    ErrorDescriptionStage,
    ErrorDiagnosticsStage,
    ErrorExamplesOrDiagnosticsStage,
    ErrorExamplesStage,
    ErrorRuleStage,
    ErrorTitleStage,
    ExampleFactory,
)

__all__ = [
    # Records
    "ContextEntryDocumentation",
    "ErrorDescription",
    "ErrorDiagnostic",
    "ErrorDocumentation",
    # Builder
    "ErrorDocumentationBuilder",
    "aggregate_context",
    "collect_examples",
    "describe_error",
    "invoke_example",
    # Stage contracts
    "ErrorDescriptionStage",
    "ErrorDiagnosticsStage",
    "ErrorExamplesOrDiagnosticsStage",
    "ErrorExamplesStage",
    "ErrorRuleStage",
    "ErrorTitleStage",
    "ExampleFactory",
]
