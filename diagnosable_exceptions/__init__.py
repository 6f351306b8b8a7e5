"""Diagnosable exceptions.

Document errors where they are raised and extract an error catalog from code.

An exception class exposes one factory method per error and links each factory
to a documentation method with ``@documented_by``. The documentation method
describes the error through a staged builder (title, explanation, rule,
diagnostics) and hands it example factories; the builder derives the error
code, the example messages and the context schema from the live examples.
``discover`` then collects the documentation of every documented error in a
module tree.

Usage:
    from diagnosable_exceptions import (
        DomainException,
        ErrorCode,
        describe_error,
        discover,
        documented_by,
    )
"""

from diagnosable_exceptions.application.catalog import (
    CatalogGenerationError,
    ErrorCatalogReader,
    discover,
    discover_many,
)
from diagnosable_exceptions.core.enums import FailureBehavior
from diagnosable_exceptions.core.errors import AlreadyRegisteredError
from diagnosable_exceptions.domain.context import ErrorContext, ErrorContextBuilder
from diagnosable_exceptions.domain.documentation import (
    ContextEntryDocumentation,
    ErrorDescription,
    ErrorDiagnostic,
    ErrorDocumentation,
    ErrorDocumentationBuilder,
    describe_error,
)
from diagnosable_exceptions.domain.enums import ErrorCauseType, FlowDirection
from diagnosable_exceptions.domain.errors import (
    ErrorDocumentationError,
    ErrorDocumentationErrorReason,
)
from diagnosable_exceptions.domain.exceptions import (
    DiagnosableException,
    DomainException,
    InfrastructureException,
    PrimaryAdapterException,
    SecondaryAdapterException,
    documented_by,
    provides_errors_for,
)
from diagnosable_exceptions.domain.value_objects import ContextKey, ErrorCode

__version__ = "0.1.0"

__all__ = [
    # Identifiers
    "ContextKey",
    "ErrorCode",
    # Context
    "ErrorContext",
    "ErrorContextBuilder",
    # Exceptions
    "DiagnosableException",
    "DomainException",
    "InfrastructureException",
    "PrimaryAdapterException",
    "SecondaryAdapterException",
    "FlowDirection",
    # Documentation
    "ContextEntryDocumentation",
    "ErrorCauseType",
    "ErrorDescription",
    "ErrorDiagnostic",
    "ErrorDocumentation",
    "ErrorDocumentationBuilder",
    "describe_error",
    "documented_by",
    "provides_errors_for",
    # Catalog
    "ErrorCatalogReader",
    "FailureBehavior",
    "discover",
    "discover_many",
    # Errors
    "AlreadyRegisteredError",
    "CatalogGenerationError",
    "ErrorDocumentationError",
    "ErrorDocumentationErrorReason",
]
