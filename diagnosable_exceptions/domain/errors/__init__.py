"""Domain errors package.

Usage:
    from diagnosable_exceptions.domain.errors import (
        ErrorDocumentationError,
        ErrorDocumentationErrorReason,
    )
"""

from diagnosable_exceptions.domain.errors.error_documentation_error import (
    ErrorDocumentationError,
    ErrorDocumentationErrorReason,
)

__all__ = [
    "ErrorDocumentationError",
    "ErrorDocumentationErrorReason",
]
