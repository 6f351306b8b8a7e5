"""Error context package.

Usage:
    from diagnosable_exceptions.domain.context import ErrorContext, ErrorContextBuilder
"""

from diagnosable_exceptions.domain.context.error_context import ErrorContext
from diagnosable_exceptions.domain.context.error_context_builder import (
    ErrorContextBuilder,
)

__all__ = [
    "ErrorContext",
    "ErrorContextBuilder",
]
