"""Domain value objects.

Usage:
    from diagnosable_exceptions.domain.value_objects import ContextKey, ErrorCode
"""

from diagnosable_exceptions.domain.value_objects.context_key import ContextKey
from diagnosable_exceptions.domain.value_objects.error_code import ErrorCode

__all__ = [
    "ContextKey",
    "ErrorCode",
]
