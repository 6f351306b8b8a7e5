"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- The process-wide name registry behind ErrorCode and ContextKey
- Core error types

The core module has NO dependencies on other layers. Settings and the logger
composition root live in core.config and core.container and are imported
explicitly where needed.
"""

from diagnosable_exceptions.core.errors import AlreadyRegisteredError
from diagnosable_exceptions.core.registry import NameRegistry
from diagnosable_exceptions.core.result import Failure, Result, Success

__all__ = [
    "AlreadyRegisteredError",
    "Failure",
    "NameRegistry",
    "Result",
    "Success",
]
