"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from diagnosable_exceptions.core.enums import Environment, FailureBehavior
"""

from diagnosable_exceptions.core.enums.environment import Environment
from diagnosable_exceptions.core.enums.failure_behavior import FailureBehavior

__all__ = ["Environment", "FailureBehavior"]
