"""Logging adapters implementing LoggerProtocol."""

from diagnosable_exceptions.infrastructure.logging.console_adapter import (
    ConsoleAdapter,
)

__all__ = ["ConsoleAdapter"]
