"""Pytest configuration.

This configuration ensures:
1. ErrorCode and ContextKey registries are empty at the start of every test
2. Cached settings and logger singletons never leak between tests
"""

import pytest

from diagnosable_exceptions.core.config import get_settings
from diagnosable_exceptions.core.container import get_logger
from diagnosable_exceptions.domain.value_objects import ContextKey, ErrorCode
from tests.fixtures.recording_logger import RecordingLogger


def _reset_registries() -> None:
    ErrorCode.reset_for_tests()
    ContextKey.reset_for_tests()


@pytest.fixture(autouse=True)
def isolated_registries():
    """Reset both process-wide registries around each test.

    Fixture catalog modules register their codes once, at first import; the
    instances they hold stay valid after a reset.
    """
    _reset_registries()
    yield
    _reset_registries()


@pytest.fixture
def clear_singletons():
    """Clear cached settings and logger before and after the test."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
