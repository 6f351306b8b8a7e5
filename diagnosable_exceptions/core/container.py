"""Dependency factories (composition root).

Application-scoped singletons:
- Logging (structlog console adapter)

Adapters are imported lazily inside the factories so the core layer keeps no
import-time dependency on infrastructure.

Usage:
    from diagnosable_exceptions.core.container import get_logger

    logger = get_logger()
    logger.info("error_catalog_scan_started", module="billing.errors")
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from diagnosable_exceptions.core.config import get_settings

if TYPE_CHECKING:
    from diagnosable_exceptions.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    The minimum level comes from ``Settings.log_level``.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from diagnosable_exceptions.infrastructure.logging.console_adapter import (
        ConsoleAdapter,
    )

    current = get_settings()
    return ConsoleAdapter(use_json=current.uses_json_logs, level=current.log_level)
