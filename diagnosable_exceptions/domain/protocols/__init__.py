"""Domain protocols (ports)."""

from diagnosable_exceptions.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
