"""Infrastructure layer - Adapters for domain protocols.

Structure:
- logging/: structlog-based LoggerProtocol implementation
"""
