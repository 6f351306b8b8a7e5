"""Application layer - Error catalog generation.

Structure:
- catalog/: discovery of documented errors in importable modules

The application layer orchestrates domain objects (documentation links,
documentation methods) and reports progress through LoggerProtocol.
"""
