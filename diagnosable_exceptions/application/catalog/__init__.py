"""Error catalog discovery.

Usage:
    from diagnosable_exceptions.application.catalog import ErrorCatalogReader, discover
"""

from diagnosable_exceptions.application.catalog.errors import CatalogGenerationError
from diagnosable_exceptions.application.catalog.reader import (
    ErrorCatalogReader,
    discover,
    discover_many,
    sort_catalog,
)

__all__ = [
    "CatalogGenerationError",
    "ErrorCatalogReader",
    "discover",
    "discover_many",
    "sort_catalog",
]
