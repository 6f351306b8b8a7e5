"""Catalog generation errors."""


class CatalogGenerationError(Exception):
    """Catalog generation stopped on a failure.

    Raised only when the reader runs with ``FailureBehavior.STOP``; the
    original error is chained as ``__cause__``.

    Attributes:
        module: Name of the module being scanned when the failure happened.
    """

    def __init__(self, message: str, *, module: str | None = None) -> None:
        super().__init__(message)
        self.module = module
