"""Business-rule violations.

A DomainException reports that a rule of the domain forbids the requested
operation (a temperature below absolute zero, adding amounts in different
currencies). Retrying the same input gives the same answer, so these errors
are never transient.
"""

from diagnosable_exceptions.domain.exceptions.diagnosable_exception import (
    DiagnosableException,
)


class DomainException(DiagnosableException, abstract=True):
    """Abstract base of business-rule violations."""

    @property
    def is_transient(self) -> bool:
        return False
