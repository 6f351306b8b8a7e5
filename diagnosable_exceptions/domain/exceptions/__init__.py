"""Diagnosable exception hierarchy and documentation links.

Usage:
    from diagnosable_exceptions.domain.exceptions import (
        DomainException,
        documented_by,
        provides_errors_for,
    )
"""

from diagnosable_exceptions.domain.exceptions.diagnosable_exception import (
    ContextConfigurator,
    DiagnosableException,
)
from diagnosable_exceptions.domain.exceptions.domain_exception import DomainException
from diagnosable_exceptions.domain.exceptions.infrastructure_exception import (
    InfrastructureException,
    PrimaryAdapterException,
    SecondaryAdapterException,
)
from diagnosable_exceptions.domain.exceptions.links import (
    DOCUMENTATION_LINKS,
    DocumentationLinkTable,
    DocumentedFactory,
    documented_by,
    provides_errors_for,
)

__all__ = [
    "ContextConfigurator",
    "DOCUMENTATION_LINKS",
    "DiagnosableException",
    "DocumentationLinkTable",
    "DocumentedFactory",
    "DomainException",
    "InfrastructureException",
    "PrimaryAdapterException",
    "SecondaryAdapterException",
    "documented_by",
    "provides_errors_for",
]
