"""Unit tests for documentation records.

Tests cover:
- ErrorDiagnostic validation and trimming
- ErrorDescription trimming and blank short messages
- Structural equality and immutability
"""

from dataclasses import FrozenInstanceError

import pytest

from diagnosable_exceptions.domain.documentation import (
    ErrorDescription,
    ErrorDiagnostic,
    ErrorDocumentation,
)
from diagnosable_exceptions.domain.enums import ErrorCauseType


@pytest.mark.unit
class TestErrorDiagnostic:
    """Test ErrorDiagnostic."""

    def test_trims_text(self):
        """Test cause and analysis lead are trimmed."""
        diagnostic = ErrorDiagnostic(
            "  Stale exchange rate.  ", ErrorCauseType.SYSTEM, "\tCheck the rate cache.\n"
        )

        assert diagnostic.cause == "Stale exchange rate."
        assert diagnostic.type is ErrorCauseType.SYSTEM
        assert diagnostic.analysis_lead == "Check the rate cache."

    @pytest.mark.parametrize("cause", [None, "", "   "])
    def test_cause_required(self, cause):
        """Test a blank cause is rejected."""
        with pytest.raises(ValueError, match="cause"):
            ErrorDiagnostic(cause, ErrorCauseType.INPUT, "Check the input.")

    @pytest.mark.parametrize("lead", [None, "", "   "])
    def test_analysis_lead_required(self, lead):
        """Test a blank analysis lead is rejected."""
        with pytest.raises(ValueError, match="analysis_lead"):
            ErrorDiagnostic("Bad input.", ErrorCauseType.INPUT, lead)

    def test_type_must_be_cause_type(self):
        """Test the origin must be an ErrorCauseType."""
        with pytest.raises(TypeError):
            ErrorDiagnostic("Bad input.", "input", "Check the input.")  # type: ignore[arg-type]


@pytest.mark.unit
class TestErrorDescription:
    """Test ErrorDescription."""

    def test_trims_messages(self):
        """Test both messages are trimmed."""
        description = ErrorDescription("  Detailed.  ", "  Short. ")

        assert description.detailed_message == "Detailed."
        assert description.short_message == "Short."

    @pytest.mark.parametrize("short", [None, "", "   "])
    def test_blank_short_message_is_none(self, short):
        """Test a blank short message becomes None."""
        assert ErrorDescription("Detailed.", short).short_message is None

    @pytest.mark.parametrize("detailed", [None, "", "  "])
    def test_detailed_message_required(self, detailed):
        """Test a blank detailed message is rejected."""
        with pytest.raises(ValueError, match="detailed_message"):
            ErrorDescription(detailed)

    def test_non_text_short_message_rejected(self):
        """Test a short message must be text when given."""
        with pytest.raises(TypeError, match="short_message must be a str or None, got int"):
            ErrorDescription("Detailed.", 42)  # type: ignore[arg-type]


@pytest.mark.unit
class TestErrorDocumentation:
    """Test ErrorDocumentation."""

    def test_structural_equality(self):
        """Test two records with the same fields are equal."""

        def build() -> ErrorDocumentation:
            return ErrorDocumentation(
                code="ORDER_REJECTED",
                title="Order rejected",
                explanation="Raised when an order is refused.",
                business_rule=None,
                examples=(ErrorDescription("Order 1 rejected."),),
            )

        assert build() == build()
        assert str(build()) == "ORDER_REJECTED"

    def test_immutable(self):
        """Test fields cannot be reassigned."""
        documentation = ErrorDocumentation(
            code="ORDER_REJECTED", title="t", explanation="", business_rule=None
        )

        with pytest.raises(FrozenInstanceError):
            documentation.code = "OTHER"  # type: ignore[misc]

    def test_provenance_empty_by_default(self):
        """Test provenance is only set by discovery."""
        documentation = ErrorDocumentation(
            code="ORDER_REJECTED", title="t", explanation="", business_rule=None
        )

        assert documentation.exception_type is None
        assert documentation.error_source is None
        assert documentation.factory_method_name is None
