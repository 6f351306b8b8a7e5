"""Unit tests for the staged error documentation builder.

Tests cover:
- Stage order and text validation
- Rules and diagnostics (set, chained, opted out)
- Example invocation failures (none, None slot, non-callable slot, raising,
  None result, non-diagnosable result)
- Error code consistency across examples
- Context aggregation across examples
- Determinism (documenting twice gives equal records)
"""

import pytest

from diagnosable_exceptions.core.result import Failure, Success
from diagnosable_exceptions.domain.documentation import (
    ContextEntryDocumentation,
    ErrorDescription,
    ErrorDiagnostic,
    ErrorDocumentation,
    ErrorDocumentationBuilder,
    describe_error,
    invoke_example,
)
from diagnosable_exceptions.domain.enums import ErrorCauseType
from diagnosable_exceptions.domain.errors import (
    ErrorDocumentationError,
    ErrorDocumentationErrorReason,
)
from diagnosable_exceptions.domain.exceptions import DomainException
from diagnosable_exceptions.domain.value_objects import ContextKey, ErrorCode


class PaymentException(DomainException):
    pass


@pytest.fixture
def declined() -> ErrorCode:
    return ErrorCode.create("PAYMENT_DECLINED")


@pytest.fixture
def user_id() -> ContextKey[str]:
    return ContextKey.create("UserId", str, "Identifier of the paying user.")


@pytest.fixture
def examples_stage():
    return (
        describe_error("Payment declined")
        .with_description("Raised when the bank refuses a payment.")
        .without_rule()
        .without_diagnostic()
    )


def payment(code: ErrorCode, message: str = "Payment declined by the bank.", **kwargs):
    return lambda: PaymentException(code, message, **kwargs)


# =============================================================================
# Stages
# =============================================================================


@pytest.mark.unit
class TestBuilderStages:
    """Test stage transitions and text fields."""

    def test_full_chain_builds_documentation(self, declined):
        """Test every authored field lands in the record."""
        documentation = (
            ErrorDocumentationBuilder()
            .with_title("  Payment declined ")
            .with_description(" Raised when the bank refuses a payment. ")
            .with_rule(" A payment needs the bank's approval. ")
            .with_diagnostic("Insufficient funds.", ErrorCauseType.INPUT, "Check the balance.")
            .with_examples(payment(declined, short_message="Declined."))
        )

        assert isinstance(documentation, ErrorDocumentation)
        assert documentation.code == "PAYMENT_DECLINED"
        assert documentation.title == "Payment declined"
        assert documentation.explanation == "Raised when the bank refuses a payment."
        assert documentation.business_rule == "A payment needs the bank's approval."
        assert documentation.diagnostics == (
            ErrorDiagnostic("Insufficient funds.", ErrorCauseType.INPUT, "Check the balance."),
        )
        assert documentation.examples == (
            ErrorDescription("Payment declined by the bank.", "Declined."),
        )

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_blank_title_rejected(self, title):
        """Test the title is required."""
        with pytest.raises(ValueError, match="title"):
            describe_error(title)

    def test_none_explanation_rejected(self):
        """Test the explanation cannot be None."""
        with pytest.raises(ValueError, match="explanation"):
            describe_error("Payment declined").with_description(None)

    def test_empty_explanation_allowed(self, declined):
        """Test an empty explanation is kept as empty text."""
        documentation = (
            describe_error("Payment declined")
            .with_description("   ")
            .without_rule()
            .without_diagnostic()
            .with_examples(payment(declined))
        )

        assert documentation.explanation == ""

    def test_none_rule_rejected(self):
        """Test with_rule() requires a rule; opting out is without_rule()."""
        stage = describe_error("Payment declined").with_description("Explanation.")

        with pytest.raises(ValueError, match="rule"):
            stage.with_rule(None)

    def test_without_rule_leaves_rule_empty(self, examples_stage, declined):
        """Test opting out of the rule gives None."""
        assert examples_stage.with_examples(payment(declined)).business_rule is None

    def test_stages_expose_only_next_step(self):
        """Test a stage cannot be skipped at runtime."""
        stage = describe_error("Payment declined")

        assert not hasattr(stage, "with_examples")
        assert not hasattr(stage, "with_rule")
        assert not hasattr(stage.with_description("x"), "with_examples")

    def test_stages_are_reusable_prefixes(self, declined):
        """Test branching from one stage does not leak between branches."""
        diagnostics_stage = describe_error("Payment declined").with_description("x").without_rule()

        with_one = diagnostics_stage.with_diagnostic("A.", ErrorCauseType.SYSTEM, "Look at A.")
        with_two = with_one.and_diagnostic("B.", ErrorCauseType.INPUT, "Look at B.")

        assert len(with_one.with_examples(payment(declined)).diagnostics) == 1
        assert len(with_two.with_examples(payment(declined)).diagnostics) == 2


# =============================================================================
# Diagnostics
# =============================================================================


@pytest.mark.unit
class TestBuilderDiagnostics:
    """Test the diagnostics stage."""

    def test_chained_diagnostics_keep_order(self, declined):
        """Test and_diagnostic appends in call order."""
        documentation = (
            describe_error("Payment declined")
            .with_description("x")
            .without_rule()
            .with_diagnostic("First.", ErrorCauseType.SYSTEM, "Lead 1.")
            .and_diagnostic("Second.", ErrorCauseType.INPUT, "Lead 2.")
            .and_diagnostic("Third.", ErrorCauseType.SYSTEM_OR_INPUT, "Lead 3.")
            .with_examples(payment(declined))
        )

        assert [d.cause for d in documentation.diagnostics] == ["First.", "Second.", "Third."]

    def test_with_diagnostics_sets_list(self, declined):
        """Test with_diagnostics takes prepared diagnostics."""
        shared = ErrorDiagnostic("Shared cause.", ErrorCauseType.SYSTEM, "Shared lead.")

        documentation = (
            describe_error("Payment declined")
            .with_description("x")
            .without_rule()
            .with_diagnostics(shared)
            .with_examples(payment(declined))
        )

        assert documentation.diagnostics == (shared,)

    def test_with_diagnostics_rejects_other_objects(self):
        """Test with_diagnostics only accepts ErrorDiagnostic instances."""
        stage = describe_error("Payment declined").with_description("x").without_rule()

        with pytest.raises(TypeError, match="index 0"):
            stage.with_diagnostics("Insufficient funds.")  # type: ignore[arg-type]

    def test_invalid_diagnostic_rejected_eagerly(self):
        """Test a blank cause fails when the diagnostic is added."""
        stage = describe_error("Payment declined").with_description("x").without_rule()

        with pytest.raises(ValueError):
            stage.with_diagnostic("  ", ErrorCauseType.SYSTEM, "Lead.")

    def test_without_diagnostic(self, examples_stage, declined):
        """Test opting out gives no diagnostics."""
        assert examples_stage.with_examples(payment(declined)).diagnostics == ()


# =============================================================================
# Examples
# =============================================================================


@pytest.mark.unit
class TestBuilderExamples:
    """Test example invocation and validation."""

    def test_no_factory(self, examples_stage):
        """Test at least one example is required."""
        with pytest.raises(ErrorDocumentationError) as exc_info:
            examples_stage.with_examples()

        assert exc_info.value.reason is ErrorDocumentationErrorReason.AT_LEAST_ONE_EXAMPLE_REQUIRED
        assert exc_info.value.example_index is None
        assert str(exc_info.value) == (
            "At least one example factory must be provided to build documentation examples."
        )

    def test_none_factory(self, examples_stage, declined):
        """Test a None slot names its index."""
        with pytest.raises(ErrorDocumentationError) as exc_info:
            examples_stage.with_examples(payment(declined), None)

        assert exc_info.value.reason is ErrorDocumentationErrorReason.EXAMPLE_FACTORY_IS_NULL
        assert exc_info.value.example_index == 1

    def test_non_callable_factory(self, examples_stage, declined):
        """Test an exception instance passed instead of a factory is reported."""
        instance = PaymentException(declined, "Payment declined by the bank.")

        with pytest.raises(ErrorDocumentationError) as exc_info:
            examples_stage.with_examples(instance)  # type: ignore[arg-type]

        assert exc_info.value.reason is ErrorDocumentationErrorReason.EXAMPLE_FACTORY_NOT_CALLABLE
        assert exc_info.value.example_index == 0
        assert exc_info.value.__cause__ is None
        assert "PaymentException, not a callable" in str(exc_info.value)

    def test_raising_factory(self, examples_stage):
        """Test a raising factory is wrapped with its index and cause."""
        boom = RuntimeError("boom")

        def raising():
            raise boom

        with pytest.raises(ErrorDocumentationError) as exc_info:
            examples_stage.with_examples(raising)

        assert exc_info.value.reason is ErrorDocumentationErrorReason.EXAMPLE_FACTORY_THREW
        assert exc_info.value.example_index == 0
        assert exc_info.value.__cause__ is boom
        assert str(exc_info.value) == (
            "Example factory at index 0 threw an exception. "
            "Factories must be deterministic and side-effect free."
        )

    def test_factory_returning_none(self, examples_stage):
        """Test a factory returning None is rejected."""
        with pytest.raises(ErrorDocumentationError) as exc_info:
            examples_stage.with_examples(lambda: None)

        assert exc_info.value.reason is ErrorDocumentationErrorReason.NULL_EXAMPLE
        assert exc_info.value.example_index == 0

    def test_factory_returning_plain_exception(self, examples_stage):
        """Test examples must be diagnosable exceptions."""
        with pytest.raises(ErrorDocumentationError) as exc_info:
            examples_stage.with_examples(lambda: ValueError("plain"))

        assert exc_info.value.reason is ErrorDocumentationErrorReason.EXAMPLE_NOT_DIAGNOSABLE
        assert "ValueError" in str(exc_info.value)

    def test_inconsistent_error_codes(self, examples_stage, declined):
        """Test the second example's code must match the first's."""
        expired = ErrorCode.create("PAYMENT_CARD_EXPIRED")

        with pytest.raises(ErrorDocumentationError) as exc_info:
            examples_stage.with_examples(payment(declined), payment(expired))

        error = exc_info.value
        assert error.reason is ErrorDocumentationErrorReason.INCONSISTENT_ERROR_CODE
        assert error.example_index == 1
        assert error.expected_code == "PAYMENT_DECLINED"
        assert error.received_code == "PAYMENT_CARD_EXPIRED"
        assert "Expected 'PAYMENT_DECLINED', but received 'PAYMENT_CARD_EXPIRED'." in str(error)

    def test_factories_after_a_failure_not_invoked(self, examples_stage, declined):
        """Test invocation stops at the first failing factory."""
        calls: list[int] = []

        def tracked(index: int):
            def factory():
                calls.append(index)
                return PaymentException(declined, "Payment declined.")

            return factory

        with pytest.raises(ErrorDocumentationError):
            examples_stage.with_examples(tracked(0), lambda: None, tracked(2))

        assert calls == [0]

    def test_examples_in_factory_order(self, examples_stage, declined):
        """Test one description per example, in order."""
        documentation = examples_stage.with_examples(
            payment(declined, "Payment 1 declined.", short_message="Declined."),
            payment(declined, "Payment 2 declined.", short_message="   "),
        )

        assert documentation.examples == (
            ErrorDescription("Payment 1 declined.", "Declined."),
            ErrorDescription("Payment 2 declined.", None),
        )

    def test_invoke_example_result(self, declined):
        """Test invoke_example returns Success or Failure instead of raising."""
        success = invoke_example(0, payment(declined))
        failure = invoke_example(3, lambda: None)

        assert isinstance(success, Success)
        assert isinstance(success.value, PaymentException)
        assert isinstance(failure, Failure)
        assert failure.error.example_index == 3


# =============================================================================
# Context aggregation
# =============================================================================


@pytest.mark.unit
class TestContextAggregation:
    """Test merging of example contexts."""

    def test_values_grouped_by_key_in_first_seen_order(self, examples_stage, declined, user_id):
        """Test distinct values of one key are listed in example order."""
        documentation = examples_stage.with_examples(
            payment(declined, configure_context=lambda ctx: ctx.add(user_id, "u-1")),
            payment(declined, configure_context=lambda ctx: ctx.add(user_id, "u-2")),
            payment(declined, configure_context=lambda ctx: ctx.add(user_id, "u-1")),
        )

        assert documentation.context == (
            ContextEntryDocumentation(
                key="UserId",
                description="Identifier of the paying user.",
                value_type=str,
                example_values=("u-1", "u-2"),
            ),
        )

    def test_none_values_excluded_but_key_kept(self, examples_stage, declined, user_id):
        """Test a key seen only with None still appears, without values."""
        attempt = ContextKey.create("Attempt", int)

        documentation = examples_stage.with_examples(
            payment(declined, configure_context=lambda ctx: ctx.add(user_id, None)),
            payment(
                declined,
                configure_context=lambda ctx: ctx.add(attempt, 2).add(user_id, None),
            ),
        )

        entries = {entry.key: entry for entry in documentation.context}
        assert list(entries) == ["UserId", "Attempt"]
        assert entries["UserId"].example_values == ()
        assert entries["Attempt"].example_values == (2,)
        assert entries["Attempt"].value_type is int

    def test_unhashable_values_supported(self, examples_stage, declined):
        """Test list values are deduplicated by equality."""
        tags = ContextKey.create("Tags", list[str])

        documentation = examples_stage.with_examples(
            payment(declined, configure_context=lambda ctx: ctx.add(tags, ["a"])),
            payment(declined, configure_context=lambda ctx: ctx.add(tags, ["a"])),
            payment(declined, configure_context=lambda ctx: ctx.add(tags, ["b"])),
        )

        assert documentation.context[0].example_values == (["a"], ["b"])

    def test_no_context(self, examples_stage, declined):
        """Test examples without context give no entries."""
        assert examples_stage.with_examples(payment(declined)).context == ()


@pytest.mark.unit
class TestDeterminism:
    """Test documenting the same definition twice."""

    def test_documenting_twice_gives_equal_records(self, declined, user_id):
        """Test records do not depend on example instance identity."""

        def document() -> ErrorDocumentation:
            return (
                describe_error("Payment declined")
                .with_description("Raised when the bank refuses a payment.")
                .with_rule("A payment needs the bank's approval.")
                .with_diagnostic("Insufficient funds.", ErrorCauseType.INPUT, "Check the balance.")
                .with_examples(
                    payment(declined, configure_context=lambda ctx: ctx.add(user_id, "u-1")),
                    payment(declined, "Second payment declined."),
                )
            )

        assert document() == document()
