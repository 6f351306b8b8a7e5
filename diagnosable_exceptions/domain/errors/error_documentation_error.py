"""Errors raised when the documentation API is misused.

Misusing the staged builder (no examples, a broken example factory, examples
that disagree on their error code) is an authoring mistake, distinct from an
ordinary argument error: it surfaces as a single ErrorDocumentationError whose
``reason`` tells the cases apart and whose ``example_index`` points at the
offending factory.

Usage:
    try:
        describe_error("Title")...with_examples(lambda: make_error())
    except ErrorDocumentationError as exc:
        if exc.reason is ErrorDocumentationErrorReason.EXAMPLE_FACTORY_THREW:
            print(exc.example_index, exc.__cause__)
"""

from enum import Enum


class ErrorDocumentationErrorReason(str, Enum):
    """Why the documentation of an error could not be built."""

    AT_LEAST_ONE_EXAMPLE_REQUIRED = "at_least_one_example_required"
    EXAMPLE_FACTORY_IS_NULL = "example_factory_is_null"
    EXAMPLE_FACTORY_NOT_CALLABLE = "example_factory_not_callable"
    EXAMPLE_FACTORY_THREW = "example_factory_threw"
    NULL_EXAMPLE = "null_example"
    EXAMPLE_NOT_DIAGNOSABLE = "example_not_diagnosable"
    INCONSISTENT_ERROR_CODE = "inconsistent_error_code"


class ErrorDocumentationError(Exception):
    """Misuse of the error documentation API.

    Instances are created through the named constructors below, one per
    reason. When a factory threw, the original exception is chained as
    ``__cause__``.

    Attributes:
        reason: Which authoring rule was broken.
        example_index: Index of the offending example factory, or None when
            the failure is not about one factory.
        expected_code: First example's error code (inconsistent codes only).
        received_code: Offending example's error code (inconsistent codes only).
    """

    def __init__(
        self,
        message: str,
        *,
        reason: ErrorDocumentationErrorReason,
        example_index: int | None = None,
        expected_code: str | None = None,
        received_code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.example_index = example_index
        self.expected_code = expected_code
        self.received_code = received_code

    @classmethod
    def at_least_one_example_required(cls) -> "ErrorDocumentationError":
        return cls(
            "At least one example factory must be provided to build documentation examples.",
            reason=ErrorDocumentationErrorReason.AT_LEAST_ONE_EXAMPLE_REQUIRED,
        )

    @classmethod
    def example_factory_is_null(cls, index: int) -> "ErrorDocumentationError":
        return cls(
            f"Example factory at index {index} is None. All factories must be callables.",
            reason=ErrorDocumentationErrorReason.EXAMPLE_FACTORY_IS_NULL,
            example_index=index,
        )

    @classmethod
    def example_factory_not_callable(
        cls, index: int, factory: object
    ) -> "ErrorDocumentationError":
        return cls(
            f"Example factory at index {index} is a {type(factory).__name__}, not a callable. "
            "Pass a zero-argument callable such as a lambda.",
            reason=ErrorDocumentationErrorReason.EXAMPLE_FACTORY_NOT_CALLABLE,
            example_index=index,
        )

    @classmethod
    def example_factory_threw(
        cls, index: int, error: BaseException
    ) -> "ErrorDocumentationError":
        """Wrap the failure of an example factory.

        Args:
            index: Index of the factory that raised.
            error: What it raised; chained as ``__cause__``.
        """
        documentation_error = cls(
            f"Example factory at index {index} threw an exception. "
            "Factories must be deterministic and side-effect free.",
            reason=ErrorDocumentationErrorReason.EXAMPLE_FACTORY_THREW,
            example_index=index,
        )
        documentation_error.__cause__ = error
        return documentation_error

    @classmethod
    def null_example(cls, index: int) -> "ErrorDocumentationError":
        return cls(
            f"Example factory at index {index} returned None. "
            "Factories must return a valid exception instance.",
            reason=ErrorDocumentationErrorReason.NULL_EXAMPLE,
            example_index=index,
        )

    @classmethod
    def example_not_diagnosable(
        cls, index: int, produced: object
    ) -> "ErrorDocumentationError":
        return cls(
            f"Example factory at index {index} returned a {type(produced).__name__}. "
            "Factories must return a DiagnosableException instance.",
            reason=ErrorDocumentationErrorReason.EXAMPLE_NOT_DIAGNOSABLE,
            example_index=index,
        )

    @classmethod
    def inconsistent_error_code(
        cls, index: int, expected_code: str, received_code: str
    ) -> "ErrorDocumentationError":
        """All examples of one documentation must share their error code.

        Args:
            index: Index of the first example whose code differs.
            expected_code: Code of the first example.
            received_code: Code of the offending example.
        """
        return cls(
            "All example factories must produce exceptions with the same ErrorCode. "
            f"Example at index {index} produced a different ErrorCode. "
            f"Expected '{expected_code}', but received '{received_code}'.",
            reason=ErrorDocumentationErrorReason.INCONSISTENT_ERROR_CODE,
            example_index=index,
            expected_code=expected_code,
            received_code=received_code,
        )
