"""Likely origin of a documented diagnostic cause.

The classification orients an investigation: it says where analysis should
start, it does not assign responsibility.

Usage:
    from diagnosable_exceptions.domain.enums import ErrorCauseType

    ErrorDiagnostic(
        cause="The declared total does not match the sum of the lines.",
        type=ErrorCauseType.INPUT,
        analysis_lead="Compare the declared total with the computed one.",
    )
"""

from enum import Enum


class ErrorCauseType(str, Enum):
    """Most likely origin of a documented cause.

    Values:
        SYSTEM: The system's own logic, rules or implementation (internal
            computations, transformations, validations).
        INPUT: Invalid or inconsistent values coming from outside the system
            (user input, external systems, configuration, persisted data).
        SYSTEM_OR_INPUT: The symptom does not tell an internal defect apart
            from bad incoming data; both sides need investigating.
    """

    SYSTEM = "system"
    INPUT = "input"
    SYSTEM_OR_INPUT = "system_or_input"
