"""Domain enums.

Available Enums:
    - ErrorCauseType: Likely origin of a documented diagnostic cause
    - FlowDirection: Inbound/outbound side of an adapter failure
"""

from diagnosable_exceptions.domain.enums.error_cause_type import ErrorCauseType
from diagnosable_exceptions.domain.enums.flow_direction import FlowDirection

__all__ = [
    "ErrorCauseType",
    "FlowDirection",
]
