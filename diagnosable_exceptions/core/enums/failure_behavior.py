"""Failure handling policy for catalog generation.

Decides what the discovery engine does when a module cannot be imported or
a documentation method raises while the catalog is being assembled.
"""

from enum import Enum


class FailureBehavior(str, Enum):
    """What to do when one part of a catalog scan fails.

    String Enum:
        Inherits from str so the value can be read straight from
        environment variables (DIAGNOSABLE_FAILURE_BEHAVIOR=stop).
    """

    CONTINUE = "continue"
    STOP = "stop"
