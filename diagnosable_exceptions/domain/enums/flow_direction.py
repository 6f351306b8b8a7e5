"""Direction of the interaction an adapter exception belongs to."""

from enum import Enum


class FlowDirection(str, Enum):
    """Side of the hexagon where an adapter failure happened.

    INBOUND: outside -> inside (primary adapters: HTTP handlers, file readers).
    OUTBOUND: inside -> outside (secondary adapters: databases, remote APIs).
    """

    INBOUND = "inbound"
    OUTBOUND = "outbound"
