"""Shared enums for the continuity simulator."""

from enum import Enum


class Role(str, Enum):
    SOURCE = "source"
    RETURN = "return"
    GATE = "gate"
    PASSIVE = "passive"


class SubRole(str, Enum):
    """Role plus, for gates, the position the gate takes at simulation start."""

    SOURCE = "source"
    RETURN = "return"
    GATE_NORMALLY_OPEN = "gate_normally_open"
    GATE_NORMALLY_CLOSED = "gate_normally_closed"
    GATE_PROTECTIVE = "gate_protective"
    PASSIVE = "passive"

    @property
    def role(self) -> Role:
        if self in (SubRole.GATE_NORMALLY_OPEN, SubRole.GATE_NORMALLY_CLOSED, SubRole.GATE_PROTECTIVE):
            return Role.GATE
        return Role(self.value)

    @property
    def default_closed(self) -> bool:
        # Protective devices conduct until tripped; tripping is not modeled.
        return self in (SubRole.GATE_NORMALLY_CLOSED, SubRole.GATE_PROTECTIVE)


class DisplayState(str, Enum):
    ON = "on"
    OFF = "off"
    FAULT = "fault"  # reserved for a short-circuit detector, never produced


class NodeKind(str, Enum):
    COMPONENT = "component"
    WIRE = "wire"
