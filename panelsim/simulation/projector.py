"""Projection of the two reachable sets onto per-element display states."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Sequence

from panelsim.schematic.models import Component, Wire
from panelsim.simulation.graph import ConnectivityGraph
from panelsim.simulation.switches import SwitchState
from panelsim.types import DisplayState, Role, SubRole


@dataclass(frozen=True)
class SimulationResult:
    """Snapshot of one run. Built fresh every time, never patched."""

    component_states: dict[str, DisplayState] = field(default_factory=dict)
    wire_energized: dict[str, bool] = field(default_factory=dict)

    def state_of(self, component_id: str) -> DisplayState:
        return self.component_states.get(component_id, DisplayState.OFF)

    def is_on(self, component_id: str) -> bool:
        return self.state_of(component_id) is DisplayState.ON

    def energized_components(self) -> list[str]:
        return [cid for cid, state in self.component_states.items() if state is DisplayState.ON]

    def energized_wires(self) -> list[str]:
        return [wid for wid, energized in self.wire_energized.items() if energized]

    def to_dict(self) -> dict:
        return {
            "component_states": {cid: state.value for cid, state in self.component_states.items()},
            "wire_energized": dict(self.wire_energized),
        }


def energized_nodes(
    from_source: AbstractSet[int],
    from_return: AbstractSet[int],
    terminals: AbstractSet[int],
) -> set[int]:
    """Nodes on a source-to-return path, plus the sources and returns themselves."""
    return (set(from_source) & set(from_return)) | set(terminals)


def project_states(
    graph: ConnectivityGraph,
    components: Sequence[Component],
    wires: Sequence[Wire],
    sub_roles: Sequence[SubRole],
    energized: AbstractSet[int],
    switch_state: SwitchState,
) -> SimulationResult:
    """Map the energized node set onto component and wire states.

    Components occupy graph nodes 0..len(components)-1 and wires follow, in
    input order. Elements excluded from the graph are always off.
    """
    component_states: dict[str, DisplayState] = {}
    for index, (comp, sub_role) in enumerate(zip(components, sub_roles)):
        role = sub_role.role
        if graph.is_isolated(index):
            state = DisplayState.OFF
        elif role in (Role.SOURCE, Role.RETURN):
            state = DisplayState.ON
        elif index not in energized:
            state = DisplayState.OFF
        elif role is Role.GATE:
            # Reached, but the gate's own position decides what it shows
            state = DisplayState.ON if switch_state.is_closed(comp.id) else DisplayState.OFF
        else:
            state = DisplayState.ON
        component_states[comp.id] = state

    offset = len(components)
    wire_energized = {wire.id: (offset + j) in energized for j, wire in enumerate(wires)}
    return SimulationResult(component_states=component_states, wire_energized=wire_energized)
