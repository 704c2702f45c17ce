"""Simulation entry points: `seed`, `toggle`, `run`, and a session wrapper.

    components + wires
        │
        ▼
    [GRAPH]       ─── build_graph (proximity edges, once per run)
        │
        ▼
    [CLASSIFY]    ─── RoleTable: source / return / gate / passive
        │
        ▼
    [REACH x2]    ─── gated BFS from sources, gated BFS from returns
        │
        ▼
    [PROJECT]     ─── intersection -> on/off per component, energized per wire

`run` is pure: the same components, wires and switch state always give an
equal `SimulationResult`.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from panelsim.schematic.models import Component, Wire
from panelsim.simulation.graph import DEFAULT_PROXIMITY, build_graph
from panelsim.simulation.projector import SimulationResult, energized_nodes, project_states
from panelsim.simulation.reachability import reachable
from panelsim.simulation.roles import DEFAULT_ROLES, RoleTable
from panelsim.simulation.switches import SwitchState, seed, toggle
from panelsim.types import Role

log = logging.getLogger(__name__)


def run(
    components: Sequence[Component],
    wires: Sequence[Wire],
    switch_state: SwitchState,
    roles: Optional[RoleTable] = None,
    threshold: Optional[float] = None,
) -> SimulationResult:
    """Compute the on/off state of every component and wire."""
    roles = roles or DEFAULT_ROLES
    graph = build_graph(components, wires, DEFAULT_PROXIMITY if threshold is None else threshold)
    sub_roles = [roles.classify(comp) for comp in components]

    sources: list[int] = []
    returns: list[int] = []
    open_gates: set[int] = set()
    for index, (comp, sub_role) in enumerate(zip(components, sub_roles)):
        if graph.is_isolated(index):
            continue
        role = sub_role.role
        if role is Role.SOURCE:
            sources.append(index)
        elif role is Role.RETURN:
            returns.append(index)
        elif role is Role.GATE and not switch_state.is_closed(comp.id):
            open_gates.add(index)

    blocks = open_gates.__contains__
    from_source = reachable(graph, sources, blocks)
    from_return = reachable(graph, returns, blocks)
    energized = energized_nodes(from_source, from_return, {*sources, *returns})

    log.debug(
        "Run: %d components, %d wires, %d open gates, %d energized nodes",
        len(components), len(wires), len(open_gates), len(energized),
    )
    return project_states(graph, components, wires, sub_roles, energized, switch_state)


class SimulationSession:
    """One simulation session over a fixed schematic snapshot.

    The switch state is seeded on `start()`, replaced on every `toggle()`,
    and dropped on `stop()`. Each change reruns the whole simulation.
    """

    def __init__(
        self,
        components: Sequence[Component],
        wires: Sequence[Wire],
        roles: Optional[RoleTable] = None,
        threshold: Optional[float] = None,
    ) -> None:
        self._components = list(components)
        self._wires = list(wires)
        self._roles = roles or DEFAULT_ROLES
        self._threshold = threshold
        self._switch_state: Optional[SwitchState] = None
        self._result: Optional[SimulationResult] = None

    @property
    def active(self) -> bool:
        return self._switch_state is not None

    @property
    def switch_state(self) -> Optional[SwitchState]:
        return self._switch_state

    @property
    def result(self) -> Optional[SimulationResult]:
        return self._result

    def start(self) -> SimulationResult:
        self._switch_state = seed(self._components, self._roles)
        log.info("Simulation started: %d gates", len(self._switch_state))
        return self._rerun()

    def toggle(self, gate_id: str) -> SimulationResult:
        """Flip a gate and rerun. Starts the session first if needed."""
        if self._switch_state is None:
            self.start()
        self._switch_state = toggle(self._switch_state, gate_id)
        return self._rerun()

    def stop(self) -> None:
        self._switch_state = None
        self._result = None

    def _rerun(self) -> SimulationResult:
        self._result = run(self._components, self._wires, self._switch_state, self._roles, self._threshold)
        return self._result
