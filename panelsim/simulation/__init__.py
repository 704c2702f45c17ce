"""Continuity simulation engine.

Components + wires + switch positions -> on/off per component and
energized per wire, by gated reachability from sources and from returns.
"""

from panelsim.simulation.engine import SimulationSession, run
from panelsim.simulation.graph import DEFAULT_PROXIMITY, ConnectivityGraph, build_graph
from panelsim.simulation.projector import SimulationResult
from panelsim.simulation.roles import DEFAULT_ROLE_TABLE, RoleTable
from panelsim.simulation.switches import SwitchState, is_toggleable, seed, toggle

__all__ = [
    "DEFAULT_PROXIMITY",
    "DEFAULT_ROLE_TABLE",
    "ConnectivityGraph",
    "RoleTable",
    "SimulationResult",
    "SimulationSession",
    "SwitchState",
    "build_graph",
    "is_toggleable",
    "run",
    "seed",
    "toggle",
]
