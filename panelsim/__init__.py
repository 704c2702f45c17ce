"""panelsim: continuity simulator for electrical control schematics."""

__version__ = "0.3.0"

from panelsim.schematic.models import Component, Point, Schematic, Terminal, Wire
from panelsim.simulation import RoleTable, SimulationResult, SimulationSession, SwitchState, run, seed, toggle
from panelsim.types import DisplayState, Role, SubRole

__all__ = [
    "Component",
    "DisplayState",
    "Point",
    "Role",
    "RoleTable",
    "Schematic",
    "SimulationResult",
    "SimulationSession",
    "SubRole",
    "SwitchState",
    "Terminal",
    "Wire",
    "__version__",
    "run",
    "seed",
    "toggle",
]
