"""Pydantic models for schematics handed to the simulator.

The editor owns these objects; the engine only reads them. Coordinates are
plain floats, non-finite values included, so a damaged document still
validates and the engine can isolate the bad element instead of failing.
"""

from __future__ import annotations

import uuid
from typing import Optional

from pydantic import BaseModel, Field

from panelsim.schematic.geometry import Vec, project_terminal


class Point(BaseModel):
    x: float = 0.0
    y: float = 0.0

    def as_tuple(self) -> Vec:
        return (self.x, self.y)


class Terminal(BaseModel):
    """A connection point, defined in the component's local frame."""

    id: str = Field(default="", description="Terminal name (e.g., 't1', 'A1')")
    offset: Point = Field(default_factory=Point, description="Offset from the component origin, pre-rotation")


class Component(BaseModel):
    """A placed schematic symbol."""

    id: str = Field(..., description="Unique component id within the schematic")
    kind: str = Field(default="", description="Catalog key (e.g., 'push_button_no')")
    role: Optional[str] = Field(
        default=None,
        description="Explicit sub-role tag; overrides the role table lookup by kind",
    )
    position: Point = Field(default_factory=Point)
    rotation: float = Field(default=0.0, description="Degrees, normally a multiple of 90")
    label: str = Field(default="")
    terminals: list[Terminal] = Field(default_factory=list)
    properties: dict[str, str] = Field(default_factory=dict)

    def world_terminals(self) -> list[Vec]:
        """Absolute terminal positions, recomputed from position and rotation."""
        origin = self.position.as_tuple()
        return [project_terminal(origin, self.rotation, t.offset.as_tuple()) for t in self.terminals]


class Wire(BaseModel):
    """An undirected polyline; any of its points may touch other conductors."""

    id: str = Field(..., description="Unique wire id within the schematic")
    points: list[Point] = Field(default_factory=list)
    label: str = Field(default="", description="Wire number/label")

    def point_tuples(self) -> list[Vec]:
        return [p.as_tuple() for p in self.points]


class Schematic(BaseModel):
    """A stored schematic document: components plus wires."""

    schematic_id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    name: str = Field(default="Untitled")
    description: str = Field(default="")
    components: list[Component] = Field(default_factory=list)
    wires: list[Wire] = Field(default_factory=list)

    def get_component(self, component_id: str) -> Optional[Component]:
        for comp in self.components:
            if comp.id == component_id:
                return comp
        return None
