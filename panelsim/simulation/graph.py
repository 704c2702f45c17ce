"""Connectivity graph: components and wires as nodes, proximity as edges.

    components + wires
        │
        ▼
    [PROJECT]  ─── terminal offsets -> world points (exact for quarter turns)
        │
        ▼
    [EXCLUDE]  ─── drop elements with non-finite coordinates (isolated nodes)
        │
        ▼
    [LINK]     ─── wire point ~ component terminal, wire point ~ wire point
        │
        ▼
    ConnectivityGraph (node arena + index adjacency, immutable)

Components never link to each other directly: two coincident terminals only
connect through a wire node touching both.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from panelsim.schematic.geometry import Vec, all_finite, is_finite_point, points_close
from panelsim.schematic.models import Component, Wire
from panelsim.types import NodeKind

log = logging.getLogger(__name__)

# Below one 20 px grid step, above the 10 px half-step
DEFAULT_PROXIMITY = 15.0

NodeKey = tuple[NodeKind, str]


@dataclass(frozen=True)
class ConnectivityGraph:
    """Undirected graph over component and wire nodes.

    Node i is `nodes[i]`; `adjacency[i]` holds the sorted indices of its
    neighbors. Keys are (kind, id) so a wire and a component sharing an id
    string stay distinct.
    """

    nodes: tuple[NodeKey, ...]
    adjacency: tuple[tuple[int, ...], ...]
    isolated_indices: frozenset[int] = frozenset()
    _index: dict[NodeKey, int] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self._index:
            self._index.update({key: i for i, key in enumerate(self.nodes)})

    @property
    def isolated(self) -> frozenset[NodeKey]:
        """Keys of the isolated nodes; see `isolated_indices` for positions."""
        return frozenset(self.nodes[i] for i in self.isolated_indices)

    def is_isolated(self, index: int) -> bool:
        return index in self.isolated_indices

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(n) for n in self.adjacency) // 2

    def index_of(self, kind: NodeKind, element_id: str) -> Optional[int]:
        return self._index.get((kind, element_id))

    def neighbors(self, index: int) -> tuple[int, ...]:
        return self.adjacency[index]

    def has_edge(self, a: NodeKey, b: NodeKey) -> bool:
        ia, ib = self._index.get(a), self._index.get(b)
        if ia is None or ib is None:
            return False
        return ib in self.adjacency[ia]

    def neighbor_keys(self, kind: NodeKind, element_id: str) -> list[NodeKey]:
        index = self.index_of(kind, element_id)
        if index is None:
            return []
        return [self.nodes[j] for j in self.adjacency[index]]


def _component_terminals(component: Component) -> Optional[list[Vec]]:
    """World terminals, or None when any input coordinate is non-finite."""
    pos = component.position
    offsets = [v for t in component.terminals for v in (t.offset.x, t.offset.y)]
    if not all_finite([pos.x, pos.y, component.rotation, *offsets]):
        return None
    points = component.world_terminals()
    if not all(is_finite_point(p) for p in points):
        return None
    return points


def _wire_points(wire: Wire) -> Optional[list[Vec]]:
    points = wire.point_tuples()
    if not points or not all(is_finite_point(p) for p in points):
        return None
    return points


def _any_close(points_a: Iterable[Vec], points_b: Sequence[Vec], threshold: float) -> bool:
    return any(points_close(a, b, threshold) for a in points_a for b in points_b)


def build_graph(
    components: Sequence[Component],
    wires: Sequence[Wire],
    threshold: float = DEFAULT_PROXIMITY,
) -> ConnectivityGraph:
    """Build the connectivity graph for one simulation run.

    Every component and wire becomes a node, in input order (components
    first). Elements with non-finite coordinates keep their node but get no
    edges and are listed in `isolated_indices`.
    """
    nodes: list[NodeKey] = []
    isolated: set[int] = set()
    terminals: list[tuple[int, list[Vec]]] = []
    wire_points: list[tuple[int, list[Vec]]] = []

    for comp in components:
        key = (NodeKind.COMPONENT, comp.id)
        index = len(nodes)
        nodes.append(key)
        points = _component_terminals(comp)
        if points is None:
            log.debug("Excluding component %s: non-finite coordinates", comp.id)
            isolated.add(index)
        elif points:
            terminals.append((index, points))

    for wire in wires:
        key = (NodeKind.WIRE, wire.id)
        index = len(nodes)
        nodes.append(key)
        points = _wire_points(wire)
        if points is None:
            log.debug("Excluding wire %s: no points or non-finite coordinates", wire.id)
            isolated.add(index)
        else:
            wire_points.append((index, points))

    adjacency: list[set[int]] = [set() for _ in nodes]

    def link(a: int, b: int) -> None:
        adjacency[a].add(b)
        adjacency[b].add(a)

    for w_index, w_points in wire_points:
        # Wire <-> component: any polyline point against any terminal
        for c_index, c_points in terminals:
            if _any_close(w_points, c_points, threshold):
                link(w_index, c_index)

    for i, (a_index, a_points) in enumerate(wire_points):
        # Wire <-> wire: each unordered pair once
        for b_index, b_points in wire_points[i + 1:]:
            if _any_close(a_points, b_points, threshold):
                link(a_index, b_index)

    graph = ConnectivityGraph(
        nodes=tuple(nodes),
        adjacency=tuple(tuple(sorted(n)) for n in adjacency),
        isolated_indices=frozenset(isolated),
    )
    log.debug(
        "Graph built: %d nodes, %d edges, %d isolated",
        graph.node_count, graph.edge_count, len(isolated),
    )
    return graph
