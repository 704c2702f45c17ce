"""Gated breadth-first reachability over the connectivity graph."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable

from panelsim.simulation.graph import ConnectivityGraph


def reachable(
    graph: ConnectivityGraph,
    seeds: Iterable[int],
    blocks: Callable[[int], bool],
) -> frozenset[int]:
    """Node indices reachable from `seeds`.

    A node for which `blocks(index)` is true (an open gate) is still
    visited when reached, so its own state can be reported, but the
    traversal does not continue through it.
    """
    visited: set[int] = set()
    queue: deque[int] = deque()
    for index in seeds:
        if index not in visited:
            visited.add(index)
            queue.append(index)

    while queue:
        current = queue.popleft()
        if blocks(current):
            continue
        for neighbor in graph.neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return frozenset(visited)
