"""Terminal projection: local terminal offsets to world coordinates.

Quarter turns use exact integer cos/sin so projected terminals land on the
same grid points as the wires drawn to them. Any other angle falls back to
the trigonometric rotation.
"""

from __future__ import annotations

import math
from typing import Iterable

Vec = tuple[float, float]

# (cos, sin) for the four quarter turns
_QUARTER_TURNS: dict[float, tuple[int, int]] = {
    0.0: (1, 0),
    90.0: (0, 1),
    180.0: (-1, 0),
    270.0: (0, -1),
}


def _cos_sin(degrees: float) -> tuple[float, float]:
    normalized = degrees % 360.0
    exact = _QUARTER_TURNS.get(normalized)
    if exact is not None:
        return float(exact[0]), float(exact[1])
    rad = math.radians(normalized)
    return math.cos(rad), math.sin(rad)


def rotate(offset: Vec, degrees: float) -> Vec:
    """Rotate a local offset by `degrees` (counter-clockwise in math axes)."""
    cos, sin = _cos_sin(degrees)
    x, y = offset
    return (x * cos - y * sin, x * sin + y * cos)


def project_terminal(position: Vec, rotation: float, offset: Vec) -> Vec:
    """World-space point of a terminal: rotate the offset, then translate."""
    rx, ry = rotate(offset, rotation)
    return (position[0] + rx, position[1] + ry)


def is_finite_point(point: Vec) -> bool:
    return math.isfinite(point[0]) and math.isfinite(point[1])


def all_finite(values: Iterable[float]) -> bool:
    return all(math.isfinite(v) for v in values)


def points_close(a: Vec, b: Vec, threshold: float) -> bool:
    """Independent-axis proximity test shared by every edge rule."""
    return abs(a[0] - b[0]) < threshold and abs(a[1] - b[1]) < threshold
