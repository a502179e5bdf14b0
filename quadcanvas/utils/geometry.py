"""Leaf-node geometry predicates against the unit square. No engine imports.

Every shape is expressed in the local frame of the cell being tested, so the
cell is always ``[0,1]x[0,1]`` with (0, 0) at the top-left corner.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence

import numpy as np

Point = tuple[float, float]
Polygon = Sequence[Sequence[float]]

# Corner order matches child index order: top-left, top-right, bottom-left, bottom-right.
UNIT_CORNERS = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
CELL_CENTER: Point = (0.5, 0.5)

# Child origin offsets inside the parent frame, in child index order.
QUADRANT_OFFSETS: tuple[Point, ...] = ((0.0, 0.0), (0.5, 0.0), (0.0, 0.5), (0.5, 0.5))


class Coverage(enum.Enum):
    INSIDE = "inside"
    OUTSIDE = "outside"
    MIXED = "mixed"


def point_in_polygon(polygon: Polygon, px: float, py: float) -> bool:
    """Even-odd ray casting, including the wrap edge from last vertex to first.

    A horizontal edge has ``(yi > py) == (yj > py)`` for every ``py``, so it
    never reaches the intersection division and is skipped. Points exactly on
    an edge get whatever the floating-point comparison yields.
    """
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i][0], polygon[i][1]
        xj, yj = polygon[j][0], polygon[j][1]
        if (yi > py) != (yj > py) and px < (xj - xi) * (py - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def _classify(flags: Sequence[bool]) -> Coverage:
    if all(flags):
        return Coverage.INSIDE
    if not any(flags):
        return Coverage.OUTSIDE
    return Coverage.MIXED


def polygon_coverage(polygon: Polygon) -> Coverage:
    """Classify the unit square by testing its 4 corners for polygon membership."""
    return _classify([point_in_polygon(polygon, float(x), float(y)) for x, y in UNIT_CORNERS])


def circle_coverage(cx: float, cy: float, radius: float) -> Coverage:
    """Classify the unit square by the distance from the center to each corner."""
    distances = np.hypot(UNIT_CORNERS[:, 0] - cx, UNIT_CORNERS[:, 1] - cy)
    if bool(np.all(distances <= radius)):
        return Coverage.INSIDE
    if bool(np.all(distances > radius)):
        return Coverage.OUTSIDE
    return Coverage.MIXED


def polygon_contains_center(polygon: Polygon) -> bool:
    return point_in_polygon(polygon, *CELL_CENTER)


def circle_contains_center(cx: float, cy: float, radius: float) -> bool:
    return math.hypot(cx - CELL_CENTER[0], cy - CELL_CENTER[1]) <= radius


def rescale_polygon(polygon: Polygon, quadrant: int) -> list[Point]:
    """Map polygon vertices into the frame of child ``quadrant``.

    Scales by 0.5 and translates by the quadrant origin offset.
    """
    ox, oy = QUADRANT_OFFSETS[quadrant]
    return [(ox + 0.5 * p[0], oy + 0.5 * p[1]) for p in polygon]


def rescale_circle(cx: float, cy: float, radius: float, quadrant: int) -> tuple[float, float, float]:
    """Map a circle into the frame of child ``quadrant``.

    The child covers half the parent, so the circle is magnified by 2 and
    shifted by the child's origin in child units.
    """
    ox, oy = QUADRANT_OFFSETS[quadrant]
    return 2 * cx - 2 * ox, 2 * cy - 2 * oy, 2 * radius


def capsule_body(x0: float, y0: float, x1: float, y1: float, width: float) -> list[Point]:
    """Rectangle of the line body, offset ``width/2`` perpendicular to the segment."""
    theta = math.atan2(y1 - y0, x1 - x0)
    half = width / 2
    left = (half * math.cos(theta + math.pi / 2), half * math.sin(theta + math.pi / 2))
    right = (half * math.cos(theta - math.pi / 2), half * math.sin(theta - math.pi / 2))
    return [
        (x0 + left[0], y0 + left[1]),
        (x0 + right[0], y0 + right[1]),
        (x1 + right[0], y1 + right[1]),
        (x1 + left[0], y1 + left[1]),
    ]
