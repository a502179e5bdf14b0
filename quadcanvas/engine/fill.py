"""Shape rasterization into a quadtree.

Each fill classifies the current cell against the shape, paints or skips
uniform cells, and subdivides mixed ones. Children are visited with the shape
rescaled into their own unit frame, then the cell is re-normalized.
"""

from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Any

import numpy as np

from quadcanvas.config import get_settings
from quadcanvas.utils.geometry import (
    Coverage,
    Polygon,
    capsule_body,
    circle_contains_center,
    circle_coverage,
    polygon_contains_center,
    polygon_coverage,
    rescale_circle,
    rescale_polygon,
)

if TYPE_CHECKING:
    from quadcanvas.engine.quadtree import QuadtreeNode

logger = logging.getLogger(__name__)


def check_depth(max_depth: int) -> int:
    """Reject depths that are not integers or fall outside ``[0, max_fill_depth]``.

    Integer-like values (e.g. ``numpy.int64``) are accepted and returned as ``int``.
    """
    limit = get_settings().max_fill_depth
    if isinstance(max_depth, (bool, np.bool_)):
        raise ValueError(f"max_depth must be an int, got {type(max_depth).__name__}")
    try:
        depth = operator.index(max_depth)
    except TypeError:
        raise ValueError(f"max_depth must be an int, got {type(max_depth).__name__}") from None
    if depth < 0 or depth > limit:
        raise ValueError(f"max_depth must be within [0, {limit}], got {depth}")
    return depth


def _fill_polygon(node: QuadtreeNode, polygon: Polygon, value: Any, depth: int) -> None:
    if depth == 0:
        if polygon_contains_center(polygon):
            node.set_value(value)
        return

    coverage = polygon_coverage(polygon)
    if coverage is Coverage.INSIDE:
        node.set_value(value)
        return
    if coverage is Coverage.OUTSIDE:
        return

    node.subdivide()
    for quadrant, child in enumerate(node.children):
        _fill_polygon(child, rescale_polygon(polygon, quadrant), value, depth - 1)
    node.merge_if_possible()


def _fill_circle(node: QuadtreeNode, cx: float, cy: float, radius: float, value: Any, depth: int) -> None:
    if depth == 0:
        if circle_contains_center(cx, cy, radius):
            node.set_value(value)
        return

    coverage = circle_coverage(cx, cy, radius)
    if coverage is Coverage.INSIDE:
        node.set_value(value)
        return
    if coverage is Coverage.OUTSIDE:
        return

    node.subdivide()
    for quadrant, child in enumerate(node.children):
        _fill_circle(child, *rescale_circle(cx, cy, radius, quadrant), value, depth - 1)
    node.merge_if_possible()


def fill_polygon(node: QuadtreeNode, polygon: Polygon, value: Any, max_depth: int) -> None:
    """Paint ``value`` into every cell of ``node`` covered by ``polygon``.

    Args:
        node: Root of the region to paint, in its own unit frame.
        polygon: Ordered (x, y) vertices; the closing edge is implicit.
        value: Value written into covered cells.
        max_depth: Number of subdivision levels allowed below ``node``.
    """
    max_depth = check_depth(max_depth)
    logger.debug("fill_polygon: %d vertices, depth %d", len(polygon), max_depth)
    _fill_polygon(node, polygon, value, max_depth)


def fill_circle(node: QuadtreeNode, cx: float, cy: float, radius: float, value: Any, max_depth: int) -> None:
    """Paint ``value`` into every cell of ``node`` covered by the circle."""
    max_depth = check_depth(max_depth)
    logger.debug("fill_circle: center (%.4f, %.4f) r=%.4f, depth %d", cx, cy, radius, max_depth)
    _fill_circle(node, cx, cy, radius, value, max_depth)


def draw_line(
    node: QuadtreeNode,
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    value: Any,
    width: float,
    max_depth: int,
) -> None:
    """Paint a capsule: the line body rectangle plus a round cap at each end.

    The three fills overlap but write the same value, so order does not matter.
    """
    max_depth = check_depth(max_depth)
    logger.debug("draw_line: (%.4f, %.4f) -> (%.4f, %.4f) width %.4f, depth %d", x0, y0, x1, y1, width, max_depth)
    half = width / 2
    _fill_polygon(node, capsule_body(x0, y0, x1, y1, width), value, max_depth)
    _fill_circle(node, x0, y0, half, value, max_depth)
    _fill_circle(node, x1, y1, half, value, max_depth)
