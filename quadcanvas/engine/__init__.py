"""Quadtree engine: node state machine and shape rasterization."""

from quadcanvas.engine.quadtree import QuadtreeNode
from quadcanvas.engine.fill import draw_line, fill_circle, fill_polygon

__all__ = [
    "QuadtreeNode",
    "fill_polygon",
    "fill_circle",
    "draw_line",
]
