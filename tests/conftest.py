"""Shared test fixtures."""

from __future__ import annotations

import pytest

from quadcanvas.engine.quadtree import QuadtreeNode
from quadcanvas.models.layer import LayerFactory


UNIT_SQUARE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]

# Slightly larger than the unit square: covers every corner of every cell.
COVERING_SQUARE = [(-0.1, -0.1), (1.1, -0.1), (1.1, 1.1), (-0.1, 1.1)]

SMALL_TRIANGLE = [(0.0, 0.0), (0.2, 0.0), (0.0, 0.2)]

FAR_AWAY_TRIANGLE = [(5.0, 5.0), (6.0, 5.0), (5.5, 6.0)]

# Half plane x < 0.5, extended past the cell so no corner sits on an edge.
LEFT_HALF = [(-1.0, -1.0), (0.5, -1.0), (0.5, 2.0), (-1.0, 2.0)]

# Concave 5-pointed star centered in the unit square.
STAR = [
    (0.5, 0.05),
    (0.61, 0.38),
    (0.95, 0.38),
    (0.68, 0.58),
    (0.78, 0.92),
    (0.5, 0.72),
    (0.22, 0.92),
    (0.32, 0.58),
    (0.05, 0.38),
    (0.39, 0.38),
]


def assert_normalized(node: QuadtreeNode) -> None:
    """No divided node may have four equal-valued leaf children."""
    if node.is_leaf():
        return
    children = node.children
    assert len(children) == 4
    assert node.get_value() is None
    uniform = all(c.is_leaf() for c in children) and len({repr(c.get_value()) for c in children}) == 1
    assert not uniform, "divided node with uniform leaf children"
    for child in children:
        assert_normalized(child)


@pytest.fixture
def divided_tree() -> QuadtreeNode:
    """Root split into leaves 1, 2, 3, 4."""
    qt = QuadtreeNode(0)
    qt.subdivide()
    for i, value in enumerate([1, 2, 3, 4]):
        qt.get_child(i).set_value(value)
    return qt


@pytest.fixture
def layer_factory() -> LayerFactory:
    return LayerFactory()
