"""Region quadtree over the unit square.

A node is either a leaf holding one value or a divided node owning exactly
four children, never both. Nodes store no absolute bounds: every child sees
its own ``[0,1]x[0,1]`` frame.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from quadcanvas.engine import fill
from quadcanvas.utils.geometry import Polygon

V = TypeVar("V")

# Child indices
TOP_LEFT = 0
TOP_RIGHT = 1
BOTTOM_LEFT = 2
BOTTOM_RIGHT = 3


class QuadtreeNode(Generic[V]):
    """One cell of a region quadtree.

    ``V`` must have a deterministic ``==`` returning a bool: merging compares
    sibling values with it. For types without one (NaN floats, numpy arrays)
    merge results are undefined.
    """

    __slots__ = ("_value", "_children")

    def __init__(self, value: V) -> None:
        self._value: V | None = value
        self._children: list[QuadtreeNode[V]] | None = None

    def __repr__(self) -> str:
        if self._children is None:
            return f"QuadtreeNode({self._value!r})"
        return f"QuadtreeNode(<divided, {self.leaf_count()} leaves>)"

    # value

    def set_value(self, value: V) -> None:
        """Make this node a leaf holding ``value``, dropping any subtree."""
        self._value = value
        self._children = None

    def get_value(self) -> V | None:
        """Leaf value, or ``None`` when divided."""
        return self._value

    @property
    def value(self) -> V | None:
        return self._value

    # children

    def is_leaf(self) -> bool:
        return self._children is None

    def is_divided(self) -> bool:
        return self._children is not None

    def get_child(self, index: int) -> QuadtreeNode[V] | None:
        if index not in (TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT):
            raise IndexError(f"child index must be 0..3, got {index!r}")
        if self._children is None:
            return None
        return self._children[index]

    @property
    def children(self) -> tuple[QuadtreeNode[V], ...]:
        if self._children is None:
            return ()
        return tuple(self._children)

    # structure

    def subdivide(self) -> None:
        """Split a leaf into four leaves inheriting its value. No-op when divided."""
        if self._children is not None:
            return
        self._children = [QuadtreeNode(self._value) for _ in range(4)]
        self._value = None

    def merge_if_possible(self) -> None:
        """Collapse uniform subtrees bottom-up.

        Children are normalized first; this node then becomes a leaf if all
        four children are leaves with equal values.
        """
        if self._children is None:
            return

        for child in self._children:
            child.merge_if_possible()

        first = self._children[0]
        if all(child.is_leaf() and child._value == first._value for child in self._children):
            self._value = first._value
            self._children = None

    # shapes

    def fill_polygon(self, polygon: Polygon, value: V, max_depth: int) -> None:
        fill.fill_polygon(self, polygon, value, max_depth)

    def fill_circle(self, cx: float, cy: float, radius: float, value: V, max_depth: int) -> None:
        fill.fill_circle(self, cx, cy, radius, value, max_depth)

    def draw_line(
        self,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        value: V,
        width: float,
        max_depth: int,
    ) -> None:
        fill.draw_line(self, x0, y0, x1, y1, value, width, max_depth)

    # inspection

    def depth(self) -> int:
        """Height of the subtree; 0 for a leaf."""
        if self._children is None:
            return 0
        return 1 + max(child.depth() for child in self._children)

    def leaf_count(self) -> int:
        if self._children is None:
            return 1
        return sum(child.leaf_count() for child in self._children)

    def iter_leaves(self) -> Iterator[QuadtreeNode[V]]:
        """Leaves in pre-order, children visited in index order."""
        if self._children is None:
            yield self
            return
        for child in self._children:
            yield from child.iter_leaves()

    def snapshot(self) -> tuple[str, Any]:
        """Comparable pre-order description of the tree.

        ``("leaf", value)`` or ``("divided", (c0, c1, c2, c3))``.
        """
        if self._children is None:
            return ("leaf", self._value)
        return ("divided", tuple(child.snapshot() for child in self._children))
