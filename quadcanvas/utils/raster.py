"""Rasterization utilities: quadtree to cell list, pixel grid, text.

These walk a tree the way a renderer does: through ``is_leaf``/``children``
and ``get_value`` only, mapping each cell's local frame back to root
coordinates.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from quadcanvas.engine.quadtree import QuadtreeNode

_OFFSETS = ((0, 0), (1, 0), (0, 1), (1, 1))


def iter_cells(
    node: QuadtreeNode,
    max_depth: int | None = None,
) -> Iterator[tuple[float, float, float, QuadtreeNode]]:
    """Yield ``(x, y, size, node)`` for each cell in root coordinates.

    Leaves are yielded wherever they are. With ``max_depth`` set, divided
    nodes at that depth are yielded instead of being descended into.
    """
    stack: list[tuple[QuadtreeNode, float, float, float, int]] = [(node, 0.0, 0.0, 1.0, 0)]
    while stack:
        current, x, y, size, depth = stack.pop()
        if current.is_leaf() or (max_depth is not None and depth >= max_depth):
            yield x, y, size, current
            continue
        half = size / 2
        # Reversed so cells come out in child index order
        for index in range(3, -1, -1):
            dx, dy = _OFFSETS[index]
            stack.append((current.children[index], x + dx * half, y + dy * half, half, depth + 1))


def _first_leaf_value(node: QuadtreeNode) -> Any:
    while node.is_divided():
        node = node.children[0]
    return node.get_value()


def to_grid(node: QuadtreeNode, resolution: int, empty: Any = None) -> NDArray[np.object_]:
    """Sample the tree onto a resolution×resolution grid of values.

    Args:
        node: Root of the tree.
        resolution: Grid size; must be a positive power of two.
        empty: Initial grid content (only visible if the tree is malformed).

    Returns:
        Object array indexed ``[row, col]`` with row 0 at the top. Cells finer
        than one pixel contribute the value of their top-left leaf.
    """
    if resolution <= 0 or resolution & (resolution - 1):
        raise ValueError(f"resolution must be a positive power of two, got {resolution}")

    grid = np.full((resolution, resolution), empty, dtype=object)
    max_depth = resolution.bit_length() - 1

    for x, y, size, cell in iter_cells(node, max_depth=max_depth):
        col = int(round(x * resolution))
        row = int(round(y * resolution))
        span = max(1, int(round(size * resolution)))
        value = _first_leaf_value(cell)
        # Element-wise so sequence values (e.g. RGB tuples) are not broadcast
        for r in range(row, row + span):
            for c in range(col, col + span):
                grid[r, c] = value

    return grid


def _symbol(symbols: Mapping[Any, str], cell: Any, default: str) -> str:
    if not isinstance(cell, Hashable):
        return default
    return symbols.get(cell, default)


def grid_to_text(
    grid: NDArray[Any],
    symbols: Mapping[Any, str] | None = None,
    default: str = ".",
) -> str:
    """Convert a value grid to text, one character per cell.

    Cells missing from ``symbols`` or holding unhashable values render as ``default``.
    """
    symbols = symbols or {}
    rows = []
    for row in grid:
        rows.append(" ".join(_symbol(symbols, cell, default) for cell in row))
    return "\n".join(rows)


def covered_area(node: QuadtreeNode, value: Any) -> float:
    """Fraction of the unit square whose leaves hold ``value``."""
    return float(sum(size * size for _, _, size, cell in iter_cells(node) if cell.get_value() == value))
