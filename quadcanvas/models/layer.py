"""Layer: a named raster with a palette and child layers.

Children are plain references: a layer may sit under several parents, or
under the same parent more than once, and nothing prevents cycles. Whoever
holds the layers owns their lifetime.
"""

from __future__ import annotations

import itertools
import logging
from typing import Any

from quadcanvas.engine.quadtree import QuadtreeNode
from quadcanvas.models.color import Color

logger = logging.getLogger(__name__)


class LayerIdGenerator:
    """Monotonically increasing layer ids, starting at ``start``."""

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)


class Layer:
    def __init__(self, layer_id: int, name: str) -> None:
        self._id = layer_id
        self.name = name
        self.colors: list[Color] = []
        self.children: list[Layer] = []
        self._quadtree: QuadtreeNode[Any] | None = None

    def __repr__(self) -> str:
        return f"Layer(id={self._id}, name={self.name!r})"

    @property
    def id(self) -> int:
        return self._id

    def get_id(self) -> int:
        return self._id

    # name

    def set_name(self, name: str) -> None:
        self.name = name

    def get_name(self) -> str:
        return self.name

    # colors

    def add_color(self, color: Color) -> None:
        self.colors.append(color)

    def get_colors(self) -> list[Color]:
        return self.colors

    def includes_color(self, color_name: str) -> bool:
        return any(color.name == color_name for color in self.colors)

    def get_color(self, color_name: str) -> Color | None:
        """First palette entry named ``color_name``."""
        return next((color for color in self.colors if color.name == color_name), None)

    # children

    def add_child(self, layer: Layer) -> None:
        self.children.append(layer)

    def get_children(self) -> list[Layer]:
        return self.children

    def includes_layer(self, layer_id: int) -> bool:
        return any(layer.id == layer_id for layer in self.children)

    # quadtree

    def set_quadtree(self, quadtree: QuadtreeNode[Any] | None) -> None:
        if self._quadtree is not None and quadtree is not self._quadtree:
            logger.debug("Layer %d: replacing quadtree", self._id)
        self._quadtree = quadtree

    def get_quadtree(self) -> QuadtreeNode[Any] | None:
        return self._quadtree

    @property
    def quadtree(self) -> QuadtreeNode[Any] | None:
        return self._quadtree


class LayerFactory:
    """Creates layers with ids from its own generator.

    Pass a shared ``LayerIdGenerator`` to keep ids unique across factories.
    """

    def __init__(self, id_generator: LayerIdGenerator | None = None) -> None:
        self.id_generator = id_generator or LayerIdGenerator()

    def create(self, name: str) -> Layer:
        layer = Layer(self.id_generator.next_id(), name)
        logger.debug("Created layer %d (%s)", layer.id, name)
        return layer
