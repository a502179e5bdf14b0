"""Command-line entry point: paint shapes into a layer and print the grid.

Usage:
    quadcanvas --depth 5 --circle 0.5 0.5 0.3 --line 0.1 0.9 0.9 0.1 0.05
    quadcanvas --polygon 0.1,0.1 0.9,0.2 0.5,0.9 --resolution 16
"""

from __future__ import annotations

import argparse
import logging
import sys

from quadcanvas.config import settings
from quadcanvas.engine.quadtree import QuadtreeNode
from quadcanvas.models.color import Color
from quadcanvas.models.layer import Layer, LayerFactory
from quadcanvas.utils.raster import grid_to_text, to_grid

logger = logging.getLogger(__name__)

_EMPTY = "background"
_FILLED = "ink"


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.quadcanvas_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _point(text: str) -> tuple[float, float]:
    try:
        x, y = (float(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}") from None
    return x, y


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quadcanvas", description="Paint shapes into a quadtree layer.")
    parser.add_argument("--name", default="canvas", help="Layer name")
    parser.add_argument("--depth", type=int, default=5, help="Maximum subdivision depth")
    parser.add_argument(
        "--resolution",
        type=int,
        default=settings.grid_resolution,
        help="Printed grid size (power of two)",
    )
    parser.add_argument("--polygon", nargs="+", type=_point, action="append", default=[], metavar="X,Y")
    parser.add_argument("--circle", nargs=3, type=float, action="append", default=[], metavar=("CX", "CY", "R"))
    parser.add_argument(
        "--line",
        nargs=5,
        type=float,
        action="append",
        default=[],
        metavar=("X0", "Y0", "X1", "Y1", "WIDTH"),
    )
    return parser


def paint(layer: Layer, args: argparse.Namespace) -> None:
    root = layer.get_quadtree()
    for polygon in args.polygon:
        root.fill_polygon(polygon, _FILLED, args.depth)
    for cx, cy, radius in args.circle:
        root.fill_circle(cx, cy, radius, _FILLED, args.depth)
    for x0, y0, x1, y1, width in args.line:
        root.draw_line(x0, y0, x1, y1, _FILLED, width, args.depth)


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)

    layer = LayerFactory().create(args.name)
    layer.add_color(Color(name=_EMPTY, color="."))
    layer.add_color(Color(name=_FILLED, color="#"))
    layer.set_quadtree(QuadtreeNode(_EMPTY))

    try:
        paint(layer, args)
        grid = to_grid(layer.get_quadtree(), args.resolution)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    root = layer.get_quadtree()
    logger.info("Layer %d (%s): %d leaves, depth %d", layer.id, layer.name, root.leaf_count(), root.depth())
    symbols = {color.name: str(color.color) for color in layer.colors}
    print(grid_to_text(grid, symbols))
    return 0


if __name__ == "__main__":
    sys.exit(main())
