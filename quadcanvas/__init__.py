"""Region quadtree raster with shape filling and layered composition."""

__version__ = "0.1.0"
