from quadcanvas.models.color import Color
from quadcanvas.models.layer import Layer, LayerFactory, LayerIdGenerator

__all__ = ["Color", "Layer", "LayerFactory", "LayerIdGenerator"]
