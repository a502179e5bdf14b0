"""Palette entry model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class Color(BaseModel):
    """A named color. Names are untyped keys (often raster values) and not unique; the value is opaque."""

    name: Any
    color: Any = None

    model_config = {"validate_assignment": True}
