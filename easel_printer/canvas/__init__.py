"""
Canvas module.

Provides the easel model (state mirror and state-changing clicks) and
the shape drawer with its scanline polygon filler.
"""

from easel_printer.canvas.easel import (
    CanvasState,
    Easel,
    EaselError,
    NoCoordinates,
    Orientation,
    OutOfBounds,
    Tool,
)
from easel_printer.canvas.shapes import FILL_STEP, PolygonFiller, ShapeDrawer

__all__ = [
    "CanvasState",
    "Easel",
    "EaselError",
    "FILL_STEP",
    "NoCoordinates",
    "Orientation",
    "OutOfBounds",
    "PolygonFiller",
    "ShapeDrawer",
    "Tool",
]
