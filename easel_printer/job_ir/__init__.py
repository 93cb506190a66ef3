"""
Gesture intermediate representation.

Defines pointer gestures as immutable dataclasses plus the ``Stroke``
drawing request.  This vocabulary is the contract between the drawing
engine and any pointer backend.
"""

from easel_printer.job_ir.operations import (
    Gesture,
    GestureGroup,
    MoveTo,
    Press,
    Release,
    Stroke,
    create_shape,
    drawn_path,
    gestures_to_strokes,
)

__all__ = [
    "Gesture",
    "GestureGroup",
    "MoveTo",
    "Press",
    "Release",
    "Stroke",
    "create_shape",
    "drawn_path",
    "gestures_to_strokes",
]
