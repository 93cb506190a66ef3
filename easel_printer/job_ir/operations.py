"""Gesture IR -- the vocabulary between the drawing engine and the pointer.

Every pointer action is an immutable, slotted dataclass.  Gestures use
**device-absolute** screen coordinates: they are what the pointer driver
actually receives, after ``ShapeDrawer`` has translated image-relative
points.

Grouping
--------
A *stroke* on the easel is one press -> move(s) -> release sequence.
``gestures_to_strokes`` splits a flat gesture log at ``Release``
boundaries, which is how tests and dry runs count emitted strokes.

``Stroke`` (below) is the higher-level drawing request: image-relative
points plus colour and close/fill flags.  It is built, drawn and
discarded; nothing retains it.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from easel_printer.geometry.coords import Coord

if TYPE_CHECKING:
    from easel_printer.palette.colors import PaletteColor

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

GestureGroup = list["Gesture"]
"""Gestures of one press/release cycle (a click or a drawn stroke)."""

# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Gesture(ABC):
    """Base class for all pointer gestures."""

    pass


# ---------------------------------------------------------------------------
# Pointer gestures  (device-absolute pixels)
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MoveTo(Gesture):
    """Move the pointer to ``(x, y)`` on screen."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Press(Gesture):
    """Press a pointer button at the current position."""

    button: str = "left"


@dataclass(frozen=True, slots=True)
class Release(Gesture):
    """Release a pointer button at the current position."""

    button: str = "left"


# ---------------------------------------------------------------------------
# Drawing request
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Stroke:
    """One atomic press -> move(s) -> release drawing request.

    Parameters
    ----------
    points : tuple[Coord, ...]
        Ordered image-relative points.  Must contain >= 1 point.
    color : PaletteColor
        Colour to select before drawing.
    close : bool
        Return to the first point before releasing.
    fill : bool
        Scanline-fill the polygon after outlining it.  Implies ``close``.
    """

    points: tuple[Coord, ...]
    color: PaletteColor
    close: bool = False
    fill: bool = False

    def __post_init__(self) -> None:
        if len(self.points) < 1:
            raise ValueError("Stroke requires >= 1 point, got 0")

    @classmethod
    def line(cls, start: Coord, end: Coord, color: PaletteColor) -> Stroke:
        return cls(points=(start, end), color=color)


def create_shape(
    points: Sequence[Coord | Sequence[int]],
    color: PaletteColor,
    fill: bool = False,
) -> Stroke:
    """Build a closed (optionally filled) shape stroke from ``(x, y)`` pairs."""
    return Stroke(
        points=tuple(Coord.of(p) for p in points),
        color=color,
        close=True,
        fill=fill,
    )


def gestures_to_strokes(gestures: list[Gesture]) -> list[GestureGroup]:
    """Split a flat gesture log into groups at ``Release`` boundaries.

    Parameters
    ----------
    gestures : list[Gesture]
        Flat gesture log, e.g. ``RecordingPointer.gestures``.

    Returns
    -------
    list[GestureGroup]
        One group per press/release cycle.  Trailing gestures with no
        closing ``Release`` form a final group.
    """
    if not gestures:
        return []

    groups: list[GestureGroup] = []
    current: GestureGroup = []

    for gesture in gestures:
        current.append(gesture)
        if isinstance(gesture, Release):
            groups.append(current)
            current = []

    if current:
        groups.append(current)

    return groups


def drawn_path(group: GestureGroup) -> list[tuple[int, int]]:
    """Screen positions visited while the button was held in *group*.

    The move immediately preceding ``Press`` counts as the first point.
    """
    path: list[tuple[int, int]] = []
    last_move: tuple[int, int] | None = None
    pressed = False
    for gesture in group:
        if isinstance(gesture, MoveTo):
            last_move = (gesture.x, gesture.y)
            if pressed:
                path.append(last_move)
        elif isinstance(gesture, Press):
            pressed = True
            if last_move is not None:
                path.append(last_move)
        elif isinstance(gesture, Release):
            pressed = False
    return path
