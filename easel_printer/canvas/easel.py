"""Easel model -- canvas state plus the clicks that change it.

The in-game easel keeps its own state (orientation, colour, tool, brush
size) between operations and offers no way to read it back.  ``Easel``
therefore mirrors that state in ``CanvasState`` and only ever changes it
by emitting the matching click, so the mirror and the screen cannot drift
apart silently.

Timing:
    Every pointer primitive is followed by ``timing.settle_s``.  The game
    drops button releases below ~6 ms.  Brush resizing is slower still:
    repeated clicks on the brush controls use ``timing.brush_settle_s``
    (32 ms by default, see ``DEFAULT_BRUSH_SETTLE_MS``).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from easel_printer.configs.loader import MAX_BRUSH_STEP, EaselConfig
from easel_printer.geometry.coords import Bounds, Coord
from easel_printer.hardware.pointer import PointerDriver
from easel_printer.palette.colors import PaletteColor, nearest

logger = logging.getLogger(__name__)

# Extra inset applied by ``draw_pixel`` on top of the brush width so a
# single dab never bleeds past the easel edge.
PIXEL_MARGIN = 12


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class EaselError(Exception):
    """Base exception for drawing failures."""

    pass


class OutOfBounds(EaselError):
    """A translated point lies past the easel's lower-right corner."""

    def __init__(self, point: Coord, bounds: Bounds) -> None:
        self.point = point
        self.bounds = bounds
        super().__init__(
            f"Out of bounds drawing to the easel: {point.as_tuple()} exceeds "
            f"lower-right {bounds.lower_right.as_tuple()}"
        )


class NoCoordinates(EaselError):
    """A shape operation received zero points."""

    def __init__(self) -> None:
        super().__init__("Drawing requires at least one point.")


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


class Orientation(Enum):
    """Easel layout."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"

    def flipped(self) -> Orientation:
        if self is Orientation.PORTRAIT:
            return Orientation.LANDSCAPE
        return Orientation.PORTRAIT


class Tool(Enum):
    """Drawing tools; values match the ``controls`` keys in ``easel.yaml``."""

    PAINTBRUSH = "paintbrush"
    SPRAY_CAN = "spray_can"
    PEN = "pen"


@dataclass
class CanvasState:
    """Mirror of the easel's own state.  Mutated only by ``Easel``."""

    orientation: Orientation
    color: PaletteColor
    tool: Tool
    brush_width: int


# ---------------------------------------------------------------------------
# Easel
# ---------------------------------------------------------------------------


class Easel:
    """Canvas model driving a pointer.

    Parameters
    ----------
    config : EaselConfig
        Screen layout and timings.
    pointer : PointerDriver
        Pointer backend.  Gestures are serialized; the easel is not
        thread-safe and must only be used from the drawing thread.
    """

    def __init__(self, config: EaselConfig, pointer: PointerDriver) -> None:
        self._cfg = config
        self.pointer = pointer
        s = config.session
        self.state = CanvasState(
            orientation=Orientation(s.orientation),
            color=s.color,
            tool=Tool(s.tool),
            brush_width=s.brush_width,
        )

    @property
    def config(self) -> EaselConfig:
        return self._cfg

    # ------------------------------------------------------------------
    # Pointer primitives (each followed by the settle delay)
    # ------------------------------------------------------------------

    def move(self, point: Coord) -> None:
        self.pointer.move_to(point.x, point.y)
        time.sleep(self._cfg.timing.settle_s)

    def press(self) -> None:
        self.pointer.press("left")
        time.sleep(self._cfg.timing.settle_s)

    def release(self) -> None:
        self.pointer.release("left")
        time.sleep(self._cfg.timing.settle_s)

    def click(self, wait_s: float | None = None) -> None:
        """Press and release at the current position."""
        wait = self._cfg.timing.settle_s if wait_s is None else wait_s
        self.pointer.press("left")
        time.sleep(wait)
        self.pointer.release("left")
        time.sleep(wait)

    def move_and_click(self, point: Coord) -> None:
        self.move(point)
        self.click()

    # ------------------------------------------------------------------
    # State changes
    # ------------------------------------------------------------------

    def bounds(self) -> Bounds:
        """Screen bounds of the easel in its current orientation."""
        return self._cfg.get_bounds(self.state.orientation.value)

    def set_orientation(self, orientation: Orientation) -> None:
        """Click the orientation toggle and flip the mirrored orientation.

        The toggle is binary, so the click always happens; callers only
        request a change when *orientation* differs from the current one.
        """
        self.move_and_click(self._cfg.controls.change_orientation)
        self.state.orientation = self.state.orientation.flipped()
        if self.state.orientation is not orientation:
            logger.warning(
                "Orientation toggle produced %s, requested %s",
                self.state.orientation.value,
                orientation.value,
            )
        else:
            logger.info("Easel orientation: %s", orientation.value)

    def set_tool(self, tool: Tool) -> None:
        """Select *tool*.  Always clicks."""
        self.move_and_click(self._cfg.controls.tool(tool.value))
        self.state.tool = tool

    def set_color(self, color: PaletteColor) -> None:
        """Select *color*; does nothing if it is already active.

        Re-clicking the active swatch is not idempotent in-game, so the
        skip is required, not just an optimisation.
        """
        if color is self.state.color:
            return
        self.move_and_click(self._cfg.palette.swatch(color.row, color.col))
        self.state.color = color
        logger.debug("Colour -> %s", color.value)

    def set_brush_width(self, width: int) -> None:
        """Step the brush to *width*, clamped to ``[0, MAX_BRUSH_STEP]``.

        One move-and-click on the increase/decrease control, then
        ``delta - 1`` further clicks in place at the slower brush settle.
        ``delta == 0`` emits nothing.
        """
        target = max(0, min(MAX_BRUSH_STEP, width))
        delta = abs(target - self.state.brush_width)
        if delta > 0:
            controls = self._cfg.controls
            control = (
                controls.increase_brush
                if target > self.state.brush_width
                else controls.decrease_brush
            )
            brush_wait = self._cfg.timing.brush_settle_s
            self.move_and_click(control)
            for _ in range(delta - 1):
                self.click(brush_wait)
                time.sleep(brush_wait)
            logger.debug(
                "Brush %d -> %d (%d clicks)",
                self.state.brush_width, target, delta,
            )
        self.state.brush_width = target

    # ------------------------------------------------------------------
    # Single-pixel drawing
    # ------------------------------------------------------------------

    def draw_pixel(self, point: Coord, rgba: Sequence[float]) -> None:
        """Dab one image pixel at *point* in its nearest palette colour.

        The point is inset by the brush width plus ``PIXEL_MARGIN``.

        Raises
        ------
        OutOfBounds
            If the inset point passes the lower-right corner.
        """
        color = nearest(rgba)
        bounds = self.bounds()
        margin = self.state.brush_width + PIXEL_MARGIN
        target = bounds.upper_left + point + Coord(margin, margin)
        if not bounds.contains_lower_right(target):
            raise OutOfBounds(target, bounds)
        self.set_color(color)
        self.move_and_click(target)
