"""Drawing session -- ties the easel, the encoder and the pause flag together.

A session owns the ``Easel`` (and so the canvas state) for its lifetime
and runs strictly on one thread.  Between every pixel and every stroke it
passes a pause checkpoint; a ``draw``/``fill`` call in progress is never
interrupted, so resuming needs no rollback.

Any ``EaselError`` propagates out and ends the session: a half-drawn
easel cannot be resumed safely.
"""

from __future__ import annotations

import logging
from typing import Iterable

from PIL import Image

from easel_printer.canvas.easel import Easel, Orientation, Tool
from easel_printer.canvas.shapes import ShapeDrawer
from easel_printer.encoder.imaging import iter_palette_pixels, orientation_for
from easel_printer.encoder.stroke_encoder import StrokeEncoder
from easel_printer.hardware.pause import PauseFlag
from easel_printer.job_ir.operations import Stroke

logger = logging.getLogger(__name__)


class PrintSession:
    """Single-threaded drawing session.

    Parameters
    ----------
    easel : Easel
        Canvas model (owns the pointer).
    pause : PauseFlag | None
        Shared pause flag; a fresh, never-set flag when ``None``.
    """

    def __init__(self, easel: Easel, pause: PauseFlag | None = None) -> None:
        self.easel = easel
        self.drawer = ShapeDrawer(easel)
        self.pause = pause if pause is not None else PauseFlag()

    def checkpoint(self) -> None:
        """Block here while paused."""
        self.pause.wait_while_paused(self.easel.config.timing.pause_poll_s)

    # ------------------------------------------------------------------
    # Images
    # ------------------------------------------------------------------

    def prepare_easel(self, image_size: tuple[int, int]) -> None:
        """Smallest brush, paintbrush tool, orientation matching the image."""
        self.easel.set_brush_width(0)
        self.easel.set_tool(Tool.PAINTBRUSH)
        wanted = Orientation(orientation_for(image_size))
        width, height = image_size
        if width != height and self.easel.state.orientation is not wanted:
            self.easel.set_orientation(wanted)

    def print_image(self, image: Image.Image) -> int:
        """Draw *image* row by row; returns the number of strokes emitted."""
        self.prepare_easel(image.size)
        encoder = StrokeEncoder(
            self.drawer,
            image.size,
            self.easel.bounds(),
            background=self.easel.config.session.background,
        )
        logger.info(
            "Printing %dx%d image at offset (%d, %d)",
            image.width, image.height, encoder.offset_x, encoder.offset_y,
        )
        for x, y, color in iter_palette_pixels(image):
            self.checkpoint()
            encoder.handle_pixel(x, y, color)
        self.checkpoint()
        encoder.finish()
        return encoder.strokes_emitted

    # ------------------------------------------------------------------
    # Shapes
    # ------------------------------------------------------------------

    def draw_strokes(self, strokes: Iterable[Stroke]) -> int:
        """Draw shape strokes in order; returns how many were drawn."""
        count = 0
        for stroke in strokes:
            self.checkpoint()
            self.drawer.draw_stroke(stroke)
            count += 1
        logger.info("Drew %d shapes", count)
        return count
