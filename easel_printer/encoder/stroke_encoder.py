"""Run-length stroke encoder -- raster rows to horizontal strokes.

Pixels arrive in row-major order.  The encoder keeps one open *run*
(start point + palette colour) and emits it as a straight horizontal
stroke when either

    - the row ends (next pixel has a larger y): the run extends to the
      image's last column, or
    - the quantized colour changes mid-row: the run ends one column left
      of the new pixel.

Runs never merge across rows, even when the colours match.

Letterboxing
------------
The image is centred on the easel.  ``finish()`` flushes the last run
and then paints the gaps around the image in the background colour:
top rows, left gap, right gap, bottom rows.

Coordinates handed to the drawer are image-relative easel coordinates
(pixel position + centering offset).
"""

from __future__ import annotations

import logging
from typing import Protocol, Sequence, Union

from easel_printer.geometry.coords import Bounds, Coord
from easel_printer.job_ir.operations import Stroke
from easel_printer.palette.colors import PaletteColor, nearest

logger = logging.getLogger(__name__)

PixelColor = Union[PaletteColor, Sequence[float]]


class StrokeSink(Protocol):
    """Anything that can draw a ``Stroke`` (normally ``ShapeDrawer``)."""

    def draw_stroke(self, stroke: Stroke) -> None: ...


def centering_offsets(
    image_size: tuple[int, int], bounds: Bounds,
) -> tuple[int, int, int, int]:
    """Offsets that centre an image on the easel.

    Returns
    -------
    tuple[int, int, int, int]
        ``(offset_x, offset_y, max_x, max_y)`` where ``max_x``/``max_y``
        are the last usable image-relative column/row on the easel.
    """
    width, height = image_size
    max_x = bounds.width - 1
    max_y = bounds.height - 1
    offset_x = max(0, (max_x + 1 - width) // 2)
    offset_y = max(0, (max_y + 1 - height) // 2)
    return offset_x, offset_y, max_x, max_y


class StrokeEncoder:
    """Stateful row-major pixel consumer.

    Parameters
    ----------
    sink : StrokeSink
        Receives every emitted stroke.
    image_size : tuple[int, int]
        ``(width, height)`` of the raster, in pixels.
    bounds : Bounds
        Easel bounds for the orientation the image is drawn in.
    background : PaletteColor
        Letterbox colour.
    """

    def __init__(
        self,
        sink: StrokeSink,
        image_size: tuple[int, int],
        bounds: Bounds,
        background: PaletteColor = PaletteColor.WHITE,
    ) -> None:
        self._sink = sink
        self.width, self.height = image_size
        self.background = background
        (
            self.offset_x,
            self.offset_y,
            self.max_x,
            self.max_y,
        ) = centering_offsets(image_size, bounds)

        self._run_start: Coord | None = None
        self._run_color: PaletteColor | None = None
        self.strokes_emitted = 0

    @property
    def row_end_x(self) -> int:
        """Easel column of the image's last pixel column."""
        # Inclusive; the right letterbox starts at the next column.
        return self.offset_x + self.width - 1

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def _emit(self, start: Coord, end: Coord, color: PaletteColor) -> None:
        self._sink.draw_stroke(Stroke.line(start, end, color))
        self.strokes_emitted += 1

    def _open_run(self, point: Coord, color: PaletteColor) -> None:
        self._run_start = point
        self._run_color = color

    # ------------------------------------------------------------------
    # Pixel stream
    # ------------------------------------------------------------------

    def handle_pixel(self, x: int, y: int, color: PixelColor) -> None:
        """Consume the pixel at image position ``(x, y)``.

        *color* is a ``PaletteColor`` or an RGB(A) tuple quantized here.
        """
        if not isinstance(color, PaletteColor):
            color = nearest(color)
        point = Coord(x + self.offset_x, y + self.offset_y)

        if self._run_start is None or self._run_color is None:
            self._open_run(point, color)
            return

        if point.y > self._run_start.y:
            self._emit(
                self._run_start,
                Coord(self.row_end_x, self._run_start.y),
                self._run_color,
            )
            self._open_run(point, color)
            return

        if color is not self._run_color:
            self._emit(self._run_start, Coord(point.x - 1, point.y), self._run_color)
            self._open_run(point, color)

    def flush(self) -> None:
        """Emit the open run, if any."""
        if self._run_start is None or self._run_color is None:
            return
        self._emit(
            self._run_start,
            Coord(self.row_end_x, self._run_start.y),
            self._run_color,
        )
        self._run_start = None
        self._run_color = None

    # ------------------------------------------------------------------
    # Letterbox
    # ------------------------------------------------------------------

    def border_strokes(self) -> list[Stroke]:
        """Background strokes covering the easel outside the image."""
        bg = self.background
        image_top = self.offset_y
        image_bottom = self.offset_y + self.height  # first row below
        right_gap = self.offset_x + self.width      # first column right
        strokes: list[Stroke] = []

        for y in range(0, image_top):
            strokes.append(Stroke.line(Coord(0, y), Coord(self.max_x, y), bg))

        if self.offset_x > 0:
            for y in range(image_top, image_bottom):
                strokes.append(
                    Stroke.line(Coord(0, y), Coord(self.offset_x - 1, y), bg)
                )

        if right_gap <= self.max_x:
            for y in range(image_top, image_bottom):
                strokes.append(
                    Stroke.line(Coord(right_gap, y), Coord(self.max_x, y), bg)
                )

        for y in range(image_bottom, self.max_y + 1):
            strokes.append(Stroke.line(Coord(0, y), Coord(self.max_x, y), bg))

        return strokes

    def draw_borders(self) -> int:
        """Draw ``border_strokes()``; returns how many were drawn."""
        strokes = self.border_strokes()
        for stroke in strokes:
            self._sink.draw_stroke(stroke)
        self.strokes_emitted += len(strokes)
        return len(strokes)

    def finish(self) -> None:
        """Flush the last run, then letterbox the image."""
        self.flush()
        borders = self.draw_borders()
        logger.info(
            "Encoded %dx%d image: %d strokes (%d letterbox)",
            self.width, self.height, self.strokes_emitted, borders,
        )

    def encode(self, pixels: Sequence[Sequence[PixelColor]]) -> None:
        """Consume a whole raster given as rows of colours, then finish."""
        for y, row in enumerate(pixels):
            for x, color in enumerate(row):
                self.handle_pixel(x, y, color)
        self.finish()
