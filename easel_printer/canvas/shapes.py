"""Shape drawing -- outlines as single gestures, plus scanline fill.

``ShapeDrawer.draw`` turns an ordered point list into one continuous
press -> move(s) -> release gesture.  Points are **image-relative**; the
drawer adds the current orientation's upper-left corner exactly once and
checks every translated point against the lower-right corner before the
first gesture of the call (the colour click included) is emitted.

Fill
----
``PolygonFiller`` sweeps horizontal scanlines ``FILL_STEP`` units apart
with the brush forced to its smallest size, and draws each span through
``ShapeDrawer.draw_line``.  Intersections are paired in **edge order**,
not sorted by x: spans come out right only when edge order already
alternates inside/outside along every scanline, as it does for convex
polygons and for the hand-ordered star outlines in
``calibration.patterns``.  Callers depend on that pairing; it is kept
as is.
"""

from __future__ import annotations

import logging
from typing import Sequence

from easel_printer.canvas.easel import Easel, NoCoordinates, OutOfBounds
from easel_printer.geometry.coords import Coord, Polygon, polygon_edges
from easel_printer.job_ir.operations import Stroke
from easel_printer.palette.colors import PaletteColor

logger = logging.getLogger(__name__)

# Scanline spacing in drawing units: half the footprint of the smallest
# brush, which is what the fill runs with.
FILL_STEP = 6

# Slope stored for vertical edges (dx == 0).  Horizontal edges also have
# slope 0 but never straddle a scanline, so the value is unambiguous for
# every edge that reaches the intersection step.
VERTICAL_SLOPE = 0.0

PointLike = Coord | Sequence[int]


# ---------------------------------------------------------------------------
# Scanline helpers
# ---------------------------------------------------------------------------


def edge_slopes(edges: Sequence[tuple[Coord, Coord]]) -> list[float]:
    """``dy/dx`` per edge, ``VERTICAL_SLOPE`` where ``dx == 0``."""
    slopes = []
    for p0, p1 in edges:
        dx = p1.x - p0.x
        slopes.append(VERTICAL_SLOPE if dx == 0 else (p1.y - p0.y) / dx)
    return slopes


def scanline_intersections(
    edges: Sequence[tuple[Coord, Coord]],
    slopes: Sequence[float],
    y: int,
) -> list[int]:
    """X-intersections of scanline *y* with the edges straddling it.

    An edge is active when ``min_y < y < max_y``.  Results keep edge
    order.
    """
    xs = []
    for (p0, p1), slope in zip(edges, slopes):
        lo, hi = min(p0.y, p1.y), max(p0.y, p1.y)
        if not lo < y < hi:
            continue
        if slope == VERTICAL_SLOPE:
            xs.append(p0.x)
        else:
            xs.append(int(p0.x + (y - p0.y) / slope))
    return xs


def inside_spans(xs: Sequence[int]) -> list[tuple[int, int]]:
    """Alternate consecutive intersection pairs as inside/outside.

    Windows ``(xs[0], xs[1])``, ``(xs[2], xs[3])``, ... are inside; the
    windows between them are outside.  Zero-length spans are dropped.
    """
    spans = []
    inside = True
    for a, b in zip(xs, xs[1:]):
        if inside and a != b:
            spans.append((a, b))
        inside = not inside
    return spans


# ---------------------------------------------------------------------------
# Filler
# ---------------------------------------------------------------------------


class PolygonFiller:
    """Scanline fill driven through a ``ShapeDrawer``."""

    def __init__(self, drawer: ShapeDrawer) -> None:
        self._drawer = drawer

    def fill(self, points: Sequence[PointLike], color: PaletteColor) -> int:
        """Fill the polygon given by image-relative *points*.

        The brush is set to width 0 for the sweep and restored afterwards,
        also when a span fails.

        Returns
        -------
        int
            Number of spans drawn.

        Raises
        ------
        NoCoordinates
            If *points* is empty.
        OutOfBounds
            If a span leaves the easel; the sweep stops there.
        """
        pts = [Coord.of(p) for p in points]
        if not pts:
            raise NoCoordinates()

        edges = polygon_edges(pts)
        slopes = edge_slopes(edges)
        start_y = min(p.y for p in pts)
        end_y = max(p.y for p in pts)

        easel = self._drawer.easel
        previous_width = easel.state.brush_width
        easel.set_brush_width(0)
        spans = 0
        try:
            y = start_y
            while y < end_y:
                xs = scanline_intersections(edges, slopes, y)
                for x0, x1 in inside_spans(xs):
                    self._drawer.draw_line(Coord(x0, y), Coord(x1, y), color)
                    spans += 1
                y += FILL_STEP
        finally:
            easel.set_brush_width(previous_width)

        logger.debug("Filled polygon with %d spans", spans)
        return spans


# ---------------------------------------------------------------------------
# Drawer
# ---------------------------------------------------------------------------


class ShapeDrawer:
    """Draws image-relative shapes on an ``Easel``.

    Parameters
    ----------
    easel : Easel
        Canvas model that owns colour/brush state and the pointer.
    """

    def __init__(self, easel: Easel) -> None:
        self.easel = easel
        self.filler = PolygonFiller(self)

    def draw(
        self,
        points: Sequence[PointLike],
        color: PaletteColor,
        close: bool = False,
        fill: bool = False,
    ) -> None:
        """Draw *points* as one continuous stroke.

        Parameters
        ----------
        points : Sequence[Coord | (x, y)]
            Ordered image-relative points.
        color : PaletteColor
            Stroke colour.
        close : bool
            Return to the first point before releasing.
        fill : bool
            Scanline-fill the shape afterwards.  Implies ``close``.

        Raises
        ------
        NoCoordinates
            If *points* is empty.
        OutOfBounds
            If any translated point passes the lower-right corner.  No
            gesture of this call has been emitted at that point.
        """
        if not points:
            raise NoCoordinates()

        bounds = self.easel.bounds()
        translated = []
        for p in points:
            screen = bounds.upper_left + Coord.of(p)
            if not bounds.contains_lower_right(screen):
                raise OutOfBounds(screen, bounds)
            translated.append(screen)

        self.easel.set_color(color)

        first = translated[0]
        self.easel.move(first)
        self.easel.press()
        for screen in translated[1:]:
            self.easel.move(screen)
        if close or fill:
            self.easel.move(first)
        self.easel.release()

        if fill:
            self.filler.fill(points, color)

    def draw_line(self, start: PointLike, end: PointLike, color: PaletteColor) -> None:
        """Straight line from *start* to *end*."""
        self.draw([start, end], color, close=False, fill=False)

    def draw_stroke(self, stroke: Stroke) -> None:
        self.draw(stroke.points, stroke.color, close=stroke.close, fill=stroke.fill)

    def draw_polygon(
        self, polygon: Polygon, color: PaletteColor, fill: bool = True,
    ) -> None:
        self.draw(polygon.vertices, color, close=True, fill=fill)
