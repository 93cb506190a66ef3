"""Demo and test shapes.

Each function returns ``list[Stroke]`` ready for ``PrintSession.draw_strokes``.
All coordinates are image-relative easel units (upper-left origin,
+Y down).

Common parameters accepted by every pattern:

    origin : tuple[int, int]
        Upper-left corner of the pattern's bounding box on the easel.
    color : PaletteColor
        Stroke colour.
    fill : bool
        Scanline-fill the outline.

The star outline is ordered so that, along every scanline, consecutive
edge intersections alternate inside/outside -- the order the scanline
filler relies on.
"""

from __future__ import annotations

from easel_printer.geometry.coords import Coord
from easel_printer.job_ir.operations import Stroke, create_shape
from easel_printer.palette.colors import PaletteColor


def _shift(points: list[tuple[int, int]], origin: tuple[int, int]) -> list[Coord]:
    ox, oy = origin
    return [Coord(x + ox, y + oy) for x, y in points]


# ---------------------------------------------------------------------------
# Basic shapes
# ---------------------------------------------------------------------------


def square(
    size: int = 50,
    origin: tuple[int, int] = (100, 100),
    color: PaletteColor = PaletteColor.RED,
    fill: bool = True,
) -> list[Stroke]:
    """Axis-aligned square, vertices listed counter-clockwise on screen."""
    pts = [(0, 0), (0, size), (size, size), (size, 0)]
    return [create_shape(_shift(pts, origin), color, fill=fill)]


def triangle(
    base: int = 50,
    height: int = 50,
    origin: tuple[int, int] = (100, 50),
    color: PaletteColor = PaletteColor.BLUE,
    fill: bool = True,
) -> list[Stroke]:
    """Isosceles triangle, apex up."""
    pts = [(base // 2, 0), (0, height), (base, height)]
    return [create_shape(_shift(pts, origin), color, fill=fill)]


def star(
    origin: tuple[int, int] = (100, 200),
    color: PaletteColor = PaletteColor.YELLOW,
    fill: bool = True,
) -> list[Stroke]:
    """Ten-vertex star, 200 x 150 units."""
    pts = [
        (100, 0),
        (50, 50),
        (0, 50),
        (50, 100),
        (25, 150),
        (100, 100),
        (150, 150),
        (125, 100),
        (200, 50),
        (150, 50),
    ]
    return [create_shape(_shift(pts, origin), color, fill=fill)]


def house(origin: tuple[int, int] = (100, 50)) -> list[Stroke]:
    """Red square body with a blue roof on top."""
    ox, oy = origin
    roof = triangle(base=50, height=50, origin=(ox, oy), color=PaletteColor.BLUE)
    body = square(size=50, origin=(ox, oy + 50), color=PaletteColor.RED)
    return body + roof


def demo_scene() -> list[Stroke]:
    """House plus star."""
    return house() + star()


PATTERNS = {
    "square": square,
    "triangle": triangle,
    "star": star,
    "house": house,
    "demo": demo_scene,
}
