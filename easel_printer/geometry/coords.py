"""Integer coordinates, bounds rectangles and polygons.

Every ``Coord`` is either **image-relative** (origin at the easel's
upper-left corner, as produced by shapes and the stroke encoder) or
**device-absolute** (screen pixels handed to the pointer driver).  The
translation from one to the other happens exactly once per draw call,
inside ``ShapeDrawer``.

+Y points down in both spaces (screen convention).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass(frozen=True, slots=True)
class Coord:
    """Integer ``(x, y)`` point."""

    x: int
    y: int

    @classmethod
    def of(cls, value: Coord | Sequence[int]) -> Coord:
        """Coerce a ``Coord`` or an ``(x, y)`` pair to ``Coord``."""
        if isinstance(value, Coord):
            return value
        x, y = value
        return cls(int(x), int(y))

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coord) -> Coord:
        return Coord(self.x - other.x, self.y - other.y)

    def __mul__(self, k: int) -> Coord:
        return Coord(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


def coords_from_pairs(pairs: Sequence[Coord | Sequence[int]]) -> list[Coord]:
    """Convert a sequence of ``(x, y)`` pairs to a list of ``Coord``."""
    return [Coord.of(p) for p in pairs]


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned rectangle given by its upper-left and lower-right corners.

    Raises
    ------
    ValueError
        If the upper-left corner lies right of or below the lower-right one.
    """

    upper_left: Coord
    lower_right: Coord

    def __post_init__(self) -> None:
        ul, lr = self.upper_left, self.lower_right
        if ul.x > lr.x or ul.y > lr.y:
            raise ValueError(
                f"Bounds upper-left {ul.as_tuple()} must not exceed "
                f"lower-right {lr.as_tuple()}"
            )

    @property
    def width(self) -> int:
        return self.lower_right.x - self.upper_left.x

    @property
    def height(self) -> int:
        return self.lower_right.y - self.upper_left.y

    def contains_lower_right(self, point: Coord) -> bool:
        """``True`` if *point* does not pass the lower-right corner."""
        return point.x <= self.lower_right.x and point.y <= self.lower_right.y


@dataclass(frozen=True, slots=True)
class Polygon:
    """Closed polygon of at least three vertices.

    Parameters
    ----------
    vertices : tuple[Coord, ...]
        Ordered vertices.  The closing edge (last -> first) is implicit.
    """

    vertices: tuple[Coord, ...]

    def __post_init__(self) -> None:
        if len(self.vertices) < 3:
            raise ValueError(
                f"Polygon requires >= 3 vertices, got {len(self.vertices)}"
            )

    @classmethod
    def from_pairs(cls, pairs: Sequence[Coord | Sequence[int]]) -> Polygon:
        return cls(tuple(coords_from_pairs(pairs)))


def polygon_edges(points: Sequence[Coord]) -> list[tuple[Coord, Coord]]:
    """Consecutive vertex pairs plus the wrap-around edge (last -> first)."""
    edges = [(points[i], points[i + 1]) for i in range(len(points) - 1)]
    edges.append((points[-1], points[0]))
    return edges
