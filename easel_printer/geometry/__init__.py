"""Coordinate and shape primitives."""

from easel_printer.geometry.coords import (
    Bounds,
    Coord,
    Polygon,
    coords_from_pairs,
    polygon_edges,
)

__all__ = ["Bounds", "Coord", "Polygon", "coords_from_pairs", "polygon_edges"]
