"""Tests for the gesture IR and stroke requests."""

from __future__ import annotations

import dataclasses

import pytest

from easel_printer.geometry.coords import Coord
from easel_printer.job_ir.operations import (
    Gesture,
    MoveTo,
    Press,
    Release,
    Stroke,
    create_shape,
    drawn_path,
    gestures_to_strokes,
)
from easel_printer.palette.colors import PaletteColor


class TestGestures:
    def test_immutable(self) -> None:
        op = MoveTo(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            op.x = 5  # type: ignore[misc]

    def test_default_button(self) -> None:
        assert Press().button == "left"
        assert Release().button == "left"

    def test_all_are_gestures(self) -> None:
        for op in (MoveTo(0, 0), Press(), Release()):
            assert isinstance(op, Gesture)

    def test_equality(self) -> None:
        assert MoveTo(3, 4) == MoveTo(3, 4)
        assert Press("right") != Press()


class TestStroke:
    def test_requires_a_point(self) -> None:
        with pytest.raises(ValueError, match=">= 1 point"):
            Stroke(points=(), color=PaletteColor.RED)

    def test_line(self) -> None:
        s = Stroke.line(Coord(0, 0), Coord(5, 0), PaletteColor.RED)
        assert s.points == (Coord(0, 0), Coord(5, 0))
        assert not s.close and not s.fill

    def test_create_shape_is_closed(self) -> None:
        s = create_shape([(0, 0), (4, 0), (4, 4)], PaletteColor.GREEN, fill=True)
        assert s.close and s.fill
        assert s.points[2] == Coord(4, 4)


class TestGrouping:
    def test_split_at_release(self) -> None:
        log = [
            MoveTo(0, 0), Press(), Release(),
            MoveTo(1, 1), Press(), MoveTo(5, 1), Release(),
        ]
        groups = gestures_to_strokes(log)
        assert len(groups) == 2
        assert groups[1] == [MoveTo(1, 1), Press(), MoveTo(5, 1), Release()]

    def test_trailing_group(self) -> None:
        groups = gestures_to_strokes([Press(), Release(), MoveTo(9, 9)])
        assert groups[-1] == [MoveTo(9, 9)]

    def test_empty(self) -> None:
        assert gestures_to_strokes([]) == []

    def test_drawn_path_includes_move_before_press(self) -> None:
        group = [MoveTo(0, 0), MoveTo(2, 2), Press(), MoveTo(5, 2), MoveTo(5, 6), Release()]
        assert drawn_path(group) == [(2, 2), (5, 2), (5, 6)]

    def test_drawn_path_click_in_place(self) -> None:
        assert drawn_path([Press(), Release()]) == []
