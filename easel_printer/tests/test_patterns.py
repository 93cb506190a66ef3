"""Tests for the built-in demo shapes.

Validates pattern structure and that every pattern draws (outline and
fill) on the shipped easel layout without leaving the bounds.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from easel_printer.calibration import patterns
from easel_printer.canvas.easel import Easel
from easel_printer.configs.loader import TimingConfig, load_config
from easel_printer.hardware.pointer import RecordingPointer
from easel_printer.job_ir.operations import Release, Stroke
from easel_printer.palette.colors import PaletteColor
from easel_printer.session import PrintSession


def _extent(stroke: Stroke) -> tuple[int, int, int, int]:
    xs = [p.x for p in stroke.points]
    ys = [p.y for p in stroke.points]
    return min(xs), min(ys), max(xs), max(ys)


class TestBasicPatterns:
    def test_square_dimensions(self) -> None:
        (s,) = patterns.square(size=40, origin=(10, 20))
        assert _extent(s) == (10, 20, 50, 60)
        assert s.close and s.fill
        assert s.color is PaletteColor.RED

    def test_triangle_apex_up(self) -> None:
        (t,) = patterns.triangle(base=50, height=30, origin=(0, 0))
        assert t.points[0].y == 0
        assert t.points[0].x == 25
        assert _extent(t) == (0, 0, 50, 30)

    def test_star(self) -> None:
        (s,) = patterns.star(origin=(0, 0))
        assert len(s.points) == 10
        assert _extent(s) == (0, 0, 200, 150)
        assert s.color is PaletteColor.YELLOW

    def test_house_body_before_roof(self) -> None:
        body, roof = patterns.house(origin=(0, 0))
        assert body.color is PaletteColor.RED
        assert roof.color is PaletteColor.BLUE
        # Roof base sits on the body's top edge.
        assert _extent(roof)[3] == _extent(body)[1]

    def test_unfilled_variant(self) -> None:
        (s,) = patterns.square(fill=False)
        assert s.close and not s.fill


class TestRegistry:
    def test_registry_entries(self) -> None:
        assert set(patterns.PATTERNS) == {"square", "triangle", "star", "house", "demo"}

    def test_demo_is_house_plus_star(self) -> None:
        assert patterns.demo_scene() == patterns.house() + patterns.star()

    @pytest.mark.parametrize("name", sorted(patterns.PATTERNS))
    def test_all_produce_closed_shapes(self, name: str) -> None:
        strokes = patterns.PATTERNS[name]()
        assert strokes
        for s in strokes:
            assert len(s.points) >= 3
            assert s.close


class TestDrawOnDefaultEasel:
    @pytest.mark.parametrize("name", sorted(patterns.PATTERNS))
    def test_draws_within_bounds(self, name: str) -> None:
        cfg = load_config()
        cfg = replace(cfg, timing=TimingConfig(0.0, 0.0, 0.0))
        pointer = RecordingPointer()
        session = PrintSession(Easel(cfg, pointer))
        assert session.draw_strokes(patterns.PATTERNS[name]()) == len(
            patterns.PATTERNS[name]()
        )
        assert pointer.gestures
        assert isinstance(pointer.gestures[-1], Release)
