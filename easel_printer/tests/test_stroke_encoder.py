"""Tests for the run-length stroke encoder.

Validates that:
    - Runs break on colour changes and at every row end
    - Runs never merge across rows
    - The last run is flushed by finish()
    - The image is centred and letterboxed in the background colour
"""

from __future__ import annotations

import pytest

from easel_printer.encoder.stroke_encoder import StrokeEncoder, centering_offsets
from easel_printer.geometry.coords import Bounds, Coord
from easel_printer.job_ir.operations import Stroke
from easel_printer.palette.colors import PaletteColor

R = PaletteColor.RED
B = PaletteColor.BLUE
W = PaletteColor.WHITE


class ListSink:
    def __init__(self) -> None:
        self.strokes: list[Stroke] = []

    def draw_stroke(self, stroke: Stroke) -> None:
        self.strokes.append(stroke)


def _bounds(width: int, height: int) -> Bounds:
    return Bounds(Coord(0, 0), Coord(width, height))


def _segments(sink: ListSink) -> list[tuple[tuple[int, int], tuple[int, int], PaletteColor]]:
    return [
        (s.points[0].as_tuple(), s.points[-1].as_tuple(), s.color)
        for s in sink.strokes
    ]


@pytest.fixture()
def sink() -> ListSink:
    return ListSink()


# ---------------------------------------------------------------------------
# Offsets
# ---------------------------------------------------------------------------


class TestCenteringOffsets:
    def test_centred(self) -> None:
        assert centering_offsets((10, 4), _bounds(20, 10)) == (5, 3, 19, 9)

    def test_exact_fit(self) -> None:
        assert centering_offsets((2, 2), _bounds(2, 2)) == (0, 0, 1, 1)

    def test_oversized_image_clamps_to_zero(self) -> None:
        ox, oy, _, _ = centering_offsets((50, 50), _bounds(20, 10))
        assert (ox, oy) == (0, 0)


# ---------------------------------------------------------------------------
# Runs
# ---------------------------------------------------------------------------


class TestRuns:
    def test_two_by_two(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (2, 2), _bounds(2, 2))
        encoder.encode([[R, R], [R, B]])
        assert _segments(sink) == [
            ((0, 0), (1, 0), R),
            ((0, 1), (0, 1), R),
            ((1, 1), (1, 1), B),
        ]
        assert encoder.strokes_emitted == 3

    def test_two_by_two_colour_first_on_second_row(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (2, 2), _bounds(2, 2))
        encoder.encode([[R, R], [B, R]])
        assert _segments(sink) == [
            ((0, 0), (1, 0), R),
            ((0, 1), (0, 1), B),
            ((1, 1), (1, 1), R),
        ]

    def test_rows_never_merge(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (3, 2), _bounds(3, 2))
        encoder.encode([[R, R, R], [R, R, R]])
        assert _segments(sink) == [((0, 0), (2, 0), R), ((0, 1), (2, 1), R)]

    def test_colour_change_ends_left_of_new_pixel(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (4, 1), _bounds(4, 1))
        encoder.encode([[R, R, B, B]])
        assert _segments(sink) == [((0, 0), (1, 0), R), ((2, 0), (3, 0), B)]

    def test_first_pixel_emits_nothing(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (2, 2), _bounds(2, 2))
        encoder.handle_pixel(0, 0, R)
        assert sink.strokes == []

    def test_flush_emits_open_run_once(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (2, 1), _bounds(2, 1))
        encoder.handle_pixel(0, 0, B)
        encoder.flush()
        encoder.flush()
        assert _segments(sink) == [((0, 0), (1, 0), B)]

    def test_rgb_pixels_are_quantized(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (2, 1), _bounds(2, 1))
        encoder.encode([[(250, 20, 30), (0, 160, 230, 255)]])
        assert [s.color for s in sink.strokes] == [R, B]

    def test_strokes_are_open_lines(self, sink: ListSink) -> None:
        StrokeEncoder(sink, (2, 2), _bounds(2, 2)).encode([[R, B], [B, R]])
        assert all(len(s.points) == 2 for s in sink.strokes)
        assert not any(s.close or s.fill for s in sink.strokes)


# ---------------------------------------------------------------------------
# Letterbox
# ---------------------------------------------------------------------------


class TestLetterbox:
    def test_offset_applied_to_runs(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (2, 2), _bounds(4, 4))
        assert encoder.row_end_x == 2
        encoder.encode([[R, R], [R, R]])
        assert _segments(sink)[:2] == [((1, 1), (2, 1), R), ((1, 2), (2, 2), R)]

    def test_right_gap_starts_after_row_end(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (2, 1), _bounds(5, 1), background=W)
        encoder.encode([[R, R]])
        run, left, right = _segments(sink)
        assert run == ((1, 0), (encoder.row_end_x, 0), R)
        assert left == ((0, 0), (0, 0), W)
        assert right == ((encoder.row_end_x + 1, 0), (4, 0), W)

    def test_border_order_and_colour(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (2, 2), _bounds(4, 4), background=W)
        segments = [
            (s.points[0].as_tuple(), s.points[-1].as_tuple())
            for s in encoder.border_strokes()
        ]
        assert segments == [
            ((0, 0), (3, 0)),  # top
            ((0, 1), (0, 1)),  # left
            ((0, 2), (0, 2)),
            ((3, 1), (3, 1)),  # right
            ((3, 2), (3, 2)),
            ((0, 3), (3, 3)),  # bottom
        ]
        assert all(s.color is W for s in encoder.border_strokes())

    def test_borders_after_pixels(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (2, 2), _bounds(4, 4), background=W)
        encoder.encode([[R, R], [R, R]])
        colours = [s.color for s in sink.strokes]
        assert colours == [R, R] + [W] * 6
        assert encoder.strokes_emitted == 8

    def test_no_borders_when_image_fills_easel(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (2, 2), _bounds(2, 2))
        assert encoder.border_strokes() == []

    def test_empty_image_only_letterboxes(self, sink: ListSink) -> None:
        encoder = StrokeEncoder(sink, (0, 0), _bounds(3, 2), background=W)
        encoder.encode([])
        assert _segments(sink) == [((0, 0), (2, 0), W), ((0, 1), (2, 1), W)]
