"""Tests for the drawing session: easel preparation, printing and pausing."""

from __future__ import annotations

import threading
import time

import pytest
from PIL import Image

from easel_printer.calibration.patterns import square
from easel_printer.canvas.easel import Easel, Orientation, OutOfBounds, Tool
from easel_printer.hardware.pause import PauseFlag
from easel_printer.hardware.pointer import RecordingPointer
from easel_printer.job_ir.operations import MoveTo, Press, Release, create_shape
from easel_printer.palette.colors import PaletteColor
from easel_printer.session import PrintSession


@pytest.fixture()
def session(easel: Easel) -> PrintSession:
    return PrintSession(easel)


@pytest.fixture()
def image() -> Image.Image:
    """2 x 2: red, red / red, blue."""
    img = Image.new("RGB", (2, 2), PaletteColor.RED.rgb)
    img.putpixel((1, 1), PaletteColor.BLUE.rgb)
    return img


class TestPrepareEasel:
    def test_smallest_brush_and_paintbrush(
        self, session: PrintSession, easel: Easel, pointer: RecordingPointer,
    ) -> None:
        session.prepare_easel((2, 2))
        assert easel.state.brush_width == 0
        assert easel.state.tool is Tool.PAINTBRUSH
        assert MoveTo(400, 10) in pointer.gestures

    def test_wide_image_switches_to_landscape(
        self, session: PrintSession, easel: Easel, pointer: RecordingPointer,
    ) -> None:
        session.prepare_easel((4, 2))
        assert easel.state.orientation is Orientation.LANDSCAPE
        assert MoveTo(500, 10) in pointer.gestures

    def test_square_image_keeps_orientation(
        self, session: PrintSession, easel: Easel, pointer: RecordingPointer,
    ) -> None:
        easel.set_orientation(Orientation.LANDSCAPE)
        pointer.clear()
        session.prepare_easel((3, 3))
        assert easel.state.orientation is Orientation.LANDSCAPE
        assert MoveTo(500, 10) not in pointer.gestures


class TestPrintImage:
    def test_stroke_count(self, session: PrintSession, image: Image.Image) -> None:
        # 3 runs + letterbox of a 2x2 image centred on 100x100:
        # 49 top rows, 2 left, 2 right, 49 bottom rows.
        assert session.print_image(image) == 3 + 49 + 2 + 2 + 49

    def test_pointer_released_at_end(
        self, session: PrintSession, image: Image.Image, pointer: RecordingPointer,
    ) -> None:
        session.print_image(image)
        assert isinstance(pointer.gestures[-1], Release)
        assert session.easel.state.color is PaletteColor.WHITE

    def test_landscape_image(self, session: PrintSession, easel: Easel) -> None:
        img = Image.new("RGB", (4, 2), PaletteColor.GREEN.rgb)
        session.print_image(img)
        assert easel.state.orientation is Orientation.LANDSCAPE

    def test_waits_while_paused(self, easel: Easel, image: Image.Image) -> None:
        flag = PauseFlag()
        flag.pause()
        session = PrintSession(easel, flag)
        timer = threading.Timer(0.05, flag.resume)
        start = time.monotonic()
        timer.start()
        session.print_image(image)
        assert time.monotonic() - start >= 0.04


class TestDrawStrokes:
    def test_count(self, session: PrintSession) -> None:
        strokes = [
            create_shape([(0, 0), (10, 0), (5, 10)], PaletteColor.RED),
            create_shape([(20, 20), (30, 20), (25, 30)], PaletteColor.BLUE),
        ]
        assert session.draw_strokes(strokes) == 2

    def test_out_of_bounds_propagates(
        self, session: PrintSession, pointer: RecordingPointer,
    ) -> None:
        # The default square sits at (100, 100), past this 100 x 100 easel.
        with pytest.raises(OutOfBounds):
            session.draw_strokes(square())
        assert not any(isinstance(g, Press) for g in pointer.gestures)

    def test_pause_checked_between_strokes(self, easel: Easel) -> None:
        flag = PauseFlag()
        session = PrintSession(easel, flag)
        flag.pause()
        threading.Timer(0.05, flag.resume).start()
        start = time.monotonic()
        session.draw_strokes(square(size=10, origin=(0, 0), fill=False))
        assert time.monotonic() - start >= 0.04
