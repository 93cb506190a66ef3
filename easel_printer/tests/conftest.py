"""Shared fixtures: a small easel layout with zero settle delays."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from easel_printer.canvas.easel import Easel
from easel_printer.canvas.shapes import ShapeDrawer
from easel_printer.configs.loader import EaselConfig, parse_config
from easel_printer.hardware.pointer import RecordingPointer

# Portrait easel is 100 x 100 at (100, 200); landscape is 200 x 100.
_LAYOUT: dict[str, Any] = {
    "easel": {
        "portrait_bounds": {"upper_left": [100, 200], "lower_right": [200, 300]},
        "landscape_bounds": {"upper_left": [50, 250], "lower_right": [250, 350]},
    },
    "controls": {
        "paintbrush": [400, 10],
        "spray_can": [400, 40],
        "pen": [400, 70],
        "decrease_brush": [450, 10],
        "increase_brush": [450, 40],
        "change_orientation": [500, 10],
    },
    "palette": {"origin": [10, 20], "row_step": 30, "col_step": 40},
    "timing": {"settle_ms": 0, "brush_settle_ms": 0, "pause_poll_ms": 1},
    "session": {
        "orientation": "portrait",
        "brush_width": 9,
        "color": "black",
        "tool": "paintbrush",
        "background": "white",
    },
}


@pytest.fixture()
def layout() -> dict[str, Any]:
    """Raw config document; each test gets its own copy to mutate."""
    return copy.deepcopy(_LAYOUT)


@pytest.fixture()
def config(layout: dict[str, Any]) -> EaselConfig:
    return parse_config(layout)


@pytest.fixture()
def pointer() -> RecordingPointer:
    return RecordingPointer()


@pytest.fixture()
def easel(config: EaselConfig, pointer: RecordingPointer) -> Easel:
    return Easel(config, pointer)


@pytest.fixture()
def drawer(easel: Easel) -> ShapeDrawer:
    return ShapeDrawer(easel)
