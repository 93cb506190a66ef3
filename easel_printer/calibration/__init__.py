"""
Calibration module.

Provides demo shape generators and the interactive wizard that records
easel screen positions.
"""

from easel_printer.calibration.patterns import (
    PATTERNS,
    demo_scene,
    house,
    square,
    star,
    triangle,
)
from easel_printer.calibration.wizard import calibrate, capture_click, run_wizard

__all__ = [
    "PATTERNS",
    "calibrate",
    "capture_click",
    "demo_scene",
    "house",
    "run_wizard",
    "square",
    "star",
    "triangle",
]
