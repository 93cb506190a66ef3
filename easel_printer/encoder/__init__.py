"""
Encoder module.

Turns images into strokes: image preparation (load, fit, dither) and
the run-length stroke encoder.
"""

from easel_printer.encoder.imaging import (
    dither_to_palette,
    iter_palette_pixels,
    load_image,
    orientation_for,
    prepare_image,
    quantize_image,
    size_to_easel,
)
from easel_printer.encoder.stroke_encoder import StrokeEncoder, centering_offsets

__all__ = [
    "StrokeEncoder",
    "centering_offsets",
    "dither_to_palette",
    "iter_palette_pixels",
    "load_image",
    "orientation_for",
    "prepare_image",
    "quantize_image",
    "size_to_easel",
]
