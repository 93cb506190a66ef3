"""
Easel Printer Package.

Draws raster images and polygons onto an in-game easel by driving the
mouse: colours are quantized to the easel's fixed palette, image rows
are run-length encoded into horizontal strokes, and shapes are drawn as
single gestures with an optional scanline fill.

Subpackages:
    geometry: Coordinates, bounds and polygons
    palette: Fixed palette and nearest-colour quantization
    job_ir: Pointer gesture vocabulary and stroke requests
    hardware: Pointer backends, pause flag and listener
    configs: Easel configuration loading and validation
    canvas: Easel state model, shape drawer and polygon filler
    encoder: Image preparation and run-length stroke encoder
    calibration: Demo shapes and the calibration wizard
"""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "palette",
    "job_ir",
    "hardware",
    "configs",
    "canvas",
    "encoder",
    "calibration",
]
