"""Fixed easel palette and nearest-colour quantization."""

from easel_printer.palette.colors import (
    MEMBERS,
    PALETTE,
    PaletteColor,
    Swatch,
    color_distance,
    nearest,
    nearest_indices,
    palette_image,
    quantize_rgb,
)

__all__ = [
    "MEMBERS",
    "PALETTE",
    "PaletteColor",
    "Swatch",
    "color_distance",
    "nearest",
    "nearest_indices",
    "palette_image",
    "quantize_rgb",
]
