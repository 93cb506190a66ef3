"""Image loading and preparation for the stroke encoder.

Provides:
    - Loading any Pillow-readable file as RGBA
    - Fitting the image to the easel (Lanczos, aspect preserved; the
      orientation follows the image's aspect ratio)
    - Optional Floyd-Steinberg dithering onto the fixed palette
    - Row-major pixel iteration, pre-quantized to ``PaletteColor``

The image is treated as landscape when wider than tall, portrait
otherwise.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import numpy as np
from PIL import Image, ImageOps

from easel_printer.configs.loader import EaselConfig
from easel_printer.palette.colors import MEMBERS, PaletteColor, nearest_indices, palette_image

logger = logging.getLogger(__name__)


def orientation_for(size: tuple[int, int]) -> str:
    """``"landscape"`` for wide images, ``"portrait"`` otherwise."""
    width, height = size
    return "landscape" if width > height else "portrait"


def load_image(path: str | Path) -> Image.Image:
    """Open *path* and convert to RGBA.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Image not found: {path}")
    with Image.open(path) as img:
        rgba = img.convert("RGBA")
    logger.info("Loaded %s (%dx%d)", path, rgba.width, rgba.height)
    return rgba


def size_to_easel(image: Image.Image, config: EaselConfig) -> Image.Image:
    """Scale *image* to fit the easel bounds for its orientation.

    The drawable area is one pixel smaller than the bounds on each axis
    (see ``StrokeEncoder``), and the aspect ratio is preserved.
    """
    bounds = config.get_bounds(orientation_for(image.size))
    target = (max(1, bounds.width - 1), max(1, bounds.height - 1))
    fitted = ImageOps.contain(image, target, method=Image.Resampling.LANCZOS)
    logger.info(
        "Scaled %dx%d -> %dx%d", image.width, image.height,
        fitted.width, fitted.height,
    )
    return fitted


def dither_to_palette(image: Image.Image) -> Image.Image:
    """Floyd-Steinberg dither *image* onto the easel palette.

    Alpha is kept: the dithered colours are recombined with the source
    alpha channel so translucent pixels still quantize as translucent.
    """
    rgba = image.convert("RGBA")
    out = rgba.convert("RGB").quantize(
        palette=palette_image(), dither=Image.Dither.FLOYDSTEINBERG,
    ).convert("RGBA")
    out.putalpha(rgba.getchannel("A"))
    return out


def quantize_image(image: Image.Image) -> np.ndarray:
    """Palette index per pixel, shape ``(H, W)``."""
    return nearest_indices(np.asarray(image.convert("RGBA")))


def iter_palette_pixels(
    image: Image.Image,
) -> Iterator[tuple[int, int, PaletteColor]]:
    """Yield ``(x, y, colour)`` in row-major order."""
    indices = quantize_image(image)
    height, width = indices.shape
    for y in range(height):
        row = indices[y]
        for x in range(width):
            yield x, y, MEMBERS[int(row[x])]


def prepare_image(
    path: str | Path,
    config: EaselConfig,
    scale: bool = True,
    dither: bool = False,
) -> Image.Image:
    """Load, optionally scale, optionally dither."""
    image = load_image(path)
    if scale:
        image = size_to_easel(image, config)
    if dither:
        image = dither_to_palette(image)
    return image
