"""The easel's fixed colour palette and nearest-colour quantization.

The palette is static data: 24 swatches laid out on the easel in an
8 x 3 grid.  Each member carries its canonical sRGB value and its
``(row, col)`` grid position, used by ``Easel.set_color`` to locate the
swatch on screen.

Distance metric
---------------
Squared Euclidean distance in sRGB.  For RGBA input each channel
difference is the larger of

    |p - c|              raw difference
    |p - c * a / 255|    pixel composited over an opaque black background

so a translucent pixel never matches better than its opaque counterpart
or its composite would.  Ties resolve to the first member in enumeration
order (``np.argmin`` returns the first minimum).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np
from PIL import Image


class PaletteColor(Enum):
    """Selectable easel colours, in swatch-grid order (row-major)."""

    BLACK = "black"
    GREY = "grey"
    WHITE = "white"
    DARK_BROWN = "dark_brown"
    BROWN = "brown"
    LIGHT_BROWN = "light_brown"
    DARK_RED = "dark_red"
    RED = "red"
    PINK = "pink"
    ORANGE = "orange"
    DARK_YELLOW = "dark_yellow"
    YELLOW = "yellow"
    DARK_GREEN = "dark_green"
    GREEN = "green"
    LIGHT_GREEN = "light_green"
    DARK_BLUE = "dark_blue"
    BLUE = "blue"
    LIGHT_BLUE = "light_blue"
    DARK_INDIGO = "dark_indigo"
    INDIGO = "indigo"
    LIGHT_INDIGO = "light_indigo"
    DARK_VIOLET = "dark_violet"
    VIOLET = "violet"
    LIGHT_VIOLET = "light_violet"

    @property
    def rgb(self) -> tuple[int, int, int]:
        return PALETTE[self].rgb

    @property
    def row(self) -> int:
        return PALETTE[self].row

    @property
    def col(self) -> int:
        return PALETTE[self].col


@dataclass(frozen=True, slots=True)
class Swatch:
    """Immutable facts about one palette member."""

    rgb: tuple[int, int, int]
    row: int
    col: int


def _hex(value: int) -> tuple[int, int, int]:
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


# sRGB values sampled from the in-game swatches.
_RGB: dict[PaletteColor, int] = {
    PaletteColor.BLACK: 0x0D0D0D,
    PaletteColor.GREY: 0x767676,
    PaletteColor.WHITE: 0xE5E5E5,
    PaletteColor.DARK_BROWN: 0x623200,
    PaletteColor.BROWN: 0xB97A56,
    PaletteColor.LIGHT_BROWN: 0xEFE4B0,
    PaletteColor.DARK_RED: 0x7E0D0D,
    PaletteColor.RED: 0xED1C22,
    PaletteColor.PINK: 0xFFAEC9,
    PaletteColor.ORANGE: 0xFF7F26,
    PaletteColor.DARK_YELLOW: 0xFFC90D,
    PaletteColor.YELLOW: 0xFAED16,
    PaletteColor.DARK_GREEN: 0x265D38,
    PaletteColor.GREEN: 0x35AB55,
    PaletteColor.LIGHT_GREEN: 0xB5E61C,
    PaletteColor.DARK_BLUE: 0x006591,
    PaletteColor.BLUE: 0x00A2E8,
    PaletteColor.LIGHT_BLUE: 0x99D9EA,
    PaletteColor.DARK_INDIGO: 0x1C2263,
    PaletteColor.INDIGO: 0x3039CC,
    PaletteColor.LIGHT_INDIGO: 0x7092BE,
    PaletteColor.DARK_VIOLET: 0x953596,
    PaletteColor.VIOLET: 0xD55FD7,
    PaletteColor.LIGHT_VIOLET: 0xC1A7D7,
}

SWATCHES_PER_ROW = 3

PALETTE: dict[PaletteColor, Swatch] = {
    color: Swatch(
        rgb=_hex(_RGB[color]),
        row=idx // SWATCHES_PER_ROW,
        col=idx % SWATCHES_PER_ROW,
    )
    for idx, color in enumerate(PaletteColor)
}

MEMBERS: tuple[PaletteColor, ...] = tuple(PaletteColor)

# (24, 3) float table in enumeration order, built once.
_TABLE = np.array([PALETTE[c].rgb for c in MEMBERS], dtype=np.float64)


# ---------------------------------------------------------------------------
# Distance
# ---------------------------------------------------------------------------


def _channel_diffs(color: Sequence[float]) -> np.ndarray:
    """Per-member, per-channel absolute differences, shape (24, 3)."""
    if len(color) not in (3, 4):
        raise ValueError(f"Expected RGB or RGBA, got {len(color)} channels")
    rgb = np.asarray(color[:3], dtype=np.float64)
    diff = np.abs(_TABLE - rgb)
    if len(color) == 4:
        alpha = float(color[3]) / 255.0
        diff = np.maximum(diff, np.abs(_TABLE - rgb * alpha))
    return diff


def color_distance(color: Sequence[float], member: PaletteColor) -> float:
    """Squared distance between *color* and one palette member."""
    diff = _channel_diffs(color)[MEMBERS.index(member)]
    return float(np.sum(diff * diff))


def nearest(color: Sequence[float]) -> PaletteColor:
    """Return the palette member closest to an RGB or RGBA *color*.

    Parameters
    ----------
    color : Sequence[float]
        ``(r, g, b)`` or ``(r, g, b, a)`` with channels in [0, 255].

    Returns
    -------
    PaletteColor
        Closest member; the lowest-enumerated one on exact ties.
    """
    diff = _channel_diffs(color)
    dist = np.sum(diff * diff, axis=1)
    return MEMBERS[int(np.argmin(dist))]


def quantize_rgb(color: Sequence[float]) -> tuple[int, int, int]:
    """Canonical RGB of the nearest palette member."""
    return nearest(color).rgb


def nearest_indices(pixels: np.ndarray) -> np.ndarray:
    """Vectorised ``nearest`` over an ``(H, W, 3|4)`` pixel array.

    Returns
    -------
    np.ndarray
        ``(H, W)`` int array of indices into ``MEMBERS``.
    """
    pixels = np.asarray(pixels, dtype=np.float64)
    channels = pixels.shape[-1]
    if channels not in (3, 4):
        raise ValueError(f"Expected RGB or RGBA pixels, got {channels} channels")
    rgb = pixels[..., None, :3]
    diff = np.abs(_TABLE - rgb)
    if channels == 4:
        alpha = pixels[..., None, 3:4] / 255.0
        diff = np.maximum(diff, np.abs(_TABLE - rgb * alpha))
    dist = np.sum(diff * diff, axis=-1)
    return np.argmin(dist, axis=-1)


def palette_image() -> Image.Image:
    """Pillow ``P``-mode image carrying the palette, for ``Image.quantize``.

    Unused palette slots repeat the first member so the quantizer can
    never pick a colour outside the palette.
    """
    flat: list[int] = []
    for member in MEMBERS:
        flat.extend(PALETTE[member].rgb)
    flat.extend(list(PALETTE[MEMBERS[0]].rgb) * (256 - len(MEMBERS)))
    img = Image.new("P", (1, 1))
    img.putpalette(flat)
    return img
