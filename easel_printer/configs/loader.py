"""Configuration loader for the easel printer.

Loads and validates ``easel.yaml`` into typed, frozen dataclasses.  Every
on-screen coordinate (easel bounds, tool buttons, brush controls, palette
grid) comes from the config -- nothing screen-specific is hardcoded.  The
document is produced by the calibration wizard and loaded once, before
any drawing starts; a bad document stops the session before the first
click.

Timings are stored in **milliseconds** in YAML and exposed in seconds.

Usage::

    from easel_printer.configs.loader import load_config
    cfg = load_config()                     # default path
    cfg = load_config("/custom/easel.yaml") # explicit path
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from easel_printer.geometry.coords import Bounds, Coord
from easel_printer.palette.colors import PaletteColor
from easel_printer.utils.fs import atomic_yaml_dump, load_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "easel.yaml"

# Brush steps the easel supports (inclusive upper bound).
MAX_BRUSH_STEP = 16

# Pointer settle delays.  The game misses button releases below ~6 ms and
# drops brush-resize clicks faster than 32 ms; both are measured values.
DEFAULT_SETTLE_MS = 7
DEFAULT_BRUSH_SETTLE_MS = 32
DEFAULT_PAUSE_POLL_MS = 50

ORIENTATIONS = ("portrait", "landscape")
TOOLS = ("paintbrush", "spray_can", "pen")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# ---------------------------------------------------------------------------
# Dataclasses -- mirror the YAML structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EaselBoundsConfig:
    """Drawable easel rectangle per orientation, in screen pixels."""

    portrait: Bounds
    landscape: Bounds


@dataclass(frozen=True)
class ControlsConfig:
    """Screen positions of the easel's buttons."""

    paintbrush: Coord
    spray_can: Coord
    pen: Coord
    decrease_brush: Coord
    increase_brush: Coord
    change_orientation: Coord

    def tool(self, name: str) -> Coord:
        """Return the button position for tool *name*."""
        if name not in TOOLS:
            raise ConfigError(f"Unknown tool '{name}'. Available: {TOOLS}")
        return getattr(self, name)


@dataclass(frozen=True)
class PaletteGridConfig:
    """Palette swatch grid: origin (Black swatch centre) plus steps.

    ``row_step`` advances along screen X per swatch row and ``col_step``
    along screen Y per swatch column, matching the easel's sideways
    palette layout.
    """

    origin: Coord
    row_step: int
    col_step: int

    def swatch(self, row: int, col: int) -> Coord:
        return self.origin + Coord(row * self.row_step, col * self.col_step)


@dataclass(frozen=True)
class TimingConfig:
    """Pointer settle delays in seconds."""

    settle_s: float
    brush_settle_s: float
    pause_poll_s: float


@dataclass(frozen=True)
class SessionConfig:
    """State of a freshly opened easel, plus the letterbox colour."""

    orientation: str
    brush_width: int
    color: PaletteColor
    tool: str
    background: PaletteColor


@dataclass(frozen=True)
class EaselConfig:
    """Root configuration object."""

    bounds: EaselBoundsConfig
    controls: ControlsConfig
    palette: PaletteGridConfig
    timing: TimingConfig
    session: SessionConfig

    def get_bounds(self, orientation: str) -> Bounds:
        """Return the easel bounds for *orientation*."""
        if orientation not in ORIENTATIONS:
            raise ConfigError(
                f"Unknown orientation '{orientation}'. Available: {ORIENTATIONS}"
            )
        return getattr(self.bounds, orientation)

    def with_settle_ms(self, settle_ms: float) -> EaselConfig:
        """Copy with the general settle delay overridden (``--mouse-wait``)."""
        if settle_ms < 0:
            raise ConfigError(f"settle delay must be >= 0, got {settle_ms}")
        return replace(
            self, timing=replace(self.timing, settle_s=settle_ms / 1000.0),
        )


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


def _parse_point(name: str, raw: Any) -> Coord:
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ConfigError(f"'{name}' must be an [x, y] pair, got {raw!r}")
    return Coord(int(raw[0]), int(raw[1]))


def _parse_bounds(name: str, data: dict[str, Any]) -> Bounds:
    ul = _parse_point(f"{name}.upper_left", data["upper_left"])
    lr = _parse_point(f"{name}.lower_right", data["lower_right"])
    try:
        return Bounds(ul, lr)
    except ValueError as exc:
        raise ConfigError(f"{name}: {exc}") from exc


def _parse_color(name: str, raw: Any) -> PaletteColor:
    try:
        return PaletteColor(str(raw))
    except ValueError as exc:
        names = [c.value for c in PaletteColor]
        raise ConfigError(
            f"'{name}' must be one of {names}, got {raw!r}"
        ) from exc


def _ms(name: str, raw: Any) -> float:
    value = float(raw)
    if value < 0:
        raise ConfigError(f"timing.{name} must be >= 0, got {value}")
    return value / 1000.0


def _validate_config(cfg: EaselConfig) -> None:
    """Cross-field validation.  Raises ``ConfigError``."""
    s = cfg.session
    if s.orientation not in ORIENTATIONS:
        raise ConfigError(
            f"session.orientation must be one of {ORIENTATIONS}, "
            f"got {s.orientation!r}"
        )
    if s.tool not in TOOLS:
        raise ConfigError(
            f"session.tool must be one of {TOOLS}, got {s.tool!r}"
        )
    if not 0 <= s.brush_width <= MAX_BRUSH_STEP:
        raise ConfigError(
            f"session.brush_width must be in [0, {MAX_BRUSH_STEP}], "
            f"got {s.brush_width}"
        )
    for orientation in ORIENTATIONS:
        b = cfg.get_bounds(orientation)
        if b.width == 0 or b.height == 0:
            logger.warning("%s easel bounds are degenerate: %s", orientation, b)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_config(data: dict[str, Any]) -> EaselConfig:
    """Build and validate an ``EaselConfig`` from a parsed document.

    Raises
    ------
    ConfigError
        If any field is missing or fails validation.
    """
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(data)}")

    try:
        # -- easel bounds ---------------------------------------------------
        ed = data["easel"]
        bounds = EaselBoundsConfig(
            portrait=_parse_bounds("easel.portrait_bounds", ed["portrait_bounds"]),
            landscape=_parse_bounds(
                "easel.landscape_bounds", ed["landscape_bounds"],
            ),
        )

        # -- controls -------------------------------------------------------
        cd = data["controls"]
        controls = ControlsConfig(
            **{
                key: _parse_point(f"controls.{key}", cd[key])
                for key in (
                    "paintbrush",
                    "spray_can",
                    "pen",
                    "decrease_brush",
                    "increase_brush",
                    "change_orientation",
                )
            }
        )

        # -- palette grid ---------------------------------------------------
        pd = data["palette"]
        palette = PaletteGridConfig(
            origin=_parse_point("palette.origin", pd["origin"]),
            row_step=int(pd["row_step"]),
            col_step=int(pd["col_step"]),
        )

        # -- timing (optional section) --------------------------------------
        td = data.get("timing") or {}
        timing = TimingConfig(
            settle_s=_ms("settle_ms", td.get("settle_ms", DEFAULT_SETTLE_MS)),
            brush_settle_s=_ms(
                "brush_settle_ms",
                td.get("brush_settle_ms", DEFAULT_BRUSH_SETTLE_MS),
            ),
            pause_poll_s=_ms(
                "pause_poll_ms", td.get("pause_poll_ms", DEFAULT_PAUSE_POLL_MS),
            ),
        )

        # -- session defaults (optional section) ----------------------------
        sd = data.get("session") or {}
        session = SessionConfig(
            orientation=str(sd.get("orientation", "portrait")),
            brush_width=int(sd.get("brush_width", 9)),
            color=_parse_color("session.color", sd.get("color", "black")),
            tool=str(sd.get("tool", "paintbrush")),
            background=_parse_color(
                "session.background", sd.get("background", "white"),
            ),
        )

        config = EaselConfig(
            bounds=bounds,
            controls=controls,
            palette=palette,
            timing=timing,
            session=session,
        )

    except KeyError as exc:
        raise ConfigError(
            f"Missing required configuration key: {exc}"
        ) from exc
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            f"Invalid configuration value: {exc}"
        ) from exc

    _validate_config(config)
    return config


def load_config(path: str | Path | None = None) -> EaselConfig:
    """Load and validate easel configuration from YAML.

    Parameters
    ----------
    path : str | Path | None
        Path to ``easel.yaml``.  ``None`` loads the default shipped
        alongside this module.

    Returns
    -------
    EaselConfig
        Fully validated, frozen configuration object.

    Raises
    ------
    ConfigError
        If any field is missing or fails validation.
    FileNotFoundError
        If *path* does not exist.
    """
    path = DEFAULT_CONFIG_PATH if path is None else Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    logger.info("Loading configuration from %s", path)

    data = load_yaml(path)
    if data is None:
        raise ConfigError(f"Empty configuration file: {path}")

    config = parse_config(data)
    logger.info("Configuration loaded successfully")
    return config


def config_to_dict(cfg: EaselConfig) -> dict[str, Any]:
    """Inverse of ``parse_config``: plain data ready for YAML."""

    def pt(c: Coord) -> list[int]:
        return [c.x, c.y]

    def bounds(b: Bounds) -> dict[str, list[int]]:
        return {"upper_left": pt(b.upper_left), "lower_right": pt(b.lower_right)}

    c = cfg.controls
    return {
        "easel": {
            "portrait_bounds": bounds(cfg.bounds.portrait),
            "landscape_bounds": bounds(cfg.bounds.landscape),
        },
        "controls": {
            "paintbrush": pt(c.paintbrush),
            "spray_can": pt(c.spray_can),
            "pen": pt(c.pen),
            "decrease_brush": pt(c.decrease_brush),
            "increase_brush": pt(c.increase_brush),
            "change_orientation": pt(c.change_orientation),
        },
        "palette": {
            "origin": pt(cfg.palette.origin),
            "row_step": cfg.palette.row_step,
            "col_step": cfg.palette.col_step,
        },
        "timing": {
            "settle_ms": round(cfg.timing.settle_s * 1000.0, 3),
            "brush_settle_ms": round(cfg.timing.brush_settle_s * 1000.0, 3),
            "pause_poll_ms": round(cfg.timing.pause_poll_s * 1000.0, 3),
        },
        "session": {
            "orientation": cfg.session.orientation,
            "brush_width": cfg.session.brush_width,
            "color": cfg.session.color.value,
            "tool": cfg.session.tool,
            "background": cfg.session.background.value,
        },
    }


def save_config(cfg: EaselConfig, path: str | Path) -> Path:
    """Write *cfg* to *path* atomically and return the path."""
    path = Path(path)
    atomic_yaml_dump(config_to_dict(cfg), path)
    logger.info("Wrote configuration to %s", path)
    return path
