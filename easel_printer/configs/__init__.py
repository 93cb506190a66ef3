"""Easel configuration loading, validation and saving."""

from easel_printer.configs.loader import (
    DEFAULT_CONFIG_PATH,
    MAX_BRUSH_STEP,
    ConfigError,
    ControlsConfig,
    EaselBoundsConfig,
    EaselConfig,
    PaletteGridConfig,
    SessionConfig,
    TimingConfig,
    config_to_dict,
    load_config,
    parse_config,
    save_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "MAX_BRUSH_STEP",
    "ConfigError",
    "ControlsConfig",
    "EaselBoundsConfig",
    "EaselConfig",
    "PaletteGridConfig",
    "SessionConfig",
    "TimingConfig",
    "config_to_dict",
    "load_config",
    "parse_config",
    "save_config",
]
