"""Interactive calibration -- record easel screen positions by clicking.

Walks the operator through clicking every easel element once and writes
the resulting ``easel.yaml``.  The palette grid is derived from three
clicks: Black (origin), Grey (next column) and Dark Brown (next row).

Click capture uses a global ``pynput`` mouse hook; the cursor position at
each left-button press is recorded.  ``run_wizard`` accepts any
``capture`` callable so the sequence can be scripted in tests.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Callable

from easel_printer.configs.loader import (
    ControlsConfig,
    EaselBoundsConfig,
    EaselConfig,
    PaletteGridConfig,
    load_config,
    save_config,
)
from easel_printer.geometry.coords import Bounds, Coord

logger = logging.getLogger(__name__)

CaptureFn = Callable[[], Coord]
PromptFn = Callable[[str], None]


def capture_click(debounce_s: float = 1.0) -> Coord:
    """Block until the left mouse button is pressed; return its position.

    Sleeps *debounce_s* afterwards so one physical click is never
    recorded twice.
    """
    from pynput import mouse

    clicked: dict[str, Coord] = {}

    def on_click(x: float, y: float, button: object, pressed: bool) -> bool | None:
        if pressed and button == mouse.Button.left:
            clicked["pos"] = Coord(int(x), int(y))
            return False
        return None

    with mouse.Listener(on_click=on_click) as listener:
        listener.join()
    time.sleep(debounce_s)
    return clicked["pos"]


def run_wizard(
    capture: CaptureFn = capture_click,
    prompt: PromptFn = print,
    template: EaselConfig | None = None,
) -> EaselConfig:
    """Collect every easel position and build a config.

    Parameters
    ----------
    capture : CaptureFn
        Returns the screen position of the next click.
    prompt : PromptFn
        Shows one instruction line to the operator.
    template : EaselConfig | None
        Source of timing and session defaults; the shipped config when
        ``None``.

    Returns
    -------
    EaselConfig
        New configuration (not yet saved).
    """
    base = template if template is not None else load_config()

    def ask(message: str) -> Coord:
        prompt(message)
        pos = capture()
        logger.debug("%s -> %s", message, pos.as_tuple())
        return pos

    prompt("This will walk you through creation of a configuration file.")
    prompt("First, let's gather the portrait coordinates.")
    ask("Click anywhere when ready.")

    portrait_ul = ask("Please click on the upper left corner of the easel.")
    portrait_lr = ask("Please click on the lower right corner of the easel.")
    orientation = ask(
        "Please click on the button to change from portrait to landscape."
    )
    landscape_ul = ask("Please click on the upper left corner of the easel.")
    landscape_lr = ask("Please click on the lower right corner of the easel.")
    decrease_brush = ask("Please click on the button to decrease brush size.")
    increase_brush = ask("Please click on the button to increase brush size.")
    paintbrush = ask("Please click on the paintbrush tool.")
    spray_can = ask("Please click on the spray can tool.")
    pen = ask("Please click on the pen tool.")

    prompt("Next, we'll be figuring out the distance between colors.")
    prompt("Try to click in the center of the color.")
    black = ask("Please click on black.")
    grey = ask("Please click on grey.")
    dark_brown = ask("Please click on dark brown.")

    config = EaselConfig(
        bounds=EaselBoundsConfig(
            portrait=Bounds(portrait_ul, portrait_lr),
            landscape=Bounds(landscape_ul, landscape_lr),
        ),
        controls=ControlsConfig(
            paintbrush=paintbrush,
            spray_can=spray_can,
            pen=pen,
            decrease_brush=decrease_brush,
            increase_brush=increase_brush,
            change_orientation=orientation,
        ),
        palette=PaletteGridConfig(
            origin=black,
            row_step=dark_brown.x - black.x,
            col_step=grey.y - black.y,
        ),
        timing=base.timing,
        session=base.session,
    )
    prompt("Calibration complete.")
    return config


def calibrate(
    output: str | Path,
    capture: CaptureFn = capture_click,
    prompt: PromptFn = print,
) -> Path:
    """Run the wizard and save the result to *output*."""
    config = run_wizard(capture=capture, prompt=prompt)
    return save_config(config, output)
