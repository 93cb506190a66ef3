#!/usr/bin/env python3
"""
Draw Shapes Script.

Draw one of the built-in shapes (outlined and filled) on the easel.

Usage:
    easel-shapes --pattern house
    easel-shapes --pattern star --brush 0
    easel-shapes --pattern demo --dry-run
"""

from __future__ import annotations

import argparse
import logging
import sys

from easel_printer.calibration.patterns import PATTERNS
from easel_printer.canvas.easel import Easel, EaselError
from easel_printer.configs.loader import DEFAULT_CONFIG_PATH, load_config
from easel_printer.hardware.pause import PauseFlag, PauseListener
from easel_printer.hardware.pointer import PyAutoGUIPointer, RecordingPointer
from easel_printer.session import PrintSession

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Draw a built-in shape",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Available patterns: {', '.join(PATTERNS.keys())}",
    )
    parser.add_argument(
        "--pattern",
        "-p",
        type=str,
        choices=list(PATTERNS.keys()),
        default="demo",
        help="Shape to draw",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=str(DEFAULT_CONFIG_PATH),
        help="Easel configuration file",
    )
    parser.add_argument(
        "--brush",
        type=int,
        default=0,
        help="Brush width for outlines (0-16)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Record gestures instead of moving the mouse",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}")
        return 1

    strokes = PATTERNS[args.pattern]()
    print(f"Pattern {args.pattern}: {len(strokes)} shapes")

    pause = PauseFlag()
    try:
        if args.dry_run:
            recorder = RecordingPointer()
            easel = Easel(config, recorder)
            easel.set_brush_width(args.brush)
            PrintSession(easel, pause).draw_strokes(strokes)
            print(f"Dry run: {len(recorder.gestures)} gestures")
            return 0

        with PauseListener(pause):
            easel = Easel(config, PyAutoGUIPointer())
            easel.set_brush_width(args.brush)
            PrintSession(easel, pause).draw_strokes(strokes)
    except KeyboardInterrupt:
        print("\nDrawing interrupted.")
        return 1
    except EaselError as e:
        print(f"\nError: {e}")
        logger.exception("Drawing aborted")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
