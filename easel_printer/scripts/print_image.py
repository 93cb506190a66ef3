#!/usr/bin/env python3
"""
Print Image Script.

Draw an image onto the easel, row by row, using the fixed palette.

Usage:
    easel-printer --image photo.png
    easel-printer --image photo.png --enable-dither --mouse-wait 10
    easel-printer --image sprite.png --no-scale
    easel-printer --image photo.png --dry-run
    easel-printer --configure

Press Left Control + Space while drawing to pause / resume.
"""

from __future__ import annotations

import argparse
import logging
import sys

from easel_printer.calibration.wizard import calibrate
from easel_printer.canvas.easel import Easel, EaselError
from easel_printer.configs.loader import DEFAULT_CONFIG_PATH, load_config
from easel_printer.encoder.imaging import prepare_image
from easel_printer.hardware.pause import PauseFlag, PauseListener
from easel_printer.hardware.pointer import PyAutoGUIPointer, RecordingPointer
from easel_printer.job_ir.operations import gestures_to_strokes
from easel_printer.session import PrintSession

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print an image onto the easel",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--image",
        "-i",
        type=str,
        help="Input image to draw",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=str(DEFAULT_CONFIG_PATH),
        help="Easel configuration file (default: %(default)s)",
    )
    parser.add_argument(
        "--mouse-wait",
        "-w",
        type=float,
        help="Milliseconds to wait between mouse actions (overrides config)",
    )
    parser.add_argument(
        "--enable-dither",
        action="store_true",
        help="Dither onto the palette (less banding, longer draw time)",
    )
    parser.add_argument(
        "--no-scale",
        action="store_true",
        help="Disable scaling of the input image",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Record gestures instead of moving the mouse",
    )
    parser.add_argument(
        "--configure",
        action="store_true",
        help="Run the calibration wizard and write --config",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.configure:
        try:
            path = calibrate(args.config)
        except KeyboardInterrupt:
            print("\nCalibration cancelled.")
            return 1
        except ValueError as e:
            print(f"Error: {e}")
            logger.exception("Calibration failed")
            return 1
        print(f"Configuration written to {path}")
        return 0

    if not args.image:
        print("Error: please enter a path to the image to draw (--image).")
        return 1

    try:
        config = load_config(args.config)
        if args.mouse_wait is not None:
            config = config.with_settle_ms(args.mouse_wait)
    except Exception as e:
        print(f"Error loading config: {e}")
        return 1

    print("Printing to the easel with the following settings:")
    print(f"-- image: {args.image}")
    print(f"-- mouse wait: {config.timing.settle_s * 1000.0:g} ms")
    print(f"-- dithering: {args.enable_dither}")
    print(f"-- image scaling: {not args.no_scale}")
    print()

    try:
        image = prepare_image(
            args.image, config,
            scale=not args.no_scale, dither=args.enable_dither,
        )
    except Exception as e:
        print(f"Error loading image: {e}")
        logger.exception("Image preparation failed")
        return 1

    if args.dry_run:
        recorder = RecordingPointer()
        session = PrintSession(Easel(config, recorder))
        try:
            strokes = session.print_image(image)
        except EaselError as e:
            print(f"Error: {e}")
            return 1
        presses = len(gestures_to_strokes(recorder.gestures))
        print(f"Dry run: {strokes} strokes, {presses} press/release cycles, "
              f"{len(recorder.gestures)} gestures")
        return 0

    pause = PauseFlag()
    try:
        with PauseListener(pause):
            session = PrintSession(Easel(config, PyAutoGUIPointer()), pause)
            strokes = session.print_image(image)
    except KeyboardInterrupt:
        print("\nPrinting interrupted.")
        return 1
    except EaselError as e:
        print(f"\nError: {e}")
        logger.exception("Printing aborted")
        return 1

    print(f"Done: {strokes} strokes.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
