#!/usr/bin/env python3
"""
Calibration Script.

Record the easel's on-screen layout by clicking each element in turn and
write it to a configuration file.

Usage:
    easel-calibrate
    easel-calibrate --output my_easel.yaml
"""

from __future__ import annotations

import argparse
import logging
import sys

from easel_printer.calibration.wizard import calibrate
from easel_printer.configs.loader import DEFAULT_CONFIG_PATH

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Calibrate easel coordinates")
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=str(DEFAULT_CONFIG_PATH),
        help="Where to write the configuration (default: %(default)s)",
    )
    args = parser.parse_args(argv)

    try:
        path = calibrate(args.output)
    except KeyboardInterrupt:
        print("\nCalibration cancelled.")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        logger.exception("Calibration failed")
        return 1

    print(f"Configuration written to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
