#!/usr/bin/env python3
"""
Command-line front end for sweepslicer.

Slices an ASCII STL file with N evenly spaced horizontal planes between
z_min and z_max and writes the resulting segments to stdout or a file.

    sweepslicer part.stl --z-min 0 --z-max 20 --slices 40 -o part.xyz
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .default_config import DEFAULTS
from .exceptions import SweepSlicerError
from .file_parser import parse_file
from .slicer import SliceConfig, Slicer
from .slicer.writer import OUTPUT_FORMATS, write_segments

logger = logging.getLogger("sweepslicer")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sweepslicer",
        description="Slice an ASCII STL mesh into per-layer line segments.",
    )
    parser.add_argument("input", type=Path, help="ASCII STL file")
    parser.add_argument("--z-min", type=float, default=DEFAULTS["Z_MIN"],
                        help="height of the first slice (default: %(default)s)")
    parser.add_argument("--z-max", type=float, default=DEFAULTS["Z_MAX"],
                        help="upper sweep bound (default: %(default)s)")
    parser.add_argument("--slices", "-n", type=int, default=DEFAULTS["SLICE_COUNT"],
                        help="number of slices, >= 1 (default: %(default)s)")
    parser.add_argument("--auto-bounds", action="store_true",
                        help="use the mesh's z-range as sweep bounds")
    parser.add_argument("--format", "-f", choices=OUTPUT_FORMATS, default=DEFAULTS["OUTPUT_FORMAT"],
                        help="output format (default: %(default)s)")
    parser.add_argument("--output", "-o", type=Path, default=None,
                        help="output file (default: stdout)")
    parser.add_argument("--no-progress", action="store_true", help="disable progress bars")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="increase log verbosity (-v INFO, -vv DEBUG)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=None,
                        help="explicit log level, overrides -v")
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.log_level:
        level = getattr(logging, args.log_level)
    elif args.verbose >= 2:
        level = logging.DEBUG
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args)
    progress = not args.no_progress

    try:
        mesh = parse_file(args.input, progress=progress)
        z_min, z_max = mesh.z_range() if args.auto_bounds else (args.z_min, args.z_max)
        # validate before the output file is opened (and truncated)
        config = SliceConfig(z_min, z_max, args.slices)
        segments = Slicer(mesh).iter_segments(config.z_min, config.z_max, config.slice_count, progress=progress)
        if args.output is None:
            count = write_segments(segments, sys.stdout, fmt=args.format)
        else:
            with open(args.output, "w", encoding="utf-8", newline="") as f:
                count = write_segments(segments, f, fmt=args.format)
    except (SweepSlicerError, FileNotFoundError, ValueError) as e:
        logger.error(f"{e}")
        return 1

    logger.info(f"Wrote {count} segments" + (f" -> {args.output}" if args.output else ""))
    return 0


if __name__ == "__main__":
    sys.exit(main())
