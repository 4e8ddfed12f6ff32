#!/usr/bin/env python3
"""
jiometry - command-line tool for 2D geometric transformations.

  jiometry rotate "(50,96)" 90 "(256,256)"
  jiometry rotate "[(50,96) (510,296)]" -45 256 256
  jiometry format drawing.svg
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence

from export.CoordFormatter import COORD_DECIMALS, CoordFormatter
from geometry.PointFloat import PointFloat
from geometry.Rotation import Rotation
from parsing.CenterParser import CenterParser
from parsing.ParseError import CenterFormatError, ParseError
from parsing.PointParser import PointParser
from parsing.PointSetParser import PointSetParser
from svg.PathFormatter import PathFormatter

VERSION = "1.0.0"


def _parse_center_args(center: List[str]) -> PointFloat:
    """Accept either one "(cx,cy)" argument or two separate numbers."""
    if len(center) == 1:
        return CenterParser.parse_center(center[0])
    if len(center) == 2:
        cx = PointParser.parse_number(center[0])
        cy = PointParser.parse_number(center[1])
        if cx is None or cy is None:
            raise ParseError("Angle or center must be valid numbers.")
        return PointFloat(cx, cy)
    raise CenterFormatError(" ".join(center))


def cmd_rotate(args: argparse.Namespace) -> int:
    try:
        points = PointSetParser.parse_points(args.points)
        angle = PointParser.parse_number(args.angle)
        if angle is None:
            raise ParseError("Angle or center must be valid numbers.")
        center = _parse_center_args(args.center)
        if args.decimals < 0:
            raise ParseError(f"Decimals must be a non-negative integer, got {args.decimals}.")
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    rotated = Rotation.rotate_points(points, angle, center)
    print(f"New coordinates: {CoordFormatter.format_points(rotated, args.decimals)}")
    return 0


def cmd_format(args: argparse.Namespace) -> int:
    path = args.input_file_path
    print(f"Formatting {path}...")
    try:
        failures = PathFormatter.format_file(path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error formatting file {path}: {e}", file=sys.stderr)
        return 1

    for original_d, error in failures:
        print(f"Warning: Could not format path: {original_d[:50]}...", file=sys.stderr)
        print(f"Error: {error}", file=sys.stderr)

    print(f"Successfully formatted {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="jiometry", description="Command-line tool for 2D geometric transformations.")
    ap.add_argument("--version", action="version", version=VERSION)
    sub = ap.add_subparsers(dest="cmd")

    p_rot = sub.add_parser("rotate", help="Rotate point(s) around a center point")
    p_rot.add_argument("points", help="Point(s) to rotate, e.g., '(50,96)' or '[(50,96) (510,296)]'")
    p_rot.add_argument("angle", help="Angle to rotate (degrees)")
    p_rot.add_argument("center", nargs="+", help="Center point, e.g., '(256,256)', or separate cx cy")
    p_rot.add_argument("--decimals", type=int, default=COORD_DECIMALS,
                       help=f"Fractional digits before trimming (default: {COORD_DECIMALS})")
    p_rot.set_defaults(func=cmd_rotate)

    p_fmt = sub.add_parser("format", help="Format an svg document")
    p_fmt.add_argument("input_file_path", help="Input file")
    p_fmt.set_defaults(func=cmd_format)

    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if not hasattr(args, "func"):
        ap.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
