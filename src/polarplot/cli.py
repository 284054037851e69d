## command-line front end for polarplot
## Copyright (c) 2026 polarplot contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Command-line access to the polarplot geometry kernel.

Usage:
    polarplot convert X Y
    polarplot check X1 Y1 X2 Y2
    polarplot plan X1 Y1 X2 Y2 [XN YN ...] [--spacing MM] [--json FILE] [--dxf FILE]

Examples:
    # Polar form of a Cartesian point
    polarplot convert 0 -15

    # Is the straight line between two points drawable?
    polarplot check 22.5 1 22.5 -1

    # Waypoints every 2 mm along a two-segment path, with a DXF preview
    polarplot plan 22.5 0 0 22.5 -22.5 0 --spacing 2 --dxf preview.dxf
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import List

from polarplot.checks import check_segment
from polarplot.config import DEFAULT_STEP
from polarplot.errors import OutOfBoundsError
from polarplot.logging_config import setup_logging
from polarplot.points import PointCartesian, PointPolar
from polarplot.segment import Segment

logger = logging.getLogger(__name__)


def format_polar(point: PointPolar) -> str:
    return f"r={point.radius:.4f} mm  theta={point.theta:.6f} rad ({math.degrees(point.theta):.2f} deg)"


def _points_from_coords(coords: List[float]) -> List[PointCartesian]:
    if len(coords) % 2:
        raise ValueError("coordinates must come in X Y pairs")
    return [PointCartesian(x, y) for x, y in zip(coords[0::2], coords[1::2])]


def _require_reachable(points: List[PointCartesian]) -> None:
    # segment validation does not look at endpoint radii
    for point in points:
        point.as_polar()


def cmd_convert(args: argparse.Namespace) -> int:
    point = PointCartesian(args.x, args.y)
    print(format_polar(point.as_polar()))
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    a = PointCartesian(args.x1, args.y1)
    b = PointCartesian(args.x2, args.y2)
    _require_reachable([a, b])
    result = check_segment(a, b)
    if not result:
        raise result.error
    print(f"ok: segment length {a.distance_to(b):.4f} mm")
    return 0


def cmd_plan(args: argparse.Namespace) -> int:
    try:
        points = _points_from_coords(args.coords)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    if len(points) < 2:
        print("error: need at least two points", file=sys.stderr)
        return 2

    _require_reachable(points)
    segments = Segment.chain(points)
    logger.info("planned %d segment(s)", len(segments))
    for idx, seg in enumerate(segments):
        print(f"segment {idx}: ({seg.point_a.x:g}, {seg.point_a.y:g}) -> "
              f"({seg.point_b.x:g}, {seg.point_b.y:g}), {seg.length:.4f} mm")
        for p in seg.waypoints(args.spacing):
            print("  " + format_polar(p))

    if args.json:
        from polarplot.waypoint_json import segments_to_json
        Path(args.json).write_text(json.dumps(segments_to_json(segments, args.spacing), indent=2))
        logger.info("wrote waypoints to %s", args.json)

    if args.dxf:
        from polarplot.dxf_export import PlotDrawing
        drawing = PlotDrawing()
        drawing.draw(segments, spacing=args.spacing)
        drawing.save(args.dxf)

    return 0


def _positive_float(text: str) -> float:
    value = float(text)
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polarplot",
        description="Geometry checks and waypoint planning for a polar plotter.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", type=str, default=None, help="Also write log output to this file.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert a Cartesian point to polar.")
    convert.add_argument("x", type=float)
    convert.add_argument("y", type=float)
    convert.set_defaults(func=cmd_convert)

    check = subparsers.add_parser("check", help="Check that a straight segment is drawable.")
    for name in ("x1", "y1", "x2", "y2"):
        check.add_argument(name, type=float)
    check.set_defaults(func=cmd_check)

    plan = subparsers.add_parser("plan", help="Print waypoints along a path of straight segments.")
    plan.add_argument("coords", type=float, nargs="+", metavar="X Y",
                      help="Path vertices as X Y pairs (mm).")
    plan.add_argument("--spacing", type=_positive_float, default=DEFAULT_STEP,
                      help=f"Waypoint spacing in mm (default {DEFAULT_STEP}).")
    plan.add_argument("--json", type=Path, default=None, help="Write waypoints to a JSON file.")
    plan.add_argument("--dxf", type=Path, default=None, help="Write a DXF preview.")
    plan.set_defaults(func=cmd_plan)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        return args.func(args)
    except OutOfBoundsError as e:
        print(f"rejected [{e.kind.value}]: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
