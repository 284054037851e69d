# -*- coding: utf-8 -*-
"""Geometry kernel for a polar-coordinate plotter.

Converts between Cartesian drawing coordinates and the polar coordinates
the mechanism understands, rejects points and straight segments it cannot
physically follow, and steps along accepted segments to produce polar
waypoints for motion control.
"""

from importlib.metadata import PackageNotFoundError, version

from polarplot.config import MAX_RADIUS, MIN_RADIUS
from polarplot.errors import (
    AboveMaximumRadius,
    BelowMinimumRadius,
    CrossesDeadZone,
    CrossesRotationMax,
    ErrorKind,
    OutOfBoundsError,
)
from polarplot.points import PointCartesian, PointPolar
from polarplot.segment import Segment
from polarplot.shapes import CenterArc, Polygon, Rotation, Shape

try:
    __version__ = version("polarplot")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

__all__ = [
    "MIN_RADIUS",
    "MAX_RADIUS",
    "ErrorKind",
    "OutOfBoundsError",
    "BelowMinimumRadius",
    "AboveMaximumRadius",
    "CrossesRotationMax",
    "CrossesDeadZone",
    "PointCartesian",
    "PointPolar",
    "Rotation",
    "Shape",
    "CenterArc",
    "Polygon",
    "Segment",
]
