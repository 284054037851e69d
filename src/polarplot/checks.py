## validation helpers for the polarplot geometry kernel
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

"""Validation helpers for straight segments between Cartesian points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from polarplot.config import MIN_RADIUS
from polarplot.errors import CrossesDeadZone, CrossesRotationMax, OutOfBoundsError
from polarplot.points import PointCartesian


def crosses_rotation_max(a: PointCartesian, b: PointCartesian) -> bool:
    """Return ``True`` if the segment crosses ``theta = 0`` on the positive-x side.

    That is the case when neither endpoint has a negative x and the two
    y values carry opposite signs.  ``+0.0`` counts as positive and
    ``-0.0`` as negative.
    """

    if a.x < 0 or b.x < 0:
        return False
    return math.copysign(1.0, a.y) != math.copysign(1.0, b.y)


def dead_zone_distance(a: PointCartesian, b: PointCartesian) -> float:
    """Distance from the origin to the infinite line through ``a`` and ``b``.

    For a degenerate segment (``a == b``) this is the distance from the
    origin to the point.
    """

    denom = math.sqrt((b.x - a.x) ** 2 + (a.y - b.y) ** 2)
    if denom == 0.0:
        return math.hypot(a.x, a.y)
    return abs((a.x - b.x) * a.y + (b.y - a.y) * a.x) / denom


def check_segment(a: PointCartesian, b: PointCartesian) -> "CheckResult":
    """Run the rotation-max and dead-zone checks, stopping at the first failure."""

    if crosses_rotation_max(a, b):
        return CheckResult(False, CrossesRotationMax())
    distance = dead_zone_distance(a, b)
    if distance < MIN_RADIUS:
        return CheckResult(False, CrossesDeadZone(distance))
    return CheckResult(True)


@dataclass
class CheckResult:
    ok: bool
    error: Optional[OutOfBoundsError] = None

    def __bool__(self) -> bool:
        return self.ok


__all__ = [
    'CheckResult',
    'crosses_rotation_max',
    'dead_zone_distance',
    'check_segment',
]
