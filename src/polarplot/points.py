## coordinate types for the polarplot geometry kernel
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

"""Cartesian and polar points.

``PointCartesian`` is a plain (x, y) pair in millimeters on the drawing
surface.  ``PointPolar`` is what the hardware understands: a radius in
millimeters and an angle ``theta`` in radians.  A ``PointPolar`` can
only exist if its radius lies in ``[MIN_RADIUS, MAX_RADIUS]``; the
constructor is the one place that rule is checked.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from polarplot.config import MAX_RADIUS, MIN_RADIUS
from polarplot.errors import AboveMaximumRadius, BelowMinimumRadius


@dataclass(frozen=True)
class PointCartesian:
    """A point on the drawing surface, ``x`` and ``y`` in millimeters."""
    x: float
    y: float

    def as_polar(self) -> PointPolar:
        """Convert to the equivalent polar point.

        ``theta`` comes straight from ``atan2`` and so lies in
        ``(-pi, pi]``.  Raises ``AboveMaximumRadius`` or
        ``BelowMinimumRadius`` if the point is not reachable.
        """
        radius = math.hypot(self.x, self.y)
        theta = math.atan2(self.y, self.x)
        return PointPolar(radius, theta)

    def distance_to(self, other: PointCartesian) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class PointPolar:
    """A reachable point, ``radius`` in millimeters and ``theta`` in radians."""
    radius: float
    theta: float

    def __post_init__(self):
        if self.radius > MAX_RADIUS:
            raise AboveMaximumRadius(self.radius, self.theta)
        # written as a negated >= so that a NaN radius is rejected too
        if not self.radius >= MIN_RADIUS:
            raise BelowMinimumRadius(self.radius, self.theta)

    def as_cartesian(self) -> PointCartesian:
        return PointCartesian(self.radius * math.cos(self.theta),
                              self.radius * math.sin(self.theta))


__all__ = [
    'PointCartesian',
    'PointPolar',
]
