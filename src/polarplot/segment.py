## validated straight segments for the polarplot geometry kernel
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

"""Straight segments the mechanism can follow, and waypoint stepping.

A ``Segment`` joins two Cartesian endpoints and only exists if the
straight path between them

1. does not cross the rotation-max discontinuity, and
2. does not come closer to the center than ``MIN_RADIUS`` (measured to
   the infinite line through the endpoints, which is conservative).

Motion control then walks the segment with ``step`` or ``waypoints``
to obtain polar targets for the actuators.

>>> seg = Segment(PointCartesian(22.5, 0.0), PointCartesian(0.0, 22.5))
>>> len(list(seg.waypoints(spacing=10.0)))
5
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence

from polarplot.checks import check_segment
from polarplot.config import DEFAULT_STEP
from polarplot.points import PointCartesian, PointPolar

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Segment:
    point_a: PointCartesian
    point_b: PointCartesian

    def __post_init__(self):
        result = check_segment(self.point_a, self.point_b)
        if not result:
            logger.debug("rejected segment %s -> %s: %s",
                         self.point_a, self.point_b, result.error)
            raise result.error

    @classmethod
    def chain(cls, points: Sequence[PointCartesian]) -> List[Segment]:
        """Build consecutive segments through ``points`` in order.

        Raises the error of the first segment that fails validation.
        """
        if len(points) < 2:
            raise ValueError(f"need at least two points to chain, got {len(points)}")
        return [cls(a, b) for a, b in zip(points[:-1], points[1:])]

    @property
    def length(self) -> float:
        return self.point_a.distance_to(self.point_b)

    def step(self, distance: float) -> Optional[PointPolar]:
        """Polar point ``distance`` millimeters from ``point_a`` toward ``point_b``.

        Returns ``None`` if ``distance`` is outside ``[0, length]``.
        """
        length = self.length
        if not 0.0 <= distance <= length:
            return None
        # endpoints are returned exactly, without interpolation error
        if distance == 0.0:
            return self.point_a.as_polar()
        if distance == length:
            return self.point_b.as_polar()

        a, b = self.point_a, self.point_b
        x = a.x - distance * (a.x - b.x) / length
        y = a.y - distance * (a.y - b.y) / length
        return PointCartesian(x, y).as_polar()

    def waypoints(self, spacing: float = DEFAULT_STEP) -> Iterator[PointPolar]:
        """Yield polar waypoints every ``spacing`` mm, always ending at ``point_b``."""
        if not spacing > 0:
            raise ValueError(f"waypoint spacing must be positive, got {spacing}")
        length = self.length
        i = 0
        while i * spacing < length:
            yield self.step(i * spacing)
            i += 1
        yield self.step(length)


__all__ = [
    'Segment',
]
