## drawable shape descriptors for the polarplot geometry kernel
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

"""Declarative descriptions of drawable primitives.

A ``Shape`` is either a ``CenterArc`` (an arc about the rotation axis at
a fixed radius) or a ``Polygon`` (an ordered list of Cartesian
vertices).  Shapes are data holders only; they are not expanded into
segments here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from polarplot.config import pi2
from polarplot.errors import CrossesRotationMax
from polarplot.points import PointCartesian, PointPolar


@dataclass(frozen=True)
class Rotation:
    """How far an arc sweeps.

    A full rotation has ``angle`` of ``None``.  A partial rotation
    carries the absolute terminal angle in radians.
    """
    angle: Optional[float] = None

    @classmethod
    def full(cls) -> Rotation:
        return cls(None)

    @classmethod
    def partial(cls, angle: float) -> Rotation:
        return cls(float(angle))

    @property
    def is_full(self) -> bool:
        return self.angle is None


class Shape:
    """Base class for ``CenterArc`` and ``Polygon``."""

    @staticmethod
    def circle(radius: float) -> CenterArc:
        """Full circle about the origin; raises if ``radius`` is unreachable."""
        point = PointPolar(radius, 0.0)
        return CenterArc(point, Rotation.full())

    @staticmethod
    def center_arc(point: PointPolar, arc_length: float) -> CenterArc:
        """Arc about the origin starting at ``point``.

        ``arc_length`` is the angular sweep in radians.  The terminal
        angle may not pass one full revolution; negative sweeps are not
        checked.
        """
        angle = arc_length + point.theta
        if angle > pi2:
            raise CrossesRotationMax()
        return CenterArc(point, Rotation.partial(angle))

    @staticmethod
    def polygon(vertices: Iterable[PointCartesian]) -> Polygon:
        return Polygon(tuple(vertices))


@dataclass(frozen=True)
class CenterArc(Shape):
    point: PointPolar
    rotation: Rotation

    @property
    def radius(self) -> float:
        return self.point.radius


@dataclass(frozen=True)
class Polygon(Shape):
    vertices: Tuple[PointCartesian, ...]

    def __len__(self) -> int:
        return len(self.vertices)


__all__ = [
    'Rotation',
    'Shape',
    'CenterArc',
    'Polygon',
]
