## out-of-bounds error taxonomy for the polarplot geometry kernel
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
Geometry rejection errors.

Every failure the kernel can report is one of four kinds, all derived
from ``OutOfBoundsError``:

- ``BelowMinimumRadius``: a point falls inside the dead zone
- ``AboveMaximumRadius``: a point lies beyond the carriage travel
- ``CrossesRotationMax``: a path crosses the rotation-max discontinuity
- ``CrossesDeadZone``: a straight path passes through the dead zone

Callers may catch a specific class, or catch ``OutOfBoundsError`` and
branch on ``err.kind``.
"""

from enum import Enum
from typing import Any, Dict, Tuple


class ErrorKind(Enum):
    """Discriminator for the four out-of-bounds kinds."""
    BELOW_MINIMUM_RADIUS = "below_minimum_radius"
    ABOVE_MAXIMUM_RADIUS = "above_maximum_radius"
    CROSSES_ROTATION_MAX = "crosses_rotation_max"
    CROSSES_DEAD_ZONE = "crosses_dead_zone"


class OutOfBoundsError(Exception):
    """Base class for requested geometry the mechanism cannot reach."""

    kind: ErrorKind
    _fields: Tuple[str, ...] = ()

    def payload(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in self._fields}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.payload() == other.payload()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + tuple(self.payload().values()))

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.payload().items())
        return f"{type(self).__name__}({args})"

    def __str__(self) -> str:
        return self._message()

    def _message(self) -> str:
        return "geometry out of bounds"

    def to_json(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dict for tool output."""
        data: Dict[str, Any] = {"kind": self.kind.value, "message": str(self)}
        data.update(self.payload())
        return data


class BelowMinimumRadius(OutOfBoundsError):
    """Point radius is inside the dead zone."""

    kind = ErrorKind.BELOW_MINIMUM_RADIUS
    _fields = ("radius", "theta")

    def __init__(self, radius: float, theta: float):
        self.radius = radius
        self.theta = theta
        super().__init__(radius, theta)

    def _message(self) -> str:
        return f"radius {self.radius:g} mm is below the minimum radius"


class AboveMaximumRadius(OutOfBoundsError):
    """Point radius is beyond the end of carriage travel."""

    kind = ErrorKind.ABOVE_MAXIMUM_RADIUS
    _fields = ("radius", "theta")

    def __init__(self, radius: float, theta: float):
        self.radius = radius
        self.theta = theta
        super().__init__(radius, theta)

    def _message(self) -> str:
        return f"radius {self.radius:g} mm is above the maximum radius"


class CrossesRotationMax(OutOfBoundsError):
    """Path crosses the rotation-max discontinuity."""

    kind = ErrorKind.CROSSES_ROTATION_MAX

    def __init__(self):
        super().__init__()

    def _message(self) -> str:
        return "path crosses the rotation max"


class CrossesDeadZone(OutOfBoundsError):
    """Straight path passes closer to the center than the minimum radius."""

    kind = ErrorKind.CROSSES_DEAD_ZONE
    _fields = ("distance",)

    def __init__(self, distance: float):
        self.distance = distance
        super().__init__(distance)

    def _message(self) -> str:
        return f"path passes {self.distance:g} mm from the center, inside the dead zone"


__all__ = [
    'ErrorKind',
    'OutOfBoundsError',
    'BelowMinimumRadius',
    'AboveMaximumRadius',
    'CrossesRotationMax',
    'CrossesDeadZone',
]
