## waypoint JSON serialization for polarplot
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

"""Waypoint JSON serialization/deserialization helpers.

A document looks like::

    {
      "schema": "polarplot-waypoints-v0.1",
      "limits": {"minRadius": 14.0, "maxRadius": 31.0},
      "spacing": 1.0,
      "segments": [
        {"start": [x, y], "end": [x, y], "length": L,
         "waypoints": [[radius, theta], ...]}
      ]
    }
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Sequence

from polarplot.config import DEFAULT_STEP, MAX_RADIUS, MIN_RADIUS
from polarplot.points import PointCartesian, PointPolar
from polarplot.segment import Segment

SCHEMA_ID = "polarplot-waypoints-v0.1"


def _xy(pt: PointCartesian) -> List[float]:
    return [float(pt.x), float(pt.y)]


def _polar(pt: PointPolar) -> List[float]:
    return [float(pt.radius), float(pt.theta)]


def segment_to_json(segment: Segment, spacing: float = DEFAULT_STEP) -> Dict[str, Any]:
    return {
        "start": _xy(segment.point_a),
        "end": _xy(segment.point_b),
        "length": float(segment.length),
        "waypoints": [_polar(p) for p in segment.waypoints(spacing)],
    }


def segments_to_json(segments: Iterable[Segment], spacing: float = DEFAULT_STEP) -> Dict[str, Any]:
    """Serialize planned segments and their waypoints to a JSON-compatible dict."""

    return {
        "schema": SCHEMA_ID,
        "limits": {"minRadius": MIN_RADIUS, "maxRadius": MAX_RADIUS},
        "spacing": float(spacing),
        "segments": [segment_to_json(seg, spacing) for seg in segments],
    }


def _waypoint_from_components(components: Sequence[float]) -> PointPolar:
    if not isinstance(components, (list, tuple)) or len(components) != 2:
        raise ValueError(f"waypoint must be [radius, theta], got {components!r}")
    try:
        radius, theta = float(components[0]), float(components[1])
    except TypeError as e:
        raise ValueError(f"waypoint must be [radius, theta], got {components!r}") from e
    return PointPolar(radius, theta)


def waypoints_from_json(data: Dict[str, Any]) -> List[List[PointPolar]]:
    """Rebuild the per-segment waypoint lists from a document.

    Each waypoint goes through the ``PointPolar`` constructor again, so
    a document edited out of bounds raises an ``OutOfBoundsError``.
    """

    if not isinstance(data, Mapping):
        raise ValueError(f"waypoint document must be a JSON object, got {type(data).__name__}")
    schema = data.get("schema")
    if schema != SCHEMA_ID:
        raise ValueError(f"unsupported waypoint schema: {schema!r}")
    segments = data.get("segments", [])
    if not isinstance(segments, list):
        raise ValueError("\"segments\" must be a list")
    result = []
    for entry in segments:
        if not isinstance(entry, Mapping):
            raise ValueError(f"segment entry must be a JSON object, got {entry!r}")
        waypoints = entry.get("waypoints", [])
        if not isinstance(waypoints, list):
            raise ValueError(f"segment waypoints must be a list, got {waypoints!r}")
        result.append([_waypoint_from_components(c) for c in waypoints])
    return result


__all__ = [
    'SCHEMA_ID',
    'segment_to_json',
    'segments_to_json',
    'waypoints_from_json',
]
