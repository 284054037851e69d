## DXF preview of planned plotter paths using the ezdxf package
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
DXF export of planned drawings.

``PlotDrawing`` renders the reachable work area of the plotter together
with segments, their waypoints and shapes, so a drawing can be checked
in any CAD viewer before it is sent to the machine.

Layers:

- ``LIMITS``: MIN/MAX radius circles and the rotation-max line
- ``PATHS``: validated segments
- ``WAYPOINTS``: stepper output, one DXF point per waypoint
- ``SHAPES``: center arcs and polygons
"""

import logging
import math
from pathlib import Path
from typing import Iterable, Union

import ezdxf

from polarplot.config import DEFAULT_STEP, MAX_RADIUS, MIN_RADIUS
from polarplot.points import PointPolar
from polarplot.segment import Segment
from polarplot.shapes import CenterArc, Polygon, Shape

logger = logging.getLogger(__name__)

LAYERS = {
    'LIMITS': 1,     # red
    'PATHS': 7,      # white
    'WAYPOINTS': 4,  # aqua
    'SHAPES': 2,     # yellow
}


class PlotDrawing:

    def __init__(self, work_area=True):
        # setup=False skips the default blocks and styles, which some CAD
        # programs cannot read
        self.__doc = ezdxf.new(dxfversion='R2010', setup=False)
        self.__doc.header['$MEASUREMENT'] = 1  # metric
        self.__doc.header['$INSUNITS'] = 4  # millimeters
        for name, color in LAYERS.items():
            self.__doc.layers.new(name, dxfattribs={'color': color})
        self.__msp = self.__doc.modelspace()
        if work_area:
            self.draw_work_area()

    def __repr__(self):
        return 'an instance of PlotDrawing'

    @property
    def doc(self):
        return self.__doc

    def draw_work_area(self):
        attribs = {'layer': 'LIMITS'}
        self.__msp.add_circle((0, 0), MIN_RADIUS, dxfattribs=attribs)
        self.__msp.add_circle((0, 0), MAX_RADIUS, dxfattribs=attribs)
        self.__msp.add_line((MIN_RADIUS, 0), (MAX_RADIUS, 0), dxfattribs=attribs)

    def draw_segment(self, segment: Segment, spacing: float = DEFAULT_STEP,
                     waypoints=True):
        a, b = segment.point_a, segment.point_b
        self.__msp.add_line((a.x, a.y), (b.x, b.y), dxfattribs={'layer': 'PATHS'})
        if waypoints:
            for p in segment.waypoints(spacing):
                self.draw_waypoint(p)

    def draw_waypoint(self, point: PointPolar):
        c = point.as_cartesian()
        self.__msp.add_point((c.x, c.y), dxfattribs={'layer': 'WAYPOINTS'})

    def draw_shape(self, shape: Shape):
        attribs = {'layer': 'SHAPES'}
        if isinstance(shape, CenterArc):
            start = math.degrees(shape.point.theta)
            if shape.rotation.is_full:
                self.__msp.add_circle((0, 0), shape.radius, dxfattribs=attribs)
                return
            end = math.degrees(shape.rotation.angle)
            if end < start:
                start, end = end, start
            if end - start >= 360.0:
                self.__msp.add_circle((0, 0), shape.radius, dxfattribs=attribs)
            else:
                self.__msp.add_arc((0, 0), shape.radius, start, end, dxfattribs=attribs)
        elif isinstance(shape, Polygon):
            if len(shape) < 2:
                logger.warning("skipping polygon with %d vertices", len(shape))
                return
            self.__msp.add_lwpolyline([(v.x, v.y) for v in shape.vertices],
                                      close=True, dxfattribs=attribs)
        else:
            raise ValueError(f'bad shape passed to draw_shape: {shape!r}')

    def draw(self, things: Iterable[Union[Segment, Shape]], spacing: float = DEFAULT_STEP):
        for thing in things:
            if isinstance(thing, Segment):
                self.draw_segment(thing, spacing)
            else:
                self.draw_shape(thing)

    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        self.__doc.saveas(path)
        logger.info("wrote DXF preview to %s", path)
        return path


__all__ = [
    'LAYERS',
    'PlotDrawing',
]
