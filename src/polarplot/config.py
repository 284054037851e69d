## reachable-workspace constants for the polarplot geometry kernel
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

"""Physical limits of the polar plotting mechanism.

The carriage can only travel between ``MIN_RADIUS`` and ``MAX_RADIUS``
millimeters from the rotation axis.  Everything closer than
``MIN_RADIUS`` is the dead zone occupied by the pivot hardware.  These
two numbers are the single source of truth for every bounds check in
the package; redefine them at your peril.

Units: millimeters for lengths, radians for angles.
"""

from math import pi

# Reachable radius band (mm)
MIN_RADIUS = 14.0
MAX_RADIUS = 31.0

# one full revolution
pi2 = 2.0 * pi

# Tolerance for approximate comparisons in callers and tests.  The
# bounds checks themselves compare exactly.
epsilon = 5e-6

# Default spacing between generated waypoints (mm)
DEFAULT_STEP = 1.0

__all__ = [
    'MIN_RADIUS',
    'MAX_RADIUS',
    'pi2',
    'epsilon',
    'DEFAULT_STEP',
]
