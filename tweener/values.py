# vim: set et sw=4 sts=4 fileencoding=utf-8:
#
# Tweening and easing for animation loops
# Copyright (c) 2016-2018 Dave Jones <dave@waveform.org.uk>
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#     * Redistributions of source code must retain the above copyright
#       notice, this list of conditions and the following disclaimer.
#     * Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#     * Neither the name of the copyright holder nor the
#       names of its contributors may be used to endorse or promote products
#       derived from this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE
# ARE DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE
# LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR
# CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF
# SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS
# INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN
# CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
# ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED OF THE
# POSSIBILITY OF SUCH DAMAGE.

"""
Defines the arithmetic used to interpolate values. Tweens only ever need to
find the difference between two values, scale a difference by a fraction, and
add a (scaled) difference back on to a value; the functions in this module
implement those three operations for the types of value tweener understands:

* Plain numbers. Integral values stay integral (scaled differences are
  rounded to the nearest integer, halves away from zero), so a tween from
  ``0`` to ``100`` yields ``int`` values.

* :class:`~numpy.ndarray` values (lists and tuples of numbers are converted
  by :func:`coerce`). All arithmetic is element-wise.

* :class:`~colorzero.Color` values. Arithmetic happens in RGB space; the
  difference between two colors is an RGB vector (a 3-element
  :class:`~numpy.ndarray`) as it may be negative, while adding a vector to a
  color yields a new :class:`~colorzero.Color` clipped to the valid range.

Anything else falls back to the ``+``, ``-``, and ``*`` operators.
"""

import math
import numbers

import numpy as np
from colorzero import Color


def coerce(value):
    """
    Convert *value* to a form suitable for the other functions in this
    module. Lists and tuples of numbers become float
    :class:`~numpy.ndarray` instances; everything else is returned unchanged.
    """
    if isinstance(value, Color):
        # Color is a tuple too; leave it alone
        return value
    elif isinstance(value, (tuple, list)):
        return np.asarray(value, dtype=np.float64)
    else:
        return value


def _is_integral(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _to_vector(value):
    if isinstance(value, Color):
        return np.array(tuple(value), dtype=np.float64)
    return value


def _to_color(vector):
    r, g, b = np.clip(vector, 0, 1)
    return Color.from_rgb(float(r), float(g), float(b))


def subtract(a, b):
    """
    Return the difference *a* - *b*.
    """
    if isinstance(a, Color) or isinstance(b, Color):
        return _to_vector(a) - _to_vector(b)
    return a - b


def add(a, b):
    """
    Return the sum of *a* and *b*.
    """
    if isinstance(a, Color) or isinstance(b, Color):
        return _to_color(_to_vector(a) + _to_vector(b))
    return a + b


def scale(value, factor):
    """
    Return *value* scaled by the floating point *factor* (typically between
    0.0 and 1.0, though some easing curves overshoot).
    """
    if _is_integral(value):
        # Halves round away from zero (not to even) so equal steps in time
        # produce equal steps in value
        scaled = value * factor
        return int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))
    elif isinstance(value, Color):
        return _to_vector(value) * factor
    else:
        return value * factor


def lerp(start, end, factor):
    """
    Linear interpolation between *start* and *end* by *factor*. A *factor*
    of 0.0 returns *start* and 1.0 returns *end*.
    """
    return add(start, scale(subtract(end, start), factor))
