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
Defines the :class:`Tween` class and its named variants, the stateless
curves that the drivers in :mod:`tweener.tweener` advance through time.

Anything can be used as a tween provided it has:

* a ``duration`` attribute,

* a ``run(time)`` method returning the value at *time* (which the drivers
  guarantee is at least zero and less than ``duration``),

* a ``final_value()`` method returning the value once ``duration`` has
  elapsed.

An ``initial_value()`` method is only required of tweens that are to be
reversed (see :func:`reverse`), for example by an oscillator deriving its
falling side.
"""

from .easings import (
    get_easing,
    linear,
    quad_in, quad_out, quad_in_out,
    cubic_in, cubic_out, cubic_in_out,
    quart_in, quart_out, quart_in_out,
    quint_in, quint_out, quint_in_out,
    sine_in, sine_out, sine_in_out,
    expo_in, expo_out, expo_in_out,
    circ_in, circ_out, circ_in_out,
    back_in, back_out, back_in_out,
    elastic_in, elastic_out, elastic_in_out,
    bounce_in, bounce_out, bounce_in_out,
)
from .values import coerce, add, subtract, scale


class Tween:
    """
    A tween from *start* to *end* over *duration* units of time, following
    the curve of the *easing* function (either a callable or the name of one
    of the functions in :mod:`tweener.easings`). If *easing* is omitted the
    class' :attr:`default_easing` is used, which is :func:`linear` for this
    class and the eponymous curve for each of the named variants below.

    The *start* and *end* values can be anything supported by
    :mod:`tweener.values`: numbers, :class:`~numpy.ndarray` instances (or
    lists and tuples of numbers), or :class:`~colorzero.Color` instances. The
    *duration* can be any non-negative number in whatever unit of time you
    choose to drive the tween with (seconds, ticks, frames, etc).

    A *duration* of zero is permitted; such a tween is complete as soon as it
    is first stepped by any driver, and yields its *end* value.
    """
    __slots__ = ('_start', '_end', '_duration', '_easing', '_delta')
    default_easing = staticmethod(linear)

    def __init__(self, start, end, duration, easing=None):
        if duration < 0:
            raise ValueError('duration must be zero or positive')
        self._start = coerce(start)
        self._end = coerce(end)
        self._duration = duration
        self._easing = get_easing(
            self.default_easing if easing is None else easing)
        self._delta = subtract(self._end, self._start)

    def __repr__(self):
        return '%s(start=%r, end=%r, duration=%r)' % (
            self.__class__.__name__, self._start, self._end, self._duration)

    @property
    def start(self):
        "The value the tween starts from"
        return self._start

    @property
    def end(self):
        "The value the tween finishes at"
        return self._end

    @property
    def duration(self):
        "The length of the tween"
        return self._duration

    @property
    def easing(self):
        "The easing function shaping the tween"
        return self._easing

    def run(self, time):
        """
        Return the value of the tween after *time* has elapsed. The result is
        undefined if *time* lies outside the tween's duration.
        """
        return add(self._start, scale(
            self._delta, self._easing(time / self._duration)))

    def initial_value(self):
        "Return the value at the start of the tween"
        return self._start

    def final_value(self):
        "Return the value at the end of the tween"
        return self._end


class Linear(Tween):
    "Tween at a constant rate; see :func:`~tweener.easings.linear`"
    __slots__ = ()
    default_easing = staticmethod(linear)

class QuadIn(Tween):
    "Quadratic ease-in tween; see :func:`~tweener.easings.quad_in`"
    __slots__ = ()
    default_easing = staticmethod(quad_in)

class QuadOut(Tween):
    "Quadratic ease-out tween; see :func:`~tweener.easings.quad_out`"
    __slots__ = ()
    default_easing = staticmethod(quad_out)

class QuadInOut(Tween):
    "Quadratic ease-in-out tween; see :func:`~tweener.easings.quad_in_out`"
    __slots__ = ()
    default_easing = staticmethod(quad_in_out)

class CubicIn(Tween):
    "Cubic ease-in tween; see :func:`~tweener.easings.cubic_in`"
    __slots__ = ()
    default_easing = staticmethod(cubic_in)

class CubicOut(Tween):
    "Cubic ease-out tween; see :func:`~tweener.easings.cubic_out`"
    __slots__ = ()
    default_easing = staticmethod(cubic_out)

class CubicInOut(Tween):
    "Cubic ease-in-out tween; see :func:`~tweener.easings.cubic_in_out`"
    __slots__ = ()
    default_easing = staticmethod(cubic_in_out)

class QuartIn(Tween):
    "Quartic ease-in tween; see :func:`~tweener.easings.quart_in`"
    __slots__ = ()
    default_easing = staticmethod(quart_in)

class QuartOut(Tween):
    "Quartic ease-out tween; see :func:`~tweener.easings.quart_out`"
    __slots__ = ()
    default_easing = staticmethod(quart_out)

class QuartInOut(Tween):
    "Quartic ease-in-out tween; see :func:`~tweener.easings.quart_in_out`"
    __slots__ = ()
    default_easing = staticmethod(quart_in_out)

class QuintIn(Tween):
    "Quintic ease-in tween; see :func:`~tweener.easings.quint_in`"
    __slots__ = ()
    default_easing = staticmethod(quint_in)

class QuintOut(Tween):
    "Quintic ease-out tween; see :func:`~tweener.easings.quint_out`"
    __slots__ = ()
    default_easing = staticmethod(quint_out)

class QuintInOut(Tween):
    "Quintic ease-in-out tween; see :func:`~tweener.easings.quint_in_out`"
    __slots__ = ()
    default_easing = staticmethod(quint_in_out)

class SineIn(Tween):
    "Sinusoidal ease-in tween; see :func:`~tweener.easings.sine_in`"
    __slots__ = ()
    default_easing = staticmethod(sine_in)

class SineOut(Tween):
    "Sinusoidal ease-out tween; see :func:`~tweener.easings.sine_out`"
    __slots__ = ()
    default_easing = staticmethod(sine_out)

class SineInOut(Tween):
    "Sinusoidal ease-in-out tween; see :func:`~tweener.easings.sine_in_out`"
    __slots__ = ()
    default_easing = staticmethod(sine_in_out)

class ExpoIn(Tween):
    "Exponential ease-in tween; see :func:`~tweener.easings.expo_in`"
    __slots__ = ()
    default_easing = staticmethod(expo_in)

class ExpoOut(Tween):
    "Exponential ease-out tween; see :func:`~tweener.easings.expo_out`"
    __slots__ = ()
    default_easing = staticmethod(expo_out)

class ExpoInOut(Tween):
    "Exponential ease-in-out tween; see :func:`~tweener.easings.expo_in_out`"
    __slots__ = ()
    default_easing = staticmethod(expo_in_out)

class CircIn(Tween):
    "Circular ease-in tween; see :func:`~tweener.easings.circ_in`"
    __slots__ = ()
    default_easing = staticmethod(circ_in)

class CircOut(Tween):
    "Circular ease-out tween; see :func:`~tweener.easings.circ_out`"
    __slots__ = ()
    default_easing = staticmethod(circ_out)

class CircInOut(Tween):
    "Circular ease-in-out tween; see :func:`~tweener.easings.circ_in_out`"
    __slots__ = ()
    default_easing = staticmethod(circ_in_out)

class BackIn(Tween):
    "Back ease-in tween; see :func:`~tweener.easings.back_in`"
    __slots__ = ()
    default_easing = staticmethod(back_in)

class BackOut(Tween):
    "Back ease-out tween; see :func:`~tweener.easings.back_out`"
    __slots__ = ()
    default_easing = staticmethod(back_out)

class BackInOut(Tween):
    "Back ease-in-out tween; see :func:`~tweener.easings.back_in_out`"
    __slots__ = ()
    default_easing = staticmethod(back_in_out)

class ElasticIn(Tween):
    "Elastic ease-in tween; see :func:`~tweener.easings.elastic_in`"
    __slots__ = ()
    default_easing = staticmethod(elastic_in)

class ElasticOut(Tween):
    "Elastic ease-out tween; see :func:`~tweener.easings.elastic_out`"
    __slots__ = ()
    default_easing = staticmethod(elastic_out)

class ElasticInOut(Tween):
    "Elastic ease-in-out tween; see :func:`~tweener.easings.elastic_in_out`"
    __slots__ = ()
    default_easing = staticmethod(elastic_in_out)

class BounceIn(Tween):
    "Bounce ease-in tween; see :func:`~tweener.easings.bounce_in`"
    __slots__ = ()
    default_easing = staticmethod(bounce_in)

class BounceOut(Tween):
    "Bounce ease-out tween; see :func:`~tweener.easings.bounce_out`"
    __slots__ = ()
    default_easing = staticmethod(bounce_out)

class BounceInOut(Tween):
    "Bounce ease-in-out tween; see :func:`~tweener.easings.bounce_in_out`"
    __slots__ = ()
    default_easing = staticmethod(bounce_in_out)


class Reversed:
    """
    Wraps *tween* and plays it backwards: the result starts at the *tween*'s
    final value and finishes at its initial value, retracing the same curve.
    The wrapped *tween* is not modified. Use :func:`reverse` rather than
    constructing this directly.
    """
    __slots__ = ('_tween',)

    def __init__(self, tween):
        self._tween = tween

    def __repr__(self):
        return 'Reversed(%r)' % (self._tween,)

    @property
    def tween(self):
        "The tween being reversed"
        return self._tween

    @property
    def duration(self):
        return self._tween.duration

    def run(self, time):
        return self._tween.run(self._tween.duration - time)

    def initial_value(self):
        return self._tween.final_value()

    def final_value(self):
        return self._tween.initial_value()


def reverse(tween):
    """
    Return a tween which retraces *tween* from its final value back to its
    initial value. Reversing a reversed tween returns the original. Raises
    :exc:`TypeError` if *tween* has no ``initial_value`` method.
    """
    if isinstance(tween, Reversed):
        return tween.tween
    if not callable(getattr(tween, 'initial_value', None)):
        raise TypeError('%r cannot be reversed as it has no initial_value '
                        'method' % (tween,))
    return Reversed(tween)
