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
Defines the :class:`Tweener` and :class:`FixedTweener` classes which "drive"
a tween through time, tracking how much time has elapsed so that callers need
only provide time deltas.
"""

import warnings

from .exc import TweenTimeWarning, DriverConsumed
from .tweens import reverse
from .looper import Looper, FixedLooper
from .oscillator import Oscillator, FixedOscillator


class _Driver:
    # The state shared by both drivers. Composites (loopers and oscillators)
    # step and reset their drivers via the protected methods here; the
    # public stepping methods refuse to work once a composite owns the driver
    __slots__ = ('_tween', '_last_time', '_fused', '_owner')

    def __init__(self, tween):
        self._tween = tween
        self._last_time = 0
        self._fused = False
        self._owner = None

    def __repr__(self):
        return '<%s tween=%r current_time=%r%s>' % (
            self.__class__.__name__, self._tween, self._last_time,
            ' finished' if self._fused else '')

    @property
    def tween(self):
        """
        Returns the tween being driven.
        """
        return self._tween

    @property
    def current_time(self):
        """
        Returns the amount of time that has elapsed. This never exceeds the
        duration of the :attr:`tween`.
        """
        return self._last_time

    @property
    def is_finished(self):
        """
        Returns ``True`` once the final value of the tween has been produced.
        """
        return self._fused

    def _check_owner(self):
        if self._owner is not None:
            raise DriverConsumed(
                '%s belongs to a %s and cannot be used directly' % (
                    self.__class__.__name__, self._owner.__class__.__name__))

    def _claim(self, owner):
        self._check_owner()
        self._owner = owner
        if self._fused:
            self._reset()

    def _reset(self):
        self._last_time = 0
        self._fused = False

    def _step(self, delta):
        if self._fused:
            return None
        self._last_time += delta
        if self._last_time >= self._tween.duration:
            self._fused = True
            self._last_time = self._tween.duration
            return self._tween.final_value()
        else:
            return self._tween.run(self._last_time)


class Tweener(_Driver):
    """
    Drives *tween* forward by a variable amount of time with each call to
    :meth:`update`. This is the natural choice for a "variable time" loop
    (one that runs as fast as it can, measuring the time taken by each
    iteration)::

        >>> from tweener import *
        >>> tweener = Tweener(Linear(0, 10, 10))
        >>> tweener.update(1)
        1
        >>> tweener.update(2)
        3
        >>> tweener.update(100)
        10
        >>> tweener.update(100) is None
        True

    As can be seen above, overshooting the duration of the tween is not an
    error; the tween's final value is returned once, after which the tweener
    returns ``None`` forever. If you use a fixed time loop instead, see
    :class:`FixedTweener`.
    """
    __slots__ = ()

    def update(self, delta):
        """
        Advance the tween by *delta* and return the new value, or ``None`` if
        the tween had already finished.

        When the elapsed time reaches (or exceeds) the tween's duration, the
        tween's final value is returned and the tweener is finished. A
        negative *delta* produces undefined results and raises a
        :exc:`TweenTimeWarning`.
        """
        self._check_owner()
        if delta < 0:
            warnings.warn(TweenTimeWarning(
                'negative delta %r passed to %s.update' % (
                    delta, self.__class__.__name__)))
        return self._step(delta)

    def _reversed(self):
        return Tweener(reverse(self._tween))

    def looper(self):
        """
        Converts this tweener to a :class:`Looper`, which takes ownership of
        it.
        """
        return Looper(self)

    def oscillator(self):
        """
        Converts this tweener to an :class:`Oscillator` with this tweener as
        the rising side, and a reversed copy as the falling side.
        """
        return Oscillator(self)

    def oscillator_with(self, other):
        """
        Converts this tweener, and the *other* tweener, to an
        :class:`Oscillator` with this tweener as the rising side and *other*
        as the falling side. As the two may be entirely different tweens,
        this can be used to construct piece-wise oscillations.
        """
        return Oscillator(self, other)


class FixedTweener(_Driver):
    """
    Drives *tween* forward by the same *delta* at each step. This suits games
    and simulations with a fixed time loop, and permits a simpler interface:
    the instance is an iterator which yields the value of the tween after
    each step, finishing with the tween's final value::

        >>> from tweener import *
        >>> list(FixedTweener(Linear(0, 4, 4), 1))
        [1, 2, 3, 4]

    Like any iterator, the instance cannot be restarted once exhausted; wrap
    it in a :class:`FixedLooper` (see :meth:`looper`) for endless repetition.
    A negative *delta* produces undefined results and raises a
    :exc:`TweenTimeWarning`.
    """
    __slots__ = ('_delta',)

    def __init__(self, tween, delta):
        super().__init__(tween)
        if delta < 0:
            warnings.warn(TweenTimeWarning(
                'negative delta %r passed to %s' % (
                    delta, self.__class__.__name__)))
        self._delta = delta

    def __iter__(self):
        return self

    def __next__(self):
        self._check_owner()
        value = self._step(self._delta)
        if value is None:
            raise StopIteration
        return value

    @property
    def delta(self):
        """
        Returns the amount of time each step advances the tween by.
        """
        return self._delta

    def _reversed(self):
        return FixedTweener(reverse(self._tween), self._delta)

    def looper(self):
        """
        Converts this tweener to a :class:`FixedLooper`, which takes ownership
        of it.
        """
        return FixedLooper(self)

    def oscillator(self):
        """
        Converts this tweener to a :class:`FixedOscillator` with this tweener
        as the rising side and a reversed copy (with the same :attr:`delta`)
        as the falling side. The tween must have an ``initial_value`` method
        (all :class:`Tween` instances do).
        """
        return FixedOscillator(self)

    def oscillator_with(self, other):
        """
        Converts this tweener, and the *other* tweener, to a
        :class:`FixedOscillator` with this tweener as the rising side and
        *other* as the falling side.
        """
        return FixedOscillator(self, other)
