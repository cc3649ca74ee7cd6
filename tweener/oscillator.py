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
Defines the :class:`Oscillator` and :class:`FixedOscillator` classes which
bounce endlessly between a "rising" tween and a "falling" tween.
"""

import warnings

from .exc import TweenTimeWarning, DriverConsumed


RISING = 'rising'
FALLING = 'falling'


class _Oscillator:
    __slots__ = ('_rising', '_falling', '_direction')

    def __init__(self, rising, falling=None):
        # pylint: disable=protected-access
        if falling is None:
            falling = rising._reversed()
        if rising is falling:
            raise DriverConsumed(
                'the rising and falling sides of %s must be different '
                'tweeners' % self.__class__.__name__)
        # Neither side is claimed unless both can be
        rising._check_owner()
        falling._check_owner()
        self._rising = rising
        self._falling = falling
        self._direction = RISING
        rising._claim(self)
        falling._claim(self)

    def __repr__(self):
        return '<%s direction=%s rising=%r falling=%r>' % (
            self.__class__.__name__, self._direction, self._rising,
            self._falling)

    @property
    def direction(self):
        """
        Returns the direction of the oscillation: :data:`RISING` (the
        initial direction) while the rising tween is active, or
        :data:`FALLING` while the falling tween is active.

        The direction changes on the same step that produces the final value
        of the active side; that value belongs to the side that finished, and
        the next step's value comes from the other side.
        """
        return self._direction

    @property
    def rising(self):
        "Returns the tweener driving the rising side of the oscillation"
        return self._rising

    @property
    def falling(self):
        "Returns the tweener driving the falling side of the oscillation"
        return self._falling

    def _active(self):
        return self._rising if self._direction == RISING else self._falling

    def _settle(self, active):
        # pylint: disable=protected-access
        if active.is_finished:
            active._reset()
            self._direction = FALLING if self._direction == RISING else RISING


class Oscillator(_Oscillator):
    """
    Oscillates between the :class:`Tweener` instances *rising* and *falling*,
    both of which the oscillator takes ownership of. If *falling* is
    omitted, a tweener over the reverse of *rising*'s tween is created for
    it (which requires that tween to have an ``initial_value`` method, as all
    :class:`Tween` instances do). Tweeners that have already finished are
    reset::

        >>> from tweener import *
        >>> osc = Tweener(Linear(0, 2, 2)).oscillator()
        >>> [osc.update(1) for i in range(6)]
        [1, 2, 1, 0, 1, 2]

    Each call to :meth:`update` advances only the active side; when that side
    finishes, the other side becomes active and the finished side is reset
    ready for its next turn. The oscillator itself never finishes.
    """
    __slots__ = ()

    def update(self, delta):
        """
        Advance the active side by *delta* and return the new value. A
        negative *delta* produces undefined results and raises a
        :exc:`TweenTimeWarning`.
        """
        # pylint: disable=protected-access
        if delta < 0:
            warnings.warn(TweenTimeWarning(
                'negative delta %r passed to Oscillator.update' % (delta,)))
        active = self._active()
        value = active._step(delta)
        self._settle(active)
        return value


class FixedOscillator(_Oscillator):
    """
    Oscillates between the :class:`FixedTweener` instances *rising* and
    *falling*; each side advances by its own :attr:`~FixedTweener.delta`.
    If *falling* is omitted, a reversed copy of *rising* is created for it.
    The result is an infinite iterator::

        >>> from itertools import islice
        >>> from tweener import *
        >>> osc = FixedTweener(Linear(0, 2, 2), 1).oscillator()
        >>> list(islice(osc, 6))
        [1, 2, 1, 0, 1, 2]
    """
    __slots__ = ()

    def __iter__(self):
        return self

    def __next__(self):
        # pylint: disable=protected-access
        active = self._active()
        value = active._step(active.delta)
        self._settle(active)
        return value
