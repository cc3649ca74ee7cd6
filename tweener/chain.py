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
Defines the :class:`Chain` class which plays a sequence of tweens one after
another as a single timeline.
"""

import warnings

from .exc import TweenTimeWarning


class Chain:
    """
    Plays the sequence of *tweens* end to end. Each call to :meth:`update`
    advances a single timeline across the sequence; a large enough delta may
    finish several members of the chain at once, in which case the time left
    over from each member is carried into the next::

        >>> from tweener import *
        >>> chain = Chain([Linear(0, 10, 5), Linear(10, 0, 5)])
        >>> chain.update(5)
        10
        >>> chain.update(5)
        0
        >>> chain.update(5) is None
        True

    When a step lands exactly on the boundary between two members, the value
    produced is the final value of the member that finished (zero-duration
    members following it finish on the same step, the last of them providing
    the value). The chain finishes (and returns ``None`` forever after) once
    its last member finishes. A chain is not repeatable by itself; see below.

    The chain doesn't require consecutive members to meet (the final value
    of one member needn't equal the initial value of the next); a
    discontinuous jump is a perfectly valid thing to want.

    A :class:`Chain` also behaves as a tween in its own right: it has a
    :attr:`duration` (the sum of its members' durations) and stateless
    :meth:`run`, :meth:`initial_value`, and :meth:`final_value` methods. This
    means it can be given to a :class:`Tweener` to be looped or oscillated::

        >>> looper = Tweener(Chain([Linear(0, 10, 5), Linear(10, 0, 5)])).looper()

    Constructing a chain with no members raises :exc:`ValueError`.
    """
    __slots__ = ('_tweens', '_duration', '_index', '_time', '_fused')

    def __init__(self, tweens):
        self._tweens = tuple(tweens)
        if not self._tweens:
            raise ValueError('a chain must contain at least one tween')
        self._duration = sum(tween.duration for tween in self._tweens)
        self._index = 0
        self._time = 0
        self._fused = False

    def __repr__(self):
        return 'Chain(%r)' % (list(self._tweens),)

    def __len__(self):
        return len(self._tweens)

    def __iter__(self):
        return iter(self._tweens)

    @property
    def duration(self):
        """
        Returns the total duration of the chain.
        """
        return self._duration

    @property
    def index(self):
        """
        Returns the index of the member currently being played.
        """
        return self._index

    @property
    def current_time(self):
        """
        Returns the time elapsed within the member currently being played.
        """
        return self._time

    @property
    def is_finished(self):
        """
        Returns ``True`` once the last member's final value has been
        produced.
        """
        return self._fused

    def update(self, delta):
        """
        Advance the chain by *delta* and return the new value, or ``None`` if
        the chain had already finished. A negative *delta* produces undefined
        results and raises a :exc:`TweenTimeWarning`.
        """
        if self._fused:
            return None
        if delta < 0:
            warnings.warn(TweenTimeWarning(
                'negative delta %r passed to Chain.update' % (delta,)))
        self._time += delta
        tween = self._tweens[self._index]
        while self._time >= tween.duration:
            if self._index == len(self._tweens) - 1:
                self._fused = True
                self._time = tween.duration
                return tween.final_value()
            self._time -= tween.duration
            self._index += 1
            finished = tween
            tween = self._tweens[self._index]
            if not self._time and tween.duration:
                # Exactly on the boundary; the value belongs to the last member
                # finished
                return finished.final_value()
        return tween.run(self._time)

    def run(self, time):
        """
        Return the value of the chain *time* after its start, regardless of
        the state of :meth:`update`.
        """
        for tween in self._tweens:
            if time < tween.duration:
                return tween.run(time)
            time -= tween.duration
        return self._tweens[-1].final_value()

    def initial_value(self):
        "Return the initial value of the first member"
        return self._tweens[0].initial_value()

    def final_value(self):
        "Return the final value of the last member"
        return self._tweens[-1].final_value()
