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
Defines the :class:`Looper` and :class:`FixedLooper` classes which repeat a
tween endlessly.
"""

import warnings

from .exc import TweenTimeWarning


class Looper:
    """
    Wraps the :class:`Tweener` *tweener*, restarting it each time it
    finishes so that :meth:`update` never returns ``None``. Usually
    constructed with :meth:`Tweener.looper`::

        >>> from tweener import *
        >>> looper = Tweener(Linear(0, 2, 2)).looper()
        >>> [looper.update(1) for i in range(5)]
        [1, 2, 1, 2, 1]

    The looper takes ownership of *tweener*; attempting to update it directly
    afterwards raises :exc:`DriverConsumed`. If *tweener* has already
    finished it is reset.

    The final value of the tween is produced once per cycle, on the update
    that completes the cycle; the next update starts the following cycle from
    the beginning. Any time in excess of the tween's duration on the
    completing update is discarded rather than carried into the next cycle.
    """
    __slots__ = ('_tweener',)

    def __init__(self, tweener):
        # pylint: disable=protected-access
        tweener._claim(self)
        self._tweener = tweener

    def __repr__(self):
        return '<Looper tweener=%r>' % (self._tweener,)

    @property
    def tweener(self):
        """
        Returns the tweener being looped.
        """
        return self._tweener

    def update(self, delta):
        """
        Advance the tween by *delta* and return the new value. A negative
        *delta* produces undefined results and raises a
        :exc:`TweenTimeWarning`.
        """
        # pylint: disable=protected-access
        if delta < 0:
            warnings.warn(TweenTimeWarning(
                'negative delta %r passed to Looper.update' % (delta,)))
        value = self._tweener._step(delta)
        if self._tweener.is_finished:
            self._tweener._reset()
        return value


class FixedLooper:
    """
    Wraps the :class:`FixedTweener` *tweener*, restarting it each time it
    finishes. The result is an infinite iterator::

        >>> from itertools import islice
        >>> from tweener import *
        >>> looper = FixedTweener(Linear(0, 2, 2), 1).looper()
        >>> list(islice(looper, 5))
        [1, 2, 1, 2, 1]

    The looper takes ownership of *tweener*; attempting to iterate over it
    directly afterwards raises :exc:`DriverConsumed`.
    """
    __slots__ = ('_tweener',)

    def __init__(self, tweener):
        # pylint: disable=protected-access
        tweener._claim(self)
        self._tweener = tweener

    def __repr__(self):
        return '<FixedLooper tweener=%r>' % (self._tweener,)

    def __iter__(self):
        return self

    def __next__(self):
        # pylint: disable=protected-access
        value = self._tweener._step(self._tweener.delta)
        if self._tweener.is_finished:
            self._tweener._reset()
        return value

    @property
    def tweener(self):
        """
        Returns the tweener being looped.
        """
        return self._tweener
