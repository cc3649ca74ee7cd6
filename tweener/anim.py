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
Defines a set of routines for generating and playing back animations in real
time with tweens.
"""

import os
import time

from .easings import linear
from .tweens import Tween
from .tweener import FixedTweener


def default_fps():
    """
    Returns the frame-rate used by the routines in this module when none is
    given explicitly. This defaults to 15, but can be overridden with the
    ``TWEENER_FPS`` environment variable, which must be a positive number.
    For example, to test a script at a higher frame-rate without altering
    it:

    .. code-block:: console

        $ TWEENER_FPS=60 python examples/fade.py
    """
    value = os.environ.get('TWEENER_FPS', '15')
    try:
        fps = float(value)
    except ValueError:
        raise ValueError('TWEENER_FPS must be a number, not %r' % value)
    if fps <= 0:
        raise ValueError('TWEENER_FPS must be positive, not %r' % value)
    return fps


def _fps(fps):
    if fps is None:
        return default_fps()
    if fps <= 0:
        raise ValueError('fps must be positive')
    return fps


def tween_frames(start, finish, duration=1, fps=None, easing=linear):
    """
    Returns an iterator which yields a series of values moving from *start*
    to *finish*, one for each frame of an animation. The last value yielded
    is always *finish* exactly.

    The *duration* and *fps* parameters control how many values will be
    yielded. The *duration* parameter measures the length of the animation in
    seconds, while *fps* controls how many frames should be shown per second
    (see :func:`default_fps` for the default). Hence, if *duration* is 1 (the
    default) and *fps* is 15, the iterator will yield 15 values.

    The *easing* parameter specifies a function (or the name of a function)
    which controls the progression of the values. See :mod:`tweener.easings`
    for the choices available.

    The result is a :class:`FixedTweener` counting frames rather than
    seconds (so that rounding errors cannot accumulate into an extra frame),
    hence it can be converted into a looper or an oscillator too.
    """
    steps = int(duration * _fps(fps))
    if steps <= 0:
        raise ValueError('duration and fps must produce at least one frame')
    return FixedTweener(Tween(start, finish, steps, easing), 1)


def play(frames, callback, fps=None):
    """
    Play an animation by passing each of *frames* to *callback* in turn,
    pausing between each call to achieve the rate given by *fps* (see
    :func:`default_fps` for the default). The *frames* can be any iterable,
    including a generator or one of the iterators produced by
    :func:`tween_frames`, :class:`FixedTweener` and friends (but beware that
    loopers and oscillators never end). If *callback* returns ``False``,
    playback stops early.
    """
    delay = 1 / _fps(fps)
    for frame in frames:
        if callback(frame) is False:
            break
        time.sleep(delay)


def animate(driver, callback, fps=None):
    """
    Drive *driver* in real time, passing each value it produces to
    *callback*. The *driver* can be anything with an ``update(delta)`` method
    that returns ``None`` when finished: a :class:`Tweener`, :class:`Chain`,
    :class:`Looper`, or :class:`Oscillator`.

    Each iteration waits for roughly one frame (at the rate specified by
    *fps*, see :func:`default_fps`) then advances *driver* by the time that
    *actually* elapsed since the last iteration, measured with
    :func:`time.monotonic`. Hence the animation stays true to its duration
    even when *callback* is slow.

    The loop finishes when *driver* returns ``None``, or when *callback*
    returns ``False`` (the only way of ending loopers and oscillators). The
    number of values passed to *callback* is returned.
    """
    delay = 1 / _fps(fps)
    count = 0
    last = time.monotonic()
    while True:
        time.sleep(delay)
        now = time.monotonic()
        value = driver.update(now - last)
        last = now
        if value is None:
            break
        count += 1
        if callback(value) is False:
            break
    return count
