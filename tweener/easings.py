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
Defines various easing functions for the tweens. Each function maps the
proportion of a tween's duration that has elapsed, *t* (between 0.0 and 1.0),
to the proportion of the change in value that should have been applied by
that point. All functions return 0.0 for an input of 0.0 and 1.0 for an input
of 1.0; the "back" and "elastic" families deliberately stray outside that
range in between.
"""

import math


def linear(t):
    """
    Linear easing function.

    This is the default easing function which simply progresses the tween at
    a constant rate from start to finish.
    """
    return t


def quad_in(t):
    """
    Quadratic ease-in function.

    This function starts the tween off slowly, and builds speed as it
    progresses, finishing abruptly.
    """
    return t ** 2


def quad_out(t):
    """
    Quadratic ease-out function.

    This function starts the tween suddenly and then eases it gradually to a
    halt.
    """
    return t * (2 - t)


def quad_in_out(t):
    """
    Quadratic ease-in-out function.

    This function starts the tween gradually, progresses rapidly at the
    mid-point, and eases gently to a halt.
    """
    return 2 * t ** 2 if t < 0.5 else (4 - 2 * t) * t - 1


# Familiar aliases for the quadratic family
ease_in = quad_in
ease_out = quad_out
ease_in_out = quad_in_out


def cubic_in(t):
    "Cubic ease-in function"
    return t ** 3


def cubic_out(t):
    "Cubic ease-out function"
    return 1 - (1 - t) ** 3


def cubic_in_out(t):
    "Cubic ease-in-out function"
    return 4 * t ** 3 if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


def quart_in(t):
    "Quartic ease-in function"
    return t ** 4


def quart_out(t):
    "Quartic ease-out function"
    return 1 - (1 - t) ** 4


def quart_in_out(t):
    "Quartic ease-in-out function"
    return 8 * t ** 4 if t < 0.5 else 1 - (-2 * t + 2) ** 4 / 2


def quint_in(t):
    "Quintic ease-in function"
    return t ** 5


def quint_out(t):
    "Quintic ease-out function"
    return 1 - (1 - t) ** 5


def quint_in_out(t):
    "Quintic ease-in-out function"
    return 16 * t ** 5 if t < 0.5 else 1 - (-2 * t + 2) ** 5 / 2


def sine_in(t):
    """
    Sinusoidal ease-in function. The gentlest of the "in" curves.
    """
    return 1 - math.cos(t * math.pi / 2)


def sine_out(t):
    "Sinusoidal ease-out function"
    return math.sin(t * math.pi / 2)


def sine_in_out(t):
    "Sinusoidal ease-in-out function"
    return -(math.cos(math.pi * t) - 1) / 2


def expo_in(t):
    """
    Exponential ease-in function. Barely moves for the first half of the
    tween, then accelerates sharply.
    """
    return 0.0 if t == 0 else 2 ** (10 * t - 10)


def expo_out(t):
    "Exponential ease-out function"
    return 1.0 if t == 1 else 1 - 2 ** (-10 * t)


def expo_in_out(t):
    "Exponential ease-in-out function"
    if t == 0:
        return 0.0
    elif t == 1:
        return 1.0
    elif t < 0.5:
        return 2 ** (20 * t - 10) / 2
    else:
        return (2 - 2 ** (-20 * t + 10)) / 2


def circ_in(t):
    "Circular ease-in function; follows the arc of a quarter circle"
    return 1 - math.sqrt(1 - t ** 2)


def circ_out(t):
    "Circular ease-out function"
    return math.sqrt(1 - (t - 1) ** 2)


def circ_in_out(t):
    "Circular ease-in-out function"
    if t < 0.5:
        return (1 - math.sqrt(1 - (2 * t) ** 2)) / 2
    return (math.sqrt(1 - (-2 * t + 2) ** 2) + 1) / 2


_BACK_C1 = 1.70158
_BACK_C2 = _BACK_C1 * 1.525
_BACK_C3 = _BACK_C1 + 1


def back_in(t):
    """
    Ease-in function that backs away from the target (dipping below 0.0)
    before heading towards it, like drawing back a catapult.
    """
    return _BACK_C3 * t ** 3 - _BACK_C1 * t ** 2


def back_out(t):
    """
    Ease-out function that overshoots the target (exceeding 1.0) before
    settling back on to it.
    """
    return 1 + _BACK_C3 * (t - 1) ** 3 + _BACK_C1 * (t - 1) ** 2


def back_in_out(t):
    "Combination of :func:`back_in` and :func:`back_out`"
    if t < 0.5:
        return ((2 * t) ** 2 * ((_BACK_C2 + 1) * 2 * t - _BACK_C2)) / 2
    return ((2 * t - 2) ** 2 * ((_BACK_C2 + 1) * (t * 2 - 2) + _BACK_C2) + 2) / 2


def elastic_in(t):
    """
    Ease-in function that oscillates around the start with growing
    amplitude, like a spring being wound up.
    """
    if t == 0:
        return 0.0
    elif t == 1:
        return 1.0
    return -(2 ** (10 * t - 10)) * math.sin((t * 10 - 10.75) * (2 * math.pi) / 3)


def elastic_out(t):
    """
    Ease-out function that oscillates around the target with decaying
    amplitude, like a released spring.
    """
    if t == 0:
        return 0.0
    elif t == 1:
        return 1.0
    return 2 ** (-10 * t) * math.sin((t * 10 - 0.75) * (2 * math.pi) / 3) + 1


def elastic_in_out(t):
    "Combination of :func:`elastic_in` and :func:`elastic_out`"
    if t == 0:
        return 0.0
    elif t == 1:
        return 1.0
    c5 = (2 * math.pi) / 4.5
    if t < 0.5:
        return -(2 ** (20 * t - 10) * math.sin((20 * t - 11.125) * c5)) / 2
    return (2 ** (-20 * t + 10) * math.sin((20 * t - 11.125) * c5)) / 2 + 1


def bounce_out(t):
    """
    Ease-out function that bounces off the target several times, like a
    ball dropped on to the floor.
    """
    n1 = 7.5625
    d1 = 2.75
    if t < 1 / d1:
        return n1 * t * t
    elif t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    elif t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    else:
        t -= 2.625 / d1
        return n1 * t * t + 0.984375


def bounce_in(t):
    "The mirror image of :func:`bounce_out`; bounces off the start"
    return 1 - bounce_out(1 - t)


def bounce_in_out(t):
    "Combination of :func:`bounce_in` and :func:`bounce_out`"
    if t < 0.5:
        return (1 - bounce_out(1 - 2 * t)) / 2
    return (1 + bounce_out(2 * t - 1)) / 2


EASINGS = {
    'linear':         linear,
    'quad_in':        quad_in,
    'quad_out':       quad_out,
    'quad_in_out':    quad_in_out,
    'ease_in':        ease_in,
    'ease_out':       ease_out,
    'ease_in_out':    ease_in_out,
    'cubic_in':       cubic_in,
    'cubic_out':      cubic_out,
    'cubic_in_out':   cubic_in_out,
    'quart_in':       quart_in,
    'quart_out':      quart_out,
    'quart_in_out':   quart_in_out,
    'quint_in':       quint_in,
    'quint_out':      quint_out,
    'quint_in_out':   quint_in_out,
    'sine_in':        sine_in,
    'sine_out':       sine_out,
    'sine_in_out':    sine_in_out,
    'expo_in':        expo_in,
    'expo_out':       expo_out,
    'expo_in_out':    expo_in_out,
    'circ_in':        circ_in,
    'circ_out':       circ_out,
    'circ_in_out':    circ_in_out,
    'back_in':        back_in,
    'back_out':       back_out,
    'back_in_out':    back_in_out,
    'elastic_in':     elastic_in,
    'elastic_out':    elastic_out,
    'elastic_in_out': elastic_in_out,
    'bounce_in':      bounce_in,
    'bounce_out':     bounce_out,
    'bounce_in_out':  bounce_in_out,
}


def get_easing(easing):
    """
    Return the easing function for *easing*, which may be the name of one of
    the functions in this module (see :data:`EASINGS`) or any callable
    accepting and returning a float. Raises :exc:`ValueError` for unknown
    names.
    """
    if callable(easing):
        return easing
    try:
        return EASINGS[easing]
    except KeyError:
        raise ValueError('invalid easing: %s' % easing)
