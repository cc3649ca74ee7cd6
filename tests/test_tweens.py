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

import numpy as np
import pytest
from colorzero import Color

from tweener import *


def test_tween_attributes():
    tween = Linear(0, 100, 10)
    assert tween.start == 0
    assert tween.end == 100
    assert tween.duration == 10
    assert tween.easing is linear
    assert tween.initial_value() == 0
    assert tween.final_value() == 100
    assert repr(tween) == 'Linear(start=0, end=100, duration=10)'


def test_tween_run():
    tween = Linear(0, 100, 10)
    assert [tween.run(t) for t in range(10)] == list(range(0, 100, 10))
    assert isinstance(tween.run(3), int)
    tween = Linear(0.0, 1.0, 4)
    assert tween.run(1) == 0.25


def test_tween_easing():
    assert Tween(0.0, 1.0, 1).easing is linear
    assert Tween(0.0, 1.0, 1, easing='quad_in').run(0.5) == 0.25
    assert Tween(0.0, 1.0, 1, easing=lambda t: 1.0).run(0.5) == 1.0
    with pytest.raises(ValueError):
        Tween(0.0, 1.0, 1, easing='wobbly')


def test_tween_bad_duration():
    with pytest.raises(ValueError):
        Linear(0, 1, -1)


def test_tween_zero_duration():
    tween = Linear(0, 1, 0)
    assert tween.duration == 0
    assert tween.final_value() == 1


@pytest.mark.parametrize('cls,easing', [
    (Linear, linear),
    (QuadIn, quad_in), (QuadOut, quad_out), (QuadInOut, quad_in_out),
    (CubicIn, cubic_in), (CubicOut, cubic_out), (CubicInOut, cubic_in_out),
    (QuartIn, quart_in), (QuartOut, quart_out), (QuartInOut, quart_in_out),
    (QuintIn, quint_in), (QuintOut, quint_out), (QuintInOut, quint_in_out),
    (SineIn, sine_in), (SineOut, sine_out), (SineInOut, sine_in_out),
    (ExpoIn, expo_in), (ExpoOut, expo_out), (ExpoInOut, expo_in_out),
    (CircIn, circ_in), (CircOut, circ_out), (CircInOut, circ_in_out),
    (BackIn, back_in), (BackOut, back_out), (BackInOut, back_in_out),
    (ElasticIn, elastic_in), (ElasticOut, elastic_out),
    (ElasticInOut, elastic_in_out),
    (BounceIn, bounce_in), (BounceOut, bounce_out),
    (BounceInOut, bounce_in_out),
])
def test_named_tweens(cls, easing):
    tween = cls(10.0, 20.0, 4)
    assert tween.easing is easing
    for t in (1, 2, 3):
        assert tween.run(t) == pytest.approx(10.0 + 10.0 * easing(t / 4))
    assert tween.final_value() == 20.0


def test_quart_tween():
    tween = QuartIn(0.0, 16.0, 2)
    assert tween.run(1) == 1.0
    tween = QuartOut(0.0, 16.0, 2)
    assert tween.run(1) == 15.0


def test_array_tween():
    tween = Linear((0, 0), (10, 20), 10)
    assert isinstance(tween.start, np.ndarray)
    assert np.allclose(tween.run(5), [5, 10])


def test_color_tween():
    tween = Linear(Color('black'), Color('white'), 4)
    value = tween.run(1)
    assert isinstance(value, Color)
    assert tuple(value) == pytest.approx((0.25, 0.25, 0.25))
    assert tween.final_value() == Color('white')


def test_reverse():
    tween = Linear(0, 10, 10)
    backwards = reverse(tween)
    assert isinstance(backwards, Reversed)
    assert backwards.tween is tween
    assert backwards.duration == 10
    assert [backwards.run(t) for t in range(1, 10)] == list(range(9, 0, -1))
    assert backwards.initial_value() == 10
    assert backwards.final_value() == 0
    assert repr(backwards) == 'Reversed(Linear(start=0, end=10, duration=10))'


def test_reverse_curve_is_mirrored():
    tween = QuadIn(0.0, 1.0, 4)
    backwards = reverse(tween)
    for t in (1, 2, 3):
        assert backwards.run(t) == tween.run(4 - t)


def test_reverse_reversed():
    tween = Linear(0, 10, 10)
    assert reverse(reverse(tween)) is tween


def test_reverse_needs_initial_value(steps):
    with pytest.raises(TypeError):
        reverse(steps(2))
