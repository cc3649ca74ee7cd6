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

import warnings

import pytest

from tweener import *


def test_tweener(linear2):
    tweener = Tweener(linear2)
    assert tweener.tween is linear2
    assert tweener.current_time == 0
    assert not tweener.is_finished
    assert tweener.update(1) == 1
    assert tweener.update(2) == 2
    assert tweener.is_finished
    assert tweener.update(100) is None


def test_tweener_deltas():
    tweener = Tweener(Linear(0, 10, 10))
    assert tweener.update(1) == 1
    assert tweener.update(2) == 3
    assert tweener.current_time == 3
    assert tweener.update(100) == 10
    assert tweener.current_time == 10
    assert tweener.update(100) is None


def test_tweener_exhausted_forever(linear2):
    tweener = Tweener(linear2)
    tweener.update(2)
    assert all(tweener.update(1) is None for i in range(10))
    assert tweener.current_time == 2


def test_tweener_final_value_at_boundary(steps):
    tweener = Tweener(steps(2))
    assert tweener.update(1) == ('run', 1)
    assert tweener.update(1) == 'final'
    assert tweener.update(1) is None


def test_tweener_overshoot_invariance():
    exact = Tweener(QuadIn(0.0, 5.0, 10))
    huge = Tweener(QuadIn(0.0, 5.0, 10))
    assert exact.update(3) == huge.update(3)
    assert exact.update(7) == huge.update(1000) == 5.0


def test_tweener_float_time():
    tweener = Tweener(Linear(0.0, 1.0, 1.0))
    assert tweener.update(0.25) == 0.25
    assert tweener.update(0.5) == 0.75
    assert tweener.update(0.5) == 1.0
    assert tweener.current_time == 1.0


def test_tweener_zero_duration():
    tweener = Tweener(Linear(0, 5, 0))
    assert tweener.update(0) == 5
    assert tweener.update(0) is None


def test_tweener_negative_delta(linear2):
    tweener = Tweener(linear2)
    tweener.update(1)
    with pytest.warns(TweenTimeWarning):
        tweener.update(-1)


def test_tweener_repr(linear2):
    tweener = Tweener(linear2)
    assert repr(tweener) == (
        '<Tweener tween=Linear(start=0, end=2, duration=2) current_time=0>')
    tweener.update(5)
    assert repr(tweener) == (
        '<Tweener tween=Linear(start=0, end=2, duration=2) current_time=2 '
        'finished>')


def test_fixed_tweener():
    tweener = FixedTweener(Linear(0, 100, 10), 1)
    assert list(tweener) == [10, 20, 30, 40, 50, 60, 70, 80, 90, 100]


def test_fixed_tweener_small():
    tweener = FixedTweener(Linear(0, 4, 4), 1)
    assert next(tweener) == 1
    assert next(tweener) == 2
    assert next(tweener) == 3
    assert next(tweener) == 4
    with pytest.raises(StopIteration):
        next(tweener)


def test_fixed_tweener_exhausted_forever(linear2):
    tweener = FixedTweener(linear2, 1)
    assert list(tweener) == [1, 2]
    assert list(tweener) == []
    assert next(tweener, None) is None
    assert tweener.is_finished


def test_fixed_tweener_accessors(linear2):
    tweener = FixedTweener(linear2, 1)
    assert iter(tweener) is tweener
    assert tweener.tween is linear2
    assert tweener.delta == 1
    assert tweener.current_time == 0
    next(tweener)
    assert tweener.current_time == 1
    next(tweener)
    assert tweener.current_time == 2


def test_fixed_tweener_overshoot():
    tweener = FixedTweener(Linear(0, 10, 10), 4)
    assert list(tweener) == [4, 8, 10]
    assert tweener.current_time == 10


def test_fixed_tweener_final_value_at_boundary(steps):
    assert list(FixedTweener(steps(3), 1)) == [('run', 1), ('run', 2), 'final']


def test_fixed_tweener_zero_duration():
    assert list(FixedTweener(Linear(0, 5, 0), 1)) == [5]


def test_fixed_tweener_negative_delta(linear2):
    with pytest.warns(TweenTimeWarning):
        FixedTweener(linear2, -1)


def test_no_warning_for_positive_delta(linear2):
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        Tweener(linear2).update(1)
        FixedTweener(linear2, 1)


def test_consumed_tweener(linear2):
    tweener = Tweener(linear2)
    looper = tweener.looper()
    with pytest.raises(DriverConsumed):
        tweener.update(1)
    with pytest.raises(RuntimeError):
        tweener.update(1)
    with pytest.raises(DriverConsumed):
        Looper(tweener)
    assert looper.update(1) == 1


def test_consumed_fixed_tweener(linear2):
    tweener = FixedTweener(linear2, 1)
    tweener.oscillator()
    with pytest.raises(DriverConsumed):
        next(tweener)
    with pytest.raises(DriverConsumed):
        tweener.looper()
