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

import os
from unittest import mock

import pytest

from tweener import *


@pytest.fixture()
def anim_time(request):
    # Replace the time module as seen by tweener.anim, leaving the real one
    # alone for pytest's benefit
    patcher = mock.patch('tweener.anim.time')
    request.addfinalizer(patcher.stop)
    return patcher.start()


@pytest.fixture()
def fps_env(request):
    patcher = mock.patch.dict('os.environ', {'TWEENER_FPS': '10'})
    request.addfinalizer(patcher.stop)
    patcher.start()
    return 10


@pytest.fixture()
def no_fps_env(request):
    patcher = mock.patch.dict('os.environ')
    request.addfinalizer(patcher.stop)
    patcher.start()
    os.environ.pop('TWEENER_FPS', None)


@pytest.fixture()
def linear2():
    # The workhorse of the tests: 0 to 2 over 2 ticks
    return Linear(0, 2, 2)


class Steps:
    "A minimal tween, without an initial_value method, reporting run times"
    def __init__(self, duration):
        self.duration = duration

    def run(self, time):
        return ('run', time)

    def final_value(self):
        return 'final'


@pytest.fixture()
def steps():
    return Steps
