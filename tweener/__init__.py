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
The :mod:`tweener` module is the main namespace for the tweener package; it
imports (and exposes) all publically accessible classes, functions, and
constants from all the modules beneath it for convenience.

The package is organized in layers. At the bottom are the easing functions
(:mod:`tweener.easings`) and the stateless tweens built upon them
(:class:`Tween` and its named variants like :class:`Linear` and
:class:`QuartInOut`). Above those are the drivers, :class:`Tweener` and
:class:`FixedTweener`, which advance a tween through time. Finally the
composites repeat (:class:`Looper`, :class:`FixedLooper`), bounce
(:class:`Oscillator`, :class:`FixedOscillator`), or sequence
(:class:`Chain`) tweens.
"""

from .exc import (
    TweenWarning,
    TweenTimeWarning,
    TweenError,
    DriverConsumed,
)
from .easings import (
    EASINGS,
    get_easing,
    linear,
    ease_in, ease_out, ease_in_out,
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
from .tweens import (
    Tween,
    Linear,
    QuadIn, QuadOut, QuadInOut,
    CubicIn, CubicOut, CubicInOut,
    QuartIn, QuartOut, QuartInOut,
    QuintIn, QuintOut, QuintInOut,
    SineIn, SineOut, SineInOut,
    ExpoIn, ExpoOut, ExpoInOut,
    CircIn, CircOut, CircInOut,
    BackIn, BackOut, BackInOut,
    ElasticIn, ElasticOut, ElasticInOut,
    BounceIn, BounceOut, BounceInOut,
    Reversed,
    reverse,
)
from .tweener import Tweener, FixedTweener
from .looper import Looper, FixedLooper
from .oscillator import Oscillator, FixedOscillator, RISING, FALLING
from .chain import Chain
from .anim import default_fps, tween_frames, play, animate
