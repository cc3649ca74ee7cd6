from tweener import tween_frames, play
from colorzero import Color


def show(color):
    print(color.html, end='\r', flush=True)

frames = tween_frames(Color('navy'), Color('orange'), duration=3,
                      easing='sine_in_out')
play(frames, show)
print()
