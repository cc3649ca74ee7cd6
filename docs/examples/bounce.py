from tweener import Tweener, BounceOut, QuadIn, animate

width = 60

# Drop from the top with a bounce, then drift back up slowly, forever
ball = Tweener(BounceOut(0.0, 1.0, 1.5)).oscillator_with(
    Tweener(QuadIn(1.0, 0.0, 2.0)))


def draw(height):
    pos = int(height * (width - 1))
    print(' ' * pos + 'o' + ' ' * (width - 1 - pos) + '|', end='\r', flush=True)

try:
    animate(ball, draw, fps=30)
except KeyboardInterrupt:
    print()
