from tweener import Chain, Linear, CubicInOut, FixedTweener
from itertools import islice

# A fixed-step loop (one step per tick) moving a point around three corners
# of a square, then looping back to the start
path = Chain([
    CubicInOut((0, 0), (10, 0), 10),
    CubicInOut((10, 0), (10, 10), 10),
    Linear((10, 10), (0, 0), 14),
])
for x, y in islice(FixedTweener(path, 1).looper(), 68):
    print('%5.2f %5.2f' % (x, y))
