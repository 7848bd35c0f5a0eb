"""Primitive Arbitrary implementations, and the defaults for
arbitrary_for()."""

import itertools

from .interface import Arbitrary, InvalidConfiguration
from .generic import generic

__all__ = ['roundrobin', 'arbitrary_for', 'BoundedInteger', 'ByteArray',
           'Constant', 'ListOf', 'INT_MIN', 'INT_MAX', 'DEFAULT_MAX_BYTES']

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1
DEFAULT_MAX_BYTES = 64

def roundrobin(*iterables):
    "roundrobin('ABC', 'D', 'EF') --> A D E B F C"
    # Recipe credited to George Sakkis
    pending = len(iterables)
    nexts = itertools.cycle(iter(it).__next__ for it in iterables)
    while pending:
        try:
            for next in nexts:
                yield next()
        except StopIteration:
            pending -= 1
            nexts = itertools.cycle(itertools.islice(nexts, pending))

def _halve(d):
    # rounds toward zero, unlike //
    if d < 0:
        return -(-d // 2)
    return d // 2

class BoundedInteger(Arbitrary):
    """Integers in [low, high], inclusive, uniformly distributed.

    Values shrink toward 0 if it is in range, and otherwise toward the
    bound closest to 0. Candidates are the target itself, then points
    halfway, three quarters, and so on of the way from the target back
    to the value, so there are only O(log(high - low)) of them.
    """
    def __init__(self, low, high):
        if low > high:
            raise InvalidConfiguration(
                "empty integer range [{}, {}]".format(low, high))
        self.low = low
        self.high = high

    def __repr__(self):
        return "BoundedInteger({}, {})".format(self.low, self.high)

    @property
    def target(self):
        if self.low <= 0 <= self.high:
            return 0
        if self.low > 0:
            return self.low
        return self.high

    def get(self, rnd):
        return rnd.randint(self.low, self.high)

    def accepts(self, v):
        return isinstance(v, int) and self.low <= v <= self.high

    def shrink(self, v):
        target = self.target
        if v == target:
            return []

        candidates = [target]
        # only possible when target is 0, so -v is just as close
        if v < 0 and self.low <= -v <= self.high:
            candidates.append(-v)

        step = _halve(v - target)
        while step != 0:
            c = v - step
            if c not in candidates:
                candidates.append(c)
            step = _halve(step)
        return candidates

_BYTE = BoundedInteger(0x00, 0xff)

class ByteArray(Arbitrary):
    """Byte strings with a length uniformly chosen from [min_length,
    max_length], each byte independently random.

    Shrinking tries the shortest allowed string first, then removes
    half, a quarter, ... down to one of the trailing bytes, then tries
    same-length strings with a single byte moved toward zero.
    """
    def __init__(self, max_length, min_length=0):
        if min_length < 0 or max_length < 0:
            raise InvalidConfiguration(
                "byte array lengths must be non-negative, got [{}, {}]".format(min_length, max_length))
        if min_length > max_length:
            raise InvalidConfiguration(
                "empty length range [{}, {}]".format(min_length, max_length))
        self.min_length = min_length
        self.max_length = max_length

    def __repr__(self):
        return "ByteArray({}, min_length={})".format(self.max_length, self.min_length)

    def get(self, rnd):
        n = rnd.randint(self.min_length, self.max_length)
        return bytes(rnd.randrange(0x100) for _ in range(n))

    def accepts(self, v):
        return isinstance(v, bytes) and self.min_length <= len(v) <= self.max_length

    def shrink(self, v):
        n = len(v)
        candidates = []

        room = n - self.min_length
        if room > 0:
            candidates.append(v[:self.min_length])
            remove = room // 2
            while remove > 0:
                candidates.append(v[:n - remove])
                remove //= 2

        def makeshrinks(i):
            for s in _BYTE.shrink(v[i]):
                yield v[:i] + bytes([s]) + v[i+1:]

        candidates.extend(roundrobin(*(makeshrinks(i) for i in range(n))))
        return candidates

class Constant(Arbitrary):
    def __init__(self, v):
        self.v = v

    def get(self, rnd):
        return self.v

    def accepts(self, v):
        return v == self.v

class ListOf(Arbitrary):
    """Lists of exactly length elements, each drawn from element. Lists
    shrink one element at a time."""
    def __init__(self, element, length):
        if length < 0:
            raise InvalidConfiguration("negative list length {}".format(length))
        self.element = element
        self.length = length

    def get(self, rnd):
        return [self.element.get(rnd) for _ in range(self.length)]

    def accepts(self, v):
        return (isinstance(v, list) and len(v) == self.length
                and all(self.element.accepts(x) for x in v))

    def shrink(self, v):
        def makeshrinks(i):
            for s in self.element.shrink(v[i]):
                vc = list(v)
                vc[i] = s
                yield vc
        return list(roundrobin(*(makeshrinks(i) for i in range(len(v)))))

@generic(issubclass)
def arbitrary_for(spec):
    """Return an Arbitrary for spec, which is either a type registered
    with arbitrary_for.register(), or an Arbitrary already.
    """
    raise NotImplementedError("arbitrary_for({!r})".format(spec))

@arbitrary_for.register(Arbitrary, checker=isinstance)
def arbitrary_for_arbitrary(spec):
    return spec

@arbitrary_for.register(int)
def arbitrary_for_int(_):
    return BoundedInteger(INT_MIN, INT_MAX)

# bool needs to come *after* int, as bool is a subtype of int

@arbitrary_for.register(bool)
def arbitrary_for_bool(_):
    return BoundedInteger(0, 1).map(bool, int)

@arbitrary_for.register(bytes)
def arbitrary_for_bytes(_):
    return ByteArray(DEFAULT_MAX_BYTES)
