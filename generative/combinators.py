"""The Arbitrary objects returned by Arbitrary.map() and flat_map().

Each combinator wraps its parent instead of subclassing it. Whether a
reverse function was given is visible in the type: the reversible
variants can shrink, the others never do. Without reverse there is also
no way to check a value, so accepts() answers None (unknown), and
replayed trials draw such values afresh instead of reusing them.
"""

import random

from .interface import Arbitrary

__all__ = ['Mapped', 'ReversibleMapped', 'FlatMapped', 'ReversibleFlatMapped']

class Mapped(Arbitrary):
    def __init__(self, parent, forward):
        self.parent = parent
        self.forward = forward

    def get(self, rnd):
        return self.forward(self.parent.get(rnd))

    def accepts(self, v):
        return None

class ReversibleMapped(Mapped):
    """Shrinks a value r to forward(s) for every s in
    parent.shrink(reverse(r)). reverse need not be a true inverse, but
    the values it produces must shrink to things that, mapped forward,
    are simpler than r. That is up to the caller.
    """
    def __init__(self, parent, forward, reverse):
        super().__init__(parent, forward)
        self.reverse = reverse

    def accepts(self, v):
        return self.parent.accepts(self.reverse(v))

    def shrink(self, v):
        return [self.forward(s) for s in self.parent.shrink(self.reverse(v))]

class FlatMapped(Arbitrary):
    def __init__(self, parent, forward):
        self.parent = parent
        self.forward = forward

    def get(self, rnd):
        return self.forward(self.parent.get(rnd)).get(rnd)

    def accepts(self, v):
        return None

class ReversibleFlatMapped(FlatMapped):
    """Shrinks a value r by shrinking reverse(r) with the parent, and
    drawing one value from forward(s) for each shrunk s. The dependent
    Arbitrary is never asked to shrink.

    The draw is seeded from repr(s), so shrinking the same value always
    gives the same candidates. Across processes that only holds when
    repr(s) depends on the value alone (ints, bytes, strings and tuples
    of them do; the default object repr includes an address).
    """
    def __init__(self, parent, forward, reverse):
        super().__init__(parent, forward)
        self.reverse = reverse

    def accepts(self, v):
        s = self.reverse(v)
        ok = self.parent.accepts(s)
        if ok is not True:
            return ok
        return self.forward(s).accepts(v)

    def shrink(self, v):
        return [self.forward(s).get(random.Random(repr(s)))
                for s in self.parent.shrink(self.reverse(v))]
