"""The context a single trial of a property runs in."""

import collections
import logging
import random

from .implementations import BoundedInteger, ByteArray, ListOf, INT_MIN, INT_MAX

__all__ = ['Draw', 'Trial']

log = logging.getLogger(__name__)

Draw = collections.namedtuple('Draw', ['arbitrary', 'value', 'label'])
Draw.__doc__ = """One value handed to the property, along with the Arbitrary it
came from and its label, if it was given one with named_var()."""

_MISSING = object()

class Trial:
    """Holds the random source for one run of a property, and records
    every value drawn through it, in order.

    A trial can also replay an earlier one: given the draws of a
    previous run, the value at each position is reused instead of drawn,
    except for positions in overrides, which get the overriding value.
    A recorded value is only reused if the Arbitrary asking for it is of
    the same type and accepts it; otherwise a new one is drawn.
    """
    def __init__(self, index, seed, replay=(), overrides=None):
        self.index = index
        self.seed = seed
        self.random = random.Random(seed)
        self.draws = []
        self.replay = list(replay)
        self.overrides = dict(overrides or {})
        self._label = None

    def __repr__(self):
        return "Trial({}, seed={})".format(self.index, self.seed)

    def named_var(self, label):
        """Label the next generator made (or value drawn) by this trial.
        Labels only show up in failure reports. Returns the trial, so
        calls can be chained.
        """
        self._label = label
        return self

    def _take_label(self, label=None):
        if label is None:
            label = self._label
        self._label = None
        return label

    def _replayed(self, pos, arbitrary):
        if pos in self.overrides:
            return self.overrides[pos]
        if pos < len(self.replay):
            old = self.replay[pos]
            if type(old.arbitrary) is type(arbitrary) and arbitrary.accepts(old.value):
                return old.value
            log.debug("trial %d: cannot replay %r at position %d, drawing a new value",
                      self.index, old.value, pos)
        return _MISSING

    def generate(self, arbitrary, label=None):
        """Draw and record a value from arbitrary."""
        label = self._take_label(label)
        pos = len(self.draws)
        v = self._replayed(pos, arbitrary)
        if v is _MISSING:
            v = arbitrary.get(self.random)
        self.draws.append(Draw(arbitrary, v, label))
        return v

    def gen(self, arbitrary):
        """Return a Generator for arbitrary bound to this trial."""
        return arbitrary.bind(self, label=self._take_label())

    def any_integer(self):
        return self.generate(BoundedInteger(INT_MIN, INT_MAX))

    def any_positive_integer_less_than(self, n):
        return self.generate(BoundedInteger(1, n - 1))

    def any_bounded_integer(self, low, high):
        return self.generate(BoundedInteger(low, high))

    def any_byte_array_up_to_length(self, n):
        return self.generate(ByteArray(n))

    def list_of_length(self, arbitrary, n):
        return self.gen(ListOf(arbitrary, n))
