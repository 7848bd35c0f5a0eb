"""Generators tie an Arbitrary to the trial that is currently running."""

from .interface import Arbitrary

__all__ = ['Generator']

class Generator(Arbitrary):
    """An Arbitrary bound to a Trial, so property code can ask for the
    next value without handing around a random source. Calling get()
    with no arguments draws through the trial, which records the value
    (and label) so it can be replayed or shrunk. Everything else is
    passed on to the wrapped Arbitrary.
    """
    def __init__(self, arbitrary, trial, label=None):
        self.arbitrary = arbitrary
        self.trial = trial
        self.label = label

    def __repr__(self):
        return "Generator({!r}, label={!r})".format(self.arbitrary, self.label)

    def bind(self, trial, label=None):
        if label is None:
            label = self.label
        return Generator(self.arbitrary, trial, label=label)

    def get(self, rnd=None):
        if rnd is None:
            return self.trial.generate(self.arbitrary, self.label)
        return self.arbitrary.get(rnd)

    def shrink(self, v):
        return self.arbitrary.shrink(v)

    def accepts(self, v):
        return self.arbitrary.accepts(v)

    def stream(self, rnd):
        return self.arbitrary.stream(rnd)

    def map(self, forward, reverse=None):
        return Generator(self.arbitrary.map(forward, reverse), self.trial, label=self.label)

    def flat_map(self, forward, reverse=None):
        return Generator(self.arbitrary.flat_map(forward, reverse), self.trial, label=self.label)
