"""Defines the Arbitrary interface and the errors it can raise."""

__all__ = ['GenerativeError', 'InvalidConfiguration', 'Arbitrary']

class GenerativeError(Exception):
    pass

class InvalidConfiguration(GenerativeError, ValueError):
    """Raised when an Arbitrary (or a test run) is set up with
    constraints that can never be satisfied. This always happens at
    construction time, never while generating values.
    """
    pass

class Arbitrary:
    """Something that can produce random values of some type, and
    simpler versions of a value it produced.

    Subclasses must implement get(). Everything else has a sensible
    default: shrink() produces nothing, and accepts() accepts
    everything. Arbitrary objects are stateless, so the same one may
    be used for any number of trials.
    """

    def get(self, rnd):
        """Return a new value, using rnd (a random.Random) as the only
        source of randomness."""
        raise NotImplementedError("{}.get".format(self.__class__.__name__))

    def shrink(self, v):
        """Return a list of values that are strictly simpler than v. The
        default implementation returns an empty list. Every value
        returned must be something get() could have returned.
        """
        return []

    def accepts(self, v):
        """True if v satisfies the constraints of this Arbitrary, False if
        it does not, and None if there is no way to tell. Anything but
        True keeps v from being replayed or used as a shrink."""
        return True

    def stream(self, rnd):
        """An endless iterator of new values drawn from rnd."""
        while True:
            yield self.get(rnd)

    def map(self, forward, reverse=None):
        """Return an Arbitrary producing forward(x) for every x this one
        produces. Without reverse, the result cannot shrink. With it,
        values shrink by shrinking reverse(value) here, then mapping the
        results forward again.
        """
        from .combinators import Mapped, ReversibleMapped
        if reverse is None:
            return Mapped(self, forward)
        return ReversibleMapped(self, forward, reverse)

    def flat_map(self, forward, reverse=None):
        """Return an Arbitrary that draws x from this one, and then draws
        its result from the Arbitrary forward(x). reverse works as it
        does for map(), and must turn a result back into the x that
        would produce it.
        """
        from .combinators import FlatMapped, ReversibleFlatMapped
        if reverse is None:
            return FlatMapped(self, forward)
        return ReversibleFlatMapped(self, forward, reverse)

    def bind(self, trial, label=None):
        """Return a Generator drawing from this Arbitrary inside trial."""
        from .generator import Generator
        return Generator(self, trial, label=label)
