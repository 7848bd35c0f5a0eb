"""Runs properties against many random inputs, and shrinks the inputs
of any failure down to a small counterexample."""

import functools
import logging
import random

from .interface import GenerativeError, InvalidConfiguration
from .implementations import arbitrary_for
from .trial import Trial

__all__ = ['PropertyFailure', 'run_tests', 'forall',
           'DEFAULT_TRIALS', 'DEFAULT_MAX_SHRINKS']

log = logging.getLogger(__name__)

DEFAULT_TRIALS = 100
DEFAULT_MAX_SHRINKS = 1000

class PropertyFailure(GenerativeError):
    """Raised by run_tests() when a property fails. Carries the index
    and seed of the failing trial, the (shrunk) values drawn in it, the
    number of shrinks that were applied, and the exception the property
    raised on those values, which is also chained as __cause__.
    """
    def __init__(self, trial, seed, draws, error, shrinks=0):
        super().__init__(trial, seed, draws, error, shrinks)
        self.trial = trial
        self.seed = seed
        self.draws = list(draws)
        self.error = error
        self.shrinks = shrinks

    @property
    def values(self):
        return [d.value for d in self.draws]

    @property
    def named_values(self):
        """Every labelled value, as a dict from label to the list of
        values drawn under it, in draw order."""
        named = {}
        for d in self.draws:
            if d.label is not None:
                named.setdefault(d.label, []).append(d.value)
        return named

    def __str__(self):
        lines = ["property failed on trial {} (seed {}) after {} shrinks:".format(
            self.trial, self.seed, self.shrinks)]
        for i, d in enumerate(self.draws):
            name = d.label if d.label is not None else "#{}".format(i)
            lines.append("  {} = {!r}".format(name, d.value))
        lines.append("{}: {}".format(type(self.error).__name__, self.error))
        return "\n".join(lines)

def _run(prop, trial):
    """Run prop inside trial, and return the exception it raised, or
    None if it passed. Bad configuration is not a failure of the
    property, so it is never caught here.
    """
    try:
        prop(trial.index, trial)
    except InvalidConfiguration:
        raise
    except Exception as e:
        return e
    return None

def _candidates(draws):
    for pos, draw in enumerate(draws):
        for v in draw.arbitrary.shrink(draw.value):
            if draw.arbitrary.accepts(v):
                yield pos, v
            else:
                log.debug("ignoring invalid shrink %r of %r", v, draw.value)

def _minimize(prop, failed, error, max_shrinks):
    """Given a failed trial and the exception it raised, look for a
    trial with simpler values that still raises the same kind of
    exception. One value is shrunk at a time, with every other value
    replayed as it was. The first candidate that still fails is kept,
    and the search starts over from it, until no candidate fails or
    max_shrinks candidates have been kept.
    """
    exctype = type(error)
    best = failed
    shrinks = 0

    while shrinks < max_shrinks:
        for pos, v in _candidates(best.draws):
            replay = Trial(best.index, best.seed, replay=best.draws, overrides={pos: v})
            try:
                e = _run(prop, replay)
            except InvalidConfiguration as ic:
                log.debug("shrink %r at position %d is unusable: %s", v, pos, ic)
                continue
            if isinstance(e, exctype):
                # successful minimization!
                log.debug("shrunk position %d to %r", pos, v)
                best = replay
                error = e
                shrinks += 1
                break
        else:
            # we never minimized anything, so
            break

    return best, error, shrinks

def run_tests(trials, prop, seed=None, max_shrinks=DEFAULT_MAX_SHRINKS):
    """Call prop(index, trial) for each of the given number of trials,
    each with a fresh Trial and random seed. prop signals failure by
    raising. On the first failure, its inputs are shrunk and a
    PropertyFailure describing the smallest failing inputs found is
    raised. If every trial passes, this returns None.

    Passing the same seed reproduces the same sequence of trials.
    """
    if not isinstance(trials, int) or trials < 1:
        raise InvalidConfiguration("trials must be a positive integer, got {!r}".format(trials))
    if max_shrinks < 0:
        raise InvalidConfiguration("max_shrinks must be non-negative, got {!r}".format(max_shrinks))

    seeds = random.Random(seed)
    for index in range(trials):
        trial = Trial(index, seeds.getrandbits(64))
        log.debug("running trial %d with seed %d", index, trial.seed)
        error = _run(prop, trial)
        if error is None:
            continue

        log.info("trial %d failed with %s: %s", index, type(error).__name__, error)
        best, error, shrinks = _minimize(prop, trial, error, max_shrinks)
        log.info("shrinking finished after %d shrinks", shrinks)
        raise PropertyFailure(best.index, best.seed, best.draws, error, shrinks) from error

def forall(trials=DEFAULT_TRIALS, seed=None, max_shrinks=DEFAULT_MAX_SHRINKS):
    """Decorator that turns a function into a checked property. Each
    parameter annotated with a type or an Arbitrary gets a value from
    arbitrary_for(annotation), labelled with the parameter's name,
    unless it is passed explicitly. Calling the decorated function runs
    all the trials, and raises PropertyFailure if any of them fail.
    """
    def wrapper(f):
        @functools.wraps(f)
        def inner(*args, **kwargs):
            specs = {}
            for name, spec in f.__annotations__.items():
                if name == 'return' or name in kwargs:
                    continue
                specs[name] = arbitrary_for(spec)

            def prop(index, trial):
                kwargs_new = kwargs.copy()
                for name, arb in specs.items():
                    kwargs_new[name] = trial.generate(arb, label=name)
                f(*args, **kwargs_new)

            run_tests(trials, prop, seed=seed, max_shrinks=max_shrinks)
        return inner
    return wrapper
