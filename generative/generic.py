"""Defines a way to create single-dispatch generic functions."""

import functools

__all__ = ['generic']

class SingleDispatchGeneric:
    """Looks like a function, but picks an implementation based on its
    first argument. If you call self.register(typ)(impl) and then
    self(obj), impl will be used if and only if checker(obj, typ) is
    true. The most recently registered match wins, so more specific
    types should be registered after the general ones.
    """
    def __init__(self, default, checker):
        self.default = default
        self.checker = checker
        self.implementations = []

    def register(self, typ, checker=None):
        if checker is None:
            checker = self.checker
        def wrapper(impl):
            self.implementations.insert(0, (typ, impl, checker))
            return impl
        return wrapper

    def dispatch(self, obj):
        for typ, impl, checker in self.implementations:
            try:
                if checker(obj, typ):
                    return impl
            except TypeError:
                # issubclass() on something that isn't a class
                continue
        return None

    def __call__(self, obj, *args, **kwargs):
        impl = self.dispatch(obj)
        if impl is None:
            return self.default(obj, *args, **kwargs)
        return impl(obj, *args, **kwargs)

def generic(checker):
    """Decorator for making a single-dispatch generic function. The
    decorated function is used when no registered implementation
    matches.
    """
    def wrapper(default):
        obj = SingleDispatchGeneric(default, checker)
        @functools.wraps(default)
        def inner(*args, **kwargs):
            return obj(*args, **kwargs)
        inner.register = obj.register
        return inner
    return wrapper
