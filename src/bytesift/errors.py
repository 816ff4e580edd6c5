# src/bytesift/errors.py
"""
Exceptions raised by the engine.

Only :class:`Falsified` is meant to reach users; the others are signals
between the draw primitive, the executor and the shrinker.
"""


class Overrun(BaseException):
    """A replayed execution tried to draw past the end of its fixed buffer.

    Derives from ``BaseException`` so that a property body catching
    ``Exception`` cannot hide it. The executor turns it into an inconclusive
    result; it never surfaces to the caller.
    """


class PropertyViolation(AssertionError):
    """Raised by :meth:`ExecutionContext.check` on a false predicate."""


class InternalInvariantViolation(RuntimeError):
    """The engine was misused or has a bug. Always fatal."""


class Falsified(AssertionError):
    """A registered property failed. Carries the shrunk counterexample."""

    def __init__(self, message, counterexample=None):
        super().__init__(message)
        self.counterexample = counterexample
