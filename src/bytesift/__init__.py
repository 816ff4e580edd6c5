# src/bytesift/__init__.py
"""
bytesift: property-based testing over replayable byte streams.

Every generated value is decoded from a recorded sequence of bytes. When a
property fails, the bytes that produced the failure are shrunk (zeroed,
swapped, halved, decremented) and replayed until the smallest failing input
that the budget allows is found.

Example:
    .. code-block:: python

        import bytesift

        @bytesift.given(bytesift.integers)
        def test_small(x):
            assert x < 1000
"""
import logging

from .api import Counterexample, falsify
from .context import ExecutionContext, Mode
from .errors import (
    Falsified,
    InternalInvariantViolation,
    Overrun,
    PropertyViolation,
)
from .executor import RunResult, Status, execute
from .generators import (
    booleans,
    characters,
    collections,
    integers,
    sequences,
    text,
)
from .registry import PropertyRegistry, PropertyTest, default_registry
from .report import replay_counterexample, replay_names
from .search import run_search
from .settings import Settings, default_settings
from .shrinker import ShrinkBudget, shrink
from .stream import ByteStream

# the easy decorator alias
given = default_registry.register

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "ByteStream",
    "Counterexample",
    "ExecutionContext",
    "Falsified",
    "InternalInvariantViolation",
    "Mode",
    "Overrun",
    "PropertyRegistry",
    "PropertyTest",
    "PropertyViolation",
    "RunResult",
    "Settings",
    "ShrinkBudget",
    "Status",
    "booleans",
    "characters",
    "collections",
    "default_registry",
    "default_settings",
    "execute",
    "falsify",
    "given",
    "integers",
    "replay_counterexample",
    "replay_names",
    "run_search",
    "sequences",
    "shrink",
    "text",
]
