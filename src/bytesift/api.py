# src/bytesift/api.py
"""
Public API: find, shrink and describe a counterexample in one call.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from . import settings as _settings
from .executor import PropertyFunction
from .report import format_names, replay_counterexample
from .search import run_search
from .settings import Settings
from .shrinker import ShrinkBudget, shrink
from .stream import ByteStream

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Counterexample:
    """A minimized failing input.

    Attributes:
        stream (ByteStream): The shrunk stream. Replaying it reproduces the failure.
        names (List[Tuple[str, Any]]): Named generated values, in draw order.
        error (Optional[BaseException]): What the property raised on replay.
    """

    stream: ByteStream
    names: List[Tuple[str, Any]] = field(default_factory=list)
    error: Optional[BaseException] = None

    def describe(self) -> str:
        """A multi-line failure message."""
        lines = ["Falsifying example:", format_names(self.names)]
        if self.error is not None:
            lines.append(f"Error: {type(self.error).__name__}: {self.error}")
        return "\n".join(lines)


def falsify(
    prop: PropertyFunction, settings: Optional[Settings] = None
) -> Optional[Counterexample]:
    """High-level entry point: search for a failure, shrink it, replay it.

    Args:
        prop: A callable taking an :class:`~bytesift.context.ExecutionContext`.
        settings: Budgets and seed. Defaults to the process-wide
            :data:`~bytesift.settings.default_settings`.

    Returns:
        Counterexample: The minimized failure, or ``None`` if the property
        held for every example.
    """
    if settings is None:
        settings = _settings.default_settings

    failing = run_search(prop, max_examples=settings.max_examples, rng=settings.rng())
    if failing is None:
        return None

    budget = ShrinkBudget(settings.max_shrinks)
    shrunk = shrink(prop, failing, budget)
    logger.debug(
        "Shrunk %d -> %d bytes with %d attempts to spare",
        len(failing),
        len(shrunk),
        budget.remaining,
    )

    result = replay_counterexample(prop, shrunk)
    return Counterexample(stream=shrunk, names=result.names, error=result.error)
