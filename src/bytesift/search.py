# src/bytesift/search.py
"""
The search loop: fresh random executions until one fails.
"""
import logging
from typing import Optional

import numpy as np

from . import settings as _settings
from .context import Mode
from .executor import PropertyFunction, execute
from .stream import ByteStream

logger = logging.getLogger(__name__)


def run_search(
    prop: PropertyFunction,
    max_examples: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> Optional[ByteStream]:
    """Look for an input that falsifies ``prop``.

    Runs up to ``max_examples`` generate-mode executions, each from an empty
    stream, and stops at the first failure.

    Args:
        prop: The property function.
        max_examples: Example budget. Read from
            :data:`bytesift.settings.default_settings` when omitted.
        rng: Shared entropy source for every execution of this search.

    Returns:
        The failing stream, trimmed to the bytes it consumed, or ``None`` if
        every execution passed.
    """
    if max_examples is None:
        max_examples = _settings.default_settings.max_examples
    if rng is None:
        rng = _settings.default_settings.rng()

    for run in range(max_examples):
        result = execute(prop, ByteStream.empty(), mode=Mode.GENERATE, rng=rng)
        if result.failed:
            counterexample = result.counterexample
            logger.debug(
                "Falsified after %d examples (%d bytes): %r",
                run + 1,
                len(counterexample),
                result.error,
            )
            return counterexample

    logger.debug("Property held for %d examples", max_examples)
    return None
