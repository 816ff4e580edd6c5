# src/bytesift/report.py
"""
Recovering readable values from a minimized stream.
"""
import logging
from typing import Any, List, Sequence, Tuple

from .executor import PropertyFunction, RunResult, replay
from .stream import ByteStream

logger = logging.getLogger(__name__)


def replay_counterexample(prop: PropertyFunction, stream: ByteStream) -> RunResult:
    """Replay ``stream`` once with recording on.

    Logs a warning if the stream no longer fails. The result is returned
    either way so the caller can still report what was drawn.
    """
    result = replay(prop, stream, record=True)
    if not result.failed:
        logger.warning(
            "Counterexample no longer fails on replay (status %s)", result.status.value
        )
    return result


def replay_names(prop: PropertyFunction, stream: ByteStream) -> List[Tuple[str, Any]]:
    """The named values ``stream`` produces, in the order the generators
    were called. Unnamed draws are not listed.
    """
    return replay_counterexample(prop, stream).names


def format_names(names: Sequence[Tuple[str, Any]]) -> str:
    """Render ``name = value`` lines for a failure message."""
    if not names:
        return "  (no named values)"
    return "\n".join(f"  {name} = {value!r}" for name, value in names)
