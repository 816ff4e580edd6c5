# src/bytesift/executor.py

"""Module: bytesift.executor

Runs a property function once against a byte stream and classifies the
outcome. This is the single place where the exceptions raised inside a
property body are turned into a tagged :class:`RunResult`.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

import numpy as np

from .context import ExecutionContext, Mode
from .errors import InternalInvariantViolation, Overrun
from .stream import ByteStream

logger = logging.getLogger(__name__)

PropertyFunction = Callable[[ExecutionContext], Any]


class Status(Enum):
    """Outcome of one execution."""

    PASSED = "passed"
    FAILED = "failed"
    OVERRUN = "overrun"
    """Inconclusive: the replay ran out of bytes."""


@dataclass(frozen=True)
class RunResult:
    """Tagged result of :func:`execute`.

    Attributes:
        status (Status): What happened.
        stream (Optional[ByteStream]): The stream captured at the moment of
            failure, untrimmed. Only set when ``status`` is ``FAILED``.
        error (Optional[BaseException]): The exception that failed the run.
        names (List[Tuple[str, Any]]): Values recorded during a recording replay.
    """

    status: Status
    stream: Optional[ByteStream] = None
    error: Optional[BaseException] = None
    names: List[Tuple[str, Any]] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.status is Status.FAILED

    @property
    def counterexample(self) -> Optional[ByteStream]:
        """The trimmed failing stream, or None if the property held."""
        if self.stream is None:
            return None
        return self.stream.trimmed()


def execute(
    prop: PropertyFunction,
    stream: ByteStream,
    mode: Mode = Mode.REPLAY,
    rng: Optional[np.random.Generator] = None,
    record: bool = False,
) -> RunResult:
    """Invoke ``prop`` once with a context over a copy of ``stream``.

    Args:
        prop: Callable taking an :class:`ExecutionContext`. Returning normally
            means the property held.
        stream: Starting bytes. Its interval log is discarded.
        mode: Generate (grow and mint) or replay (fixed buffer).
        rng: Entropy for generate mode.
        record: Collect named values (replay mode only).

    Raises:
        InternalInvariantViolation: Never caught here. It marks an engine bug.
    """
    ctx = ExecutionContext(stream, mode=mode, rng=rng, record=record)
    try:
        prop(ctx)
    except Overrun:
        logger.debug("Run overran its %d byte buffer", len(ctx))
        return RunResult(Status.OVERRUN, names=ctx.names)
    except InternalInvariantViolation:
        raise
    except Exception as e:  # pylint: disable=broad-exception-caught
        return RunResult(
            Status.FAILED, stream=ctx.snapshot(), error=e, names=ctx.names
        )
    finally:
        ctx.finish()

    ctx.verify_fully_consumed()
    return RunResult(Status.PASSED, names=ctx.names)


def replay(prop: PropertyFunction, stream: ByteStream, record: bool = False) -> RunResult:
    """Execute ``prop`` against a fixed buffer."""
    return execute(prop, stream, mode=Mode.REPLAY, record=record)
