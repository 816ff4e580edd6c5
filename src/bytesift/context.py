# src/bytesift/context.py

"""Module: bytesift.context

This module contains the :class:`ExecutionContext`, the object threaded
through every generator call of one property execution. It owns the working
buffer, the cursor, the interval log and the named-value record, and it
provides :meth:`ExecutionContext.draw`, the only place bytes are consumed.
"""

import logging
from enum import Enum
from typing import Any, List, Optional, Tuple

import numpy as np

from .errors import InternalInvariantViolation, Overrun, PropertyViolation
from .stream import ByteStream, Interval

logger = logging.getLogger(__name__)

# Minted bytes are uniform over [0, 254].
MINT_UPPER_BOUND = 255


class Mode(Enum):
    """How a context treats the end of its buffer."""

    GENERATE = "generate"
    """The buffer grows on demand with fresh random bytes."""

    REPLAY = "replay"
    """The buffer is fixed. Drawing past its end is an :class:`Overrun`."""


class ExecutionContext:
    """
    The live state of one property execution.

    Generators call :meth:`draw` to consume bytes and :meth:`note` to report
    the value they produced. Property bodies call :meth:`check` to assert.

    Args:
        stream: The stream to start from. Its interval log is not carried over.
        mode: :attr:`Mode.GENERATE` or :attr:`Mode.REPLAY`.
        rng: Entropy source for generate mode. A fresh unseeded
            ``numpy.random.Generator`` is used when omitted.
        record: Collect ``(name, value)`` pairs. Only honoured in replay mode.
    """

    def __init__(
        self,
        stream: Optional[ByteStream] = None,
        mode: Mode = Mode.REPLAY,
        rng: Optional[np.random.Generator] = None,
        record: bool = False,
    ):
        if stream is None:
            stream = ByteStream.empty()
        self.mode = mode
        self.buffer = bytearray(stream.buffer)
        self.cursor = stream.cursor
        self.intervals: List[Interval] = []
        self.names: List[Tuple[str, Any]] = []
        self.record = record and mode is Mode.REPLAY
        self.active = True
        self._rng = rng

    @classmethod
    def for_buffer(cls, buffer: bytes, record: bool = False) -> "ExecutionContext":
        """A replay context over raw bytes."""
        return cls(ByteStream.for_buffer(buffer), Mode.REPLAY, record=record)

    def __repr__(self):
        return (
            f"ExecutionContext(mode={self.mode.value}, cursor={self.cursor}, "
            f"length={len(self.buffer)}, intervals={len(self.intervals)})"
        )

    @property
    def remaining(self) -> int:
        """Bytes left before the end of the current buffer."""
        return len(self.buffer) - self.cursor

    def draw(self, n: int) -> bytes:
        """Consume ``n`` bytes and log them as one interval.

        Raises:
            Overrun: In replay mode, when fewer than ``n`` bytes remain.
            InternalInvariantViolation: If the context is no longer active.
        """
        if not self.active:
            raise InternalInvariantViolation(
                "draw() called on a context whose execution has finished"
            )
        if n < 0:
            raise ValueError(f"Cannot draw a negative number of bytes: {n}")

        start = self.cursor
        end = start + n
        if end > len(self.buffer):
            if self.mode is Mode.REPLAY:
                raise Overrun(f"Draw of {n} bytes at {start} overruns {len(self)}")
            self.buffer.extend(self._mint(end - len(self.buffer)))

        self.cursor = end
        self.intervals.append((start, end))
        return bytes(self.buffer[start:end])

    def __len__(self):
        return len(self.buffer)

    def _mint(self, n: int) -> bytes:
        if self._rng is None:
            self._rng = np.random.default_rng()
        return self._rng.integers(0, MINT_UPPER_BOUND, size=n, dtype=np.uint8).tobytes()

    def note(self, name: Optional[str], value: Any) -> None:
        """Record a generated value under ``name`` when recording."""
        if name is not None and self.record:
            self.names.append((name, value))

    def check(self, condition: Any, message: Optional[str] = None) -> None:
        """Fail the current execution unless ``condition`` is truthy."""
        if not condition:
            raise PropertyViolation(message or "Property check failed")

    def snapshot(self) -> ByteStream:
        """The stream as it stands now."""
        return ByteStream(
            buffer=bytes(self.buffer), cursor=self.cursor, intervals=self.intervals
        )

    def finish(self) -> None:
        """Deactivate the context. Later draws are an engine misuse."""
        self.active = False

    def verify_fully_consumed(self) -> None:
        """Generate-mode runs must leave no unconsumed bytes behind."""
        if self.mode is Mode.GENERATE and self.cursor != len(self.buffer):
            raise InternalInvariantViolation(
                f"Generate-mode run left {self.remaining} unconsumed bytes"
            )
