# src/bytesift/stream.py
"""Immutable byte streams.

A :class:`ByteStream` is both the entropy a run consumed and the log of how
it consumed it. Attributes:

    buffer (bytes): The bytes, in the order they were drawn.
    cursor (int): Read position, never past ``len(buffer)``.
    intervals (Tuple[Tuple[int, int], ...]): Half-open ``(start, end)`` ranges,
        one per draw, in consumption order. Their union is ``[0, cursor)``.
"""
import logging
from dataclasses import dataclass, field
from typing import Tuple

logger = logging.getLogger(__name__)

Interval = Tuple[int, int]


@dataclass(frozen=True)
class ByteStream:
    """A buffer, a cursor and the interval log of one execution.

    Streams are never edited in place: every method returns a new value, so a
    rejected shrink candidate cannot disturb the stream it was derived from.
    """

    buffer: bytes = b""
    cursor: int = 0
    intervals: Tuple[Interval, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.buffer, bytes):
            object.__setattr__(self, "buffer", bytes(self.buffer))
        if not isinstance(self.intervals, tuple):
            object.__setattr__(self, "intervals", tuple(self.intervals))
        if not 0 <= self.cursor <= len(self.buffer):
            raise ValueError(
                f"Cursor {self.cursor} outside buffer of length {len(self.buffer)}"
            )

    def __len__(self):
        return len(self.buffer)

    @classmethod
    def empty(cls) -> "ByteStream":
        """A fresh stream for a generate-mode run."""
        return cls()

    @classmethod
    def for_buffer(cls, buffer: bytes) -> "ByteStream":
        """A replayable stream over ``buffer`` with no interval log yet."""
        return cls(buffer=bytes(buffer))

    def trimmed(self) -> "ByteStream":
        """Cut the buffer to what was consumed and rewind the cursor.

        This is the shape of a counterexample: only bytes that mattered are
        kept, and the intervals (which all lie below the old cursor) survive.
        """
        return ByteStream(
            buffer=self.buffer[: self.cursor], cursor=0, intervals=self.intervals
        )

    def with_buffer(self, buffer: bytes) -> "ByteStream":
        """Same interval log over a different buffer of the same length."""
        if len(buffer) != len(self.buffer):
            raise ValueError("Replacement buffer must keep the stream length")
        return ByteStream(buffer=bytes(buffer), cursor=0, intervals=self.intervals)

    def interval_bytes(self, index: int) -> bytes:
        """The bytes covered by interval ``index``."""
        start, end = self.intervals[index]
        return self.buffer[start:end]

    def replace(self, start: int, data: bytes) -> bytes:
        """Return the buffer with ``data`` written at ``start``."""
        end = start + len(data)
        if end > len(self.buffer):
            raise ValueError("Replacement runs past the end of the buffer")
        return self.buffer[:start] + bytes(data) + self.buffer[end:]

    def sort_key(self) -> Tuple[int, bytes]:
        """Shortlex key: shorter is smaller, then bytewise."""
        return (len(self.buffer), self.buffer)

    def is_smaller_than(self, other: "ByteStream") -> bool:
        """True when this stream sorts strictly before ``other``."""
        return self.sort_key() < other.sort_key()
