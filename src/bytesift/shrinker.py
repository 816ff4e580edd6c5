# src/bytesift/shrinker.py
"""
Reduction of a failing byte stream to a smaller one that still fails.

The shrinker runs an ordered battery of strategies. Each strategy sweeps over
positions in the current best stream (intervals, bytes or interval pairs),
proposes a smaller buffer, and replays it. A strategy is repeated until a
whole sweep makes no progress, then the next one starts from the latest
accepted stream. The battery repeats until a full round changes nothing or
the shared attempt budget runs out.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from . import settings as _settings
from .executor import PropertyFunction, replay
from .stream import ByteStream
from .utils.byte_arithmetic import saturating_subtract, shift_right, zeroed

logger = logging.getLogger(__name__)

SUBTRACT_AMOUNTS = (10, 1)

Proposer = Callable[[ByteStream, Any], Optional[bytes]]
Positions = Callable[[ByteStream], Sequence[Any]]


@dataclass
class ShrinkBudget:
    """Attempts left for the shrinker. May be shared between several shrinks."""

    remaining: int

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0

    def consume(self) -> bool:
        """Spend one attempt. Returns False if none was left."""
        if self.exhausted:
            return False
        self.remaining -= 1
        return True


class Shrinker:
    """
    Minimizes ``initial`` with respect to ``prop``.

    Args:
        prop: The property function that ``initial`` falsifies.
        initial: A trimmed failing stream. It is the fallback result.
        budget: Shared attempt counter; every replayed candidate costs one.
    """

    def __init__(
        self, prop: PropertyFunction, initial: ByteStream, budget: ShrinkBudget
    ):
        self.prop = prop
        self.initial = initial
        self.current = initial
        self.budget = budget
        self.attempts = 0
        self.shrinks = 0

    def __repr__(self):
        return (
            f"Shrinker(length={len(self.current)}, attempts={self.attempts}, "
            f"shrinks={self.shrinks}, remaining={self.budget.remaining})"
        )

    def consider(self, buffer: bytes) -> bool:
        """Replay ``buffer`` and adopt it if it fails and sorts lower.

        The stream adopted is the replay's own trimmed capture, so bytes the
        candidate no longer consumes are dropped.
        """
        if not self.budget.consume():
            return False
        self.attempts += 1

        result = replay(self.prop, ByteStream.for_buffer(buffer))
        if not result.failed:
            return False

        candidate = result.counterexample
        if not candidate.is_smaller_than(self.current):
            return False

        self.shrinks += 1
        logger.debug(
            "Shrink %d: %d -> %d bytes", self.shrinks, len(self.current), len(candidate)
        )
        self.current = candidate
        return True

    def shrink(self) -> ByteStream:
        """Run the strategy battery and return the smallest failing stream."""
        if not self.current.intervals:
            return self.current

        passes = [
            self.zero_intervals,
            self.zero_bytes,
            self.swap_intervals,
            self.shift_intervals,
        ]
        passes.extend(self._subtract_pass(amount) for amount in SUBTRACT_AMOUNTS)

        while not self.budget.exhausted:
            before = self.current
            for sweep in passes:
                self._run_to_fixpoint(sweep)
            if self.current is before:
                break

        if self.budget.exhausted:
            logger.debug("Shrink budget exhausted after %d attempts", self.attempts)
        return self.current

    def _run_to_fixpoint(self, sweep: Callable[[], bool]) -> None:
        while not self.budget.exhausted and sweep():
            pass

    def _sweep(self, positions: Positions, propose: Proposer) -> bool:
        """One pass over ``positions(current)``.

        After an accepted candidate the same position is tried again against
        the new stream before moving on.
        """
        improved = False
        index = 0
        candidates = positions(self.current)
        while not self.budget.exhausted and index < len(candidates):
            buffer = propose(self.current, candidates[index])
            if buffer is not None and self.consider(buffer):
                improved = True
                candidates = positions(self.current)
                continue
            index += 1
        return improved

    # --- Strategies ---

    def zero_intervals(self) -> bool:
        return self._sweep(_interval_indices, _propose_interval(zeroed))

    def zero_bytes(self) -> bool:
        return self._sweep(_byte_indices, _propose_zero_byte)

    def swap_intervals(self) -> bool:
        return self._sweep(_equal_length_pairs, _propose_swap)

    def shift_intervals(self) -> bool:
        return self._sweep(_interval_indices, _propose_interval(shift_right))

    def _subtract_pass(self, amount: int) -> Callable[[], bool]:
        def subtract():
            return self._sweep(
                _interval_indices,
                _propose_interval(lambda data: saturating_subtract(data, amount)),
            )

        subtract.__name__ = f"subtract_{amount}"
        return subtract


def _interval_indices(stream: ByteStream) -> Sequence[int]:
    return range(len(stream.intervals))


def _byte_indices(stream: ByteStream) -> Sequence[int]:
    return range(len(stream.buffer))


def _equal_length_pairs(stream: ByteStream) -> List[tuple]:
    lengths = [end - start for start, end in stream.intervals]
    return [
        (i, j)
        for i in range(len(lengths))
        for j in range(i + 1, len(lengths))
        if lengths[i] == lengths[j]
    ]


def _propose_interval(transform: Callable[[bytes], Optional[bytes]]) -> Proposer:
    """Lift a bytes -> bytes transform to whole-interval candidates."""

    def propose(stream: ByteStream, index: int) -> Optional[bytes]:
        start, _ = stream.intervals[index]
        replacement = transform(stream.interval_bytes(index))
        if replacement is None:
            return None
        return stream.replace(start, replacement)

    return propose


def _propose_zero_byte(stream: ByteStream, index: int) -> Optional[bytes]:
    if stream.buffer[index] == 0:
        return None
    return stream.replace(index, b"\x00")


def _propose_swap(stream: ByteStream, pair: tuple) -> Optional[bytes]:
    i, j = pair
    left, right = stream.interval_bytes(i), stream.interval_bytes(j)
    if not right < left:
        return None
    swapped = stream.replace(stream.intervals[i][0], right)
    return stream.with_buffer(swapped).replace(stream.intervals[j][0], left)


def shrink(
    prop: PropertyFunction,
    stream: ByteStream,
    budget: Optional[ShrinkBudget] = None,
) -> ByteStream:
    """Shrink a failing ``stream`` within ``budget`` attempts.

    Args:
        prop: The property function ``stream`` falsifies.
        stream: A trimmed counterexample, as returned by the search loop.
        budget: Shared attempt counter. A new one holding
            :attr:`Settings.max_shrinks` of the process-wide defaults is used
            when omitted.

    Returns:
        The most reduced failing stream found; ``stream`` itself if nothing
        smaller failed.
    """
    if budget is None:
        budget = ShrinkBudget(_settings.default_settings.max_shrinks)
    return Shrinker(prop, stream, budget).shrink()
