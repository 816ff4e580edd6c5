# src/bytesift/utils/byte_arithmetic.py
"""
Big-endian arithmetic on byte strings, used to propose shrink candidates.

Each helper returns ``None`` when it has nothing smaller to offer, so callers
can skip a candidate without spending a replay on it.
"""
from typing import Optional


def to_int(data: bytes) -> int:
    """Read ``data`` as one unsigned big-endian number."""
    return int.from_bytes(data, "big")


def from_int(value: int, size: int) -> bytes:
    """Write ``value`` back into exactly ``size`` big-endian bytes."""
    return value.to_bytes(size, "big")


def is_zero(data: bytes) -> bool:
    return not any(data)


def zeroed(data: bytes) -> Optional[bytes]:
    """All-zero bytes of the same length, or None if already zero."""
    if is_zero(data):
        return None
    return bytes(len(data))


def shift_right(data: bytes) -> Optional[bytes]:
    """Halve ``data`` as a big-endian number, carrying bits between bytes."""
    if is_zero(data):
        return None
    return from_int(to_int(data) >> 1, len(data))


def saturating_subtract(data: bytes, amount: int) -> Optional[bytes]:
    """
    Subtract ``amount`` from ``data`` as a big-endian number.

    Borrows run leftward through zero bytes exactly as in integer subtraction.
    A result that would be zero or below is not offered: zeroing an interval
    is the job of a cheaper strategy, and saturating there would only repeat it.
    """
    if amount <= 0:
        raise ValueError(f"Subtraction amount must be positive: {amount}")
    value = to_int(data)
    if value <= amount:
        return None
    return from_int(value - amount, len(data))
