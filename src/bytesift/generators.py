# src/bytesift/generators.py
"""
Typed value generators built on :meth:`ExecutionContext.draw`.

Every generator takes the context first and an optional display ``name``.
Naming only feeds the replay record; it never changes what is drawn.

All generators are shrink-friendly: lowering a drawn byte never produces a
"larger" value (zero bytes give the simplest value, fewer continuation bytes
give a shorter sequence).
"""
import logging
from typing import Any, Callable, List, Optional, Tuple, TypeVar

from .context import ExecutionContext

logger = logging.getLogger(__name__)

T = TypeVar("T")
Generator = Callable[..., Any]

BOOLEAN_THRESHOLD = 128
SIGN_THRESHOLD = 128

PRINTABLE_BASE = 32
PRINTABLE_COUNT = 95

# A continuation byte above this keeps a sequence going (~80%).
SEQUENCE_STOP_MAX = 50
# A continuation byte at or above this keeps a string going (~75%).
TEXT_CONTINUE_MIN = 64


def booleans(ctx: ExecutionContext, name: Optional[str] = None) -> bool:
    """One byte; true iff it is at least 128."""
    value = ctx.draw(1)[0] >= BOOLEAN_THRESHOLD
    ctx.note(name, value)
    return value


def integers(
    ctx: ExecutionContext,
    name: Optional[str] = None,
    bits: int = 64,
    signed: bool = True,
) -> int:
    """
    A fixed-width integer.

    Signed integers draw a sign byte first: above 128 selects the magnitude
    itself, anything else selects ``-magnitude - 1``. The magnitude is drawn
    as one big-endian interval of ``ceil(width / 8)`` bytes where ``width`` is
    ``bits - 1`` for signed and ``bits`` for unsigned integers.

    Args:
        ctx: The active execution context.
        name: Display name for the replay record.
        bits: Total width. ``bits=64, signed=True`` covers exactly the int64 range.
        signed: When False, no sign byte is drawn and the result is non-negative.
    """
    if bits < 1 or (signed and bits < 2):
        raise ValueError(f"Integer width too small: {bits}")

    positive = True
    if signed:
        positive = ctx.draw(1)[0] > SIGN_THRESHOLD
    width = bits - 1 if signed else bits

    magnitude = _draw_magnitude(ctx, width)
    value = magnitude if positive else -magnitude - 1
    ctx.note(name, value)
    return value


def _draw_magnitude(ctx: ExecutionContext, width: int) -> int:
    """Big-endian unsigned value of ``width`` bits from one draw."""
    size = (width + 7) // 8
    raw = bytearray(ctx.draw(size))
    spare_bits = size * 8 - width
    # Shifting rather than masking keeps lower bytes mapping to lower values.
    raw[0] >>= spare_bits
    return int.from_bytes(bytes(raw), "big")


def characters(ctx: ExecutionContext, name: Optional[str] = None) -> str:
    """A printable ASCII character, ``' '`` for a zero byte."""
    value = chr(PRINTABLE_BASE + ctx.draw(1)[0] % PRINTABLE_COUNT)
    ctx.note(name, value)
    return value


def _draw_items(
    ctx: ExecutionContext, item: Callable[[ExecutionContext], T]
) -> List[T]:
    items = []
    while ctx.draw(1)[0] > SEQUENCE_STOP_MAX:
        items.append(item(ctx))
    return items


def sequences(
    ctx: ExecutionContext,
    item: Callable[[ExecutionContext], T],
    name: Optional[str] = None,
) -> List[T]:
    """
    An unbounded list of values from ``item``.

    Each element is preceded by one continuation byte; the first byte of 50 or
    less ends the list.

    Example:
        .. code-block:: python

            xs = sequences(ctx, lambda c: integers(c, bits=8), name="xs")
    """
    value = _draw_items(ctx, item)
    ctx.note(name, value)
    return value


def collections(
    ctx: ExecutionContext,
    item: Callable[[ExecutionContext], T],
    name: Optional[str] = None,
) -> Tuple[T, ...]:
    """As :func:`sequences`, frozen into a tuple."""
    value = tuple(_draw_items(ctx, item))
    ctx.note(name, value)
    return value


def text(ctx: ExecutionContext, name: Optional[str] = None) -> str:
    """A string of printable characters; continuation bytes below 64 stop it."""
    chars = []
    while ctx.draw(1)[0] >= TEXT_CONTINUE_MIN:
        chars.append(characters(ctx))
    value = "".join(chars)
    ctx.note(name, value)
    return value
