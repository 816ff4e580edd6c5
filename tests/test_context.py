import numpy as np
import pytest

from bytesift.context import ExecutionContext, Mode
from bytesift.errors import InternalInvariantViolation, Overrun, PropertyViolation
from bytesift.stream import ByteStream


def test_generate_mode_grows_buffer_on_demand():
    ctx = ExecutionContext(mode=Mode.GENERATE, rng=np.random.default_rng(0))

    first = ctx.draw(3)
    second = ctx.draw(2)

    assert len(first) == 3 and len(second) == 2
    assert bytes(ctx.buffer) == first + second
    assert ctx.cursor == 5
    assert ctx.intervals == [(0, 3), (3, 5)]


def test_minted_bytes_never_reach_255():
    ctx = ExecutionContext(mode=Mode.GENERATE, rng=np.random.default_rng(1))
    data = ctx.draw(5000)
    assert max(data) <= 254
    assert min(data) == 0


def test_generate_mode_reuses_existing_prefix():
    stream = ByteStream.for_buffer(b"\x07\x08")
    ctx = ExecutionContext(stream, mode=Mode.GENERATE, rng=np.random.default_rng(0))

    assert ctx.draw(1) == b"\x07"
    assert ctx.draw(2)[:1] == b"\x08"
    assert len(ctx) == 3


def test_replay_mode_overrun():
    ctx = ExecutionContext.for_buffer(b"\x01\x02")

    assert ctx.draw(2) == b"\x01\x02"
    with pytest.raises(Overrun):
        ctx.draw(1)
    # A failed draw consumes nothing
    assert ctx.cursor == 2
    assert ctx.intervals == [(0, 2)]


def test_intervals_cover_consumed_prefix():
    ctx = ExecutionContext.for_buffer(bytes(10))
    for n in (1, 3, 0, 2):
        ctx.draw(n)

    covered = []
    for start, end in ctx.intervals:
        covered.extend(range(start, end))
    assert covered == list(range(ctx.cursor))


def test_negative_draw_is_rejected():
    ctx = ExecutionContext.for_buffer(b"\x00")
    with pytest.raises(ValueError, match="negative"):
        ctx.draw(-1)


def test_draw_after_finish_is_an_engine_misuse():
    ctx = ExecutionContext.for_buffer(b"\x00\x00")
    ctx.finish()
    with pytest.raises(InternalInvariantViolation):
        ctx.draw(1)


def test_names_only_recorded_in_recording_replay():
    recording = ExecutionContext.for_buffer(b"", record=True)
    recording.note("x", 1)
    recording.note(None, 2)
    assert recording.names == [("x", 1)]

    silent = ExecutionContext.for_buffer(b"")
    silent.note("x", 1)
    assert silent.names == []

    # record=True is ignored outside replay
    generating = ExecutionContext(mode=Mode.GENERATE, record=True)
    generating.note("x", 1)
    assert generating.names == []


def test_check():
    ctx = ExecutionContext.for_buffer(b"")
    ctx.check(True)
    with pytest.raises(PropertyViolation, match="too big"):
        ctx.check(False, "too big")
    with pytest.raises(AssertionError):
        ctx.check(0)


def test_verify_fully_consumed():
    ctx = ExecutionContext(
        ByteStream.for_buffer(b"\x01\x02"), mode=Mode.GENERATE
    )
    ctx.draw(1)
    with pytest.raises(InternalInvariantViolation, match="1 unconsumed"):
        ctx.verify_fully_consumed()

    # Replay mode may legitimately leave bytes behind
    replaying = ExecutionContext.for_buffer(b"\x01\x02")
    replaying.draw(1)
    replaying.verify_fully_consumed()


def test_snapshot_is_independent_of_later_draws():
    ctx = ExecutionContext.for_buffer(b"\x01\x02\x03")
    ctx.draw(1)
    snap = ctx.snapshot()
    ctx.draw(2)

    assert snap.cursor == 1
    assert snap.intervals == ((0, 1),)
    assert snap.buffer == b"\x01\x02\x03"


def test_repr():
    ctx = ExecutionContext.for_buffer(b"\x01")
    assert repr(ctx).startswith("ExecutionContext(mode=replay")
