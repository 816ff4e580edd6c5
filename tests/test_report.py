import logging

from bytesift.generators import booleans, integers
from bytesift.executor import Status
from bytesift.report import format_names, replay_counterexample, replay_names
from bytesift.stream import ByteStream


def pair(ctx):
    flag = booleans(ctx, name="flag")
    n = integers(ctx, name="n", bits=8, signed=False)
    integers(ctx, bits=8, signed=False)  # unnamed
    ctx.check(not flag or n < 10)


def test_replay_names_in_draw_order():
    stream = ByteStream.for_buffer(b"\xff\x0a\x03")
    assert replay_names(pair, stream) == [("flag", True), ("n", 10)]


def test_replay_names_warns_when_example_passes(caplog):
    stream = ByteStream.for_buffer(b"\x00\x0a\x03")

    with caplog.at_level(logging.WARNING, logger="bytesift.report"):
        names = replay_names(pair, stream)

    assert names == [("flag", False), ("n", 10)]
    assert "no longer fails" in caplog.text


def test_format_names():
    assert format_names([("x", 1000), ("s", "ab")]) == "  x = 1000\n  s = 'ab'"
    assert format_names([]) == "  (no named values)"


def test_replay_counterexample_keeps_error_and_names():
    result = replay_counterexample(pair, ByteStream.for_buffer(b"\xff\x0a\x03"))

    assert result.status is Status.FAILED
    assert result.names == [("flag", True), ("n", 10)]
    assert "Property check failed" in str(result.error)
