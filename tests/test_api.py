import logging

import bytesift
from bytesift import settings
from bytesift.api import Counterexample, falsify
from bytesift.errors import PropertyViolation
from bytesift.generators import integers
from bytesift.stream import ByteStream


def below_1000(ctx):
    x = integers(ctx, name="x")
    ctx.check(x < 1000, f"{x} is too big")


def test_falsify_shrinks_and_names():
    found = falsify(below_1000, settings.Settings(seed=4))

    assert found.names == [("x", 1000)]
    assert isinstance(found.error, PropertyViolation)
    assert found.stream.cursor == 0
    assert found.stream.buffer[1:] == (1000).to_bytes(8, "big")


def test_falsify_returns_none_when_property_holds():
    assert falsify(lambda ctx: integers(ctx), settings.Settings(max_examples=20)) is None


def test_falsify_uses_process_defaults(monkeypatch):
    calls = []

    def holds(ctx):
        calls.append(integers(ctx))

    monkeypatch.setattr(settings, "default_settings", settings.Settings(max_examples=7))
    assert falsify(holds) is None
    assert len(calls) == 7


def test_zero_shrink_budget_still_reports():
    found = falsify(below_1000, settings.Settings(seed=4, max_shrinks=0))
    assert found is not None
    (name, value), = found.names
    assert name == "x" and value >= 1000


def test_describe():
    found = Counterexample(
        stream=ByteStream.empty(),
        names=[("x", 1000)],
        error=PropertyViolation("1000 is too big"),
    )
    assert found.describe() == (
        "Falsifying example:\n"
        "  x = 1000\n"
        "Error: PropertyViolation: 1000 is too big"
    )


def test_public_names_are_exported():
    for name in bytesift.__all__:
        assert hasattr(bytesift, name), name


def test_flaky_failure_is_reported_with_a_warning(caplog):
    calls = []

    def fails_once(ctx):
        calls.append(integers(ctx, name="x"))
        ctx.check(len(calls) > 1)

    with caplog.at_level(logging.WARNING, logger="bytesift.report"):
        found = falsify(fails_once, settings.Settings(seed=0))

    assert found is not None
    assert found.error is None
    assert [name for name, _ in found.names] == ["x"]
    assert "no longer fails" in caplog.text
