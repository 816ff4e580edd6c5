# tests/conftest.py

import pytest

from bytesift.context import ExecutionContext
from bytesift.errors import Overrun
from bytesift.executor import replay
from bytesift.stream import ByteStream


def pytest_addoption(parser):
    """Add a custom CLI flag to run statistical sweeps."""
    parser.addoption(
        "--slow",
        action="store_true",
        default=False,
        help="Run slow statistical sweeps over many seeds",
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests marked 'slow' unless the --slow flag is passed."""
    if config.getoption("--slow"):
        # If flag is present, run everything
        return

    skip_slow = pytest.mark.skip(reason="need --slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


##########
# FIXTURES
##########


@pytest.fixture
def decode():
    """Factory fixture: run a generator over fixed bytes and return its value."""

    def _decode(generator, buffer: bytes, **kwargs):
        ctx = ExecutionContext.for_buffer(buffer)
        return generator(ctx, **kwargs)

    return _decode


@pytest.fixture
def try_decode(decode):
    """Like ``decode`` but returns None instead of raising Overrun."""

    def _try(generator, buffer: bytes, **kwargs):
        try:
            return decode(generator, buffer, **kwargs)
        except Overrun:
            return None

    return _try


@pytest.fixture
def values_of():
    """Returns a function that replays a stream and lists its named values."""

    def _values(prop, stream: ByteStream):
        result = replay(prop, stream, record=True)
        return [value for _, value in result.names]

    return _values
