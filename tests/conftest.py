import contextlib

import pytest
from loguru import logger

from narigama_optional import Optional
from narigama_optional.config import LOGGER_NAME
from narigama_optional.config import configure_logging


class Thing:
    """A plain object, compared by identity."""


# values that aren't None, however empty they might look
NON_NONE_VALUES = [
    Thing(),
    Optional.of(1),
    "",
    False,
    0,
    "0",
    0.0,
    [],
    "test",
    123,
    123.4,
    ["test", "multi", ["array"]],
]


@pytest.fixture(params=NON_NONE_VALUES, ids=repr)
def value(request):
    return request.param


@pytest.fixture
def fresh_empty(monkeypatch: pytest.MonkeyPatch):
    """Forget the shared empty Optional, so the next Optional.empty() creates it again."""
    monkeypatch.setattr(Optional, "_EMPTY", None)


@contextlib.contextmanager
def collect(extract):
    """Enable the package logger and collect extract(message) for everything it logs."""
    collected = []
    logger.enable(LOGGER_NAME)
    handler_id = logger.add(lambda message: collected.append(extract(message)), level="DEBUG")
    try:
        yield collected
    finally:
        logger.remove(handler_id)
        # back to whatever the environment asks for, not simply off
        configure_logging()


@pytest.fixture
def logs():
    # loguru doesn't go through stdlib logging, so collect messages with a sink
    with collect(lambda message: message.record["message"]) as messages:
        yield messages


@pytest.fixture
def log_records():
    with collect(lambda message: message.record) as records:
        yield records
