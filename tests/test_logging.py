import io
import json
import logging

import pytest

from tixhub.core.logging import configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_configure_logging_emits_json_lines(root_logger):
    stream = io.StringIO()
    configure_logging("debug", stream=stream)

    logging.getLogger("tixhub.test").info("fetched %s events", 3)

    payload = json.loads(stream.getvalue().strip())
    assert payload["level"] == "INFO"
    assert payload["logger"] == "tixhub.test"
    assert payload["msg"] == "fetched 3 events"
    assert root_logger.level == logging.DEBUG


def test_unknown_level_name_falls_back_to_info(root_logger):
    configure_logging("chatty", stream=io.StringIO())

    assert root_logger.level == logging.INFO
    assert len(root_logger.handlers) == 1


def test_exception_trace_is_included(root_logger):
    stream = io.StringIO()
    configure_logging(logging.WARNING, stream=stream)

    try:
        raise ValueError("bad payload")
    except ValueError:
        logging.getLogger("tixhub.test").exception("fetch failed")

    payload = json.loads(stream.getvalue().strip())
    assert payload["level"] == "ERROR"
    assert "ValueError: bad payload" in payload["exc_info"]
