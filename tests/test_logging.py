from __future__ import annotations

import io
import json
import logging
import math
import sys
from decimal import Decimal
from typing import Iterator

import pytest

from numwindow.core.buffers import BoundedNumericBuffer
from numwindow.utils.logging import JsonFormatter, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, JsonFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord("numwindow.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.size = 3
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "numwindow.test"
    assert payload["message"] == "hello world"
    assert payload["size"] == 3
    assert "lineno" not in payload


def test_json_formatter_keeps_decimal_digits() -> None:
    record = logging.LogRecord("numwindow.test", logging.INFO, __file__, 1, "avg", (), None)
    record.average = Decimal("0.1000000000000000000000000000000001")
    payload = json.loads(JsonFormatter().format(record))
    assert payload["average"] == "0.1000000000000000000000000000000001"


def test_setup_logging_installs_single_handler() -> None:
    setup_logging("warning")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_setup_logging_writes_to_stderr_by_default() -> None:
    setup_logging("INFO")
    handler = logging.getLogger().handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr


def test_setup_logging_custom_stream() -> None:
    stream = io.StringIO()
    setup_logging("DEBUG", stream=stream)
    logging.getLogger("numwindow.test").debug("ping", extra={"value": 1})
    payload = json.loads(stream.getvalue().splitlines()[-1])
    assert payload["message"] == "ping"
    assert payload["value"] == 1


def test_rejected_values_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    buf: BoundedNumericBuffer[float] = BoundedNumericBuffer(3)
    with caplog.at_level(logging.DEBUG, logger="numwindow.core.buffers"):
        buf.add(None)
        buf.add(math.inf)
    messages = [r.getMessage() for r in caplog.records]
    assert "Dropping None value" in messages
    assert "Dropping non-finite value" in messages
