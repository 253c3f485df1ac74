from __future__ import annotations

import json
import logging
import sys
from decimal import Decimal
from typing import Any, Dict, Optional, TextIO


# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def _json_default(value: Any) -> Any:
    # Decimals keep their exact digits as strings rather than becoming floats
    if isinstance(value, Decimal):
        return str(value)
    return repr(value)


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with ``extra`` fields at the top level."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        payload.update({k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS})
        return json.dumps(payload, ensure_ascii=False, default=_json_default)


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Install the JSON formatter on the root logger.

    Records go to stderr by default so stdout carries only command results.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(JsonFormatter())
    root.handlers.clear()
    root.addHandler(handler)
