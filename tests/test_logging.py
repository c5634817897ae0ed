from __future__ import annotations

import json
import logging
import sys

from snippetkit.observability.logging import JsonFormatter, configure_logging


def _record(msg: str, **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("snippetkit.test", logging.INFO, __file__, 1, msg, None, None)
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_emits_core_fields_and_extras() -> None:
    out = json.loads(JsonFormatter().format(_record("command_done", command="dedup-sort", latency_ms=3)))
    assert out["level"] == "INFO"
    assert out["logger"] == "snippetkit.test"
    assert out["message"] == "command_done"
    assert out["command"] == "dedup-sort"
    assert out["latency_ms"] == 3
    assert "ts" in out
    assert "lineno" not in out


def test_json_formatter_reprs_unserializable_extras() -> None:
    out = json.loads(JsonFormatter().format(_record("x", thing=object())))
    assert out["thing"].startswith("<object object")


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("t", logging.ERROR, __file__, 1, "failed", None, sys.exc_info())
    out = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in out["exc_info"]


def test_configure_logging_replaces_handlers() -> None:
    configure_logging(level="debug")
    configure_logging(level="warning", json_format=False)

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)
