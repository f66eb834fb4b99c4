# tests/unit/core/test_logger.py
from __future__ import annotations

import json
import logging
import sys

from ozone_coin.core.logger import ACCESS_LOGGER, JSONFormatter, configure_logging, ensure_request_id


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("ozone", logging.INFO, __file__, 1, "store %s", ("ready",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_renders_core_fields():
    payload = json.loads(JSONFormatter().format(_record(request_id="abc")))
    assert payload["level"] == "INFO"
    assert payload["name"] == "ozone"
    assert payload["message"] == "store ready"
    assert payload["request_id"] == "abc"
    assert "time" in payload


def test_json_formatter_copies_known_extras_only():
    payload = json.loads(JSONFormatter().format(_record(backend="memory", elapsed_ms=1.5, secret="x")))
    assert payload["backend"] == "memory"
    assert payload["elapsed_ms"] == 1.5
    assert "secret" not in payload


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord("ozone", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())
    payload = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in payload["exc_info"]


def test_configure_logging_installs_single_json_handler():
    configure_logging("debug")
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JSONFormatter)
    assert root.level == logging.DEBUG
    configure_logging("WARNING")
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING


def test_request_id_outside_request_is_fresh():
    assert ensure_request_id() != ensure_request_id()


def test_request_id_is_echoed(client):
    resp = client.get("/api/health", headers={"X-Request-ID": "req-42"})
    assert resp.headers["X-Request-ID"] == "req-42"


def test_request_id_is_generated_when_absent(client):
    resp = client.get("/api/health")
    assert resp.headers["X-Request-ID"]


class _Collect(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


def test_each_request_writes_one_access_line(client):
    access = logging.getLogger(ACCESS_LOGGER)
    collector = _Collect()
    previous = access.level
    access.addHandler(collector)
    access.setLevel(logging.INFO)
    try:
        client.get("/api/classes", headers={"X-Forwarded-For": "203.0.113.5"})
    finally:
        access.removeHandler(collector)
        access.setLevel(previous)

    (record,) = collector.records
    assert record.getMessage() == "GET /api/classes 200"
    assert record.method == "GET"
    assert record.status == 200
    assert record.ip == "203.0.113.5"
    assert record.elapsed_ms >= 0
