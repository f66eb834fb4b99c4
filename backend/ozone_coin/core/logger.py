"""Structured logging: JSON lines on stdout, request correlation, access log."""

from __future__ import annotations

import json
import logging
import sys
import time
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from flask import Flask, Response, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"
CORRELATION_HEADERS = ("X-Request-ID", "X-Correlation-ID")
ACCESS_LOGGER = "ozone_coin.access"

# ``extra=`` keys copied verbatim into the JSON payload
EXTRA_KEYS = (
    "endpoint",
    "elapsed_ms",
    "backend",
    "class_id",
    "method",
    "path",
    "status",
    "ip",
)


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", None),
        }
        for key in EXTRA_KEYS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class RequestIdFilter(logging.Filter):
    """Stamp ``request_id`` on every record (``None`` outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = ensure_request_id() if has_request_context() else None
        return True


def ensure_request_id() -> str:
    """Return the request's correlation id, adopting an inbound header or minting one."""

    if not has_request_context():
        return str(uuid4())
    if "request_id" not in g:
        inbound = next((request.headers[h] for h in CORRELATION_HEADERS if request.headers.get(h)), None)
        g.request_id = inbound or str(uuid4())
    return g.request_id


def configure_logging(level: str | int = "INFO") -> None:
    """Replace root handlers with a single JSON stdout handler at ``level``."""

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    handler.addFilter(RequestIdFilter())
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.INFO
    root.setLevel(level)
    # The access log below replaces werkzeug's own request lines
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


def init_app(app: Flask) -> None:
    """Seed the request id, echo it back, and write one access line per request."""

    from ozone_coin.core.proxy import client_ip

    access_log = logging.getLogger(ACCESS_LOGGER)
    app.logger.addFilter(RequestIdFilter())

    @app.before_request
    def _start_request() -> None:
        ensure_request_id()
        g.request_started = time.perf_counter()

    @app.after_request
    def _finish_request(response: Response) -> Response:
        response.headers.setdefault(REQUEST_ID_HEADER, ensure_request_id())
        started = g.pop("request_started", None)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2) if started is not None else None
        access_log.info(
            "%s %s %s",
            request.method,
            request.path,
            response.status_code,
            extra={
                "method": request.method,
                "path": request.path,
                "status": response.status_code,
                "ip": client_ip(request),
                "elapsed_ms": elapsed_ms,
            },
        )
        return response


__all__ = ["configure_logging", "init_app", "ensure_request_id"]
