"""Health check endpoint."""

from __future__ import annotations

from datetime import UTC, datetime

from flask import Blueprint, request

from ozone_coin.api.deps import get_store, json_response, timing
from ozone_coin.core.proxy import client_ip

bp = Blueprint("health", __name__)


def utc_timestamp() -> str:
    """Return the current instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""

    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@bp.get("/health")
@timing
def healthcheck():
    """Report liveness and durable-store reachability. Always HTTP 200."""

    started = utc_timestamp()
    db_status = "ok" if get_store().ping() else "error"
    payload = {"status": "ok", "timestamp": started, "ip": client_ip(request), "db": db_status}
    response = json_response(payload)
    response.headers["Cache-Control"] = "no-store"
    return response
