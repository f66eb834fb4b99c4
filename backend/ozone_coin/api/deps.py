"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from flask import Response, current_app, jsonify, request

from ozone_coin.core.errors import Unauthorized
from ozone_coin.core.extensions import get_class_store
from ozone_coin.core.logger import ensure_request_id
from ozone_coin.core.proxy import client_ip
from ozone_coin.services._shared.base import BaseService, ServiceContext
from ozone_coin.services._shared.errors import ServiceError
from ozone_coin.services._shared.ports import ClassStore
from ozone_coin.services.auth.service import AdminAuthService

F = TypeVar("F", bound=Callable[..., Any])

ADMIN_SERVICE_KEY = "admin_auth"


def service_context() -> ServiceContext:
    """Build the request-scoped context handed to services."""

    return ServiceContext(request_id=ensure_request_id(), client_ip=client_ip(request))


def get_admin_service() -> AdminAuthService:
    """Return the admin gate bound to the current request."""

    base: AdminAuthService = current_app.extensions[ADMIN_SERVICE_KEY]
    return AdminAuthService(settings=base.settings, codec=base.codec, ctx=service_context())


def get_store() -> ClassStore:
    """Return the storage backend selected at start-up."""

    return get_class_store()


def json_body() -> dict[str, Any]:
    """Return the parsed JSON object body; anything else (absent, unparsable, a list) is ``{}``."""

    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


@contextmanager
def translated_errors() -> Iterator[None]:
    """Re-raise domain errors as their API counterparts."""

    try:
        yield
    except ServiceError as exc:
        raise BaseService.translate_exceptions(exc) from exc


def require_admin(func: F) -> F:
    """Admit the request only with a valid ``Authorization: Bearer`` admin token.

    The wrapped view never runs on rejection.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        if not get_admin_service().authorize(request.headers.get("Authorization")):
            raise Unauthorized()
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
