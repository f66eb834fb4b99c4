"""Centralized JSON error handling for the API.

Every failure leaves the service as ``{"error": <message>}``; a few carry an
extra ``details`` string. Handlers are registered on the application so
blueprints stay free of try/except boilerplate.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from marshmallow import ValidationError as MarshmallowValidationError
from werkzeug.exceptions import HTTPException

from ozone_coin.core.logger import ensure_request_id

log = logging.getLogger(__name__)


def _error_body(message: str, details: str | None = None) -> dict[str, Any]:
    """Build the JSON error payload shared by all handlers."""
    body: dict[str, Any] = {"error": message}
    if details:
        body["details"] = details
    return body


def error_response(message: str, status: int, *, details: str | None = None) -> Response:
    """Return a JSON error response with the given status code."""
    resp = jsonify(_error_body(message, details))
    resp.status_code = int(status)
    return resp


def _first_validation_message(messages: Any) -> str | None:
    """Pick the first human-readable message out of marshmallow's error tree."""
    if isinstance(messages, str):
        return messages
    if isinstance(messages, dict):
        for value in messages.values():
            found = _first_validation_message(value)
            if found:
                return found
    if isinstance(messages, list):
        for value in messages:
            found = _first_validation_message(value)
            if found:
                return found
    return None


class APIError(Exception):
    """
    Represent a JSON-serializable API error.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    details : str | None, optional
        Optional extra text rendered as the ``details`` field.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        details: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.details = details

    def to_response(self) -> Response:
        """Serialize the error into a Flask response."""
        return error_response(self.message, self.status_code, details=self.details)


class BadRequest(APIError):
    """400 when input is missing or malformed."""

    def __init__(self, message: str = "Bad request") -> None:
        super().__init__(message, status_code=HTTPStatus.BAD_REQUEST)


class NotFound(APIError):
    """404 when resources are missing."""

    def __init__(self, message: str = "Not found") -> None:
        super().__init__(message, status_code=HTTPStatus.NOT_FOUND)


class Unauthorized(APIError):
    """401 when authentication or authorization fails."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, status_code=HTTPStatus.UNAUTHORIZED)


class InternalError(APIError):
    """500 when the store fails while mutating data."""

    def __init__(self, message: str = "Internal server error", details: str | None = None) -> None:
        super().__init__(message, status_code=HTTPStatus.INTERNAL_SERVER_ERROR, details=details)


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - 5xx are logged as errors, 4xx as warnings.
    - Unexpected exceptions never leak internals to clients.
    """

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        level = log.error if err.status_code >= 500 else log.warning
        level(
            "APIError: status=%s msg=%s details=%s request_id=%s",
            err.status_code,
            err.message,
            err.details,
            ensure_request_id(),
        )
        return err.to_response()

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        message = HTTPStatus(status).phrase
        if status == HTTPStatus.NOT_FOUND and request:
            message = f"Route '{request.path}' not found"
        level = log.error if status >= 500 else log.warning
        level(
            "HTTPException: status=%s detail=%s request_id=%s",
            status,
            message,
            ensure_request_id(),
        )
        return error_response(message, status)

    @app.errorhandler(MarshmallowValidationError)
    def handle_validation_error(err: MarshmallowValidationError):
        message = _first_validation_message(err.messages) or "Validation failed"
        log.warning("ValidationError: msg=%s request_id=%s", message, ensure_request_id())
        return error_response(message, HTTPStatus.BAD_REQUEST)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        log.error(
            "Unhandled exception: request_id=%s",
            ensure_request_id(),
            exc_info=True,
        )
        return error_response("Unexpected error", HTTPStatus.INTERNAL_SERVER_ERROR)
