"""Admin session endpoints."""

from __future__ import annotations

from flask import Blueprint

from ozone_coin.api.deps import (
    get_admin_service,
    json_body,
    json_response,
    timing,
    translated_errors,
)
from ozone_coin.schemas import LoginResponseSchema, LoginSchema
from ozone_coin.services.auth.dto import LoginIn

bp = Blueprint("admin", __name__)

login_schema = LoginSchema()
login_response_schema = LoginResponseSchema()


@bp.post("/login")
@timing
def login():
    """Exchange the admin username/password for a bearer token."""

    data = login_schema.load(json_body())
    with translated_errors():
        result = get_admin_service().authenticate(LoginIn(user=data["user"], password=data["password"]))
    return json_response(login_response_schema.dump({"token": result.token}))


@bp.post("/logout")
@timing
def logout():
    """Acknowledge a logout. Tokens are stateless; the client discards its copy."""

    return json_response({"ok": True})
