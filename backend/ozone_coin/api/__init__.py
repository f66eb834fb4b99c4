"""API blueprint package: admin gate wiring and route registration."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Blueprint, Flask

from ozone_coin.api.deps import ADMIN_SERVICE_KEY
from ozone_coin.services.auth.dto import AdminSettings
from ozone_coin.services.auth.service import AdminAuthService


def register_blueprint_group(
    app: Flask,
    *,
    base_prefix: str,
    entries: Iterable[tuple[Blueprint, str]],
) -> None:
    """Register related blueprints beneath a common prefix.

    Parameters
    ----------
    app:
        Application instance receiving the blueprints.
    base_prefix:
        Prefix applied to all entries, typically ``"/api"``.
    entries:
        Iterable of ``(blueprint, relative_prefix)`` pairs where
        ``relative_prefix`` is appended to ``base_prefix``.

    Notes
    -----
    Empty relative prefixes are supported, allowing a blueprint to mount at the
    API root while others extend it with additional path segments.
    """

    for bp, rel_prefix in entries:
        full_prefix = "/".join(
            segment for segment in [base_prefix.rstrip("/"), rel_prefix.strip("/")] if segment
        )
        full_prefix = "/" + full_prefix if not full_prefix.startswith("/") else full_prefix
        app.register_blueprint(bp, url_prefix=full_prefix)


def init_app(app: Flask) -> None:
    """Build the admin gate from config and register the API routes."""

    settings = AdminSettings.from_mapping(app.config)
    app.extensions[ADMIN_SERVICE_KEY] = AdminAuthService(settings=settings)

    from ozone_coin.api.routes import REGISTRY

    register_blueprint_group(app, base_prefix=app.config.get("API_BASE_PREFIX", "/api"), entries=REGISTRY)


__all__ = ["init_app", "register_blueprint_group"]
