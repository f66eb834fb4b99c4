"""Reverse-proxy awareness: WSGI middleware and client address lookup."""

from __future__ import annotations

from flask import Flask, Request
from werkzeug.middleware.proxy_fix import ProxyFix


def init_app(app: Flask) -> None:
    """Apply :class:`werkzeug.middleware.proxy_fix.ProxyFix` when enabled.

    Parameters
    ----------
    app: flask.Flask
        Application whose WSGI pipeline should respect upstream proxy headers.

    Notes
    -----
    Controlled by the ``USE_PROXYFIX`` configuration flag (defaults to
    ``True``). ``ProxyFix`` trusts a single hop for ``X-Forwarded-*`` headers.
    """
    if app.config.get("USE_PROXYFIX", True):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)


def client_ip(req: Request) -> str:
    """Return the originating client address of ``req``.

    Prefers the first ``X-Forwarded-For`` entry, then ``X-Real-IP``, then the
    socket peer. Returns ``"unknown"`` when none is available.
    """
    forwarded = req.headers.get("X-Forwarded-For")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    real = req.headers.get("X-Real-IP")
    if real and real.strip():
        return real.strip()
    return req.remote_addr or "unknown"
