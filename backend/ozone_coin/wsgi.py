"""WSGI entry point for gunicorn: ``gunicorn ozone_coin.wsgi:app``."""

from __future__ import annotations

from ozone_coin import create_app

app = create_app()
