"""API blueprint package bundling the ``/api`` routes."""

from __future__ import annotations

from flask import Blueprint

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .admin import bp as admin_bp  # noqa: E402
from .classes import bp as classes_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .students import bp as students_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_api_base)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),  # -> /api/health
    (admin_bp, "/admin"),  # -> /api/admin/login, /api/admin/logout
    (classes_bp, "/classes"),
    (students_bp, "/students"),
]
