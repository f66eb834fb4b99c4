"""Application settings with environment-based simple classes."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Final

from dotenv import load_dotenv

# Public selector env var (keep neutral name to avoid collisions)
ENV_VAR: Final[str] = "APP_ENV"  # 'development' | 'testing' | 'production'

# Connection strings still holding this marker are unfilled templates
DATABASE_URL_PLACEHOLDER: Final[str] = "USER:PASSWORD"

DEFAULT_CORS_ORIGINS: Final[tuple[str, ...]] = (
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
    "http://ozone-coin.online",
    "https://ozone-coin.online",
    "http://www.ozone-coin.online",
    "https://www.ozone-coin.online",
)


load_dotenv()


def env_bool(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from an environment variable.

    Parameters
    ----------
    name: str
        Environment variable to inspect.
    default: bool, optional
        Value returned when the variable is unset. Defaults to ``False``.

    Returns
    -------
    bool
        ``True`` if the value resembles ``{"1", "true", "yes", "y", "on"}``
        ignoring case; otherwise ``False`` or ``default`` when missing.
    """
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


def env_int(name: str, default: int) -> int:
    """Parse an integer from an environment variable, ignoring garbage."""
    val = os.getenv(name, "").strip()
    try:
        return int(val) if val else default
    except ValueError:
        return default


def build_cors_origins(extra: str | None = None) -> str:
    """Return the comma-separated origin allow-list.

    The built-in front-end hosts are always present; ``extra`` may add more
    (comma-separated). Duplicates are dropped while keeping order.
    """
    origins = list(DEFAULT_CORS_ORIGINS)
    for origin in (extra or "").split(","):
        origin = origin.strip()
        if origin and origin not in origins:
            origins.append(origin)
    return ",".join(origins)


def cors_origins_from_env() -> str:
    """Build the allow-list from ``CORS_ORIGINS`` and ``CORS_ORIGIN`` on top of the defaults."""
    extras = [os.getenv("CORS_ORIGINS", ""), os.getenv("CORS_ORIGIN", "")]
    return build_cors_origins(",".join(e for e in extras if e.strip()))


def uses_memory_storage(database_url: str | None) -> bool:
    """Return ``True`` when no usable durable-store connection string is set."""
    if not database_url or not database_url.strip():
        return True
    return DATABASE_URL_PLACEHOLDER in database_url


class BaseConfig:
    """Base configuration shared across environments.

    Attributes
    ----------
    API_BASE_PREFIX: str
        Root path for registering API blueprints.
    DATABASE_URL: str
        Durable store connection string. Empty or placeholder values select
        the in-memory store.
    SQLALCHEMY_DATABASE_URI: str
        Same value, consumed by Flask-SQLAlchemy when the durable store is on.
    SQLALCHEMY_TRACK_MODIFICATIONS: bool
        Disabled to avoid extra overhead from the event system.
    SQLALCHEMY_ECHO: bool
        When ``True`` SQLAlchemy logs SQL statements for debugging.
    ADMIN_USER: str
        Username accepted by ``POST /api/admin/login``.
    ADMIN_PASSWORD: str
        Password accepted by ``POST /api/admin/login``.
    TOKEN_SECRET: str
        HMAC key for admin bearer tokens; falls back to ``ADMIN_PASSWORD``.
    JSON_SORT_KEYS: bool
        Keeps JSON output order stable when ``False``.
    PROPAGATE_EXCEPTIONS: bool
        Controls Flask error propagation.
    LOG_LEVEL: str
        Root logging verbosity (``INFO`` by default).
    CORS_ORIGINS: str
        Comma-separated allowed origins: the built-in hosts plus any from
        ``CORS_ORIGINS`` / ``CORS_ORIGIN``. A ``*`` entry allows every origin.
    PORT: int
        Listen port for ``python -m ozone_coin`` and gunicorn.
    DEBUG: bool
        Toggles Flask debug mode.
    TESTING: bool
        Enables Flask testing mode when ``True``.

    Notes
    -----
    Values are primarily sourced from environment variables, enabling
    configuration without code changes.
    """

    API_BASE_PREFIX = "/api"

    # Admin credentials / token signing
    ADMIN_USER = os.getenv("ADMIN_USER") or "admin2026"
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD") or "112212"
    TOKEN_SECRET = os.getenv("TOKEN_SECRET") or ADMIN_PASSWORD or "ozone-secret"

    # DB
    DATABASE_URL = os.getenv("DATABASE_URL", "")
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)

    # Flask & JSON
    JSON_SORT_KEYS = False
    PROPAGATE_EXCEPTIONS = False

    # Logging & CORS
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS = cors_origins_from_env()
    CORS_MAX_AGE = 600

    PORT = env_int("PORT", 3001)
    USE_PROXYFIX = env_bool("USE_PROXYFIX", True)

    DEBUG = False
    TESTING = False


class DevelopmentConfig(BaseConfig):
    """Configuration tailored for local development.

    Notes
    -----
    Enables debug mode by default and honors ``SQLALCHEMY_ECHO`` for verbose
    SQL logging when requested.
    """

    DEBUG = env_bool("FLASK_DEBUG", True)
    SQLALCHEMY_ECHO = env_bool("SQLALCHEMY_ECHO", False)


class TestingConfig(BaseConfig):
    """Configuration for automated test runs.

    Notes
    -----
    - Forces ``TESTING`` mode and disables debug logs.
    - Uses the in-memory store unless ``TEST_DATABASE_URL`` is set.
    - Pins admin credentials so tests never depend on the host environment.
    """

    TESTING = True
    DEBUG = False
    DATABASE_URL = os.getenv("TEST_DATABASE_URL", "")
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    ADMIN_USER = "admin"
    ADMIN_PASSWORD = "secret"
    TOKEN_SECRET = "test-token-secret"
    USE_PROXYFIX = False


class ProductionConfig(BaseConfig):
    """Configuration defaults for production deployments.

    Notes
    -----
    Keeps debug and SQL echoing disabled while relying on WSGI-level log
    configuration for noise control.
    """

    DEBUG = False
    SQLALCHEMY_ECHO = False
    PROPAGATE_EXCEPTIONS = False


CONFIG_MAP: Mapping[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}


def get_config() -> type[BaseConfig]:
    """Return the configuration class inferred from ``APP_ENV``.

    Returns
    -------
    type[BaseConfig]
        Class to pass to :meth:`flask.Config.from_object`.

    Notes
    -----
    Falls back to :class:`DevelopmentConfig` when ``APP_ENV`` is unset or
    unknown.
    """
    name = os.getenv(ENV_VAR, "development").strip().lower()
    return CONFIG_MAP.get(name, DevelopmentConfig)
