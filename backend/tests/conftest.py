"""Pytest fixtures building isolated applications for each storage backend.

Every test gets a fresh application: the in-memory backend starts empty, and
the durable backend runs against a private in-memory SQLite database whose
schema is created lazily by the store itself.
"""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest
from flask import Flask
from ozone_coin.core.config import TestingConfig
from ozone_coin.core.extensions import db as _db
from ozone_coin.core.extensions import get_class_store
from ozone_coin.factory import create_app
from ozone_coin.services._shared.ports import ClassStore

from tests.helpers.auth import bearer, expired_admin_token, issue_admin_token

BACKENDS = ("memory", "sqlalchemy")


class MemoryTestConfig(TestingConfig):
    """Testing configuration forcing the in-memory store."""

    DATABASE_URL = ""
    SQLALCHEMY_DATABASE_URI = ""


class SQLiteTestConfig(TestingConfig):
    """Testing configuration using the durable store on in-memory SQLite."""

    DATABASE_URL = "sqlite://"
    SQLALCHEMY_DATABASE_URI = "sqlite://"


CONFIGS: dict[str, type[TestingConfig]] = {
    "memory": MemoryTestConfig,
    "sqlalchemy": SQLiteTestConfig,
}


def _build_app(backend: str) -> Flask:
    application = create_app(CONFIGS[backend], instance_relative_config=False)
    application.logger.setLevel("WARNING")
    return application


@pytest.fixture(params=BACKENDS)
def app(request: pytest.FixtureRequest) -> Generator[Flask, None, None]:
    """Application for each backend; tests using it run once per backend."""

    application = _build_app(request.param)
    with application.app_context():
        yield application
        if request.param == "sqlalchemy":
            _db.session.remove()
            _db.drop_all()


@pytest.fixture()
def memory_app() -> Generator[Flask, None, None]:
    """Application bound to the in-memory store only."""

    application = _build_app("memory")
    with application.app_context():
        yield application


@pytest.fixture()
def sql_app() -> Generator[Flask, None, None]:
    """Application bound to the SQLAlchemy store only."""

    application = _build_app("sqlalchemy")
    with application.app_context():
        yield application
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def store(app: Flask) -> ClassStore:
    """The ``ClassStore`` selected by ``app`` (parametrized over backends)."""

    return get_class_store()


@pytest.fixture()
def sql_store(sql_app: Flask) -> ClassStore:
    """The durable store, with its schema already created."""

    store = get_class_store()
    store.list_classes()
    return store


@pytest.fixture()
def client(app: Flask) -> Any:
    """Return a Flask test client."""

    return app.test_client()


@pytest.fixture()
def admin_token(app: Flask) -> str:
    """A valid admin bearer token for ``app``."""

    return issue_admin_token(app)


@pytest.fixture()
def auth_header(admin_token: str) -> dict[str, str]:
    """Authorization header for privileged requests."""

    return bearer(admin_token)


@pytest.fixture()
def expired_auth_header(app: Flask) -> dict[str, str]:
    """Authorization header carrying an already expired token."""

    return bearer(expired_admin_token(app))


@pytest.fixture()
def freeze_time():
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """

    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None) -> Any:
        return _freeze_time(target or "2024-01-01")

    return _factory


# -- Hook up Factory Boy to the durable store session ---------------------------
@pytest.fixture()
def factories(sql_store: ClassStore) -> Generator[None, None, None]:
    """Wire Factory Boy's session helper to the SQLAlchemy session."""

    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(_db.session)
    yield
    SQLAlchemySession.set(None)
