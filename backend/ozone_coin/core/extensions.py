"""Global Flask extension instances and initialization helpers."""

from __future__ import annotations

import logging

from flask import Flask, current_app
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import MetaData

from ozone_coin.core.config import uses_memory_storage
from ozone_coin.services._shared.ports import ClassStore, InMemoryClassStore

log = logging.getLogger(__name__)

# Global naming convention for all constraints
convention = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

# Global singletons (import-safe)
db: SQLAlchemy = SQLAlchemy(session_options={"autoflush": False}, metadata=metadata)

CLASS_STORE_KEY = "class_store"


def init_app(app: Flask) -> None:
    """Pick the storage backend and initialize SQLAlchemy when it is needed.

    Parameters
    ----------
    app: flask.Flask
        Application receiving the store under ``app.extensions["class_store"]``.

    Notes
    -----
    The choice is made once here. An empty ``DATABASE_URL`` or one still
    holding the ``USER:PASSWORD`` placeholder selects the in-memory store;
    anything else binds Flask-SQLAlchemy and the durable store. No connection
    is opened at this point.
    """
    store: ClassStore
    if uses_memory_storage(app.config.get("DATABASE_URL")):
        store = InMemoryClassStore()
    else:
        app.config["SQLALCHEMY_DATABASE_URI"] = app.config["DATABASE_URL"].strip()
        db.init_app(app)

        # Ensure models are imported so metadata is complete before create_all
        from ozone_coin import models as _models  # noqa: F401
        from ozone_coin.infra.sqlalchemy.sqlalchemy_class_store import SQLAlchemyClassStore

        store = SQLAlchemyClassStore(db)

    app.extensions[CLASS_STORE_KEY] = store
    log.info("storage.selected", extra={"backend": store.name})


def get_class_store() -> ClassStore:
    """Return the store bound to the current application."""
    store = current_app.extensions.get(CLASS_STORE_KEY)
    if store is None:
        raise RuntimeError("Class store is not initialized. Call init_app() first.")
    return store
