"""Flask CLI commands for inspecting and preparing the storage backend."""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from ozone_coin.core.extensions import db, get_class_store

LOGGER = logging.getLogger(__name__)


@click.group("store")
def store_cli() -> None:
    """Storage backend commands."""


@store_cli.command("init")
@with_appcontext
def init_command() -> None:
    """Create the durable-store tables if they do not exist."""
    store = get_class_store()
    if store.name == "memory":
        raise click.UsageError("DATABASE_URL is not configured; the in-memory store needs no schema.")
    LOGGER.info("Creating database schema...")
    try:
        db.create_all()
    except SQLAlchemyError as exc:
        raise click.ClickException(f"Schema creation failed: {exc}") from exc
    click.echo("Schema ready.")


@store_cli.command("info")
@with_appcontext
def info_command() -> None:
    """Print the active backend, whether it answers, and how much it holds."""
    store = get_class_store()
    reachable = store.ping()
    classes = store.list_classes()
    students = sum(len(store.list_students_by_class(group.id)) for group in classes)
    click.echo(f"backend:   {store.name}")
    click.echo(f"reachable: {'yes' if reachable else 'no'}")
    click.echo(f"classes:   {len(classes)}")
    click.echo(f"students:  {students}")
