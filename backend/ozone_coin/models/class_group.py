"""ClassGroupRecord model."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from ozone_coin.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin


class ClassGroupRecord(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Persisted class (group of students).

    Students reference it through ``students.class_id`` and are removed by
    ``SQLAlchemyClassStore.delete_class`` before the class row.
    """

    __tablename__ = "classes"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
