"""StudentRecord model."""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Float, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from ozone_coin.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin


class StudentRecord(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Persisted student with a coin balance.

    Fields
    ------
    class_id:
        Owning class; must exist when the row is inserted.
    coins:
        Balance changed only through an atomic ``coins = coins + :amount``
        update. Negative balances are allowed.
    """

    __tablename__ = "students"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    coins: Mapped[float] = mapped_column(Float, nullable=False, default=0, server_default="0")
    class_id: Mapped[str] = mapped_column(ForeignKey("classes.id"), nullable=False)

    __table_args__ = (
        CheckConstraint("length(name) > 0", name="name_not_empty"),
        Index("ix_students_class_id_coins", "class_id", "coins"),
    )
