"""Reusable SQLAlchemy mixins shared by domain models (typed 2.0)."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from ozone_coin.services._shared.policies.common import new_id


class TimestampMixin:
    """Provide a ``created_at`` timestamp column.

    Attributes
    ----------
    created_at:
        Timezone-aware insert time (microsecond precision from Python, the
        database clock as fallback). Listings use it as their stable order.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )


class PKMixin:
    """Expose an opaque string primary key column named ``id``.

    Attributes
    ----------
    id:
        32-char lowercase hex (UUID4) generated client-side on insert.
    """

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)


class ReprMixin:
    """Provide a concise ``__repr__`` including the class name and id."""

    def __repr__(self) -> str:
        """Return a short and useful string representation.

        :returns: Debug-friendly ``<ClassName id=...>``.
        :rtype: str
        """
        cls = self.__class__.__name__
        key = getattr(self, "id", None)
        return f"<{cls} id={key}>"
