"""SQLAlchemy ORM mixins – AuditMixin, SoftDeleteMixin."""
from __future__ import annotations

import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, String, false
from sqlalchemy.orm import Mapped, mapped_column


class AuditMixin:
    """Adds created/updated timestamps and user ids.

    Public field names are ``CreatedDate``, ``UpdatedDate``, ``CreatedUserId``
    and ``UpdatedUserId``, so they can be filtered with e.g.
    ``date_from_CreatedDate`` or ``not_null_UpdatedDate``. Values are naive
    datetimes and are set by the persistence layer.
    """

    created_date: Mapped[datetime.datetime | None] = mapped_column(DateTime, nullable=True, default=None)
    updated_date: Mapped[datetime.datetime | None] = mapped_column(DateTime, nullable=True, default=None)
    created_user_id: Mapped[str | None] = mapped_column(String(450), nullable=True, default=None)
    updated_user_id: Mapped[str | None] = mapped_column(String(450), nullable=True, default=None)


class SoftDeleteMixin:
    """Adds an ``is_deleted`` flag (public name ``IsDeleted``).

    Searches hide rows whose flag is set::

        class Doctor(SoftDeleteMixin, Base):
            __tablename__ = "doctors"
            id: Mapped[int] = mapped_column(primary_key=True)
    """

    is_deleted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
        index=True,
    )

    @classmethod
    def not_deleted_filter(cls) -> Any:
        """Return a column expression ``<cls>.is_deleted = false``."""
        return cls.is_deleted == false()  # type: ignore[attr-defined]

    def soft_delete(self) -> None:
        self.is_deleted = True


__all__ = ["AuditMixin", "SoftDeleteMixin"]
