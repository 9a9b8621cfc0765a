"""SQLAlchemy mixins for common model patterns (DRY).

Provides: TimestampMixin, OwnedAccessMixin, and TypeTableMixin for the
per-type tables that share the entity guid as primary key.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from socialsearch.core.constants import ACCESS_PUBLIC


class TimestampMixin:
    """Mixin for time_created and time_updated (server defaults, timezone-aware)."""

    @declared_attr
    def time_created(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def time_updated(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class OwnedAccessMixin:
    """Mixin for rows subject to access control: owner_guid and access_id."""

    @declared_attr
    def owner_guid(cls) -> Mapped[int | None]:
        return mapped_column(
            Integer,
            ForeignKey("entities.guid", ondelete="SET NULL"),
            nullable=True,
            index=True,
        )

    @declared_attr
    def access_id(cls) -> Mapped[int]:
        return mapped_column(Integer, nullable=False, default=ACCESS_PUBLIC)


class TypeTableMixin:
    """Mixin for type tables keyed by the entity guid (CASCADE delete)."""

    @declared_attr
    def guid(cls) -> Mapped[int]:
        return mapped_column(
            Integer,
            ForeignKey("entities.guid", ondelete="CASCADE"),
            primary_key=True,
        )
