"""Name/value rows attached to entities: metadata (tags) and annotations (profile values)."""

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from socialsearch.infrastructure.persistence.database import Base
from socialsearch.infrastructure.persistence.models.mixins import (
    OwnedAccessMixin,
    TimestampMixin,
)


class Metadata(OwnedAccessMixin, TimestampMixin, Base):
    """Metadata row (e.g. one tag value). Table: metadata. Multiple rows per name allowed."""

    __tablename__ = "metadata"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    entity_guid: Mapped[int] = mapped_column(
        Integer, ForeignKey("entities.guid", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        Index("ix_metadata_entity_name", "entity_guid", "name"),
        Index("ix_metadata_name", "name"),
    )


class Annotation(OwnedAccessMixin, TimestampMixin, Base):
    """Annotation row (e.g. profile:phone). Table: annotations."""

    __tablename__ = "annotations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    entity_guid: Mapped[int] = mapped_column(
        Integer, ForeignKey("entities.guid", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (
        Index("ix_annotations_entity_name", "entity_guid", "name"),
        Index("ix_annotations_name", "name"),
    )
