"""Entity ORM models: the shared entities table and the per-type tables.

Each entity has one row in entities and one row in the table of its type
(objects_entity, groups_entity, users_entity, sites_entity). Type tables
declare title_column, the column used for alphabetical ordering and as
the display title.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from socialsearch.domain.enums import EntityType
from socialsearch.infrastructure.persistence.database import Base
from socialsearch.infrastructure.persistence.models.mixins import (
    OwnedAccessMixin,
    TimestampMixin,
    TypeTableMixin,
)


class Entity(OwnedAccessMixin, TimestampMixin, Base):
    """Entity row. Table: entities. Index: (type, subtype)."""

    __tablename__ = "entities"

    guid: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(String(16), nullable=False, index=True)
    subtype: Mapped[str | None] = mapped_column(String(64), nullable=True)
    container_guid: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    owner: Mapped[Entity | None] = relationship(
        "Entity", remote_side="Entity.guid", foreign_keys="Entity.owner_guid"
    )
    object_row: Mapped[ObjectEntity | None] = relationship(
        back_populates="entity", lazy="selectin", uselist=False
    )
    group_row: Mapped[GroupEntity | None] = relationship(
        back_populates="entity", lazy="selectin", uselist=False
    )
    user_row: Mapped[UserEntity | None] = relationship(
        back_populates="entity", lazy="selectin", uselist=False
    )
    site_row: Mapped[SiteEntity | None] = relationship(
        back_populates="entity", lazy="selectin", uselist=False
    )

    __table_args__ = (Index("ix_entities_type_subtype", "type", "subtype"),)

    def _type_row(self) -> ObjectEntity | GroupEntity | UserEntity | SiteEntity | None:
        return {
            EntityType.OBJECT.value: self.object_row,
            EntityType.GROUP.value: self.group_row,
            EntityType.USER.value: self.user_row,
            EntityType.SITE.value: self.site_row,
        }.get(self.type)

    @property
    def title(self) -> str | None:
        return self.object_row.title if self.object_row else None

    @property
    def name(self) -> str | None:
        row = self._type_row()
        return getattr(row, "name", None)

    @property
    def description(self) -> str | None:
        row = self._type_row()
        return getattr(row, "description", None)

    @property
    def username(self) -> str | None:
        return self.user_row.username if self.user_row else None

    def __repr__(self) -> str:
        return f"<Entity guid={self.guid} type={self.type} subtype={self.subtype}>"


class ObjectEntity(TypeTableMixin, Base):
    """Generic content object. Table: objects_entity."""

    __tablename__ = "objects_entity"
    title_column = "title"

    title: Mapped[str] = mapped_column(String(400), nullable=False, default="")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    entity: Mapped[Entity] = relationship(back_populates="object_row")


class GroupEntity(TypeTableMixin, Base):
    """Group. Table: groups_entity."""

    __tablename__ = "groups_entity"
    title_column = "name"

    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    entity: Mapped[Entity] = relationship(back_populates="group_row")


class UserEntity(TypeTableMixin, Base):
    """User account. Table: users_entity. Unique username."""

    __tablename__ = "users_entity"
    title_column = "name"

    username: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    entity: Mapped[Entity] = relationship(back_populates="user_row")

    @property
    def description(self) -> None:
        return None


class SiteEntity(TypeTableMixin, Base):
    """Site. Table: sites_entity."""

    __tablename__ = "sites_entity"
    title_column = "name"

    name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    url: Mapped[str] = mapped_column(String(255), nullable=False, default="")

    entity: Mapped[Entity] = relationship(back_populates="site_row")
