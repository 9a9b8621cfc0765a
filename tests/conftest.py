"""Pytest configuration and fixtures for socialsearch.

DB-dependent fixtures use an in-memory SQLite database created from the
ORM metadata; each test gets a fresh schema.
"""

from collections.abc import Iterator
from datetime import datetime, timezone

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from socialsearch.application.dtos.search import SearchConfig
from socialsearch.core.constants import ACCESS_PUBLIC
from socialsearch.domain.enums import EntityType
from socialsearch.infrastructure.persistence.database import Base
from socialsearch.infrastructure.persistence.models import (
    Annotation,
    Entity,
    GroupEntity,
    Metadata,
    ObjectEntity,
    SiteEntity,
    UserEntity,
)


@pytest.fixture
def db_session() -> Iterator[Session]:
    """Session bound to a fresh in-memory SQLite database."""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)
    with factory() as session:
        yield session
    engine.dispose()


@pytest.fixture
def search_config() -> SearchConfig:
    """Config with two profile fields and two registered tag names."""
    return SearchConfig(
        profile_fields={"phone": "Phone", "location": "Location"},
        tag_names=("tags", "interests"),
    )


class EntityFactory:
    """Seeds entities with their type rows, tags, and profile values."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self._clock = 0

    def _entity(self, entity_type: EntityType, **kwargs) -> Entity:
        self._clock += 1
        stamp = kwargs.pop(
            "time_created", datetime(2025, 1, 1, 0, 0, self._clock, tzinfo=timezone.utc)
        )
        entity = Entity(
            type=entity_type.value,
            subtype=kwargs.pop("subtype", None),
            owner_guid=kwargs.pop("owner_guid", None),
            container_guid=kwargs.pop("container_guid", None),
            access_id=kwargs.pop("access_id", ACCESS_PUBLIC),
            enabled=kwargs.pop("enabled", True),
            time_created=stamp,
            time_updated=stamp,
        )
        self.db.add(entity)
        self.db.flush()
        return entity

    def _finish(self, entity: Entity, tags: dict[str, list[str]] | None) -> Entity:
        for name, values in (tags or {}).items():
            for value in values:
                self.db.add(Metadata(entity_guid=entity.guid, name=name, value=value))
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def object(
        self,
        title: str,
        description: str = "",
        tags: dict[str, list[str]] | None = None,
        **kwargs,
    ) -> Entity:
        entity = self._entity(EntityType.OBJECT, **kwargs)
        self.db.add(ObjectEntity(guid=entity.guid, title=title, description=description))
        return self._finish(entity, tags)

    def group(
        self,
        name: str,
        description: str = "",
        tags: dict[str, list[str]] | None = None,
        **kwargs,
    ) -> Entity:
        entity = self._entity(EntityType.GROUP, **kwargs)
        self.db.add(GroupEntity(guid=entity.guid, name=name, description=description))
        return self._finish(entity, tags)

    def user(
        self,
        username: str,
        name: str,
        profile: dict[str, list[str]] | None = None,
        tags: dict[str, list[str]] | None = None,
        **kwargs,
    ) -> Entity:
        entity = self._entity(EntityType.USER, **kwargs)
        self.db.add(UserEntity(guid=entity.guid, username=username, name=name))
        for shortname, values in (profile or {}).items():
            for value in values:
                self.db.add(
                    Annotation(
                        entity_guid=entity.guid,
                        name=f"profile:{shortname}",
                        value=value,
                        owner_guid=entity.guid,
                    )
                )
        return self._finish(entity, tags)

    def site(
        self,
        name: str,
        description: str = "",
        tags: dict[str, list[str]] | None = None,
        **kwargs,
    ) -> Entity:
        entity = self._entity(EntityType.SITE, **kwargs)
        self.db.add(SiteEntity(guid=entity.guid, name=name, description=description))
        return self._finish(entity, tags)


@pytest.fixture
def factory(db_session: Session) -> EntityFactory:
    """Entity seeding helper bound to db_session."""
    return EntityFactory(db_session)
