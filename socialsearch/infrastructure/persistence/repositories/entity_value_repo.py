"""Reads tag (metadata) and profile (annotation) values for one entity."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from socialsearch.infrastructure.persistence.models import Annotation, Metadata
from socialsearch.infrastructure.persistence.repositories.access import (
    AccessContext,
    access_predicate,
)


class EntityValueRepository:
    """Access-filtered name/value lookups used while annotating search results."""

    def __init__(self, db: Session, access: AccessContext | None = None) -> None:
        self.db = db
        self.access = access or AccessContext()

    def _values(self, model: Any, entity_guid: int, name: str) -> list[str]:
        stmt = (
            select(model.value)
            .where(
                model.entity_guid == entity_guid,
                model.name == name,
                access_predicate(model, self.access),
            )
            .order_by(model.id)
        )
        return list(self.db.scalars(stmt).all())

    def get_metadata_values(self, entity_guid: int, name: str) -> list[str]:
        """Return visible metadata values (e.g. tags) named name, oldest first."""
        return self._values(Metadata, entity_guid, name)

    def get_annotation_values(self, entity_guid: int, name: str) -> list[str]:
        """Return visible annotation values (e.g. profile:phone), oldest first."""
        return self._values(Annotation, entity_guid, name)
