"""SQL entity query executor: turns SearchParams into a count or an entity list."""

from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, Select, distinct, func, select
from sqlalchemy.orm import Session, selectinload

from socialsearch.application.dtos.search import SearchParams
from socialsearch.infrastructure.persistence.models import Entity
from socialsearch.infrastructure.persistence.repositories.access import (
    AccessContext,
    access_predicate,
)
from socialsearch.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class SqlEntityQueryExecutor:
    """Executes entity queries against the entities table and its joins.

    Applies enabled and access filtering on the entities table itself;
    joined tables that need access filtering get it from access_where().
    Counts are distinct entity guids and fetches are SELECT DISTINCT, so
    one-to-many joins (metadata, annotations) never duplicate entities.
    """

    def __init__(self, db: Session, access: AccessContext | None = None) -> None:
        self.db = db
        self.access = access or AccessContext()

    def access_where(self, table: Any) -> ColumnElement[bool]:
        """Access predicate for a joined table with access_id/owner_guid."""
        return access_predicate(table, self.access)

    def _filters(self, params: SearchParams) -> list[Any]:
        filters: list[Any] = [Entity.enabled.is_(True), self.access_where(Entity)]
        if params.types:
            filters.append(Entity.type.in_(params.types))
        if params.subtypes:
            filters.append(Entity.subtype.in_(params.subtypes))
        if params.owner_guids:
            filters.append(Entity.owner_guid.in_(params.owner_guids))
        if params.container_guids:
            filters.append(Entity.container_guid.in_(params.container_guids))
        filters.extend(params.wheres)
        return filters

    def _with_joins(self, stmt: Select[Any], params: SearchParams) -> Select[Any]:
        for join in params.joins:
            stmt = stmt.join(join.target, join.onclause, isouter=join.isouter)
        return stmt

    def execute(self, params: SearchParams) -> int | list[Entity]:
        """Return the distinct match count when params.count, else the ordered entities."""
        if params.count:
            stmt = select(func.count(distinct(Entity.guid))).select_from(Entity)
            stmt = self._with_joins(stmt, params).where(*self._filters(params))
            return int(self.db.execute(stmt).scalar_one())

        stmt = select(Entity).distinct()
        stmt = self._with_joins(stmt, params).where(*self._filters(params))
        stmt = stmt.order_by(*(params.order_by or (Entity.guid.desc(),)))
        if params.limit is not None:
            stmt = stmt.limit(params.limit)
        if params.offset:
            stmt = stmt.offset(params.offset)
        if params.preload_owners:
            stmt = stmt.options(selectinload(Entity.owner))
        entities = list(self.db.scalars(stmt).all())
        logger.debug("Fetched %d entities (limit=%s offset=%s)", len(entities), params.limit, params.offset)
        return entities
