"""Repository interfaces (ports) for the search layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from socialsearch.application.dtos.search import SearchParams


class IQueryExecutor(Protocol):
    """Entity query executor. Applies access control internally."""

    def execute(self, params: SearchParams) -> int | list[Any]:
        """Return the distinct match count when params.count, else the ordered entities."""

    def access_where(self, table: Any) -> Any:
        """Return the access predicate for a joined table with access_id/owner_guid."""


class IEntityValueReader(Protocol):
    """Reads per-entity secondary values (tags, profile annotations) after fetch."""

    def get_metadata_values(self, entity_guid: int, name: str) -> list[str]:
        """Return visible metadata values named name on the entity, oldest first."""

    def get_annotation_values(self, entity_guid: int, name: str) -> list[str]:
        """Return visible annotation values named name on the entity, oldest first."""
