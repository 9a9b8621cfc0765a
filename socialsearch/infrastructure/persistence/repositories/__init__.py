"""Persistence repositories. Re-exports for dependency injection."""

from socialsearch.infrastructure.persistence.repositories.access import (
    AccessContext,
    access_predicate,
)
from socialsearch.infrastructure.persistence.repositories.entity_query_executor import (
    SqlEntityQueryExecutor,
)
from socialsearch.infrastructure.persistence.repositories.entity_value_repo import (
    EntityValueRepository,
)

__all__ = [
    "AccessContext",
    "EntityValueRepository",
    "SqlEntityQueryExecutor",
    "access_predicate",
]
