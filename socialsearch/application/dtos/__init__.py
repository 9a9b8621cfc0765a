"""Application DTOs (no dependency on ORM)."""

from socialsearch.application.dtos.search import (
    JoinClause,
    MatchResult,
    SearchConfig,
    SearchParams,
    VolatileAnnotations,
)

__all__ = [
    "JoinClause",
    "MatchResult",
    "SearchConfig",
    "SearchParams",
    "VolatileAnnotations",
]
