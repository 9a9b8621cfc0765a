"""Search query assembly, ordering, matchers, and service wiring."""

from socialsearch.infrastructure.persistence.search.factory import create_search_service
from socialsearch.infrastructure.persistence.search.matchers import (
    EntityMatcher,
    GroupMatcher,
    ObjectMatcher,
    TagMatcher,
    UserMatcher,
)
from socialsearch.infrastructure.persistence.search.order_by import resolve_order_by
from socialsearch.infrastructure.persistence.search.predicates import build_where_sql

__all__ = [
    "EntityMatcher",
    "GroupMatcher",
    "ObjectMatcher",
    "TagMatcher",
    "UserMatcher",
    "build_where_sql",
    "create_search_service",
    "resolve_order_by",
]
