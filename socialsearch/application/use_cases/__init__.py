"""Use cases: search dispatch and the custom search-type registry."""

from socialsearch.application.use_cases.search import (
    SearchService,
    SearchTypeRegistry,
    register_tags_search_type,
)

__all__ = ["SearchService", "SearchTypeRegistry", "register_tags_search_type"]
