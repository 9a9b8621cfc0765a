"""Search use case: dispatch a search type to its matcher.

Entity types (object, group, user) are always available. Custom types
(e.g. tags) become addressable through SearchTypeRegistry hooks.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from socialsearch.core.constants import TAGS_SEARCH_TYPE
from socialsearch.domain.exceptions import UnknownSearchTypeException
from socialsearch.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from socialsearch.application.dtos.search import MatchResult, SearchParams
    from socialsearch.application.interfaces import ISearchMatcher

logger = get_logger(__name__)

CustomTypesHook = Callable[[list[str]], list[str]]


def register_tags_search_type(types: list[str]) -> list[str]:
    """Hook: add "tags" to the custom search types (never twice)."""
    if TAGS_SEARCH_TYPE in types:
        return types
    return [*types, TAGS_SEARCH_TYPE]


class SearchTypeRegistry:
    """Ordered hooks that fold the list of custom search-type names."""

    def __init__(self) -> None:
        self._hooks: list[CustomTypesHook] = []

    def register(self, hook: CustomTypesHook) -> None:
        if hook not in self._hooks:
            self._hooks.append(hook)

    def get_custom_types(self) -> list[str]:
        """Run every hook over the accumulated list, in registration order."""
        types: list[str] = []
        for hook in self._hooks:
            types = hook(list(types))
        return types


class SearchService:
    """Search across entity types and registered custom types."""

    def __init__(
        self,
        entity_matchers: Mapping[str, ISearchMatcher],
        custom_matchers: Mapping[str, ISearchMatcher],
        registry: SearchTypeRegistry,
    ) -> None:
        self.entity_matchers = dict(entity_matchers)
        self.custom_matchers = dict(custom_matchers)
        self.registry = registry

    def available_types(self) -> list[str]:
        """Entity types followed by registered custom types that have a matcher."""
        custom = [t for t in self.registry.get_custom_types() if t in self.custom_matchers]
        return [*self.entity_matchers, *custom]

    def search(self, search_type: str, params: SearchParams) -> MatchResult:
        """Run one search type.

        Raises:
            UnknownSearchTypeException: If search_type is not available.
        """
        if search_type in self.entity_matchers:
            return self.entity_matchers[search_type].search(params)
        if search_type in self.registry.get_custom_types() and search_type in self.custom_matchers:
            return self.custom_matchers[search_type].search(params)
        raise UnknownSearchTypeException(search_type, self.available_types())

    def search_all(self, params: SearchParams) -> dict[str, MatchResult]:
        """Run every available search type with the same params."""
        results: dict[str, MatchResult] = {}
        for search_type in self.available_types():
            results[search_type] = self.search(search_type, params)
        logger.debug(
            "search_all %r: %s",
            params.query,
            {t: r.count for t, r in results.items()},
        )
        return results
