"""Service interfaces (ports) used by the search layer."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from socialsearch.application.dtos.search import MatchResult, SearchParams


class Translator(Protocol):
    """Localization lookup used only for labels in matched-description strings."""

    def translate(self, key: str, default: str | None = None) -> str:
        """Return the localized string for key; default (or key) when missing."""


class ISearchMatcher(Protocol):
    """One search type: turns params into a MatchResult."""

    def search(self, params: "SearchParams") -> "MatchResult":
        """Count, then fetch and annotate when anything matched."""
