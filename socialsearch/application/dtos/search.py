"""DTOs for search requests, results, and injected search configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, NamedTuple

from socialsearch.core.constants import (
    SEARCH_MATCHED_DESCRIPTION,
    SEARCH_MATCHED_EXTRA,
    SEARCH_MATCHED_TITLE,
)

if TYPE_CHECKING:
    from socialsearch.core.config import Settings


class JoinClause(NamedTuple):
    """One JOIN in an entity query: target table/alias and ON expression."""

    target: Any
    onclause: Any
    isouter: bool = False


@dataclass
class SearchParams:
    """Caller-supplied search request, also the query description handed to the executor.

    Matchers work on a copy (see normalized()); the caller's instance is
    never mutated.
    """

    query: str = ""
    joins: list[JoinClause] = field(default_factory=list)
    wheres: list[Any] = field(default_factory=list)
    sort: str | None = None
    order: str | None = None
    order_by: tuple[Any, ...] | None = None
    count: bool = False
    preload_owners: bool = False
    types: list[str] | None = None
    subtypes: list[str] | None = None
    owner_guids: list[int] | None = None
    container_guids: list[int] | None = None
    limit: int | None = None
    offset: int = 0
    # Tag searches only: requested tag metadata names (str or list)
    tag_names: str | list[str] | None = None

    def normalized(self) -> SearchParams:
        """Return a copy with joins/wheres as fresh lists (None becomes empty)."""
        return replace(
            self,
            joins=list(self.joins or []),
            wheres=list(self.wheres or []),
        )


class VolatileAnnotations:
    """Request-scoped side channel: per-entity match explanations keyed by guid.

    Never persisted and never stored on the entity itself.
    """

    def __init__(self) -> None:
        self._data: dict[int, dict[str, str]] = {}

    def set(self, entity: Any, key: str, value: str) -> None:
        self._data.setdefault(entity.guid, {})[key] = value

    def get(self, entity: Any, key: str, default: str | None = None) -> str | None:
        return self._data.get(entity.guid, {}).get(key, default)

    def for_entity(self, entity: Any) -> dict[str, str]:
        """Return a copy of all annotations for entity."""
        return dict(self._data.get(entity.guid, {}))

    def __contains__(self, entity: Any) -> bool:
        return entity.guid in self._data

    def __len__(self) -> int:
        return len(self._data)


@dataclass
class MatchResult:
    """Matcher output. count is authoritative even when entities is empty."""

    entities: list[Any] = field(default_factory=list)
    count: int = 0
    annotations: VolatileAnnotations = field(default_factory=VolatileAnnotations)

    @classmethod
    def empty(cls) -> MatchResult:
        return cls(entities=[], count=0)

    def matched_title(self, entity: Any) -> str | None:
        return self.annotations.get(entity, SEARCH_MATCHED_TITLE)

    def matched_description(self, entity: Any) -> str | None:
        return self.annotations.get(entity, SEARCH_MATCHED_DESCRIPTION)

    def matched_extra(self, entity: Any) -> str | None:
        return self.annotations.get(entity, SEARCH_MATCHED_EXTRA)


@dataclass(frozen=True)
class SearchConfig:
    """Read-only configuration injected into every matcher.

    profile_fields: ordered shortname -> label mapping of searchable profile fields.
    tag_names: registered tag metadata names; only these reach a predicate.
    """

    profile_fields: Mapping[str, str] = field(default_factory=dict)
    tag_names: tuple[str, ...] = ()
    context_radius: int = 30
    max_length: int = 300
    matched_text_max_length: int = 297

    def __post_init__(self) -> None:
        object.__setattr__(self, "profile_fields", MappingProxyType(dict(self.profile_fields)))
        object.__setattr__(self, "tag_names", tuple(dict.fromkeys(self.tag_names)))

    @classmethod
    def from_settings(cls, settings: Settings) -> SearchConfig:
        """Build config from Settings (profile fields, tag registry, highlight policy)."""
        return cls(
            profile_fields=settings.profile_fields,
            tag_names=tuple(settings.tag_names),
            context_radius=settings.highlight_context_radius,
            max_length=settings.highlight_max_length,
            matched_text_max_length=settings.matched_text_max_length,
        )
