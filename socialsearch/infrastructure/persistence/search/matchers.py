"""Entity-type matchers: objects, groups, users, and tags.

Every matcher runs the same two-phase protocol on a copy of the caller's
params: add its joins and predicates, count, stop when nothing matched,
resolve ordering, fetch, and attach volatile match explanations to each
returned entity. Entities are never fetched when the count is zero.
"""

from __future__ import annotations

import html
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from sqlalchemy import and_, or_
from sqlalchemy.orm import aliased

from socialsearch.application.dtos.search import (
    JoinClause,
    MatchResult,
    SearchConfig,
    SearchParams,
    VolatileAnnotations,
)
from socialsearch.application.interfaces import (
    IEntityValueReader,
    IQueryExecutor,
    Translator,
)
from socialsearch.application.services.highlight import extract_highlight
from socialsearch.core.constants import (
    PROFILE_ANNOTATION_PREFIX,
    PROFILE_LABEL_PREFIX,
    SEARCH_MATCHED_DESCRIPTION,
    SEARCH_MATCHED_EXTRA,
    SEARCH_MATCHED_TITLE,
    TAG_LABEL_PREFIX,
    TAGS_SEARCH_TYPE,
)
from socialsearch.domain.enums import EntityType
from socialsearch.domain.exceptions import ValidationException
from socialsearch.infrastructure.persistence.models import (
    Annotation,
    Entity,
    GroupEntity,
    Metadata,
    ObjectEntity,
    UserEntity,
)
from socialsearch.infrastructure.persistence.search.order_by import resolve_order_by
from socialsearch.infrastructure.persistence.search.predicates import (
    build_where_sql,
    name_in_value_contains,
    name_in_value_equals,
    normalize_query,
)
from socialsearch.shared.telemetry.logging import get_logger
from socialsearch.shared.utils.sanitization import strip_tags, truncate

logger = get_logger(__name__)

oe = aliased(ObjectEntity, name="oe")
ge = aliased(GroupEntity, name="ge")
ue = aliased(UserEntity, name="ue")
an = aliased(Annotation, name="an")
md = aliased(Metadata, name="md")


@dataclass(frozen=True)
class MatchContext:
    """Per-call state produced while preparing the query.

    type_alias: type table used for alpha ordering (None for tags).
    tag_names: validated tag names searched by the tag matcher.
    """

    type_alias: Any | None = None
    tag_names: tuple[str, ...] = ()


class EntityMatcher:
    """Two-phase count-then-fetch matcher. Subclasses add predicates and annotations."""

    search_type: str = ""

    def __init__(
        self,
        executor: IQueryExecutor,
        values: IEntityValueReader,
        config: SearchConfig,
        translator: Translator,
    ) -> None:
        self.executor = executor
        self.values = values
        self.config = config
        self.translator = translator

    def _prepare(self, params: SearchParams) -> MatchContext | None:
        """Add joins and predicates to params. Return None to skip querying."""
        raise NotImplementedError

    def _annotate(
        self,
        entity: Any,
        params: SearchParams,
        context: MatchContext,
        annotations: VolatileAnnotations,
    ) -> None:
        raise NotImplementedError

    def _highlight(self, text: str | None, query: str, multi_match: bool = False) -> str:
        return extract_highlight(
            text,
            query,
            context_radius=self.config.context_radius,
            max_length=self.config.max_length,
            multi_match=multi_match,
        )

    def _join_type_table(self, params: SearchParams, type_alias: Any, entity_type: EntityType) -> None:
        params.joins.insert(0, JoinClause(type_alias, Entity.guid == type_alias.guid))
        params.types = [entity_type.value]

    def search(self, params: SearchParams) -> MatchResult:
        """Run the search for this entity kind.

        Args:
            params: Caller parameters; not mutated.

        Returns:
            MatchResult with entities, authoritative count, and volatile annotations.

        Raises:
            ValidationException: If limit or offset is negative.
        """
        if params.limit is not None and params.limit < 0:
            raise ValidationException("limit must be >= 0", field="limit")
        if params.offset < 0:
            raise ValidationException("offset must be >= 0", field="offset")
        params = params.normalized()
        context = self._prepare(params)
        if context is None:
            return MatchResult.empty()

        params.count = True
        count = int(self.executor.execute(params) or 0)
        if not count:
            logger.debug("%s search for %r: no matches", self.search_type, params.query)
            return MatchResult(entities=[], count=0)

        params.count = False
        if params.sort is not None or params.order_by is None:
            params.order_by = resolve_order_by(
                Entity, context.type_alias, params.sort, params.order
            )
        entities = list(self.executor.execute(params))
        logger.debug(
            "%s search for %r: count=%d fetched=%d",
            self.search_type,
            params.query,
            count,
            len(entities),
        )

        annotations = VolatileAnnotations()
        for entity in entities:
            self._annotate(entity, params, context, annotations)
        return MatchResult(entities=entities, count=count, annotations=annotations)


class ObjectMatcher(EntityMatcher):
    """Content objects matched on title and description."""

    search_type = EntityType.OBJECT.value
    fields = ("title", "description")

    def _prepare(self, params: SearchParams) -> MatchContext:
        self._join_type_table(params, oe, EntityType.OBJECT)
        params.wheres.append(build_where_sql(oe, self.fields, params))
        params.preload_owners = True
        return MatchContext(type_alias=oe)

    def _annotate(self, entity, params, context, annotations) -> None:
        annotations.set(entity, SEARCH_MATCHED_TITLE, self._highlight(entity.title, params.query))
        annotations.set(
            entity, SEARCH_MATCHED_DESCRIPTION, self._highlight(entity.description, params.query)
        )


class GroupMatcher(EntityMatcher):
    """Groups matched on name and description."""

    search_type = EntityType.GROUP.value
    fields = ("name", "description")

    def _prepare(self, params: SearchParams) -> MatchContext:
        self._join_type_table(params, ge, EntityType.GROUP)
        params.wheres.append(build_where_sql(ge, self.fields, params))
        return MatchContext(type_alias=ge)

    def _annotate(self, entity, params, context, annotations) -> None:
        annotations.set(entity, SEARCH_MATCHED_TITLE, self._highlight(entity.name, params.query))
        annotations.set(
            entity, SEARCH_MATCHED_DESCRIPTION, self._highlight(entity.description, params.query)
        )


class UserMatcher(EntityMatcher):
    """Users matched on username, display name, and configured profile fields.

    With profile fields configured, annotations are outer-joined so users
    without any profile values still match on username or name.
    """

    search_type = EntityType.USER.value
    fields = ("username", "name")

    def _profile_annotation_names(self) -> list[str]:
        return [PROFILE_ANNOTATION_PREFIX + shortname for shortname in self.config.profile_fields]

    def _prepare(self, params: SearchParams) -> MatchContext:
        self._join_type_table(params, ue, EntityType.USER)
        where = build_where_sql(ue, self.fields, params)

        names = self._profile_annotation_names()
        if names:
            params.joins.append(
                JoinClause(an, Entity.guid == an.entity_guid, isouter=True)
            )
            profile_where = and_(
                name_in_value_contains(an, names, params.query),
                self.executor.access_where(an),
            )
            params.wheres.append(or_(where, profile_where))
        else:
            params.wheres.append(where)
        return MatchContext(type_alias=ue)

    def _label(self, shortname: str, label: str) -> str:
        return html.escape(
            self.translator.translate(PROFILE_LABEL_PREFIX + shortname, default=label)
        )

    def _matched_profile(self, entity: Any, query: str) -> str:
        needle = normalize_query(query).lower()
        pieces: list[str] = []
        if not needle:
            return ""
        for shortname, label in self.config.profile_fields.items():
            values = self.values.get_annotation_values(
                entity.guid, PROFILE_ANNOTATION_PREFIX + shortname
            )
            for text in values:
                if needle in (text or "").lower():
                    pieces.append(f"{self._label(shortname, label)}: {self._highlight(text, query)}")
        return ". ".join(pieces)

    def _annotate(self, entity, params, context, annotations) -> None:
        query = params.query
        title = self._highlight(entity.name, query)
        needle = normalize_query(query).lower()
        username = entity.username or ""
        if needle and needle in username.lower():
            title += f" ({self._highlight(username, query)})"
        annotations.set(entity, SEARCH_MATCHED_TITLE, title)

        if self.config.profile_fields:
            annotations.set(
                entity, SEARCH_MATCHED_DESCRIPTION, self._matched_profile(entity, query)
            )


class TagMatcher(EntityMatcher):
    """Entities of any type whose registered tag metadata equals the query exactly.

    Only registered tag names reach the predicate; requested names that are
    not registered are dropped. When none remain, no query is issued.
    Title and description are plain text, truncated, then HTML-escaped like
    every other matched value.
    """

    search_type = TAGS_SEARCH_TYPE
    _named_types = frozenset(
        {EntityType.SITE.value, EntityType.USER.value, EntityType.GROUP.value}
    )

    def target_tag_names(self, requested: str | Iterable[str] | None) -> tuple[str, ...]:
        """Requested names filtered to the registry (caller order), or the whole registry."""
        valid = self.config.tag_names
        if not requested:
            return tuple(valid)
        if isinstance(requested, str):
            requested = [requested]
        requested = list(dict.fromkeys(requested))
        targets = tuple(name for name in requested if name in valid)
        if len(targets) != len(requested):
            logger.debug(
                "Dropped unregistered tag names: %s",
                sorted(set(requested) - set(targets)),
            )
        return targets

    def _prepare(self, params: SearchParams) -> MatchContext | None:
        targets = self.target_tag_names(params.tag_names)
        if not targets:
            return None
        params.joins.append(JoinClause(md, Entity.guid == md.entity_guid))
        params.wheres.append(
            and_(
                name_in_value_equals(md, targets, params.query),
                self.executor.access_where(md),
            )
        )
        return MatchContext(type_alias=None, tag_names=targets)

    def _title_source(self, entity: Any) -> str | None:
        if entity.type in self._named_types:
            return entity.name
        if entity.type == EntityType.OBJECT.value:
            return entity.title
        return None

    def _annotate(self, entity, params, context, annotations) -> None:
        needle = normalize_query(params.query).lower()
        matched: list[str] = []
        for tag_name in context.tag_names:
            tags = self.values.get_metadata_values(entity.guid, tag_name)
            if needle and needle in (tag.lower() for tag in tags):
                label = self.translator.translate(TAG_LABEL_PREFIX + tag_name, default=tag_name)
                matched.append(f"{label}: {', '.join(tags)}")

        limit = self.config.matched_text_max_length
        title = html.escape(truncate(strip_tags(self._title_source(entity)), limit))
        description = html.escape(truncate(strip_tags(entity.description), limit))
        extra = self._highlight(". ".join(matched), params.query, multi_match=True)

        annotations.set(entity, SEARCH_MATCHED_TITLE, title)
        annotations.set(entity, SEARCH_MATCHED_DESCRIPTION, description)
        annotations.set(entity, SEARCH_MATCHED_EXTRA, extra)
