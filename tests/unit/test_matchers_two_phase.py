"""Matcher protocol tests with a mocked executor (count-then-fetch, short circuits)."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy import true

from socialsearch.application.dtos.search import JoinClause, SearchConfig, SearchParams
from socialsearch.core.constants import SEARCH_MATCHED_TITLE
from socialsearch.domain.exceptions import ValidationException
from socialsearch.infrastructure.i18n import DictTranslator
from socialsearch.infrastructure.persistence.models import Entity
from socialsearch.infrastructure.persistence.search.matchers import (
    GroupMatcher,
    ObjectMatcher,
    TagMatcher,
    UserMatcher,
    oe,
)

CONFIG = SearchConfig(profile_fields={"phone": "Phone"}, tag_names=("tags", "interests"))


def _executor(*results) -> MagicMock:
    executor = MagicMock()
    executor.execute.side_effect = list(results)
    executor.access_where.return_value = true()
    return executor


def _values() -> MagicMock:
    values = MagicMock()
    values.get_annotation_values.return_value = []
    values.get_metadata_values.return_value = []
    return values


def _matcher(cls, executor, values=None, config=CONFIG):
    return cls(executor, values or _values(), config, DictTranslator())


def _object_entity(guid: int = 1, title: str = "Annual budget") -> SimpleNamespace:
    return SimpleNamespace(guid=guid, type="object", title=title, description="", name=None)


@pytest.mark.parametrize("matcher_cls", [ObjectMatcher, GroupMatcher, UserMatcher, TagMatcher])
class TestZeroCountShortCircuit:
    """A zero count never triggers the fetch."""

    def test_fetch_not_executed(self, matcher_cls) -> None:
        executor = _executor(0)
        result = _matcher(matcher_cls, executor).search(SearchParams(query="budget"))
        assert result.entities == []
        assert result.count == 0
        assert executor.execute.call_count == 1
        assert executor.execute.call_args.args[0].count is True

    def test_caller_params_not_mutated(self, matcher_cls) -> None:
        executor = _executor(0)
        params = SearchParams(query="budget")
        _matcher(matcher_cls, executor).search(params)
        assert params.joins == []
        assert params.wheres == []
        assert params.count is False
        assert params.types is None

    def test_executor_failure_propagates(self, matcher_cls) -> None:
        executor = MagicMock()
        executor.access_where.return_value = true()
        executor.execute.side_effect = RuntimeError("executor down")
        with pytest.raises(RuntimeError, match="executor down"):
            _matcher(matcher_cls, executor).search(SearchParams(query="budget"))


class TestCountThenFetch:
    def test_fetch_follows_count_and_annotates(self) -> None:
        entity = _object_entity()
        executor = _executor(1, [entity])
        result = _matcher(ObjectMatcher, executor).search(SearchParams(query="budget"))
        assert result.count == 1
        assert result.entities == [entity]
        assert executor.execute.call_count == 2
        assert "budget" in result.annotations.get(entity, SEARCH_MATCHED_TITLE)

    def test_primary_join_prepended_before_caller_joins(self) -> None:
        caller_join = JoinClause("other_table", "on_clause")
        executor = _executor(1, [_object_entity()])
        _matcher(ObjectMatcher, executor).search(
            SearchParams(query="budget", joins=[caller_join])
        )
        sent = executor.execute.call_args.args[0]
        assert sent.joins[0].target is oe
        assert sent.joins[1] == caller_join
        assert sent.types == ["object"]
        assert sent.preload_owners is True

    def test_default_order_resolved_when_no_override(self) -> None:
        executor = _executor(1, [_object_entity()])
        _matcher(ObjectMatcher, executor).search(SearchParams(query="budget"))
        sent = executor.execute.call_args.args[0]
        assert [str(c) for c in sent.order_by] == ["entities.guid DESC"]

    def test_explicit_order_by_kept_without_sort(self) -> None:
        explicit = (Entity.time_created.asc(),)
        executor = _executor(1, [_object_entity()])
        _matcher(ObjectMatcher, executor).search(
            SearchParams(query="budget", order_by=explicit)
        )
        assert executor.execute.call_args.args[0].order_by == explicit

    def test_sort_overrides_explicit_order_by(self) -> None:
        executor = _executor(1, [_object_entity()])
        _matcher(ObjectMatcher, executor).search(
            SearchParams(
                query="budget",
                order_by=(Entity.time_created.asc(),),
                sort="alpha",
                order="asc",
            )
        )
        sent = executor.execute.call_args.args[0]
        assert [str(c) for c in sent.order_by] == ["oe.title ASC", "entities.guid ASC"]


class TestUserMatcherPredicates:
    def test_profile_join_added_when_fields_configured(self) -> None:
        executor = _executor(0)
        _matcher(UserMatcher, executor).search(SearchParams(query="1234"))
        sent = executor.execute.call_args.args[0]
        assert len(sent.joins) == 2
        assert sent.joins[1].isouter is True
        executor.access_where.assert_called_once()

    def test_no_profile_join_without_fields(self) -> None:
        executor = _executor(0)
        _matcher(UserMatcher, executor, config=SearchConfig()).search(SearchParams(query="x"))
        sent = executor.execute.call_args.args[0]
        assert len(sent.joins) == 1
        executor.access_where.assert_not_called()


class TestTagMatcherNames:
    """Only registered tag names ever reach the predicate."""

    def test_unregistered_names_issue_no_queries(self) -> None:
        executor = _executor()
        result = _matcher(TagMatcher, executor).search(
            SearchParams(query="python", tag_names=["password", "email"])
        )
        assert result.entities == []
        assert result.count == 0
        executor.execute.assert_not_called()
        executor.access_where.assert_not_called()

    def test_empty_registry_issues_no_queries(self) -> None:
        executor = _executor()
        result = _matcher(TagMatcher, executor, config=SearchConfig()).search(
            SearchParams(query="python")
        )
        assert result.count == 0
        executor.execute.assert_not_called()

    def test_no_request_uses_whole_registry(self) -> None:
        matcher = _matcher(TagMatcher, _executor())
        assert matcher.target_tag_names(None) == ("tags", "interests")

    def test_single_string_name(self) -> None:
        matcher = _matcher(TagMatcher, _executor())
        assert matcher.target_tag_names("interests") == ("interests",)

    def test_invalid_names_dropped_caller_order_kept(self) -> None:
        matcher = _matcher(TagMatcher, _executor())
        assert matcher.target_tag_names(["interests", "bogus", "tags", "interests"]) == (
            "interests",
            "tags",
        )

    def test_tag_join_and_access_predicate(self) -> None:
        executor = _executor(0)
        _matcher(TagMatcher, executor).search(SearchParams(query="python"))
        sent = executor.execute.call_args.args[0]
        assert len(sent.joins) == 1
        assert sent.types is None
        executor.access_where.assert_called_once()


class TestPagingValidation:
    def test_negative_limit_rejected_before_any_query(self) -> None:
        executor = _executor()
        with pytest.raises(ValidationException) as exc_info:
            _matcher(ObjectMatcher, executor).search(SearchParams(query="budget", limit=-1))
        assert exc_info.value.details == {"field": "limit"}
        executor.execute.assert_not_called()

    def test_negative_offset_rejected(self) -> None:
        with pytest.raises(ValidationException, match="offset"):
            _matcher(GroupMatcher, _executor()).search(SearchParams(query="x", offset=-5))
