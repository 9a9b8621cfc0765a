"""Tests for domain enums (EntityType, SortDirection)."""

import pytest

from socialsearch.domain.enums import EntityType, SortDirection, SortKey


class TestEntityType:
    """EntityType enum values and .values() helper."""

    def test_values_returns_all_type_strings(self) -> None:
        got = EntityType.values()
        assert got == ["object", "group", "user", "site"]

    def test_str_enum_compares_to_string(self) -> None:
        assert EntityType.USER == "user"


class TestSortDirectionParse:
    """SortDirection.parse is lenient and defaults to DESC."""

    @pytest.mark.parametrize("raw", ["asc", "ASC", " Asc "])
    def test_asc_variants(self, raw: str) -> None:
        assert SortDirection.parse(raw) is SortDirection.ASC

    @pytest.mark.parametrize("raw", [None, "", "desc", "sideways"])
    def test_everything_else_is_desc(self, raw: str | None) -> None:
        assert SortDirection.parse(raw) is SortDirection.DESC


def test_sort_keys() -> None:
    assert {k.value for k in SortKey} == {"relevance", "created", "updated", "alpha"}
