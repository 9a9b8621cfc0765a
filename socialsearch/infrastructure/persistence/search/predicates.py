"""Query assembly: containment predicates built as SQLAlchemy expressions.

Values are bound parameters and LIKE wildcards are escaped, so the query
text is matched literally on every backend.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from sqlalchemy import ColumnElement, and_, false, func, or_

from socialsearch.application.dtos.search import SearchParams

LIKE_ESCAPE = "\\"


def normalize_query(query: str | None) -> str:
    """Return the trimmed query; None and non-strings become empty."""
    if not isinstance(query, str):
        return ""
    return query.strip()


def like_pattern(query: str) -> str:
    """Containment pattern for query with %, _ and the escape char escaped."""
    escaped = (
        query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def contains(column: Any, query: str) -> ColumnElement[bool]:
    """Case-insensitive containment of query in column; blank query matches nothing."""
    query = normalize_query(query)
    if not query:
        return false()
    return column.ilike(like_pattern(query), escape=LIKE_ESCAPE)


def build_where_sql(
    table_alias: Any, fields: Sequence[str], params: SearchParams
) -> ColumnElement[bool]:
    """OR of containment predicates over fields of table_alias against params.query.

    Args:
        table_alias: ORM class or aliased() class owning the fields.
        fields: Column attribute names, e.g. ["title", "description"].
        params: Search parameters; only query is read.

    Returns:
        Predicate to append to params.wheres; false() for a blank query.
    """
    query = normalize_query(params.query)
    if not query or not fields:
        return false()
    return or_(*(contains(getattr(table_alias, name), query) for name in fields))


def name_in_value_equals(
    table_alias: Any, names: Iterable[str], query: str
) -> ColumnElement[bool]:
    """name IN names AND value equals query (case-insensitive, exact)."""
    query = normalize_query(query)
    names = list(names)
    if not query or not names:
        return false()
    return and_(
        table_alias.name.in_(names),
        func.lower(table_alias.value) == query.lower(),
    )


def name_in_value_contains(
    table_alias: Any, names: Iterable[str], query: str
) -> ColumnElement[bool]:
    """name IN names AND value contains query (case-insensitive)."""
    names = list(names)
    if not names:
        return false()
    return and_(table_alias.name.in_(names), contains(table_alias.value, query))
