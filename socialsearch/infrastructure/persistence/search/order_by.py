"""Order-by resolution for search fetches."""

from typing import Any

from sqlalchemy import inspect as sa_inspect

from socialsearch.domain.enums import SortDirection, SortKey


def _title_column(type_alias: Any) -> Any:
    name = sa_inspect(type_alias).mapper.class_.title_column
    return getattr(type_alias, name)


def resolve_order_by(
    primary: Any,
    type_alias: Any | None,
    sort: str | None,
    direction: str | None,
) -> tuple[Any, ...]:
    """Return ORDER BY expressions for a search fetch.

    sort "created"/"updated" order by primary.time_created/time_updated;
    "alpha" orders by the type table's title column (primary key when there
    is no type table). Anything else adds no leading column. The primary key
    is always appended as a tie-break, so the result is deterministic and
    the same inputs always give the same clause.

    Args:
        primary: Entities table (ORM class or alias).
        type_alias: Type table alias, or None (e.g. tag search).
        sort: Sort key (see SortKey).
        direction: "asc" or "desc", case-insensitive; anything else is desc.

    Returns:
        Tuple of order-by expressions.
    """
    desc = SortDirection.parse(direction) is SortDirection.DESC
    key = (sort or "").strip().lower()

    column: Any = None
    if key == SortKey.CREATED.value:
        column = primary.time_created
    elif key == SortKey.UPDATED.value:
        column = primary.time_updated
    elif key == SortKey.ALPHA.value and type_alias is not None:
        column = _title_column(type_alias)

    tie_break = primary.guid.desc() if desc else primary.guid.asc()
    if column is None:
        return (tie_break,)
    return (column.desc() if desc else column.asc(), tie_break)
