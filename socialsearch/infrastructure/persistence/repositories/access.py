"""Access predicates for entities and the name/value rows attached to them."""

from dataclasses import dataclass
from typing import Any

from sqlalchemy import ColumnElement, or_, true

from socialsearch.core.constants import ACCESS_LOGGED_IN, ACCESS_PUBLIC


@dataclass(frozen=True)
class AccessContext:
    """Who is searching. viewer_guid None means an anonymous visitor."""

    viewer_guid: int | None = None
    is_admin: bool = False


def access_predicate(table: Any, access: AccessContext) -> ColumnElement[bool]:
    """Visibility rule for any table (or alias) with access_id and owner_guid.

    Admins see everything. Otherwise a row is visible when public, when
    logged-in-only and a viewer is present, or when owned by the viewer.
    """
    if access.is_admin:
        return true()
    clauses: list[ColumnElement[bool]] = [table.access_id == ACCESS_PUBLIC]
    if access.viewer_guid is not None:
        clauses.append(table.access_id == ACCESS_LOGGED_IN)
        clauses.append(table.owner_guid == access.viewer_guid)
    return or_(*clauses)
