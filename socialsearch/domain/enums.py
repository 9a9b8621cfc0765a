"""Domain enumerations for search.

Enums represent fixed sets of values (entity kinds, sort keys, directions).
"""

from enum import Enum


class EntityType(str, Enum):
    """Entity kind stored in entities.type."""

    OBJECT = "object"
    GROUP = "group"
    USER = "user"
    SITE = "site"

    @classmethod
    def values(cls) -> list[str]:
        """Return all entity type values as strings."""
        return [t.value for t in cls]


class SortKey(str, Enum):
    """Supported values for SearchParams.sort."""

    RELEVANCE = "relevance"
    CREATED = "created"
    UPDATED = "updated"
    ALPHA = "alpha"


class SortDirection(str, Enum):
    """Order direction. Anything unrecognised resolves to DESC."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortDirection":
        """Parse a direction case-insensitively, defaulting to DESC."""
        if value and value.strip().lower() == cls.ASC.value:
            return cls.ASC
        return cls.DESC
