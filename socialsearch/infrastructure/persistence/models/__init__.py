"""Persistence models: ORM entities and mixins."""

from socialsearch.infrastructure.persistence.models.entity import (
    Entity,
    GroupEntity,
    ObjectEntity,
    SiteEntity,
    UserEntity,
)
from socialsearch.infrastructure.persistence.models.metastrings import (
    Annotation,
    Metadata,
)
from socialsearch.infrastructure.persistence.models.mixins import (
    OwnedAccessMixin,
    TimestampMixin,
    TypeTableMixin,
)

__all__ = [
    "Annotation",
    "Entity",
    "GroupEntity",
    "Metadata",
    "ObjectEntity",
    "OwnedAccessMixin",
    "SiteEntity",
    "TimestampMixin",
    "TypeTableMixin",
    "UserEntity",
]
