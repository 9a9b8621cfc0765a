"""Ports the search use cases depend on (DIP)."""

from socialsearch.application.interfaces.repositories import (
    IEntityValueReader,
    IQueryExecutor,
)
from socialsearch.application.interfaces.services import ISearchMatcher, Translator

__all__ = ["IEntityValueReader", "IQueryExecutor", "ISearchMatcher", "Translator"]
