"""Shared helpers: text sanitization."""

from socialsearch.shared.utils.sanitization import strip_tags, truncate

__all__ = ["strip_tags", "truncate"]
