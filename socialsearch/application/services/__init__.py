"""Pure application services (no I/O)."""

from socialsearch.application.services.highlight import extract_highlight, mark_matches

__all__ = ["extract_highlight", "mark_matches"]
