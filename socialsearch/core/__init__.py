"""Core: config and shared constants.

Single place for settings and search-wide literal values.
"""

from socialsearch.core.config import get_settings

__all__ = ["get_settings"]
