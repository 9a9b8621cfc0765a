"""Localization lookups."""

from socialsearch.infrastructure.i18n.translator import DictTranslator

__all__ = ["DictTranslator"]
