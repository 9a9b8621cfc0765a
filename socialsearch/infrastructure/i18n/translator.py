"""Dictionary-backed translator (one language per instance)."""

from collections.abc import Mapping


class DictTranslator:
    """Translate keys from an in-memory string table.

    Missing keys return default when given, otherwise the key itself.
    """

    def __init__(self, messages: Mapping[str, str] | None = None) -> None:
        self.messages = dict(messages or {})

    def translate(self, key: str, default: str | None = None) -> str:
        if key in self.messages:
            return self.messages[key]
        return default if default is not None else key
