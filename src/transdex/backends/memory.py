"""Writable in-memory backend.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from threading import RLock

from transdex.translation import Translation, flatten_translations
from transdex.types import LocaleCode, TranslationKey

__all__ = ["MemoryBackend"]

logger = logging.getLogger(__name__)


class MemoryBackend:
    """Dict-backed backend supporting load, save and delete.

    Built from a ``{locale: nested mapping}`` document (the same shape as a
    YAML translation file) and/or an iterable of Translation records. Saved
    translations are kept in insertion order and returned by later loads.

    Thread-safe via RLock.

    Example:
        >>> backend = MemoryBackend({"en": {"user": {"name": "Name"}}})
        >>> [(t.locale, t.key, t.value) for t in backend.load_translations()]
        [('en', 'user.name', 'Name')]
    """

    __slots__ = ("_entries", "_lock", "_name")

    def __init__(
        self,
        data: Mapping[LocaleCode, object] | None = None,
        translations: Iterable[Translation] = (),
        *,
        name: str = "memory",
    ) -> None:
        self._lock = RLock()
        self._name = name
        self._entries: dict[tuple[LocaleCode, TranslationKey], str] = {}
        for locale, tree in (data or {}).items():
            for translation in flatten_translations(str(locale), tree):
                self._entries[translation.identity] = translation.value
        for translation in translations:
            self._entries[translation.identity] = translation.value

    def __repr__(self) -> str:
        return f"MemoryBackend(name={self._name!r}, entries={len(self)})"

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, locale: LocaleCode, key: TranslationKey) -> str | None:
        """Return the stored value for (locale, key), or None."""
        with self._lock:
            return self._entries.get((locale, key))

    def load_translations(self) -> list[Translation]:
        """Snapshot all stored translations, each referencing this backend."""
        with self._lock:
            return [
                Translation(locale=locale, key=key, value=value, backend=self)
                for (locale, key), value in self._entries.items()
            ]

    def save_translation(self, translation: Translation) -> None:
        """Store or overwrite a translation."""
        with self._lock:
            self._entries[translation.identity] = translation.value
        logger.debug("%s saved %s", self._name, translation.cache_key)

    def delete_translation(self, translation: Translation) -> None:
        """Remove a translation; deleting a missing translation is a no-op."""
        with self._lock:
            self._entries.pop(translation.identity, None)
        logger.debug("%s deleted %s", self._name, translation.cache_key)
