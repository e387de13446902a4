"""transdex exception hierarchy.

All library errors derive from TransdexError so callers can catch the whole
family at one seam. Errors carry the object they concern (source, translation,
pattern) for diagnostics.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from transdex.constants import NOT_IMPLEMENTED_MESSAGE, SAVE_FAILED_MESSAGE

if TYPE_CHECKING:
    from transdex.translation import Translation

__all__ = [
    "BackendError",
    "BackendNotWritableError",
    "CacheMissError",
    "CacheStoreError",
    "FormattingError",
    "TransdexError",
    "TranslationLoadError",
    "TranslationSaveError",
]


class TransdexError(Exception):
    """Base exception for all transdex errors."""


class TranslationLoadError(TransdexError):
    """Backend content could not be parsed into translations.

    Fatal for the whole load: TranslationIndex raises it from the constructor
    (or from set_cache_store/reload) before touching the cache store.

    Attributes:
        source: Human-readable description of the offending content, if known
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        """Initialize TranslationLoadError.

        Args:
            message: Error message
            source: Path or description of the content that failed to parse
        """
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)
        self.source = source


class TranslationSaveError(TransdexError):
    """No configured backend accepted a translation write.

    Attributes:
        translation: The translation that could not be persisted
    """

    def __init__(self, translation: Translation, message: str = SAVE_FAILED_MESSAGE) -> None:
        super().__init__(message)
        self.translation = translation


class BackendError(TransdexError):
    """A backend failed to save or delete a translation."""


class BackendNotWritableError(BackendError):
    """Backend is read-only; save and delete are not implemented."""

    def __init__(self, message: str = NOT_IMPLEMENTED_MESSAGE) -> None:
        super().__init__(message)


class CacheStoreError(TransdexError):
    """Cache store operation failed."""


class CacheMissError(CacheStoreError, KeyError):
    """Cache store has no entry for a key.

    Stores may raise this from get() instead of returning None; the index
    treats both as "not found".
    """

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"cache miss: {self.key!r}"


class FormattingError(TransdexError):
    """Raised when a pattern cannot be formatted with the supplied arguments.

    translate() recovers from it by returning the unformatted text.

    Attributes:
        pattern: The pattern that failed to format
    """

    def __init__(self, message: str, pattern: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message
            pattern: Pattern text that failed to format
        """
        super().__init__(message)
        self.pattern = pattern
