"""Backend protocol for translation sources.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from transdex.translation import Translation

__all__ = ["Backend"]


class Backend(Protocol):
    """Protocol for sources of (locale, key, value) translations.

    This is a Protocol (structural typing) rather than ABC: concrete backends
    are independent implementations and need not inherit from anything.

    load_translations() must not mutate external state. Read-only backends
    raise BackendNotWritableError from save_translation() and
    delete_translation(). The index treats any exception from those two
    methods as the backend declining the call.

    Example:
        >>> class EnvBackend:
        ...     def load_translations(self) -> list[Translation]:
        ...         return [Translation("en", "app.name", os.environ["APP_NAME"], self)]
        ...     def save_translation(self, translation: Translation) -> None:
        ...         raise BackendNotWritableError
        ...     def delete_translation(self, translation: Translation) -> None:
        ...         raise BackendNotWritableError
        ...
        >>> index = TranslationIndex(EnvBackend())
    """

    def load_translations(self) -> list[Translation]:
        """Return every translation this backend holds.

        Raises:
            TranslationLoadError: If the backend content cannot be parsed
        """

    def save_translation(self, translation: Translation) -> None:
        """Persist a translation.

        Raises:
            BackendError: If the write fails or is not supported
            OSError: If underlying storage cannot be written
        """

    def delete_translation(self, translation: Translation) -> None:
        """Remove a translation.

        Raises:
            BackendError: If the delete fails or is not supported
            OSError: If underlying storage cannot be written
        """
