"""Translation record and the key scheme shared by backends and the index.

Components:
    Translation - Immutable (locale, key, value) record with backend back-reference
    make_cache_key - Derive the cache store key for a (locale, key) pair
    flatten_translations - Flatten a nested mapping into dot-keyed translations

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from transdex.constants import CACHE_KEY_SEPARATOR, SCOPE_SEPARATOR
from transdex.types import CacheKey, LocaleCode, TranslationKey

if TYPE_CHECKING:
    from transdex.backends.base import Backend

__all__ = [
    "Translation",
    "flatten_translations",
    "make_cache_key",
    "stringify_value",
]


@dataclass(frozen=True, slots=True)
class Translation:
    """A single translated string.

    Identity is the (locale, key) pair. The backend back-reference records
    which backend produced the record and is only consulted when persisting
    edits; it takes no part in equality, hashing or repr.

    Attributes:
        locale: Locale code (e.g., 'en-US')
        key: Dot-scoped translation key (e.g., 'user.profile.name')
        value: Translated text (may be empty)
        backend: Owning backend, if any
    """

    locale: LocaleCode
    key: TranslationKey
    value: str = ""
    backend: Backend | None = field(default=None, compare=False, repr=False)

    @property
    def cache_key(self) -> CacheKey:
        """Cache store key for this translation."""
        return make_cache_key(self.locale, self.key)

    @property
    def identity(self) -> tuple[LocaleCode, TranslationKey]:
        """The (locale, key) pair that identifies this translation."""
        return (self.locale, self.key)


def make_cache_key(locale: LocaleCode, key: TranslationKey) -> CacheKey:
    """Build the cache store key for a (locale, key) pair.

    Example:
        >>> make_cache_key("en-US", "user.profile.name")
        'en-US/user.profile.name'
    """
    return f"{locale}{CACHE_KEY_SEPARATOR}{key}"


def stringify_value(value: object) -> str:
    """Render a non-mapping leaf value as translation text.

    None becomes the empty string and booleans use their YAML spelling
    ('true'/'false'); everything else goes through str().
    """
    match value:
        case None:
            return ""
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case _:
            return str(value)


def flatten_translations(
    locale: LocaleCode,
    value: object,
    scopes: tuple[str, ...] = (),
    backend: Backend | None = None,
) -> list[Translation]:
    """Flatten a nested mapping into translations with dot-separated keys.

    Recurses through mappings only, in insertion order. Any other value is a
    leaf: it is stringified and becomes a Translation keyed by the joined path.

    Args:
        locale: Locale code applied to every produced translation
        value: Mapping (or leaf) to flatten
        scopes: Key path accumulated so far
        backend: Backend recorded on every produced translation

    Returns:
        Translations in document order

    Example:
        >>> [t.key for t in flatten_translations("en", {"user": {"name": "Name"}})]
        ['user.name']
    """
    if isinstance(value, Mapping):
        translations: list[Translation] = []
        for child_key, child_value in value.items():
            translations.extend(
                flatten_translations(
                    locale, child_value, (*scopes, stringify_value(child_key)), backend
                )
            )
        return translations

    return [
        Translation(
            locale=locale,
            key=SCOPE_SEPARATOR.join(scopes),
            value=stringify_value(value),
            backend=backend,
        )
    ]
