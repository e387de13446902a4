"""Translation index: multi-backend merge, cache-backed lookup and fallback.

Key architectural decisions:
- Eager loading: every backend is loaded at construction (and again on
  set_cache_store/reload). All backends are parsed before the cache store is
  written, so a TranslationLoadError leaves the store untouched.
- Backend priority: backends load in reverse order; the first configured
  backend is written last and wins ties on (locale, key).
- Immutable views: scope(), default() and fallbacks() return frozen IndexView
  values sharing the index's cache store and backends.
- Protocol-based collaborators: Backend, CacheStore and Formatter are
  structural protocols; MemoryCacheStore and MessageFormatter are defaults.
- No index-level locking: thread safety is delegated to the cache store.

Lookup order for translate(locale, key):
    1. (locale, key)
    2. each static fallback for locale, then each view fallback, then the
       default locale
    3. (default_locale, key)
    4. auto-create (locale, scope + "." + key) with the view's default value
An empty stored value counts as missing at every step. When nothing
non-empty was found the raw key is returned. The result is then formatted
with the caller's arguments; formatting failures return the unformatted text.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from transdex.backends.base import Backend
from transdex.cache.memory import MemoryCacheStore
from transdex.cache.store import CacheStore
from transdex.config import IndexConfig
from transdex.constants import SCOPE_SEPARATOR
from transdex.enums import ResolutionSource
from transdex.errors import (
    CacheStoreError,
    FormattingError,
    TranslationSaveError,
)
from transdex.formatting import Formatter, MessageFormatter
from transdex.translation import Translation, make_cache_key
from transdex.types import LocaleCode, TranslationKey

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Index and views
    "TranslationIndex",
    "IndexView",
    # Fallback observability
    "FallbackInfo",
    # Load tracking
    "BackendLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when translate() resolves a key from
    a locale other than the requested one.

    Attributes:
        requested_locale: Locale passed to translate() (after default substitution)
        resolved_locale: Locale that actually held the text
        key: Translation key that was resolved
        source: FALLBACK for the candidate chain, DEFAULT_LOCALE for the final probe

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.key}: {info.resolved_locale} (requested {info.requested_locale})")
        >>> index = TranslationIndex(backend, on_fallback=log_fallback)
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    key: TranslationKey
    source: ResolutionSource


@dataclass(frozen=True, slots=True)
class BackendLoadResult:
    """Number of translations one backend contributed to the last load.

    Attributes:
        backend: repr() of the backend
        count: Translations returned by load_translations()
        priority: Position of the backend in the configured sequence (0 wins)
    """

    backend: str
    count: int
    priority: int


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of the last load into the cache store.

    Attributes:
        results: Per-backend results in priority order
    """

    results: tuple[BackendLoadResult, ...]

    def __repr__(self) -> str:
        return f"LoadSummary(backends={len(self.results)}, translations={self.total})"

    @property
    def total(self) -> int:
        """Translations loaded across all backends, duplicates included."""
        return sum(r.count for r in self.results)

    @property
    def empty_backends(self) -> tuple[BackendLoadResult, ...]:
        """Backends that contributed nothing."""
        return tuple(r for r in self.results if r.count == 0)


class TranslationIndex:
    """Cache-backed translation lookup over an ordered list of backends.

    Example - YAML files with a per-locale fallback chain:
        >>> index = TranslationIndex(
        ...     YamlBackend("config/locales"),
        ...     config=IndexConfig(fallback_locales={"en-GB": ["en-US"]}),
        ... )
        >>> index.translate("en-GB", "user.name")
        'Name'

    Example - Views:
        >>> view = index.scope("user").default("Anonymous")
        >>> view.translate("fr", "nickname")   # persists fr/user.nickname = Anonymous
        'Anonymous'

    Attributes:
        backends: Backends in priority order (first wins)
        config: Index configuration
        cache_store: Store holding the merged translations
    """

    __slots__ = (
        "_backends",
        "_cache_store",
        "_config",
        "_formatter",
        "_load_summary",
        "_on_fallback",
        "_root_view",
    )

    def __init__(
        self,
        *backends: Backend,
        config: IndexConfig | None = None,
        cache_store: CacheStore | None = None,
        formatter: Formatter | None = None,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize the index and load every backend into the cache store.

        Args:
            *backends: Translation backends in priority order (first wins)
            config: Default locale, static fallback chains and auto-create
                policy (default: ``IndexConfig()``)
            cache_store: Store for merged translations (default: a new
                MemoryCacheStore)
            formatter: Formatter applied to resolved text (default:
                MessageFormatter)
            on_fallback: Optional callback invoked when a key resolves from a
                locale other than the requested one. Exceptions raised by the
                callback propagate out of translate().

        Raises:
            TranslationLoadError: If any backend's content cannot be parsed
        """
        self._backends: tuple[Backend, ...] = tuple(backends)
        self._config = config if config is not None else IndexConfig()
        self._formatter: Formatter = formatter if formatter is not None else MessageFormatter()
        self._on_fallback = on_fallback
        self._cache_store: CacheStore = (
            cache_store if cache_store is not None else MemoryCacheStore()
        )
        self._load_summary = LoadSummary(results=())
        self._root_view = IndexView(self)
        self._load_into(self._cache_store)

    def __repr__(self) -> str:
        return (
            f"TranslationIndex(backends={len(self._backends)}, "
            f"default_locale={self._config.default_locale!r})"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def backends(self) -> tuple[Backend, ...]:
        """Backends in priority order."""
        return self._backends

    @property
    def config(self) -> IndexConfig:
        """Index configuration."""
        return self._config

    @property
    def default_locale(self) -> LocaleCode:
        """Locale probed last and substituted for empty locale codes."""
        return self._config.default_locale

    @property
    def cache_store(self) -> CacheStore:
        """Store holding the merged translations."""
        return self._cache_store

    @property
    def formatter(self) -> Formatter:
        """Formatter applied to resolved text."""
        return self._formatter

    def set_cache_store(self, cache_store: CacheStore) -> None:
        """Replace the cache store and reload every backend into it.

        Raises:
            TranslationLoadError: If a backend fails to parse; the index
                keeps its previous store
        """
        self._load_into(cache_store)
        self._cache_store = cache_store

    def reload(self) -> None:
        """Reload every backend into the current cache store.

        Existing entries (including auto-created ones) are overwritten only
        where a backend defines the same (locale, key).
        """
        self._load_into(self._cache_store)

    # ------------------------------------------------------------------
    # Load / merge
    # ------------------------------------------------------------------

    def _load_into(self, cache_store: CacheStore) -> None:
        batches: list[tuple[int, Backend, list[Translation]]] = []
        for priority in range(len(self._backends) - 1, -1, -1):
            backend = self._backends[priority]
            batches.append((priority, backend, backend.load_translations()))

        for _, _, translations in batches:
            for translation in translations:
                cache_store.set(translation.cache_key, translation)

        self._load_summary = LoadSummary(
            results=tuple(
                BackendLoadResult(backend=repr(backend), count=len(translations), priority=priority)
                for priority, backend, translations in reversed(batches)
            )
        )
        logger.info(
            "Loaded %d translations from %d backends",
            self._load_summary.total,
            len(self._backends),
        )

    def get_load_summary(self) -> LoadSummary:
        """Summary of the last load into the cache store."""
        return self._load_summary

    def load_translations(self) -> dict[LocaleCode, dict[TranslationKey, Translation]]:
        """Snapshot of every backend's translations as ``{locale: {key: Translation}}``.

        Merged directly from the backends, first backend winning ties; the
        cache store is neither read nor written. Intended for export and
        inspection, not for lookups.

        Raises:
            TranslationLoadError: If any backend's content cannot be parsed
        """
        merged: dict[LocaleCode, dict[TranslationKey, Translation]] = {}
        for backend in reversed(self._backends):
            for translation in backend.load_translations():
                merged.setdefault(translation.locale, {})[translation.key] = translation
        return merged

    # ------------------------------------------------------------------
    # Cache access
    # ------------------------------------------------------------------

    def add_translation(self, translation: Translation) -> None:
        """Write a translation into the cache store only (no backend write)."""
        self._cache_store.set(translation.cache_key, translation)
        logger.debug("Cached translation %s", translation.cache_key)

    def get_translation(self, locale: LocaleCode, key: TranslationKey) -> Translation | None:
        """Return the cached entry for (locale, key), empty values included.

        Cache-store misses return None whether the store signals them with
        None or with an exception. A store failure other than CacheStoreError
        or KeyError is logged as a warning and also reads as a miss.
        """
        cache_key = make_cache_key(locale, key)
        try:
            entry = self._cache_store.get(cache_key)
        except (CacheStoreError, KeyError) as e:
            logger.debug("Cache miss for %s: %s", cache_key, e)
            return None
        except Exception as e:  # noqa: BLE001 - any store failure reads as a miss
            logger.warning("Cache store lookup failed for %s: %s", cache_key, e)
            return None
        return entry if isinstance(entry, Translation) else None

    def has_translation(self, locale: LocaleCode, key: TranslationKey) -> bool:
        """Check whether a non-empty translation is cached for (locale, key)."""
        return self._lookup_value(locale, key) is not None

    def _lookup_value(self, locale: LocaleCode, key: TranslationKey) -> str | None:
        entry = self.get_translation(locale, key)
        if entry is None or not entry.value:
            return None
        return entry.value

    # ------------------------------------------------------------------
    # Save / delete
    # ------------------------------------------------------------------

    def save_translation(self, translation: Translation) -> None:
        """Persist a translation through the first backend that accepts it.

        Backends are tried in priority order; any exception from a backend
        counts as a rejection. On the first success the cache store is
        updated to match. No retries are made.

        Raises:
            TranslationSaveError: If no backend accepted the write (including
                when the index has no backends); the cache store is untouched
        """
        for backend in self._backends:
            try:
                backend.save_translation(translation)
            except Exception as e:  # noqa: BLE001 - any backend failure is a rejection
                logger.debug("%r rejected %s: %s", backend, translation.cache_key, e)
                continue
            self.add_translation(translation)
            return
        raise TranslationSaveError(translation)

    def delete_translation(self, translation: Translation) -> None:
        """Delete a translation from every backend, then from the cache store.

        Individual backend failures of any type are logged and ignored.

        Raises:
            CacheStoreError: If the cache store cannot remove the entry
        """
        for backend in self._backends:
            try:
                backend.delete_translation(translation)
            except Exception as e:  # noqa: BLE001 - backend failures are ignored
                logger.debug("%r could not delete %s: %s", backend, translation.cache_key, e)
        self._cache_store.delete(translation.cache_key)
        logger.debug("Deleted translation %s", translation.cache_key)

    # ------------------------------------------------------------------
    # Views and translation
    # ------------------------------------------------------------------

    @property
    def view(self) -> IndexView:
        """View with no scope, no default and no extra fallbacks."""
        return self._root_view

    def scope(self, scope: str) -> IndexView:
        """Return a view whose auto-created keys are prefixed with scope."""
        return self._root_view.scope(scope)

    def default(self, value: str) -> IndexView:
        """Return a view that uses and persists value on a full miss."""
        return self._root_view.default(value)

    def fallbacks(self, *locales: LocaleCode) -> IndexView:
        """Return a view that probes locales before the default locale."""
        return self._root_view.fallbacks(*locales)

    def translate(
        self, locale: LocaleCode | None, key: TranslationKey, /, *args: object, **kwargs: object
    ) -> str:
        """Translate key for locale with no scope, default or extra fallbacks.

        See IndexView.translate().
        """
        return self._root_view.translate(locale, key, *args, **kwargs)

    t = translate

    def _candidate_locales(
        self, locale: LocaleCode, view_fallbacks: tuple[LocaleCode, ...]
    ) -> tuple[LocaleCode, ...]:
        return (
            *self._config.fallbacks_for(locale),
            *view_fallbacks,
            self._config.default_locale,
        )

    def _resolve(
        self, view: IndexView, locale: LocaleCode, key: TranslationKey
    ) -> tuple[str, ResolutionSource, LocaleCode]:
        value = self._lookup_value(locale, key)
        if value is not None:
            return value, ResolutionSource.REQUESTED, locale

        default_locale = self._config.default_locale
        for candidate in self._candidate_locales(locale, view.fallback_locales):
            value = self._lookup_value(candidate, key)
            if value is not None:
                if candidate == default_locale:
                    return value, ResolutionSource.DEFAULT_LOCALE, candidate
                return value, ResolutionSource.FALLBACK, candidate

        value = self._lookup_value(default_locale, key)
        if value is not None:
            return value, ResolutionSource.DEFAULT_LOCALE, default_locale

        created = self._create_missing(view, locale, key)
        return created.value, ResolutionSource.CREATED, locale

    def _create_missing(self, view: IndexView, locale: LocaleCode, key: TranslationKey) -> Translation:
        scoped_key = f"{view.prefix}{SCOPE_SEPARATOR}{key}" if view.prefix else key
        translation = Translation(
            locale=locale,
            key=scoped_key,
            value=view.default_value,
            backend=self._backends[0] if self._backends else None,
        )

        if not translation.value and not self._config.persist_empty_missing:
            return translation

        existing = self.get_translation(locale, scoped_key)
        if existing is not None and existing.value == translation.value:
            # Already persisted by an earlier miss
            return translation

        try:
            self.save_translation(translation)
        except Exception as e:  # noqa: BLE001 - a miss never fails translate()
            logger.warning("Could not persist missing translation %s: %s", translation.cache_key, e)
        else:
            logger.debug("Created missing translation %s", translation.cache_key)
        return translation

    def _translate(
        self,
        view: IndexView,
        locale: LocaleCode | None,
        key: TranslationKey,
        args: tuple[object, ...],
        kwargs: dict[str, object],
    ) -> str:
        if not locale:
            locale = self._config.default_locale

        value, source, resolved_locale = self._resolve(view, locale, key)

        if source in (ResolutionSource.FALLBACK, ResolutionSource.DEFAULT_LOCALE):
            logger.debug("Resolved '%s' for %s from %s", key, locale, resolved_locale)
            if self._on_fallback is not None:
                self._on_fallback(
                    FallbackInfo(
                        requested_locale=locale,
                        resolved_locale=resolved_locale,
                        key=key,
                        source=source,
                    )
                )

        text = value or key

        try:
            return self._formatter.format(locale, text, args, kwargs)
        except (
            FormattingError,
            ArithmeticError,
            IndexError,
            KeyError,
            RecursionError,
            TypeError,
            ValueError,
        ) as e:
            logger.debug("Formatting '%s' for %s failed: %s", key, locale, e)
            return text


@dataclass(frozen=True, slots=True)
class IndexView:
    """Immutable scope/default/fallback configuration over a TranslationIndex.

    Views hold no resources of their own; create and discard them freely and
    share them across threads. Each builder copies every field except the one
    it sets.

    Attributes:
        index: Index the view reads from and writes to
        prefix: Scope prepended to keys on the auto-create path only
        default_value: Text used and persisted when nothing is found
        fallback_locales: Extra locales probed after the static chain
    """

    index: TranslationIndex
    prefix: str = ""
    default_value: str = ""
    fallback_locales: tuple[LocaleCode, ...] = ()

    def scope(self, scope: str) -> IndexView:
        """Set the key prefix used when a missing key is auto-created.

        Lookups still read the raw key; only the persisted key is scoped.
        """
        return replace(self, prefix=scope)

    def default(self, value: str) -> IndexView:
        """Set the literal text used and persisted when no translation exists."""
        return replace(self, default_value=value)

    def fallbacks(self, *locales: LocaleCode) -> IndexView:
        """Set the extra locales to probe, in order, before the default locale."""
        return replace(self, fallback_locales=locales)

    def translate(
        self, locale: LocaleCode | None, key: TranslationKey, /, *args: object, **kwargs: object
    ) -> str:
        """Translate key for locale, formatting the result with args and kwargs.

        Never raises for any locale/key/argument combination: a missing key
        is auto-created and the raw key returned; a formatting failure
        returns the unformatted text.

        Args:
            locale: Requested locale; empty or None means the default locale
            key: Translation key (unscoped)
            *args: Positional formatting arguments ({0}, {1}, ...)
            **kwargs: Keyword formatting arguments ({name})

        Returns:
            Formatted text

        Example:
            >>> index.scope("user").default("Hello {0}").translate("en", "greet", "Ann")
            'Hello Ann'
        """
        return self.index._translate(self, locale, key, args, kwargs)

    t = translate
