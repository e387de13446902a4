"""Index configuration for TranslationIndex.

Provides a single frozen dataclass that carries the process-wide default
locale, static per-locale fallback chains, and the auto-create policy.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from transdex.constants import DEFAULT_LOCALE, DEFAULT_LOCALE_ENV_VAR
from transdex.types import LocaleCode

__all__ = ["IndexConfig"]


@dataclass(frozen=True, slots=True)
class IndexConfig:
    """Immutable configuration for TranslationIndex.

    All fields have sensible defaults; ``IndexConfig()`` is a usable
    configuration. Pass an instance to ``TranslationIndex(config=...)``.

    Attributes:
        default_locale: Locale substituted for empty locale codes and probed
            last on every lookup (default: "en-US").
        fallback_locales: Static fallback chains keyed by requested locale,
            e.g. ``{"en-GB": ["en-US"], "pt-BR": ["pt-PT", "es"]}``. Stored as a
            read-only mapping of tuples.
        persist_empty_missing: When True (default), a lookup miss with no
            explicit default still persists an empty-valued translation. When
            False, only misses with an explicit default are persisted.

    Example:
        >>> config = IndexConfig(default_locale="en", fallback_locales={"lv": ["lt"]})
        >>> config.fallbacks_for("lv")
        ('lt',)
        >>> config.fallbacks_for("de")
        ()
    """

    default_locale: LocaleCode = DEFAULT_LOCALE
    fallback_locales: Mapping[LocaleCode, Iterable[LocaleCode]] = field(
        default_factory=dict
    )
    persist_empty_missing: bool = True

    def __post_init__(self) -> None:
        """Validate and freeze configuration values.

        Raises:
            ValueError: If default_locale is empty or a fallback chain is
                given as a bare string
        """
        if not self.default_locale:
            msg = "default_locale must be a non-empty locale code"
            raise ValueError(msg)

        frozen: dict[LocaleCode, tuple[LocaleCode, ...]] = {}
        for locale, chain in self.fallback_locales.items():
            if isinstance(chain, str):
                msg = f"Fallback chain for '{locale}' must be a sequence of locales, got str"
                raise ValueError(msg)
            frozen[locale] = tuple(chain)
        object.__setattr__(self, "fallback_locales", MappingProxyType(frozen))

    def fallbacks_for(self, locale: LocaleCode) -> tuple[LocaleCode, ...]:
        """Return the static fallback chain configured for a locale."""
        return tuple(self.fallback_locales.get(locale, ()))

    @classmethod
    def from_env(cls, **overrides: object) -> IndexConfig:
        """Build a configuration honoring the TRANSDEX_DEFAULT_LOCALE override.

        Explicit keyword overrides win over the environment.

        Example:
            >>> import os
            >>> os.environ["TRANSDEX_DEFAULT_LOCALE"] = "de-DE"
            >>> IndexConfig.from_env().default_locale
            'de-DE'
        """
        env_locale = os.environ.get(DEFAULT_LOCALE_ENV_VAR, "").strip()
        if env_locale and "default_locale" not in overrides:
            overrides["default_locale"] = env_locale
        return cls(**overrides)  # type: ignore[arg-type]
