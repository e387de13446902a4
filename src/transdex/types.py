"""Type aliases for the translation domain.

Semantic aliases used throughout transdex and by user code when annotating
TranslationIndex call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "CacheKey",
    "LocaleCode",
    "TranslationKey",
]

type LocaleCode = str
"""Locale identifier (e.g., 'en-US', 'lv', 'zh-Hans-CN')."""

type TranslationKey = str
"""Dot-scoped translation identifier (e.g., 'user.profile.name')."""

type CacheKey = str
"""Cache store key derived from a locale and a translation key ('en-US/user.name')."""
