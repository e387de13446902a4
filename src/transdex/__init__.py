"""transdex - translation index with pluggable backends and locale fallback.

Loads locale-tagged key/value translations from backends (YAML files,
packaged resources, in-memory mappings), merges them into a pluggable cache
store, and resolves translate(locale, key, *args) queries with scoping,
fallback-locale chains, default values, auto-creation of missing keys and
CLDR-aware argument formatting.

Public API:
    TranslationIndex - Multi-backend lookup with fallback chains
    IndexView - Immutable scope/default/fallback view over an index
    IndexConfig - Default locale, static fallback chains, auto-create policy
    Translation - (locale, key, value) record
    MemoryBackend - Writable in-memory backend
    YamlBackend - Read-only YAML backend
    MemoryCacheStore - Default thread-safe cache store
    MessageFormatter - Default Babel-based formatter

Exceptions:
    TransdexError - Base exception class
    TranslationLoadError - Backend content could not be parsed
    TranslationSaveError - No backend accepted a write
    BackendNotWritableError - Read-only backend asked to write
    FormattingError - Pattern/argument mismatch (recovered by translate)

Submodules:
    transdex.backends - Backend protocol and implementations
    transdex.cache - CacheStore protocol and MemoryCacheStore
    transdex.formatting - Formatter protocol, MessageFormatter, plural rules
"""

from .backends import Backend, MemoryBackend, YamlBackend, load_yaml_content
from .cache import CacheStore, MemoryCacheStore
from .config import IndexConfig
from .constants import DEFAULT_LOCALE
from .enums import ResolutionSource
from .errors import (
    BackendError,
    BackendNotWritableError,
    CacheMissError,
    CacheStoreError,
    FormattingError,
    TransdexError,
    TranslationLoadError,
    TranslationSaveError,
)
from .formatting import Formatter, MessageFormatter
from .index import FallbackInfo, IndexView, LoadSummary, TranslationIndex
from .translation import Translation, make_cache_key

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("transdex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_LOCALE",
    "Backend",
    "BackendError",
    "BackendNotWritableError",
    "CacheMissError",
    "CacheStore",
    "CacheStoreError",
    "FallbackInfo",
    "Formatter",
    "FormattingError",
    "IndexConfig",
    "IndexView",
    "LoadSummary",
    "MemoryBackend",
    "MemoryCacheStore",
    "MessageFormatter",
    "ResolutionSource",
    "TransdexError",
    "Translation",
    "TranslationIndex",
    "TranslationLoadError",
    "TranslationSaveError",
    "YamlBackend",
    "__version__",
    "load_yaml_content",
    "make_cache_key",
]
