"""Cache stores for TranslationIndex.

Submodules:
    store  - CacheStore protocol (pluggable, e.g. for distributed caches)
    memory - MemoryCacheStore, the default thread-safe in-process store

Python 3.13+. Zero external dependencies.
"""

from transdex.cache.memory import MemoryCacheStore
from transdex.cache.store import CacheStore

__all__ = ["CacheStore", "MemoryCacheStore"]
