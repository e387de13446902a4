"""Thread-safe in-process cache store.

Default CacheStore for TranslationIndex.

Architecture:
    - Plain dict keyed by cache key ("en-US/user.name")
    - Thread-safe using threading.RLock (reentrant lock)
    - Hit/miss/write counters for diagnostics

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from threading import RLock

from transdex.translation import Translation
from transdex.types import CacheKey

__all__ = ["MemoryCacheStore"]


class MemoryCacheStore:
    """Thread-safe in-memory CacheStore.

    Unbounded: every translation loaded or auto-created stays cached for the
    lifetime of the store. Returns None on miss.

    Attributes:
        hits: Number of get() calls that found an entry
        misses: Number of get() calls that found nothing
        writes: Number of set() calls
    """

    __slots__ = ("_entries", "_hits", "_lock", "_misses", "_writes")

    def __init__(self) -> None:
        self._entries: dict[CacheKey, Translation] = {}
        self._lock = RLock()
        self._hits = 0
        self._misses = 0
        self._writes = 0

    def get(self, key: CacheKey) -> Translation | None:
        """Get cached translation if it exists.

        Thread-safe. Returns None on cache miss.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
            else:
                self._hits += 1
            return entry

    def set(self, key: CacheKey, value: Translation) -> None:
        """Store translation, overwriting any existing entry. Thread-safe."""
        with self._lock:
            self._entries[key] = value
            self._writes += 1

    def delete(self, key: CacheKey) -> None:
        """Remove entry if present. Thread-safe; deleting a missing key is a no-op."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove all entries and reset metrics. Thread-safe."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            self._writes = 0

    def keys(self) -> list[CacheKey]:
        """Snapshot of cached keys. Thread-safe."""
        with self._lock:
            return list(self._entries)

    def get_stats(self) -> dict[str, int | float]:
        """Get cache statistics.

        Thread-safe. Returns current metrics.

        Returns:
            Dict with keys:
            - size (int): Current number of cached entries
            - hits (int): Number of cache hits
            - misses (int): Number of cache misses
            - writes (int): Number of set() calls
            - hit_rate (float): Hit rate as percentage (0.0-100.0)
        """
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0

            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "writes": self._writes,
                "hit_rate": round(hit_rate, 2),
            }

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __iter__(self) -> Iterator[CacheKey]:
        return iter(self.keys())

    def __len__(self) -> int:
        """Get current number of entries. Thread-safe."""
        with self._lock:
            return len(self._entries)

    @property
    def hits(self) -> int:
        """Number of cache hits. Thread-safe."""
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Number of cache misses. Thread-safe."""
        with self._lock:
            return self._misses

    @property
    def writes(self) -> int:
        """Number of writes. Thread-safe."""
        with self._lock:
            return self._writes
