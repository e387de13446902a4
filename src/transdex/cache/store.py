"""Cache store protocol consumed by TranslationIndex.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from transdex.translation import Translation
    from transdex.types import CacheKey

__all__ = ["CacheStore"]


class CacheStore(Protocol):
    """Protocol for the key/value store backing a TranslationIndex.

    This is a Protocol (structural typing) rather than ABC so that adapters
    for external caches need no import from transdex.

    Implementations must be safe for concurrent set/get/delete from multiple
    threads; the index performs no locking of its own.

    A miss may be signaled by returning None from get() or by raising
    CacheMissError or KeyError. Any other exception from get() is logged by
    the index and also read as a miss. Stores that serialize values must hand back a Translation
    (an empty value also counts as a miss).

    Example:
        >>> class RedisStore:
        ...     def __init__(self, client): self._client = client
        ...     def get(self, key):
        ...         raw = self._client.hgetall(key)
        ...         return Translation(raw["locale"], raw["key"], raw["value"]) if raw else None
        ...     def set(self, key, value):
        ...         self._client.hset(key, mapping={"locale": value.locale,
        ...                                         "key": value.key, "value": value.value})
        ...     def delete(self, key): self._client.delete(key)
    """

    def get(self, key: CacheKey) -> Translation | None:
        """Return the translation stored under key, or None on miss.

        Raises:
            CacheMissError: Optional alternative way to signal a miss
                (a plain KeyError is accepted too)
        """

    def set(self, key: CacheKey, value: Translation) -> None:
        """Store value under key, replacing any existing entry."""

    def delete(self, key: CacheKey) -> None:
        """Remove the entry under key.

        Raises:
            CacheStoreError: If the store cannot perform the removal
        """
