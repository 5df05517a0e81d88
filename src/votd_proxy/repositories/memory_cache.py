"""In-memory implementation of VerseCacheStore.

Holds a single (day, verse) pair for the lifetime of the process. The
hosting runtime may recycle the process at any time, which silently empties
the cache. Access is unsynchronized: two racing misses both fetch and the
last writer wins.
"""

from votd_proxy.entities import CacheEntryEntity


class InMemoryVerseCache:
    """Single-slot cache satisfying the VerseCacheStore protocol.

    Example:
        ```python
        cache = InMemoryVerseCache()
        cache.put(CacheEntryEntity(day=45, payload=verse, stored_at_ms=now_ms))
        cache.get()  # CacheEntryEntity(day=45, ...)
        ```
    """

    def __init__(self, entry: CacheEntryEntity | None = None) -> None:
        """Initialize the cache.

        Args:
            entry: Optional pre-populated entry (used by tests)
        """
        self._entry = entry

    def get(self) -> CacheEntryEntity | None:
        return self._entry

    def put(self, entry: CacheEntryEntity) -> None:
        self._entry = entry

    def clear(self) -> None:
        self._entry = None

    def __repr__(self) -> str:
        day = self._entry.day if self._entry else None
        return f"InMemoryVerseCache(day={day})"
