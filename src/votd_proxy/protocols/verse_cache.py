"""Verse cache storage protocol.

Defines the interface for the single-slot store that keeps the most
recently fetched verse of the day. Freshness is decided by the service,
not the store.
"""

from typing import Protocol, runtime_checkable

from votd_proxy.entities import CacheEntryEntity


@runtime_checkable
class VerseCacheStore(Protocol):
    """Protocol for the verse cache.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def get(self) -> CacheEntryEntity | None:
        """Return the stored entry.

        Returns:
            The current entry, or None if nothing has been stored yet
        """
        ...

    def put(self, entry: CacheEntryEntity) -> None:
        """Replace the stored entry.

        Args:
            entry: The new (day, verse, timestamp) triple
        """
        ...

    def clear(self) -> None:
        """Drop the stored entry."""
        ...
