"""Cache entry domain entity."""

from dataclasses import dataclass

from .verse import VerseEntity


@dataclass(frozen=True)
class CacheEntryEntity:
    """The single cached (day, verse) pair.

    Attributes:
        day: Day-of-year the verse was fetched for (1-366)
        payload: The verse returned for that day
        stored_at_ms: Unix timestamp in milliseconds when the entry was written
    """

    day: int
    payload: VerseEntity
    stored_at_ms: int
