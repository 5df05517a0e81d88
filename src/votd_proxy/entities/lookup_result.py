"""Lookup result returned by the service layer."""

from dataclasses import dataclass

from votd_proxy.errors import VotdError

from .verse import VerseEntity


@dataclass(frozen=True)
class LookupResult:
    """Outcome of one verse-of-the-day lookup.

    Exactly one of ``verse`` and ``error`` is set.

    Attributes:
        verse: The verse on success
        error: The failure on error, tagged with its ErrorCode
        day: Resolved day-of-year (None when the day itself was invalid)
        from_cache: True when served from the in-process cache
    """

    verse: VerseEntity | None = None
    error: VotdError | None = None
    day: int | None = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return self.verse is not None

    @classmethod
    def success(cls, verse: VerseEntity, day: int, from_cache: bool = False) -> "LookupResult":
        return cls(verse=verse, day=day, from_cache=from_cache)

    @classmethod
    def failure(cls, error: VotdError, day: int | None = None) -> "LookupResult":
        return cls(error=error, day=day)
