"""Verse-of-the-day service.

Orchestrates one lookup: resolve the day, consult the single-slot cache,
and on a miss run the two dependent upstream fetches, reshape the result
and store it.
"""

import re
import time
from collections.abc import Callable
from datetime import date

import structlog

from votd_proxy.config import settings
from votd_proxy.entities import CacheEntryEntity, LookupResult, VerseEntity
from votd_proxy.errors import ErrorCode, VotdError
from votd_proxy.extraction import build_share_url, extract_reference, extract_text
from votd_proxy.protocols import ContentProvider, VerseCacheStore

log = structlog.get_logger()

MIN_DAY = 1
MAX_DAY = 366

# Leading integer, like parseInt: "45" -> 45, "45abc" -> 45, "abc" -> no match
_LEADING_INT = re.compile(r"\s*([+-]?)([0-9]+)")


def day_of_year(today: date) -> int:
    """Return the 1-based day-of-year (Jan 1 = 1, Dec 31 of a leap year = 366)."""
    return today.timetuple().tm_yday


def resolve_day(raw: str | None, today: date) -> int:
    """Resolve the day to look up.

    An explicit ``day`` query value always wins over the server clock.

    Args:
        raw: Raw ``day`` query value, or None when absent
        today: Server-local date used when ``raw`` is absent or empty

    Returns:
        Day-of-year in 1-366

    Raises:
        VotdError: INVALID_DAY if ``raw`` has no leading integer or is out of range
    """
    if raw is None or raw == "":
        return day_of_year(today)

    match = _LEADING_INT.match(raw)
    if match is None:
        raise VotdError(ErrorCode.INVALID_DAY, f"Invalid day parameter: {raw!r}")

    sign, digits = match.groups()
    # More than three significant digits is always out of range
    if len(digits.lstrip("0")) > 3:
        raise VotdError(ErrorCode.INVALID_DAY, f"Day must be between {MIN_DAY} and {MAX_DAY}")

    day = int(sign + digits)
    if not MIN_DAY <= day <= MAX_DAY:
        raise VotdError(
            ErrorCode.INVALID_DAY,
            f"Day must be between {MIN_DAY} and {MAX_DAY}, got {day}",
        )
    return day


def _now_ms() -> int:
    return int(time.time() * 1000)


class VerseService:
    """Core verse-of-the-day orchestration.

    This service depends on PROTOCOLS, not concrete implementations:
    - VerseCacheStore: the single-slot cache
    - ContentProvider: the upstream Bible-content API

    Time is injected (``clock`` in milliseconds, ``today`` for the date) so
    tests can move the clock without sleeping.

    Example:
        ```python
        service = VerseService(
            cache=InMemoryVerseCache(),
            provider=YouVersionClient.create(api_key="..."),
        )
        result = await service.get_verse(None)  # today's verse
        if result.ok:
            print(result.verse.text)
        ```
    """

    def __init__(
        self,
        cache: VerseCacheStore,
        provider: ContentProvider,
        ttl: int | None = None,
        share_base_url: str | None = None,
        clock: Callable[[], int] | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        """Initialize the verse service.

        Args:
            cache: Single-slot cache store (required).
            provider: Upstream content provider (required).
            ttl: Cache freshness window in seconds. Defaults to settings.
            share_base_url: Base of the display URL. Defaults to settings.
            clock: Returns the current Unix time in milliseconds.
            today: Returns the server-local date.
        """
        self._cache = cache
        self._provider = provider
        self._ttl_ms = (ttl or settings.cache_ttl) * 1000
        self._share_base_url = share_base_url or settings.share_base_url
        self._clock = clock or _now_ms
        self._today = today or date.today

    @classmethod
    def create(
        cls,
        cache: VerseCacheStore,
        provider: ContentProvider,
        ttl: int | None = None,
        share_base_url: str | None = None,
    ) -> "VerseService":
        """Factory method to create VerseService with the system clock.

        Args:
            cache: Single-slot cache store (required).
            provider: Upstream content provider (required).
            ttl: Freshness window in seconds. If None, uses settings.
            share_base_url: Display URL base. If None, uses settings.

        Returns:
            Configured VerseService instance
        """
        return cls(cache=cache, provider=provider, ttl=ttl, share_base_url=share_base_url)

    async def get_verse(self, raw_day: str | None = None) -> LookupResult:
        """Return the verse for the requested (or current) day.

        Business logic:
        1. Resolve the day from ``raw_day`` or the server date
        2. Serve from cache if it holds this day and is under the TTL
        3. Otherwise fetch passage id, then passage, and reshape
        4. Store the result (success only) and return it

        Args:
            raw_day: Raw ``day`` query value, or None

        Returns:
            LookupResult carrying either the verse or the VotdError
        """
        try:
            day = resolve_day(raw_day, self._today())
        except VotdError as e:
            log.warning("votd_invalid_day", raw_day=raw_day, error=e.message)
            return LookupResult.failure(e)

        cached = self.lookup_cached(day)
        if cached is not None:
            log.info("votd_cache_hit", day=day)
            return LookupResult.success(cached, day=day, from_cache=True)

        log.info("votd_cache_miss", day=day)
        try:
            verse = await self._fetch(day)
        except VotdError as e:
            log.error("votd_lookup_failed", day=day, code=e.code.value, error=e.message)
            return LookupResult.failure(e, day=day)

        self._cache.put(CacheEntryEntity(day=day, payload=verse, stored_at_ms=self._clock()))
        log.info("votd_cached", day=day, reference=verse.human_reference)
        return LookupResult.success(verse, day=day)

    def lookup_cached(self, day: int) -> VerseEntity | None:
        """Return the cached verse if it belongs to ``day`` and is still fresh.

        Args:
            day: Resolved day-of-year

        Returns:
            The cached verse, or None on a miss
        """
        entry = self._cache.get()
        if entry is None or entry.day != day:
            return None
        if self._clock() - entry.stored_at_ms >= self._ttl_ms:
            return None
        return entry.payload

    async def _fetch(self, day: int) -> VerseEntity:
        if not self._provider.is_configured:
            log.error("votd_config_missing_key")
            raise VotdError(ErrorCode.CONFIG_ERROR, "Server config error")

        passage_id = await self._provider.fetch_passage_id(day)
        document = await self._provider.fetch_passage(passage_id)

        return VerseEntity(
            text=extract_text(document),
            human_reference=extract_reference(document, fallback=passage_id),
            url=build_share_url(self._share_base_url, self._provider.bible_id, passage_id),
        )

    @property
    def ttl_ms(self) -> int:
        """Get the cache freshness window in milliseconds."""
        return self._ttl_ms

    @property
    def cache(self) -> VerseCacheStore:
        """Get the underlying cache store (for testing)."""
        return self._cache

    @property
    def provider(self) -> ContentProvider:
        """Get the underlying content provider (for testing)."""
        return self._provider
