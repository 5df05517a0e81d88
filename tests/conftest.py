"""Shared fixtures for the verse-of-the-day tests."""

from datetime import date

import pytest

from votd_proxy.repositories import InMemoryVerseCache
from votd_proxy.services import VerseService

from .fakes import FakeClock, FakeProvider


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def cache() -> InMemoryVerseCache:
    return InMemoryVerseCache()


@pytest.fixture
def service(cache: InMemoryVerseCache, provider: FakeProvider, clock: FakeClock) -> VerseService:
    """VerseService on 2024-02-14 (day 45) with a fake provider."""
    return VerseService(
        cache=cache,
        provider=provider,
        ttl=3600,
        share_base_url="https://www.bible.com/bible",
        clock=clock,
        today=lambda: date(2024, 2, 14),
    )
