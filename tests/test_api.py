"""
Tests for the verse-of-the-day HTTP API.
"""

from datetime import date

import httpx
import pytest
import respx
from fastapi.testclient import TestClient

from votd_proxy.api.app import app
from votd_proxy.api.dependencies import get_handler
from votd_proxy.entities import CacheEntryEntity, VerseEntity
from votd_proxy.handlers import VerseHandler
from votd_proxy.repositories import InMemoryVerseCache, YouVersionClient
from votd_proxy.services import VerseService

from .fakes import (
    EXPECTED_BODY,
    PASSAGE_DOCUMENT,
    START_MS,
    VOTD_DOCUMENT,
    FakeClock,
    FakeProvider,
)

BASE_URL = "https://api.youversion.com/v1"
CACHE_CONTROL = "public, max-age=0, s-maxage=3600"


def _handler(provider, cache: InMemoryVerseCache) -> VerseHandler:
    service = VerseService(
        cache=cache,
        provider=provider,
        ttl=3600,
        share_base_url="https://www.bible.com/bible",
        clock=FakeClock(),
        today=lambda: date(2024, 2, 14),
    )
    return VerseHandler(verse_service=service, cache_control=CACHE_CONTROL)


@pytest.fixture
def verse_cache() -> InMemoryVerseCache:
    return InMemoryVerseCache()


@pytest.fixture
def make_client(verse_cache: InMemoryVerseCache):
    """Create a test client whose handler wraps the given provider."""
    clients = []

    def factory(provider) -> TestClient:
        handler = _handler(provider, verse_cache)
        app.dependency_overrides[get_handler] = lambda: handler
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.__exit__(None, None, None)
    app.dependency_overrides.clear()


@pytest.fixture
def youversion() -> YouVersionClient:
    return YouVersionClient(api_key="test-key", base_url=BASE_URL, bible_id="111")


def test_root(make_client):
    """Test root endpoint."""
    client = make_client(FakeProvider())
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Verse of the Day API"
    assert "votd" in data["endpoints"]


def test_health(make_client):
    """Test health check endpoint before and after a lookup."""
    client = make_client(FakeProvider())

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "api_key_configured": True, "cached_day": None}

    client.get("/api/votd", params={"day": "45"})
    assert client.get("/health").json()["cached_day"] == 45


def test_health_without_key(make_client):
    client = make_client(FakeProvider(configured=False))
    response = client.get("/health")
    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "unhealthy"
    assert data["api_key_configured"] is False


def test_votd_end_to_end(make_client, youversion, verse_cache):
    """day=45 through both upstream calls, then served from cache."""
    client = make_client(youversion)

    with respx.mock:
        votd_route = respx.get(f"{BASE_URL}/verse_of_the_days/45").mock(
            return_value=httpx.Response(200, json=VOTD_DOCUMENT)
        )
        passage_route = respx.get(f"{BASE_URL}/bibles/111/passages/MAT.15.13").mock(
            return_value=httpx.Response(200, json=PASSAGE_DOCUMENT)
        )

        response = client.get("/api/votd", params={"day": "45"})

        assert response.status_code == 200
        assert response.headers["cache-control"] == CACHE_CONTROL
        assert response.headers["content-type"] == "application/json"
        assert response.text == (
            '{"verse":{"text":"Hope verse text","human_reference":"Matthew 15:13",'
            '"url":"https://www.bible.com/bible/111/MAT.15.13"}}'
        )
        assert verse_cache.get().day == 45

        cached = client.get("/api/votd", params={"day": "45"})

        assert cached.status_code == 200
        assert cached.json() == EXPECTED_BODY
        assert cached.headers["cache-control"] == CACHE_CONTROL
        assert votd_route.call_count == 1
        assert passage_route.call_count == 1


def test_votd_defaults_to_server_date(make_client):
    provider = FakeProvider()
    client = make_client(provider)

    response = client.get("/api/votd")

    assert response.status_code == 200
    assert provider.calls[0] == ("passage_id", 45)


def test_netlify_function_path(make_client):
    client = make_client(FakeProvider())

    response = client.get("/.netlify/functions/votd", params={"day": "45"})

    assert response.status_code == 200
    assert response.json() == EXPECTED_BODY


def test_missing_api_key(make_client):
    provider = FakeProvider(configured=False)
    client = make_client(provider)

    response = client.get("/api/votd", params={"day": "45"})

    assert response.status_code == 500
    assert response.json() == {"error": "Server config error"}
    assert "cache-control" not in response.headers
    assert provider.calls == []


def test_identifier_failure_skips_content_call(make_client, youversion, verse_cache):
    client = make_client(youversion)

    with respx.mock(assert_all_called=False) as respx_mock:
        respx_mock.get(f"{BASE_URL}/verse_of_the_days/45").mock(return_value=httpx.Response(500))
        passage_route = respx_mock.get(f"{BASE_URL}/bibles/111/passages/MAT.15.13").mock(
            return_value=httpx.Response(200, json=PASSAGE_DOCUMENT)
        )

        response = client.get("/api/votd", params={"day": "45"})

        assert response.status_code == 500
        assert response.json() == {"error": "VOTD Endpoint Error: 500"}
        assert not passage_route.called
        assert verse_cache.get() is None


def test_missing_identifier(make_client, youversion):
    client = make_client(youversion)

    with respx.mock:
        respx.get(f"{BASE_URL}/verse_of_the_days/45").mock(
            return_value=httpx.Response(200, json={"data": []})
        )

        response = client.get("/api/votd", params={"day": "45"})

    assert response.status_code == 500
    assert response.json() == {"error": "No passage_id found for day 45"}


def test_invalid_day(make_client):
    provider = FakeProvider()
    client = make_client(provider)

    response = client.get("/api/votd", params={"day": "someday"})

    assert response.status_code == 500
    assert "error" in response.json()
    assert provider.calls == []


def test_oversized_day(make_client):
    provider = FakeProvider()
    client = make_client(provider)

    response = client.get("/api/votd", params={"day": "9" * 5000})

    assert response.status_code == 500
    assert response.json() == {"error": "Day must be between 1 and 366"}
    assert provider.calls == []


def test_missing_api_key_serves_warm_cache(make_client, verse_cache):
    verse = VerseEntity(
        text="Hope verse text",
        human_reference="Matthew 15:13",
        url="https://www.bible.com/bible/111/MAT.15.13",
    )
    verse_cache.put(CacheEntryEntity(day=45, payload=verse, stored_at_ms=START_MS))
    provider = FakeProvider(configured=False)
    client = make_client(provider)

    response = client.get("/api/votd", params={"day": "45"})

    assert response.status_code == 200
    assert response.headers["cache-control"] == CACHE_CONTROL
    assert response.json() == EXPECTED_BODY
    assert provider.calls == []
