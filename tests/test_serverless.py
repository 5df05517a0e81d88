"""Tests for the function-runtime entry point."""

import json

import httpx
import pytest
import respx

from votd_proxy import serverless
from votd_proxy.config import Settings
from votd_proxy.repositories import InMemoryVerseCache

from .fakes import EXPECTED_BODY, PASSAGE_DOCUMENT, VOTD_DOCUMENT

BASE_URL = "https://api.youversion.com/v1"


@pytest.fixture
def configured(monkeypatch):
    settings = Settings(youversion_api_key="test-key", youversion_api_url=BASE_URL, bible_id="111")
    monkeypatch.setattr(serverless, "_settings", settings)
    monkeypatch.setattr(serverless, "_cache", InMemoryVerseCache())
    return settings


@pytest.fixture
def unconfigured(monkeypatch):
    settings = Settings(youversion_api_key=None)
    monkeypatch.setattr(serverless, "_settings", settings)
    monkeypatch.setattr(serverless, "_cache", InMemoryVerseCache())
    return settings


def _mock_upstream(router) -> tuple[respx.Route, respx.Route]:
    votd = router.get(f"{BASE_URL}/verse_of_the_days/45").mock(
        return_value=httpx.Response(200, json=VOTD_DOCUMENT)
    )
    passage = router.get(f"{BASE_URL}/bibles/111/passages/MAT.15.13").mock(
        return_value=httpx.Response(200, json=PASSAGE_DOCUMENT)
    )
    return votd, passage


class TestHandleEvent:
    async def test_success_shape(self, configured) -> None:
        cache = InMemoryVerseCache()
        with respx.mock as router:
            _mock_upstream(router)
            response = await serverless.handle_event({"queryStringParameters": {"day": "45"}}, cache)

        assert response["statusCode"] == 200
        assert response["headers"] == {
            "Content-Type": "application/json",
            "Cache-Control": "public, max-age=0, s-maxage=3600",
        }
        assert json.loads(response["body"]) == EXPECTED_BODY
        assert cache.get().day == 45

    async def test_warm_cache_survives_invocations(self, configured) -> None:
        cache = InMemoryVerseCache()
        with respx.mock as router:
            votd, passage = _mock_upstream(router)
            event = {"queryStringParameters": {"day": "45"}}
            await serverless.handle_event(event, cache)
            second = await serverless.handle_event(event, cache)

        assert second["statusCode"] == 200
        assert votd.call_count == 1
        assert passage.call_count == 1

    async def test_missing_api_key(self, unconfigured) -> None:
        with respx.mock(assert_all_called=False) as router:
            votd, _ = _mock_upstream(router)
            response = await serverless.handle_event({"queryStringParameters": {"day": "45"}})

        assert response["statusCode"] == 500
        assert response["headers"] == {"Content-Type": "application/json"}
        assert json.loads(response["body"]) == {"error": "Server config error"}
        assert not votd.called

    async def test_null_query_parameters(self, unconfigured) -> None:
        response = await serverless.handle_event({"queryStringParameters": None})
        assert response["statusCode"] == 500


class TestHandler:
    def test_sync_entry_point(self, configured) -> None:
        with respx.mock as router:
            _mock_upstream(router)
            response = serverless.handler({"queryStringParameters": {"day": "45"}}, None)

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == EXPECTED_BODY
        assert serverless._cache.get().day == 45
