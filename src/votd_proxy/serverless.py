"""Function-runtime entry point (Netlify Functions / AWS Lambda event shape).

    event:    {"queryStringParameters": {"day": "45"}}
    response: {"statusCode": 200, "headers": {...}, "body": "<json>"}

The cache is module-level so it survives between invocations of a warm
instance. Each invocation runs on its own event loop, so the httpx client
is opened and closed per invocation.
"""

import asyncio
from typing import Any

import httpx
import structlog

from votd_proxy.config import get_settings
from votd_proxy.handlers import VerseHandler
from votd_proxy.logging_config import configure_logging
from votd_proxy.repositories import InMemoryVerseCache, YouVersionClient
from votd_proxy.services import VerseService

_settings = get_settings()
configure_logging(_settings.log_level, _settings.log_format)

log = structlog.get_logger()

_cache = InMemoryVerseCache()


async def handle_event(
    event: dict[str, Any],
    cache: InMemoryVerseCache | None = None,
) -> dict[str, Any]:
    """Serve one function invocation.

    Args:
        event: Runtime event; only ``queryStringParameters.day`` is read
        cache: Cache to use. Defaults to the module-level warm-instance cache.

    Returns:
        Runtime response dict with statusCode, headers and a JSON string body
    """
    params = event.get("queryStringParameters") or {}
    day = params.get("day")

    async with httpx.AsyncClient(timeout=_settings.http_timeout) as client:
        provider = YouVersionClient(
            api_key=_settings.youversion_api_key,
            base_url=_settings.youversion_api_url,
            bible_id=_settings.bible_id,
            client=client,
        )
        service = VerseService.create(
            cache=cache if cache is not None else _cache,
            provider=provider,
            ttl=_settings.cache_ttl,
            share_base_url=_settings.share_base_url,
        )
        verse_handler = VerseHandler(service, cache_control=_settings.cache_control)
        response = await verse_handler.get_verse_of_the_day(day)

    headers = {"Content-Type": "application/json"}
    if "cache-control" in response.headers:
        headers["Cache-Control"] = response.headers["cache-control"]

    return {
        "statusCode": response.status_code,
        "headers": headers,
        "body": response.body.decode("utf-8"),
    }


def handler(event: dict[str, Any], context: Any = None) -> dict[str, Any]:
    """Synchronous entry point invoked by the function runtime."""
    return asyncio.run(handle_event(event or {}))
