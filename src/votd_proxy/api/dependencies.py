"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - The verse cache lives for the lifetime of the app, not the module
"""

from contextlib import asynccontextmanager
from typing import Annotated

import structlog
from fastapi import Depends, FastAPI, Request

from votd_proxy.config import Settings, get_settings
from votd_proxy.handlers import VerseHandler
from votd_proxy.logging_config import configure_logging
from votd_proxy.repositories import InMemoryVerseCache, YouVersionClient
from votd_proxy.services import VerseService

log = structlog.get_logger()


def get_handler(request: Request) -> VerseHandler:
    """Dependency injection for VerseHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The VerseHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "verse_handler", None)
    if handler is None:
        raise RuntimeError("VerseHandler not initialized. Check lifespan setup.")
    return handler


def build_verse_service(settings: Settings) -> VerseService:
    """Wire repository -> service from settings.

    Args:
        settings: Application settings

    Returns:
        A VerseService with an empty cache and a YouVersion client
    """
    provider = YouVersionClient.create(
        api_key=settings.youversion_api_key,
        base_url=settings.youversion_api_url,
        bible_id=settings.bible_id,
        timeout=settings.http_timeout,
    )
    return VerseService.create(
        cache=InMemoryVerseCache(),
        provider=provider,
        ttl=settings.cache_ttl,
        share_base_url=settings.share_base_url,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Repositories (cache, YouVersion client) - created explicitly
    2. Service (business logic) - stored in app.state.verse_service
    3. Handler (HTTP endpoints) - stored in app.state.verse_handler

    Cleanup:
        Closes the HTTP client and removes services from app.state
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)

    verse_service = build_verse_service(settings)
    verse_handler = VerseHandler(verse_service=verse_service, cache_control=settings.cache_control)

    app.state.verse_service = verse_service
    app.state.verse_handler = verse_handler

    log.info(
        "votd_service_started",
        api_url=settings.youversion_api_url,
        bible_id=settings.bible_id,
        cache_ttl=settings.cache_ttl,
        api_key_configured=verse_service.provider.is_configured,
    )

    yield

    await verse_service.provider.close()
    del app.state.verse_handler
    del app.state.verse_service
    log.info("votd_service_stopped")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[VerseHandler, Depends(get_handler)]
