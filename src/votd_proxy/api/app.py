from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from votd_proxy import __version__
from votd_proxy.api.dependencies import HandlerDep, lifespan
from votd_proxy.config import settings
from votd_proxy.dto import ErrorResponse, HealthCheckResponse, VerseOfTheDayResponse

app = FastAPI(
    title="Verse of the Day API",
    description="Cached proxy for the YouVersion verse of the day",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.allowed_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

_VOTD_RESPONSES: dict[int | str, dict[str, Any]] = {
    200: {"model": VerseOfTheDayResponse},
    500: {"model": ErrorResponse},
}
_HEALTH_RESPONSES: dict[int | str, dict[str, Any]] = {
    200: {"model": HealthCheckResponse},
    503: {"model": HealthCheckResponse},
}


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Verse of the Day API",
        "version": __version__,
        "description": "Cached proxy for the YouVersion verse of the day",
        "endpoints": {
            "votd": "/api/votd?day={1-366}",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", responses=_HEALTH_RESPONSES)
async def health(handler: HandlerDep) -> JSONResponse:
    """Health check endpoint."""
    return await handler.health_check()


@app.get("/api/votd", responses=_VOTD_RESPONSES)
async def verse_of_the_day(handler: HandlerDep, day: str | None = None) -> JSONResponse:
    """
    Get the verse of the day.

    Args:
        day: Optional day-of-year (1-366). Defaults to the server's current date.

    Returns:
        The verse, cached for an hour by shared caches.
    """
    return await handler.get_verse_of_the_day(day)


# Path used by frontends built against the Netlify function
@app.get("/.netlify/functions/votd", responses=_VOTD_RESPONSES, include_in_schema=False)
async def netlify_verse_of_the_day(handler: HandlerDep, day: str | None = None) -> JSONResponse:
    return await handler.get_verse_of_the_day(day)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "votd_proxy.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
