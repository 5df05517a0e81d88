"""HTTP handler for the verse-of-the-day endpoint.

Converts the service's LookupResult into status code, headers and JSON body.
All failures collapse to status 500 with ``{"error": message}``.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from votd_proxy.config import settings
from votd_proxy.dto import ErrorResponse, HealthCheckResponse, VerseItem, VerseOfTheDayResponse
from votd_proxy.entities import LookupResult
from votd_proxy.services import VerseService


class VerseHandler:
    """HTTP handler for verse-of-the-day lookups.

    Example:
        ```python
        handler = VerseHandler(verse_service=service)

        @app.get("/api/votd")
        async def votd(day: str | None = None):
            return await handler.get_verse_of_the_day(day)
        ```
    """

    def __init__(self, verse_service: VerseService, cache_control: str | None = None) -> None:
        """Initialize the verse handler.

        Args:
            verse_service: The verse service for business logic (required).
            cache_control: Cache-Control value for successful responses. Defaults to settings.
        """
        self._service = verse_service
        self._cache_control = cache_control or settings.cache_control

    async def get_verse_of_the_day(self, day: str | None = None) -> JSONResponse:
        """Handle GET /api/votd requests.

        Args:
            day: Raw ``day`` query parameter, or None

        Returns:
            200 with the verse and Cache-Control, or 500 with the error message
        """
        result = await self._service.get_verse(day)
        return self.to_response(result)

    def to_response(self, result: LookupResult) -> JSONResponse:
        if result.ok:
            body = VerseOfTheDayResponse(
                verse=VerseItem(
                    text=result.verse.text,
                    human_reference=result.verse.human_reference,
                    url=result.verse.url,
                )
            )
            return JSONResponse(
                content=body.model_dump(),
                status_code=status.HTTP_200_OK,
                headers={"Cache-Control": self._cache_control},
            )

        return JSONResponse(
            content=ErrorResponse(error=result.error.message).model_dump(),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    async def health_check(self) -> JSONResponse:
        """Handle GET /health requests.

        Returns:
            200 when the API key is configured, 503 otherwise
        """
        configured = self._service.provider.is_configured
        entry = self._service.cache.get()

        body = HealthCheckResponse(
            status="healthy" if configured else "unhealthy",
            api_key_configured=configured,
            cached_day=entry.day if entry else None,
        )
        return JSONResponse(
            content=body.model_dump(),
            status_code=(
                status.HTTP_200_OK if configured else status.HTTP_503_SERVICE_UNAVAILABLE
            ),
        )
