"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class VerseItem(BaseModel):
    """The verse object nested under ``verse``."""

    text: str = Field(..., description="Passage text, or 'Text unavailable'")
    human_reference: str = Field(..., description="Readable reference, e.g. 'Matthew 15:13'")
    url: str = Field(..., description="Share link on bible.com")


class VerseOfTheDayResponse(BaseModel):
    """Response DTO for a successful verse-of-the-day lookup.

    Same body whether served from cache or freshly fetched.
    """

    verse: VerseItem


class ErrorResponse(BaseModel):
    """Response DTO for every failure (always status 500)."""

    error: str = Field(..., description="Human-readable error message")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    api_key_configured: bool = Field(..., description="Whether YOUVERSION_API_KEY is set")
    cached_day: int | None = Field(
        None,
        description="Day-of-year currently held by the in-process cache",
    )
