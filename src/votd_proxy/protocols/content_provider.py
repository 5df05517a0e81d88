"""Content provider protocol.

Defines the interface for the upstream Bible-content API: one call to find
the passage for a day, one call to fetch that passage.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ContentProvider(Protocol):
    """Protocol for verse-of-the-day content providers."""

    @property
    def is_configured(self) -> bool:
        """Return whether credentials are available.

        Returns:
            True if an API key is set, False otherwise
        """
        ...

    @property
    def bible_id(self) -> str:
        """Return the Bible version used for passage lookups (e.g. "111")."""
        ...

    async def fetch_passage_id(self, day: int) -> str:
        """Look up the passage identifier for a day-of-year.

        Args:
            day: Day-of-year (1-366)

        Returns:
            Passage identifier, e.g. "MAT.15.13"

        Raises:
            VotdError: UPSTREAM_ERROR on transport/status failure,
                SHAPE_ERROR if no identifier is present
        """
        ...

    async def fetch_passage(self, passage_id: str) -> Any:
        """Fetch the decoded passage document.

        Args:
            passage_id: Identifier returned by fetch_passage_id

        Returns:
            The decoded JSON document

        Raises:
            VotdError: UPSTREAM_ERROR on transport/status failure
        """
        ...

    async def close(self) -> None:
        """Release network resources."""
        ...
