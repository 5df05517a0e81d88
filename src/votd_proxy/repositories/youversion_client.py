"""YouVersion platform API client.

Implements the two dependent calls behind the verse of the day:

    GET {base_url}/verse_of_the_days/{day}                    -> passage id
    GET {base_url}/bibles/{bible_id}/passages/{passage_id}    -> passage text

Both requests carry the app key in ``X-YVP-App-Key``. Any non-2xx status is
fatal for the request; nothing is retried.
"""

from typing import Any

import httpx
import structlog

from votd_proxy.config import settings
from votd_proxy.errors import ErrorCode, VotdError
from votd_proxy.extraction import extract_passage_id

log = structlog.get_logger()

# Distinguishes "not passed" from an explicit None, which disables the key
_FROM_SETTINGS: Any = object()


class YouVersionClient:
    """httpx-based implementation of the ContentProvider protocol.

    This class satisfies the ContentProvider protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        provider = YouVersionClient.create(api_key="...")

        passage_id = await provider.fetch_passage_id(45)  # "MAT.15.13"
        passage = await provider.fetch_passage(passage_id)
        await provider.close()
        ```
    """

    def __init__(
        self,
        api_key: str | None = _FROM_SETTINGS,
        base_url: str | None = None,
        bible_id: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the YouVersion client.

        Args:
            api_key: YouVersion app key. Defaults to settings.youversion_api_key;
                an explicit None or "" leaves the client unconfigured.
            base_url: API base URL. Defaults to settings.youversion_api_url.
            bible_id: Bible version for passage lookups. Defaults to settings.bible_id.
            timeout: Request timeout in seconds. Defaults to settings.http_timeout.
            client: Pre-built httpx client (tests inject one); created lazily otherwise.
        """
        self._api_key = settings.youversion_api_key if api_key is _FROM_SETTINGS else api_key
        self._base_url = (base_url or settings.youversion_api_url).rstrip("/")
        self._bible_id = bible_id or settings.bible_id
        self._timeout = timeout or settings.http_timeout
        self._client = client

    @classmethod
    def create(
        cls,
        api_key: str | None = _FROM_SETTINGS,
        base_url: str | None = None,
        bible_id: str | None = None,
        timeout: float | None = None,
    ) -> "YouVersionClient":
        """Factory method to create YouVersionClient with defaults.

        Args:
            api_key: App key. If omitted, uses settings.
            base_url: API base URL. If None, uses settings.
            bible_id: Bible version id. If None, uses settings.
            timeout: Request timeout. If None, uses settings.

        Returns:
            Configured YouVersionClient
        """
        return cls(api_key=api_key, base_url=base_url, bible_id=bible_id, timeout=timeout)

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    @property
    def bible_id(self) -> str:
        return self._bible_id

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "X-YVP-App-Key": self._api_key or "",
            "Accept": "application/json",
        }

    async def _get_json(self, url: str, endpoint: str) -> Any:
        """GET ``url`` and decode the JSON body.

        Args:
            url: Absolute URL to fetch
            endpoint: Label used in error messages ("VOTD Endpoint", "Passage Endpoint")

        Raises:
            VotdError: CONFIG_ERROR without a key, UPSTREAM_ERROR on transport
                failure or non-2xx status, SHAPE_ERROR on an undecodable body
        """
        if not self.is_configured:
            raise VotdError(ErrorCode.CONFIG_ERROR, "Server config error")

        try:
            response = await self.client.get(url, headers=self._headers)
        except httpx.HTTPError as e:
            raise VotdError(ErrorCode.UPSTREAM_ERROR, f"{endpoint} request failed: {e}") from e

        if not response.is_success:
            raise VotdError(ErrorCode.UPSTREAM_ERROR, f"{endpoint} Error: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise VotdError(ErrorCode.SHAPE_ERROR, f"{endpoint} returned invalid JSON") from e

    async def fetch_passage_id(self, day: int) -> str:
        url = f"{self._base_url}/verse_of_the_days/{day}"
        log.info("votd_fetch_passage_id", day=day, url=url)

        document = await self._get_json(url, "VOTD Endpoint")
        passage_id = extract_passage_id(document)
        if passage_id is None:
            raise VotdError(ErrorCode.SHAPE_ERROR, f"No passage_id found for day {day}")
        return passage_id

    async def fetch_passage(self, passage_id: str) -> Any:
        url = f"{self._base_url}/bibles/{self._bible_id}/passages/{passage_id}"
        log.info("votd_fetch_passage", passage_id=passage_id, bible_id=self._bible_id)

        return await self._get_json(url, "Passage Endpoint")

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
