"""Verse of the Day proxy - cached lookup of the YouVersion verse of the day.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (VerseCacheStore, ContentProvider)
    - repositories: In-memory cache and YouVersion API client
    - services: Day resolution, cache decision, fetch and reshape
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from votd_proxy.repositories import InMemoryVerseCache, YouVersionClient
    from votd_proxy.services import VerseService

    service = VerseService.create(
        cache=InMemoryVerseCache(),
        provider=YouVersionClient.create(),
    )
    result = await service.get_verse("45")
    ```

For HTTP API:
    ```python
    from votd_proxy.api.app import app
    ```

For function runtimes:
    ```python
    from votd_proxy.serverless import handler
    ```
"""

__version__ = "0.1.0"

from votd_proxy.config import get_settings, settings
from votd_proxy.dto import ErrorResponse, VerseItem, VerseOfTheDayResponse
from votd_proxy.entities import CacheEntryEntity, LookupResult, VerseEntity
from votd_proxy.errors import ErrorCode, VotdError
from votd_proxy.handlers import VerseHandler
from votd_proxy.protocols import ContentProvider, VerseCacheStore
from votd_proxy.repositories import InMemoryVerseCache, YouVersionClient
from votd_proxy.services import VerseService

__all__ = [
    "__version__",
    # Configuration
    "settings",
    "get_settings",
    # Errors
    "ErrorCode",
    "VotdError",
    # Protocols (interfaces)
    "ContentProvider",
    "VerseCacheStore",
    # Services (business logic)
    "VerseService",
    # Handlers (HTTP)
    "VerseHandler",
    # Repositories (data access)
    "InMemoryVerseCache",
    "YouVersionClient",
    # Entities (domain models)
    "CacheEntryEntity",
    "LookupResult",
    "VerseEntity",
    # DTOs (API contracts)
    "VerseItem",
    "VerseOfTheDayResponse",
    "ErrorResponse",
]
