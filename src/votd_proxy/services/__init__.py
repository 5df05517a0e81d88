"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

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
"""

from .verse_service import VerseService, day_of_year, resolve_day

__all__ = [
    "VerseService",
    "day_of_year",
    "resolve_day",
]
