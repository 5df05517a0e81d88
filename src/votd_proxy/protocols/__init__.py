"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the in-memory cache for another single-slot store
- Unit testing with fake providers that record their calls
- Clear separation of concerns

Usage:
    ```python
    from votd_proxy.protocols import ContentProvider, VerseCacheStore

    cache: VerseCacheStore = InMemoryVerseCache()
    provider: ContentProvider = YouVersionClient.create()
    ```
"""

from .content_provider import ContentProvider
from .verse_cache import VerseCacheStore

__all__ = [
    "ContentProvider",
    "VerseCacheStore",
]
