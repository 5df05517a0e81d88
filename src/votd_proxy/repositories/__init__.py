"""Repository layer for data access.

This layer keeps external state (the process-local cache, the YouVersion
API) behind protocol-based interfaces. This enables:
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from votd_proxy.protocols import ContentProvider, VerseCacheStore

from .memory_cache import InMemoryVerseCache
from .youversion_client import YouVersionClient

__all__ = [
    "ContentProvider",
    "VerseCacheStore",
    "InMemoryVerseCache",
    "YouVersionClient",
]
