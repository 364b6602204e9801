"""Cache port - Injectable caching abstraction.

Leg geometry is decoded on every call and never memoized inside the
model. Callers that draw the same itinerary repeatedly put a CachePort
in front of the decoder instead (see CachingGeometryDecoder).
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache)
    - adapters/cache/null_cache.py (NullCache), used when caching is off
    """

    def get(self, key: str) -> Optional[T]:
        """Return the cached value, or None on a miss or expiry."""
        ...

    def set(self, key: str, value: T) -> None:
        """Store ``value`` under ``key``."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value, computing and storing it on a miss.

        Args:
            key: The cache key.
            compute_fn: Called only when ``key`` is not cached.

        Returns:
            The cached or computed value.
        """
        ...

    def clear(self) -> int:
        """Drop every entry and return how many there were."""
        ...

    def size(self) -> int:
        """Number of entries currently held."""
        ...
