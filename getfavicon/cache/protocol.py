"""Protocol for cache adapters."""

from typing import Protocol


class CacheAdapter(Protocol):
    """A protocol describing a cache backend."""

    async def get(self, key: str) -> bytes | None:  # pragma: no cover
        """Get the value associated with the key. Returns `None` if the key isn't in the cache.

        Raises:
            - `CacheAdapterError` for cache backend errors.
        """
        ...

    async def set(self, key: str, value: bytes) -> None:  # pragma: no cover
        """Store a key-value pair in the cache, replacing any previous value.

        Raises:
            - `CacheAdapterError` for cache backend errors.
        """
        ...

    async def keys(self) -> list[str]:  # pragma: no cover
        """Return the names of the stored entries, sorted lexicographically.

        Raises:
            - `CacheMissError` if the backing store doesn't exist yet.
            - `CacheAdapterError` for other cache backend errors.
        """
        ...

    async def close(self) -> None:  # pragma: no cover
        """Close the adapter and release any underlying resources."""
        ...
