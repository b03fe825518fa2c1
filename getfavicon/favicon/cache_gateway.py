"""Cache gateway persisting resolved favicons per domain"""

import logging

from pydantic import ValidationError

from getfavicon.cache.protocol import CacheAdapter
from getfavicon.exceptions import CacheAdapterError, CacheEntryError
from getfavicon.favicon.models import ResolvedIcon

logger = logging.getLogger(__name__)


class FaviconCacheGateway:
    """Read and write one `ResolvedIcon` record per domain on top of a cache adapter."""

    def __init__(self, cache: CacheAdapter) -> None:
        self.cache = cache

    @staticmethod
    def decode(value: bytes) -> ResolvedIcon:
        """Deserialize a cached record, marked as cached.

        Raises:
            - `CacheEntryError` if the value isn't a valid record or carries no image data.
        """
        try:
            icon = ResolvedIcon.model_validate_json(value)
        except ValidationError as exc:
            raise CacheEntryError(f"Invalid cached favicon record: {exc}") from exc
        if not icon.data:
            raise CacheEntryError("Cached favicon record has no image data")
        return icon.model_copy(update={"cached": True})

    async def lookup(self, domain: str) -> ResolvedIcon | None:
        """Return the cached record for the domain, or `None` on a miss.

        Read failures and corrupted records are logged and count as misses, the cache
        never blocks a resolution.
        """
        try:
            value = await self.cache.get(domain)
            if value is None:
                return None
            return self.decode(value)
        except (CacheAdapterError, CacheEntryError) as e:
            logger.warning(f"Ignoring unreadable cache entry for {domain}: {e}")
            return None

    async def store(self, domain: str, icon: ResolvedIcon) -> None:
        """Persist the record for the domain, marked as cached.

        Raises:
            - `CacheAdapterError` if the record can't be written.
        """
        record = icon.model_copy(update={"cached": True})
        await self.cache.set(domain, record.to_json().encode("utf-8"))
        logger.debug(f"Stored favicon record for {domain}")

    async def list_entries(self) -> list[str]:
        """List the names of the stored records.

        Raises:
            - `CacheMissError` if nothing was ever stored.
            - `CacheAdapterError` for other cache backend errors.
        """
        return await self.cache.keys()
