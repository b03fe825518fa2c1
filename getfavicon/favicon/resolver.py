"""Resolve the favicon of a domain: cache, fetch, extract, select, fill, persist."""

import logging

import aiodogstatsd
import httpx

from getfavicon.exceptions import CacheAdapterError
from getfavicon.favicon.cache_gateway import FaviconCacheGateway
from getfavicon.favicon.constants import DEFAULT_ICON_CONTENT_TYPE, MESSAGE_INVALID_DOMAIN
from getfavicon.favicon.favicon_extractor import extract_favicons
from getfavicon.favicon.favicon_filler import FaviconFiller
from getfavicon.favicon.favicon_selector import FaviconSelector
from getfavicon.favicon.models import FailureReason, HtmlFetchResult, ResolvedIcon
from getfavicon.favicon.utils import normalize_domain

logger = logging.getLogger(__name__)


class FaviconResolver:
    """Resolve a domain to a `ResolvedIcon`.

    The steps run in sequence for each request:

        normalize domain -> cache lookup -> fetch HTML -> extract -> select -> fill -> store

    A cache hit returns the stored record as is. Every failure before extraction yields
    a fallback record carrying the default icon and a message, and fallback records are
    never stored. Concurrent requests for the same domain are not deduplicated, the last
    one to store wins.
    """

    http_client: httpx.AsyncClient
    cache: FaviconCacheGateway
    filler: FaviconFiller
    metrics_client: aiodogstatsd.Client

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        cache: FaviconCacheGateway,
        filler: FaviconFiller,
        metrics_client: aiodogstatsd.Client,
    ) -> None:
        self.http_client = http_client
        self.cache = cache
        self.filler = filler
        self.metrics_client = metrics_client

    def fallback(self, reason: FailureReason, message: str) -> ResolvedIcon:
        """Build the record returned when no icon could be looked up."""
        self.metrics_client.increment("favicon.fallback", tags={"reason": reason.value})
        return ResolvedIcon(
            found=False,
            href="",
            mime_type=DEFAULT_ICON_CONTENT_TYPE,
            data=self.filler.default_icon,
            cached=False,
            message=message,
        )

    async def fetch_html(self, origin: str) -> HtmlFetchResult:
        """Fetch the root page of the origin in a single attempt."""
        try:
            response = await self.http_client.get(origin)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Error fetching HTML from {origin}: {e}")
            return HtmlFetchResult(
                failure=FailureReason.NETWORK_ERROR,
                message=f"Getting favicon error: {e}",
            )

        if not response.is_success:
            logger.info(f"Fetching HTML from {origin} not OK: {response.status_code}")
            return HtmlFetchResult(
                failure=FailureReason.HTTP_ERROR,
                message=(
                    "Fetching HTML response not OK! "
                    f"{response.status_code} {response.reason_phrase}"
                ),
            )

        return HtmlFetchResult(html=response.text)

    async def resolve(self, domain: str) -> ResolvedIcon:
        """Return the favicon record of the domain. Never raises for upstream failures."""
        with self.metrics_client.timeit("favicon.resolve.timing"):
            return await self._resolve(domain)

    async def _resolve(self, domain: str) -> ResolvedIcon:
        origin = normalize_domain(domain)
        if origin is None:
            logger.info(f"Cannot parse domain name: {domain!r}")
            return self.fallback(FailureReason.INVALID_DOMAIN, MESSAGE_INVALID_DOMAIN)

        cached_icon = await self.cache.lookup(domain)
        if cached_icon is not None:
            logger.debug(f"Using cached favicon for {domain}")
            self.metrics_client.increment("favicon.cache.hit")
            return cached_icon
        self.metrics_client.increment("favicon.cache.miss")

        result = await self.fetch_html(origin)
        if not result.ok or result.html is None:
            return self.fallback(
                result.failure or FailureReason.HTTP_ERROR, result.message or ""
            )

        candidates = extract_favicons(result.html)
        best_icon = FaviconSelector.select_best_favicon(candidates, origin)
        icon = await self.filler.fill(best_icon)

        try:
            await self.cache.store(domain, icon)
        except CacheAdapterError as e:
            logger.error(f"Failed to store favicon for {domain}: {e}")
            self.metrics_client.increment("favicon.cache.store_error")

        return icon
