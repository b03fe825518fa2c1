"""Build a `FaviconResolver` and its collaborators from the settings."""

import logging

import aiodogstatsd
import httpx

from getfavicon.cache.filesystem import FileSystemAdapter
from getfavicon.cache.none import NoCacheAdapter
from getfavicon.cache.protocol import CacheAdapter
from getfavicon.configs import settings
from getfavicon.favicon.cache_gateway import FaviconCacheGateway
from getfavicon.favicon.favicon_filler import FaviconFiller, load_default_icon
from getfavicon.favicon.resolver import FaviconResolver
from getfavicon.utils.http_client import create_http_client

logger = logging.getLogger(__name__)

favicon_settings = settings.favicon


def create_cache_adapter() -> CacheAdapter:
    """Create the cache adapter configured by `favicon.cache.backend`."""
    match favicon_settings.cache.backend:
        case "filesystem":
            return FileSystemAdapter(favicon_settings.cache.directory)
        case "none":
            return NoCacheAdapter()
        case _:
            raise ValueError(f"Unknown cache backend: {favicon_settings.cache.backend}")


def create_favicon_http_client() -> httpx.AsyncClient:
    """Create the HTTP client used for page and icon downloads."""
    return create_http_client(
        max_connections=favicon_settings.http.max_connections,
        connect_timeout=favicon_settings.http.connect_timeout_sec,
        request_timeout=favicon_settings.http.request_timeout_sec,
        pool_timeout=favicon_settings.http.pool_timeout_sec,
    )


def create_resolver(
    http_client: httpx.AsyncClient,
    metrics_client: aiodogstatsd.Client,
    cache: CacheAdapter | None = None,
) -> FaviconResolver:
    """Create a resolver sharing `http_client` for every download.

    The caller owns `http_client` and the cache adapter, and closes them on shutdown.
    """
    cache_adapter = cache or create_cache_adapter()
    default_icon = load_default_icon(favicon_settings.default_icon_path)
    logger.info(
        f"Favicon resolver ready (cache: {favicon_settings.cache.backend}, "
        f"default icon: {favicon_settings.default_icon_path})"
    )
    return FaviconResolver(
        http_client=http_client,
        cache=FaviconCacheGateway(cache_adapter),
        filler=FaviconFiller(http_client, default_icon),
        metrics_client=metrics_client,
    )
