"""Favicon endpoints."""

import html
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from getfavicon.exceptions import CacheAdapterError, CacheMissError
from getfavicon.favicon.models import ResolvedIcon
from getfavicon.favicon.resolver import FaviconResolver

logger = logging.getLogger(__name__)

router = APIRouter()

HOME_TEXT = 'Get Favicon, try "/at/deno.com"'
LIST_DIRECTORY_NOT_FOUND = "Directory not found!"
LIST_UNKNOWN_ERROR = "Unknown error!"


def get_resolver(request: Request) -> FaviconResolver:
    """Return the resolver created at startup, see `getfavicon.main.lifespan`."""
    return request.app.state.resolver


def render_demo_page(icon: ResolvedIcon) -> str:
    """Render an HTML page showing the icon record and the icon itself."""
    return f"""<!DOCTYPE html>
<html>
  <head>
    <title>Get Favicon Demo</title>
  </head>
  <body>
    <pre><code>{html.escape(icon.to_json(indent=2))}</code></pre>
    <img alt="Icon" src="{html.escape(icon.data or '')}" />
  </body>
</html>
"""


@router.get("/", tags=["favicon"], summary="Usage hint", response_class=PlainTextResponse)
async def home() -> str:
    """Show how to use the service."""
    return HOME_TEXT


@router.get(
    "/at/{domain}",
    tags=["favicon"],
    summary="Favicon image data of a domain",
    response_class=PlainTextResponse,
)
async def favicon_at(domain: str, resolver: FaviconResolver = Depends(get_resolver)) -> str:
    """Return the favicon of the domain as a base64 data URI.

    The default icon is returned when the real one can't be obtained, so this always
    answers with 200.
    """
    icon = await resolver.resolve(domain)
    return icon.data or ""


@router.get(
    "/demo/{domain}",
    tags=["favicon"],
    summary="Favicon record of a domain rendered as a page",
    response_class=HTMLResponse,
)
async def favicon_demo(domain: str, resolver: FaviconResolver = Depends(get_resolver)) -> str:
    """Render the favicon record of the domain along with the image."""
    icon = await resolver.resolve(domain)
    return render_demo_page(icon)


@router.get(
    "/list",
    tags=["favicon"],
    summary="Cached favicon records",
    response_class=PlainTextResponse,
)
async def list_cached(resolver: FaviconResolver = Depends(get_resolver)) -> str:
    """List the names of the cached favicon records, one per line."""
    try:
        entries = await resolver.cache.list_entries()
    except CacheMissError:
        return LIST_DIRECTORY_NOT_FOUND
    except CacheAdapterError as e:
        logger.warning(f"Cannot list cached favicons: {e}")
        return LIST_UNKNOWN_ERROR
    return "\n".join(entries)
