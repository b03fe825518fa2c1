"""URL and encoding utilities for favicon resolution"""

import base64
import logging
from typing import Optional
from urllib.parse import urljoin, urlsplit

from getfavicon.favicon.constants import FALLBACK_CONTENT_TYPE

logger = logging.getLogger(__name__)

HTTPS_PREFIX: str = "https://"


def normalize_domain(domain: str) -> Optional[str]:
    """Turn a domain (or URL) into the origin `https://<hostname>`, dropping any path.

    Returns `None` if the result can't be parsed or has no valid hostname.
    """
    url = domain if domain.startswith(HTTPS_PREFIX) else f"{HTTPS_PREFIX}{domain}"
    try:
        hostname = urlsplit(url).hostname
    except ValueError:
        return None

    if not hostname or any(char.isspace() for char in hostname):
        return None

    return f"{HTTPS_PREFIX}{hostname}"


def _has_valid_host(url: str) -> bool:
    """Check that the URL parses to a hostname without whitespace and a numeric port."""
    try:
        parts = urlsplit(url)
        # Reading the port raises on a non-numeric or out of range value.
        parts.port
    except ValueError:
        return False
    return bool(parts.hostname) and not any(char.isspace() for char in parts.hostname)


def is_absolute_https_url(url: str) -> bool:
    """Check if the URL uses https and carries a valid host."""
    return url.startswith(HTTPS_PREFIX) and _has_valid_host(url)


def resolve_icon_url(href: str, host_domain: str) -> str:
    """Make an icon href absolute against the host domain.

    Absolute https URLs are returned unchanged. Anything else is resolved as a
    reference relative to `https://<host_domain>`. Returns an empty string if the
    reference is malformed, including an https URL with a bad host or port.
    """
    if href.startswith(HTTPS_PREFIX):
        if is_absolute_https_url(href):
            return href
        logger.warning(f"Malformed icon href {href!r}")
        return ""

    host = host_domain if host_domain.startswith(HTTPS_PREFIX) else f"{HTTPS_PREFIX}{host_domain}"
    try:
        resolved = urljoin(host, href)
    except ValueError as e:
        logger.warning(f"Cannot resolve icon href {href!r} against {host}: {e}")
        return ""

    if resolved.startswith(("http://", HTTPS_PREFIX)) and not _has_valid_host(resolved):
        logger.warning(f"Icon href {href!r} resolved to {resolved!r} without a valid host")
        return ""

    return resolved


def to_data_uri(content: bytes, content_type: Optional[str]) -> str:
    """Encode bytes as a base64 data URI, e.g. `data:image/png;base64,iVBORw0...`."""
    media_type = (content_type or "").split(";")[0].strip().lower() or FALLBACK_CONTENT_TYPE
    return f"data:{media_type};base64,{base64.b64encode(content).decode('ascii')}"
