"""Favicon discovery, selection and encoding components"""

from getfavicon.favicon.cache_gateway import FaviconCacheGateway
from getfavicon.favicon.favicon_extractor import extract_favicons, parse_icon_size
from getfavicon.favicon.favicon_filler import FaviconFiller, load_default_icon
from getfavicon.favicon.favicon_selector import FaviconSelector
from getfavicon.favicon.models import IconCandidate, ResolvedIcon
from getfavicon.favicon.resolver import FaviconResolver

__all__ = [
    "FaviconCacheGateway",
    "FaviconFiller",
    "FaviconResolver",
    "FaviconSelector",
    "IconCandidate",
    "ResolvedIcon",
    "extract_favicons",
    "load_default_icon",
    "parse_icon_size",
]
