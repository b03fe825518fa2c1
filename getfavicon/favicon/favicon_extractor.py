"""Favicon extractor for finding icon declarations in HTML"""

import logging
import re

from bs4 import BeautifulSoup
from bs4.element import Tag

from getfavicon.favicon.constants import IMPLICIT_FAVICON_HREF, LINK_SELECTOR, PARSER
from getfavicon.favicon.models import IconCandidate

logger = logging.getLogger(__name__)

# Leading decimal digits of the first `sizes` token, e.g. "32" in "32x32".
_LEADING_INT = re.compile(r"\s*(\d+)")


def implicit_favicon() -> IconCandidate:
    """Return the candidate assumed when a page declares no icon."""
    return IconCandidate(found=False, href=IMPLICIT_FAVICON_HREF)


def parse_icon_size(sizes: str) -> int:
    """Get the (square) pixel size from a `sizes` attribute value.

    Only the part before the first "x" counts, so "48x48" is 48 and "16x16 32x32" is 16.
    Anything without leading digits, such as "any", "" or "-1x-1", is 0.
    """
    match = _LEADING_INT.match(sizes.split("x")[0])
    return int(match.group(1)) if match else 0


def _attribute(link: Tag, name: str, default: str = "") -> str:
    """Read an attribute as a string. BeautifulSoup returns multi-valued attributes
    such as `rel` as lists.
    """
    value = link.get(name)
    if value is None:
        return default
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def extract_favicons(html: str) -> list[IconCandidate]:
    """Extract icon candidates from link elements, in document order.

    Never fails: a page without icon declarations, or one that can't be parsed,
    yields the single implicit `/favicon.ico` candidate.
    """
    icons: list[IconCandidate] = []
    try:
        page = BeautifulSoup(html, PARSER)
        links = page.select(LINK_SELECTOR)
        logger.debug(f"Found {len(links)} icon link element(s)")
        for link in links:
            icons.append(
                IconCandidate(
                    found=True,
                    href=_attribute(link, "href"),
                    mime_type=_attribute(link, "type"),
                    size=parse_icon_size(_attribute(link, "sizes", "0")),
                )
            )
    except Exception as e:
        logger.warning(f"Exception extracting favicons: {e}")
        icons = []

    if not icons:
        icons.append(implicit_favicon())
    return icons
