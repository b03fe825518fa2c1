"""Favicon filler for downloading the selected favicon and encoding its image data"""

import logging
import pathlib
from functools import cache

import httpx

from getfavicon.favicon.constants import (
    DEFAULT_ICON_CONTENT_TYPE,
    MESSAGE_ICON_FETCH_ERROR,
    MESSAGE_ICON_NOT_FOUND,
    MESSAGE_NO_ICON_URL,
)
from getfavicon.favicon.models import ResolvedIcon
from getfavicon.favicon.utils import to_data_uri

logger = logging.getLogger(__name__)


@cache
def load_default_icon(path: str) -> str:
    """Read the bundled default icon and memoize it as a data URI.

    Errors are not handled here, a missing default icon should stop the service
    from starting.
    Raises:
        FileNotFoundError if the file cannot be found.
    """
    content = pathlib.Path(path).read_bytes()
    return to_data_uri(content, DEFAULT_ICON_CONTENT_TYPE)


class FaviconFiller:
    """Download the image of a selected favicon and store it as a data URI.

    Every failure keeps the default icon and explains itself in `message`.
    """

    def __init__(self, http_client: httpx.AsyncClient, default_icon: str) -> None:
        self.http_client = http_client
        self.default_icon = default_icon

    async def fill(self, icon: ResolvedIcon) -> ResolvedIcon:
        """Return a copy of the icon with `data` populated. Never raises."""
        filled = icon.model_copy(update={"data": self.default_icon})

        if not filled.href:
            filled.message = MESSAGE_NO_ICON_URL
            return filled

        logger.debug(f"Fetching icon file {filled.href}")
        try:
            response = await self.http_client.get(filled.href)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Error fetching icon file {filled.href}: {e}")
            filled.message = MESSAGE_ICON_FETCH_ERROR
            return filled

        if response.is_success:
            filled.data = to_data_uri(
                response.content, response.headers.get("Content-Type") or icon.mime_type
            )
        elif response.status_code == httpx.codes.NOT_FOUND:
            logger.info(f"Icon file not found: {filled.href}")
            filled.message = MESSAGE_ICON_NOT_FOUND
        else:
            logger.info(
                f"Fetching icon file not OK: {response.status_code} {response.reason_phrase}"
            )
            filled.message = f"Response not OK: {response.status_code} {response.reason_phrase}"

        return filled
