"""Data models for favicon resolution"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


class IconCandidate(BaseModel):
    """An icon declaration found in a page, not yet fetched.

    `found` is False for the implicit `/favicon.ico` candidate assumed when the page
    declares no icon.
    """

    model_config = ConfigDict(populate_by_name=True)

    found: bool
    href: str
    mime_type: Optional[str] = Field(default=None, alias="type")
    size: Optional[NonNegativeInt] = None


class ResolvedIcon(IconCandidate):
    """The selected icon with its absolute URL, image data and status.

    This is both the unit of cache storage and the API response payload.
    """

    data: Optional[str] = None
    cached: bool = False
    message: Optional[str] = None

    def to_json(self, indent: int | None = None) -> str:
        """Serialize with the public field names, leaving out unset optional fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)


class FailureReason(str, Enum):
    """Why a resolution fell back to the default icon before reaching extraction."""

    INVALID_DOMAIN = "invalid_domain"
    HTTP_ERROR = "http_error"
    NETWORK_ERROR = "network_error"


class HtmlFetchResult(BaseModel):
    """Outcome of fetching a site's root page: either its HTML or a failure."""

    html: Optional[str] = None
    failure: Optional[FailureReason] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Whether the page was fetched successfully."""
        return self.failure is None
