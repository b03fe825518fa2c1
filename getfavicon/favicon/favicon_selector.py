"""Favicon selection logic for choosing the best favicon from multiple candidates"""

import logging

from getfavicon.favicon.models import IconCandidate, ResolvedIcon
from getfavicon.favicon.utils import resolve_icon_url

logger = logging.getLogger(__name__)


class FaviconSelector:
    """Select best favicon: SVGs first, then the largest declared size."""

    @staticmethod
    def is_svg(favicon: IconCandidate) -> bool:
        """Check if the favicon href points to an SVG file."""
        return favicon.href.lower().endswith(".svg")

    @staticmethod
    def pick(favicons: list[IconCandidate]) -> IconCandidate:
        """Pick the preferred candidate without touching its href.

        A single candidate always wins. Otherwise the first SVG in declaration order
        wins regardless of sizes, and without any SVG the largest size wins, ties going
        to the earlier declaration.
        """
        if not favicons:
            raise ValueError("Cannot select a favicon from an empty list of candidates")

        if len(favicons) == 1:
            return favicons[0]

        for favicon in favicons:
            if FaviconSelector.is_svg(favicon):
                return favicon

        # `sorted` is stable, also with `reverse=True`.
        return sorted(favicons, key=lambda favicon: favicon.size or 0, reverse=True)[0]

    @staticmethod
    def select_best_favicon(favicons: list[IconCandidate], base_domain: str = "") -> ResolvedIcon:
        """Select the best favicon and make its href absolute against `base_domain`.

        An empty `base_domain` leaves the href as declared. The candidates are not modified.
        """
        best = FaviconSelector.pick(favicons)
        logger.debug(f"Selected favicon {best.href!r} out of {len(favicons)} candidate(s)")

        icon = ResolvedIcon(**best.model_dump())
        if base_domain:
            icon.href = resolve_icon_url(best.href, base_domain)
        return icon
