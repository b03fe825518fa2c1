# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the favicon selector module."""

import pytest

from getfavicon.favicon.favicon_extractor import extract_favicons
from getfavicon.favicon.favicon_selector import FaviconSelector
from getfavicon.favicon.models import IconCandidate, ResolvedIcon
from getfavicon.favicon.utils import resolve_icon_url
from tests.unit.types import HtmlFixture


def test_select_best_favicon_prefers_svg(html_with_favicons: HtmlFixture) -> None:
    """Test that an SVG wins over larger raster icons."""
    best = FaviconSelector.select_best_favicon(extract_favicons(html_with_favicons(True)))

    assert best == ResolvedIcon(found=True, href="/gnome.svg", mime_type="image/svg+xml", size=0)


def test_select_best_favicon_largest_without_svg(html_with_favicons: HtmlFixture) -> None:
    """Test that the largest icon wins when there is no SVG."""
    best = FaviconSelector.select_best_favicon(extract_favicons(html_with_favicons(False)))

    assert best == ResolvedIcon(found=True, href="/iphone.png", mime_type="image/png", size=57)


def test_select_best_favicon_first_svg_wins() -> None:
    """Test that the first SVG in declaration order is chosen."""
    favicons = [
        IconCandidate(found=True, href="/a.png", size=512),
        IconCandidate(found=True, href="/first.svg", size=0),
        IconCandidate(found=True, href="/second.SVG", size=64),
    ]

    assert FaviconSelector.select_best_favicon(favicons).href == "/first.svg"


def test_select_best_favicon_tie_keeps_declaration_order() -> None:
    """Test that equally sized icons resolve to the earliest declaration."""
    favicons = [
        IconCandidate(found=True, href="/small.png", size=16),
        IconCandidate(found=True, href="/first.png", size=32),
        IconCandidate(found=True, href="/second.png", size=32),
    ]

    assert FaviconSelector.select_best_favicon(favicons).href == "/first.png"


def test_select_best_favicon_missing_sizes_count_as_zero() -> None:
    """Test that an icon without size loses against any sized icon."""
    favicons = [
        IconCandidate(found=True, href="/unsized.png"),
        IconCandidate(found=True, href="/sized.png", size=1),
    ]

    assert FaviconSelector.select_best_favicon(favicons).href == "/sized.png"


def test_select_best_favicon_single_candidate() -> None:
    """Test that a single candidate is returned as is."""
    favicons = [IconCandidate(found=False, href="/favicon.ico")]

    best = FaviconSelector.select_best_favicon(favicons)

    assert best.model_dump() == ResolvedIcon(found=False, href="/favicon.ico").model_dump()


def test_select_best_favicon_empty_list() -> None:
    """Test that selecting from no candidates is an error."""
    with pytest.raises(ValueError):
        FaviconSelector.select_best_favicon([])


def test_select_best_favicon_resolves_href(html_with_favicons: HtmlFixture) -> None:
    """Test that the href is made absolute against the base domain."""
    best = FaviconSelector.select_best_favicon(
        extract_favicons(html_with_favicons(True)), "https://deno.com"
    )

    assert best.href == "https://deno.com/gnome.svg"


def test_select_best_favicon_does_not_modify_candidates() -> None:
    """Test that resolving the href leaves the input candidates untouched."""
    favicons = [IconCandidate(found=True, href="/favicon.svg")]

    FaviconSelector.select_best_favicon(favicons, "deno.com")

    assert favicons[0].href == "/favicon.svg"


@pytest.mark.parametrize(
    ("href", "host_domain", "expected_url"),
    [
        ("/static/favicon.svg", "https://deno.com", "https://deno.com/static/favicon.svg"),
        ("/static/favicon.svg", "deno.com", "https://deno.com/static/favicon.svg"),
        ("favicon.png", "https://deno.com", "https://deno.com/favicon.png"),
        ("https://cdn.example.com/icon.png", "deno.com", "https://cdn.example.com/icon.png"),
        ("//cdn.example.com/icon.png", "deno.com", "https://cdn.example.com/icon.png"),
        ("http://example.com/icon.png", "deno.com", "http://example.com/icon.png"),
        ("", "deno.com", "https://deno.com"),
        ("/icon.png", "https://[::1", ""),
        ("https://x:abc/i.png", "deno.com", ""),
        ("https://exa mple.com/i.png", "deno.com", ""),
        ("https://", "deno.com", ""),
        ("http://exa mple.com/i.png", "deno.com", ""),
    ],
    ids=[
        "root_relative",
        "bare_host_domain",
        "path_relative",
        "absolute_https",
        "protocol_relative",
        "absolute_http",
        "empty_href",
        "malformed_host",
        "absolute_https_bad_port",
        "absolute_https_space_in_host",
        "bare_https_scheme",
        "absolute_http_space_in_host",
    ],
)
def test_resolve_icon_url(href: str, host_domain: str, expected_url: str) -> None:
    """Test that icon hrefs are made absolute against the host domain."""
    assert resolve_icon_url(href, host_domain) == expected_url
