# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test fixtures for the favicon unit test directory."""

from typing import Any

import httpx
import pytest
from aiodogstatsd import Client
from pytest_mock import MockerFixture

from getfavicon.utils.http_client import create_http_client
from tests.unit.types import HtmlFixture, HttpClientFactory, HttpHandler

DEFAULT_ICON = "data:image/svg+xml;base64,PHN2Zy8+"


@pytest.fixture(name="default_icon")
def fixture_default_icon() -> str:
    """Return the data URI standing in for the bundled default icon."""
    return DEFAULT_ICON


@pytest.fixture(name="html_with_favicons")
def fixture_html_with_favicons() -> HtmlFixture:
    """Return a function rendering a page declaring four icons, the last one an SVG
    unless `svg` is False.
    """

    def render(svg: bool = True) -> str:
        svg_link = (
            '<link rel="icon" href="/gnome.svg" sizes="any" type="image/svg+xml" />'
            if svg
            else ""
        )
        return f"""<!DOCTYPE html>
<html>
  <head>
    <title>Foo Bar</title>
    <link rel="stylesheet" href="/styles.css" />
    <link rel="icon" href="/favicon.png" sizes="32x32" type="image/png" />
    <link rel="icon" href="/img/favicon-16.ico" sizes="16x16" type="image/vnd.microsoft.icon" />
    <link rel="icon" href="/iphone.png" sizes="57x57" type="image/png" />
    {svg_link}
  </head>
  <body></body>
</html>
"""

    return render


@pytest.fixture(name="html_without_favicon")
def fixture_html_without_favicon() -> str:
    """Return a page that declares no icon."""
    return """<!DOCTYPE html>
<html>
  <head>
    <title>Bar Foo</title>
    <link rel="stylesheet" href="/styles.css" />
  </head>
  <body></body>
</html>
"""


@pytest.fixture(name="http_client_factory")
def fixture_http_client_factory() -> HttpClientFactory:
    """Return a function creating an HTTP client whose requests are answered by
    `handler` instead of the network.
    """

    def factory(handler: HttpHandler) -> httpx.AsyncClient:
        return create_http_client(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture(name="metrics_client_mock")
def fixture_metrics_client_mock(mocker: MockerFixture) -> Any:
    """Create a metrics client mock object for testing."""
    metrics_client = mocker.Mock(spec=Client)
    metrics_client.timeit.return_value.__enter__ = lambda *args: None
    metrics_client.timeit.return_value.__exit__ = lambda *args: None
    return metrics_client
