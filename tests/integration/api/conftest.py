# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations for the API integration test directory."""

import pathlib
from typing import Iterator

import httpx
import pytest
from starlette.testclient import TestClient

from getfavicon.cache.filesystem import FileSystemAdapter
from getfavicon.favicon.factory import create_resolver
from getfavicon.favicon.resolver import FaviconResolver
from getfavicon.main import app
from getfavicon.utils.http_client import create_http_client
from getfavicon.utils.metrics import get_metrics_client
from getfavicon.web.api import get_resolver

SVG_BYTES = b'<svg xmlns="http://www.w3.org/2000/svg"/>'

SITE_HTML = """<!DOCTYPE html>
<html>
  <head>
    <link rel="icon" href="/favicon.png" sizes="32x32" type="image/png" />
    <link rel="icon" href="/favicon.svg" sizes="any" type="image/svg+xml" />
  </head>
  <body></body>
</html>
"""


def site_handler(request: httpx.Request) -> httpx.Response:
    """Serve deno.com with an SVG icon, every other host answers 404."""
    if request.url.host != "deno.com":
        return httpx.Response(404)
    if request.url.path == "/":
        return httpx.Response(200, text=SITE_HTML, headers={"Content-Type": "text/html"})
    if request.url.path == "/favicon.svg":
        return httpx.Response(200, content=SVG_BYTES, headers={"Content-Type": "image/svg+xml"})
    return httpx.Response(404)


@pytest.fixture(name="cache_dir")
def fixture_cache_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Return a cache directory that doesn't exist until something is stored."""
    return tmp_path / "icons"


@pytest.fixture(name="resolver")
def fixture_resolver(cache_dir: pathlib.Path) -> FaviconResolver:
    """Return a resolver answered by `site_handler` and caching to `cache_dir`."""
    http_client = create_http_client(transport=httpx.MockTransport(site_handler))
    return create_resolver(http_client, get_metrics_client(), FileSystemAdapter(cache_dir))


@pytest.fixture(name="client")
def fixture_test_client(resolver: FaviconResolver) -> Iterator[TestClient]:
    """Return a FastAPI TestClient instance using the test resolver.

    Note that this will NOT trigger event handlers (i.e. `startup` and `shutdown`) for
    the app, see: https://fastapi.tiangolo.com/advanced/testing-events/
    """
    app.dependency_overrides[get_resolver] = lambda: resolver
    yield TestClient(app)
    del app.dependency_overrides[get_resolver]


@pytest.fixture(name="client_with_events")
def fixture_test_client_with_events() -> Iterator[TestClient]:
    """Return a FastAPI TestClient instance.

    This test client will trigger event handlers (i.e. `startup` and `shutdown`) for
    the app, see: https://fastapi.tiangolo.com/advanced/testing-events/
    """
    with TestClient(app) as client:
        yield client
