"""
Integration tests for RemoteMetadataResolver against the real link preview API.

Requires network and LINK_PREVIEW_API_KEY. Run with:
  pytest tests/integration/test_remote_resolver_integration.py -m integration -v
"""
from __future__ import annotations

import pytest

from linkpreview.app.config.settings import Settings
from linkpreview.app.infrastructure.http.factory import create_http_client
from linkpreview.app.infrastructure.resolvers.factory import create_metadata_resolver

TEST_URLS = [
    "https://github.com/python/cpython",
    "https://www.python.org/",
    "https://en.wikipedia.org/wiki/Portfolio",
]


@pytest.fixture
async def resolver():
    settings = Settings(APP_ENV="production")
    if not settings.link_preview_api_key:
        pytest.skip("LINK_PREVIEW_API_KEY not set")
    client = create_http_client(settings)
    yield create_metadata_resolver(settings, client)
    await client.close()


@pytest.mark.integration
@pytest.mark.parametrize("url", TEST_URLS, ids=lambda u: u.replace("https://", "")[:40])
async def test_remote_resolver_returns_record(resolver, url):
    record = await resolver.resolve(url)

    assert record.url == url
    assert record.title
    assert record.site_name


@pytest.mark.integration
async def test_remote_resolver_bad_host_still_returns_record(resolver):
    url = "https://this-host-does-not-exist.invalid/some-project"
    record = await resolver.resolve(url)

    assert record.url == url
    assert record.title
