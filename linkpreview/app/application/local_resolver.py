"""Local metadata resolver: presets + URL-shape fallback, cached per instance.

No network access. A fixed delay is awaited on every cache miss so that the
local strategy suspends at the same point the remote one does.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Iterable
from urllib.parse import urlsplit

from loguru import logger

from linkpreview.app.application.preload import preload_urls
from linkpreview.app.constants import EXTERNAL_LINK_TITLE, GENERIC_DESCRIPTION, LINK_TYPE
from linkpreview.app.core import SERVICE_NAME
from linkpreview.app.domain.fallback import (
    description_for_type,
    extract_title_from_url,
    favicon_url,
    parse_hostname,
    strip_www,
)
from linkpreview.app.domain.models import MetadataRecord
from linkpreview.app.domain.presets import PresetTable

SIMULATED_DELAY_SECONDS = 0.1


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


def minimal_fallback_record(url: str) -> MetadataRecord:
    """Record built without presets, used when the hostname cannot be parsed."""
    try:
        hostname = urlsplit(url).hostname
    except ValueError:
        hostname = None

    if not hostname:
        return MetadataRecord(
            url=url,
            title=EXTERNAL_LINK_TITLE,
            description=GENERIC_DESCRIPTION,
        )

    domain = strip_www(hostname)
    return MetadataRecord(
        url=url,
        title=domain,
        description=f"Visit {domain} for more information",
        site_name=domain,
        favicon=favicon_url(domain),
    )


class LocalMetadataResolver:
    """Network-free MetadataResolver with an unbounded, never-expiring cache.

    Two concurrent first-time resolutions of the same url may both miss the
    cache and both write it; the values are identical so last write wins.
    """

    def __init__(
        self,
        presets: PresetTable | None = None,
        *,
        delay_seconds: float = SIMULATED_DELAY_SECONDS,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._presets = presets if presets is not None else PresetTable()
        self._delay_seconds = float(delay_seconds)
        self._sleep = sleep
        self._cache: dict[str, MetadataRecord] = {}

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def get_cached(self, url: str) -> MetadataRecord | None:
        return self._cache.get(url)

    async def resolve(self, url: str) -> MetadataRecord:
        cached = self._cache.get(url)
        if cached is not None:
            _log("metadata_cache_hit", url=url)
            return cached

        try:
            hostname = parse_hostname(url)
        except ValueError:
            _log("metadata_unparsable_url", url=url)
            return minimal_fallback_record(url)

        preset = self._presets.lookup(hostname)
        await self._sleep(self._delay_seconds)

        link_type = preset.get("type") or LINK_TYPE.WEBSITE
        record = MetadataRecord(
            url=url,
            title=preset.get("site_name") or extract_title_from_url(url),
            description=description_for_type(link_type),
            site_name=preset.get("site_name") or hostname,
            favicon=preset.get("favicon") or favicon_url(hostname),
            type=link_type,
        )
        self._cache[url] = record
        _log("metadata_resolved", url=url, source="preset" if preset else "fallback")
        return record

    async def preload(self, urls: Iterable[str]) -> None:
        await preload_urls(self.resolve, urls)

    def clear_cache(self) -> None:
        self._cache.clear()
        _log("metadata_cache_cleared")
