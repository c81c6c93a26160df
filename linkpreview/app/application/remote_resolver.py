"""Remote metadata resolver: external link preview API with local fallback.

Uses the HTTP port (AbstractHttpClient); the client is built in the composition
root. Every failure of the remote tier is one of the MetadataResolveError
subclasses below; resolve() catches exactly those and hands the url to the
local resolver, so callers always receive a record.
"""
from __future__ import annotations

import json
from typing import Any, Iterable
from urllib.parse import urlsplit

from loguru import logger
from pydantic import BaseModel, ValidationError

from linkpreview.app.application.local_resolver import LocalMetadataResolver
from linkpreview.app.application.preload import preload_urls
from linkpreview.app.core import SERVICE_NAME
from linkpreview.app.domain.models import MetadataRecord
from linkpreview.app.ports.http_client import (
    AbstractHttpClient,
    HttpClientError,
    HttpClientTimeoutError,
    RequestTimeout,
)

DEFAULT_API_URL = "https://api.linkpreview.net"


class MetadataResolveError(Exception):
    """Base error for remote metadata resolution failures."""


class RemoteTransportError(MetadataResolveError):
    """Raised when the request could not be completed (network, timeout)."""


class RemoteTimeoutError(RemoteTransportError):
    """Raised when the API request times out."""


class RemoteStatusError(MetadataResolveError):
    """Raised when the API answers with a non-success status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"API request failed: {status_code}")
        self.status_code = status_code


class RemotePayloadError(MetadataResolveError):
    """Raised when the response body is not the expected JSON object."""


class LinkPreviewPayload(BaseModel):
    """Fields read from the link preview API response; others are ignored."""

    title: str | None = None
    description: str | None = None
    image: str | None = None
    site_name: str | None = None
    favicon: str | None = None


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def _hostname_or_none(url: str) -> str | None:
    try:
        return urlsplit(url).hostname
    except ValueError:
        return None


class RemoteMetadataResolver:
    """MetadataResolver backed by the link preview API.

    Holds no cache of its own: successful API results are returned directly,
    while fallbacks go through (and populate) the local resolver's cache.
    """

    def __init__(
        self,
        client: AbstractHttpClient,
        local: LocalMetadataResolver,
        *,
        api_key: str | None,
        api_url: str = DEFAULT_API_URL,
        connect_timeout_seconds: float = 5.0,
        read_timeout_seconds: float = 15.0,
    ) -> None:
        self._client = client
        self._local = local
        self._api_key = api_key or None
        self._api_url = api_url
        self._timeout = RequestTimeout(
            connect_seconds=connect_timeout_seconds,
            read_seconds=read_timeout_seconds,
        )

    @property
    def local(self) -> LocalMetadataResolver:
        return self._local

    async def resolve(self, url: str) -> MetadataRecord:
        if not self._api_key:
            logger.bind(service_name=SERVICE_NAME, event="api_key_missing", url=url).warning(
                "No link preview API key provided, using local fallback"
            )
            return await self._local.resolve(url)

        try:
            record = await self._fetch_remote(url)
        except MetadataResolveError as exc:
            logger.bind(
                service_name=SERVICE_NAME,
                event="remote_resolve_failed",
                url=url,
                error_type=type(exc).__name__,
            ).error("Link preview API failed, using local fallback: {}", exc)
            return await self._local.resolve(url)

        _log("metadata_resolved", url=url, source="remote")
        return record

    async def _fetch_remote(self, url: str) -> MetadataRecord:
        try:
            response = await self._client.get(
                self._api_url,
                timeout=self._timeout,
                params={"key": self._api_key or "", "q": url},
            )
        except HttpClientTimeoutError as exc:
            raise RemoteTimeoutError(str(exc)) from exc
        except HttpClientError as exc:
            raise RemoteTransportError(str(exc)) from exc

        if not response.is_success:
            raise RemoteStatusError(response.status_code)

        try:
            data = json.loads(response.text)
        except ValueError as exc:
            raise RemotePayloadError(f"response body is not JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise RemotePayloadError(f"expected a JSON object, got {type(data).__name__}")
        try:
            payload = LinkPreviewPayload.model_validate(data)
        except ValidationError as exc:
            raise RemotePayloadError(str(exc)) from exc

        return MetadataRecord(
            url=url,
            title=payload.title,
            description=payload.description,
            image=payload.image,
            site_name=payload.site_name or _hostname_or_none(url),
            favicon=payload.favicon,
        )

    async def preload(self, urls: Iterable[str]) -> None:
        await preload_urls(self.resolve, urls)

    def clear_cache(self) -> None:
        self._local.clear_cache()
