"""Composition root: build and lifecycle-manage concrete dependencies.

The only place that imports concrete classes and calls factories. Consumers
(CLI commands, API lifespan) receive the selected MetadataResolver from here
and never branch on the deployment mode themselves.
"""
from __future__ import annotations

from typing import Any

from loguru import logger

from linkpreview.app.config.settings import Settings
from linkpreview.app.core import SERVICE_NAME
from linkpreview.app.infrastructure.http.factory import create_http_client
from linkpreview.app.infrastructure.resolvers.factory import create_metadata_resolver
from linkpreview.app.ports.http_client import AbstractHttpClient
from linkpreview.app.ports.metadata_resolver import MetadataResolver


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class LinkPreviewDependencies:
    """Holds wired dependencies and their lifecycle."""

    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings
        self._http_client: AbstractHttpClient | None = None
        self._resolver: MetadataResolver | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def resolver(self) -> MetadataResolver:
        if self._resolver is None:
            raise RuntimeError("resolver is not initialized")
        return self._resolver

    @property
    def connected(self) -> bool:
        return self._resolver is not None

    async def connect(self) -> None:
        self._http_client = create_http_client(self._settings)
        self._resolver = create_metadata_resolver(self._settings, self._http_client)
        _log(
            "resolver_selected",
            environment=self._settings.environment,
            resolver=type(self._resolver).__name__,
        )

    async def close(self) -> None:
        if self._http_client is not None:
            try:
                await self._http_client.close()
            except Exception as exc:
                logger.warning("http client close failed: {}", exc)
            self._http_client = None

        self._resolver = None


def create_dependencies(settings: Settings | None = None) -> LinkPreviewDependencies:
    return LinkPreviewDependencies(settings=settings or Settings())
