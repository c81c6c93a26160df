"""Resolver factory: selects the metadata strategy from config, once."""
from __future__ import annotations

from linkpreview.app.application.local_resolver import LocalMetadataResolver
from linkpreview.app.application.remote_resolver import RemoteMetadataResolver
from linkpreview.app.config.settings import Settings
from linkpreview.app.constants import DEPLOYMENT_MODE
from linkpreview.app.ports.http_client import AbstractHttpClient
from linkpreview.app.ports.metadata_resolver import MetadataResolver


def create_local_resolver(settings: Settings) -> LocalMetadataResolver:
    return LocalMetadataResolver(delay_seconds=settings.simulated_delay_seconds)


def create_metadata_resolver(
    settings: Settings,
    http_client: AbstractHttpClient,
    *,
    local: LocalMetadataResolver | None = None,
) -> MetadataResolver:
    local = local if local is not None else create_local_resolver(settings)
    mode = settings.environment.strip().lower()

    if mode == DEPLOYMENT_MODE.PRODUCTION:
        return RemoteMetadataResolver(
            http_client,
            local,
            api_key=settings.link_preview_api_key,
            api_url=settings.link_preview_api_url,
            connect_timeout_seconds=settings.fetch_connect_timeout_seconds,
            read_timeout_seconds=settings.fetch_read_timeout_seconds,
        )

    return local
