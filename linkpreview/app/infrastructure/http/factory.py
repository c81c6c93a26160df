"""HTTP client factory: builds AbstractHttpClient from settings (no provider logic in composition)."""
from __future__ import annotations

import httpx

from linkpreview.app.config.settings import Settings
from linkpreview.app.ports.http_client import AbstractHttpClient
from linkpreview.app.infrastructure.http.httpx_client import HttpxHttpClient


def create_http_client(settings: Settings) -> AbstractHttpClient:
    """Build an HTTP client from settings. Timeouts are applied per-request by the adapter."""
    headers: dict[str, str] = {}
    if settings.fetch_user_agent:
        headers["User-Agent"] = settings.fetch_user_agent
    async_client = httpx.AsyncClient(headers=headers)
    return HttpxHttpClient(async_client)
