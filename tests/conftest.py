from __future__ import annotations

from typing import Any, Mapping

import pytest
from fastapi import FastAPI

from linkpreview.app.application.local_resolver import LocalMetadataResolver
from linkpreview.app.domain.presets import PresetTable
from linkpreview.app.ports.http_client import RequestTimeout
from linkpreview.app.routers.health import health_router
from linkpreview.app.routers.metadata import metadata_router


class CountingPresetTable(PresetTable):
    """PresetTable that records every lookup; raises for hostnames in fail_on."""

    def __init__(self, fail_on: set[str] | None = None) -> None:
        super().__init__()
        self.lookups: list[str] = []
        self._fail_on = fail_on or set()

    def lookup(self, hostname: str) -> dict[str, str]:
        self.lookups.append(hostname)
        if hostname in self._fail_on:
            raise RuntimeError(f"preset lookup exploded for {hostname}")
        return super().lookup(hostname)


class RecordingSleep:
    """Stands in for asyncio.sleep; records requested delays without waiting."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = "{}", url: str = "https://api.test/") -> None:
        self.status_code = status_code
        self.text = text
        self.url = url

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class FakeHttpClient:
    """Implements AbstractHttpClient for tests; returns a canned response or raises."""

    def __init__(
        self,
        response: FakeResponse | None = None,
        *,
        raise_on_get: Exception | None = None,
    ) -> None:
        self._response = response or FakeResponse()
        self._raise_on_get = raise_on_get
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def get(
        self,
        url: str,
        *,
        timeout: RequestTimeout,
        params: Mapping[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> FakeResponse:
        self.calls.append({"url": url, "timeout": timeout, "params": dict(params or {})})
        if self._raise_on_get is not None:
            raise self._raise_on_get
        return self._response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture()
def presets() -> CountingPresetTable:
    return CountingPresetTable()


@pytest.fixture()
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture()
def local_resolver(presets: CountingPresetTable, sleep: RecordingSleep) -> LocalMetadataResolver:
    return LocalMetadataResolver(presets, sleep=sleep)


@pytest.fixture()
def test_app(local_resolver: LocalMetadataResolver) -> FastAPI:
    app = FastAPI()
    app.state.resolver = local_resolver
    app.include_router(health_router)
    app.include_router(metadata_router)
    return app
