"""Port: link metadata resolution strategy (local presets or remote API)."""
from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from linkpreview.app.domain.models import MetadataRecord


@runtime_checkable
class MetadataResolver(Protocol):
    async def resolve(self, url: str) -> MetadataRecord:
        """Always returns a record; failures degrade the record, never raise."""
        ...

    async def preload(self, urls: Iterable[str]) -> None:
        """Resolve all urls concurrently; never raises."""
        ...

    def clear_cache(self) -> None: ...
