"""Batch warm-up shared by every resolver strategy."""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Iterable

from loguru import logger

from linkpreview.app.core import SERVICE_NAME
from linkpreview.app.domain.models import MetadataRecord


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


async def preload_urls(
    resolve: Callable[[str], Awaitable[MetadataRecord]],
    urls: Iterable[str],
) -> None:
    """Run resolve for every url concurrently and wait for all to settle.

    Individual failures are logged and dropped; this coroutine never raises.
    Callers that need per-URL results must call resolve themselves.
    """
    targets = list(urls)
    if not targets:
        return

    outcomes = await asyncio.gather(
        *(resolve(url) for url in targets),
        return_exceptions=True,
    )

    failed = 0
    for url, outcome in zip(targets, outcomes):
        if isinstance(outcome, BaseException):
            failed += 1
            logger.bind(service_name=SERVICE_NAME, event="preload_item_failed", url=url).warning(
                "preload failed for {}: {}", url, outcome
            )

    _log("preload_completed", requested=len(targets), failed=failed)
