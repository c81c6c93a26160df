from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request, Response
from loguru import logger

from linkpreview.app.core import SERVICE_NAME
from linkpreview.app.schemas.metadata import MetadataResponse, PreloadRequest, PreloadResponse


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


metadata_router = APIRouter(prefix="/metadata", tags=["Metadata"])


def _resolver_or_none(request: Request):
    return getattr(request.app.state, "resolver", None)


@metadata_router.get(
    "",
    summary="Resolve link metadata",
    description="Returns title, description and icon for a URL. Remote or network failures degrade the record instead of failing the request.",
    responses={
        200: {"description": "Metadata record (possibly a generic fallback)."},
        400: {"description": "Missing url query parameter."},
        503: {"description": "Resolver not initialized."},
    },
)
async def get_metadata(request: Request, url: str | None = None) -> Response:
    if not url:
        return Response(status_code=400, content="Missing required query parameter: url")

    resolver = _resolver_or_none(request)
    if resolver is None:
        return Response(status_code=503, content="Resolver not available")

    record = await resolver.resolve(url)
    return Response(
        status_code=200,
        media_type="application/json",
        content=MetadataResponse.from_record(record).model_dump_json(exclude_none=True),
    )


@metadata_router.post(
    "/preload",
    summary="Warm the metadata cache",
    description="Resolves every URL concurrently and waits for all of them. Individual failures are logged, not reported.",
    responses={
        200: {"description": "All URLs settled."},
        422: {"description": "Invalid request body."},
        503: {"description": "Resolver not initialized."},
    },
)
async def preload_metadata(request: Request, body: PreloadRequest) -> Response:
    resolver = _resolver_or_none(request)
    if resolver is None:
        return Response(status_code=503, content="Resolver not available")

    await resolver.preload(body.urls)
    _log("preload_requested", requested=len(body.urls))
    return Response(
        status_code=200,
        media_type="application/json",
        content=PreloadResponse(requested=len(body.urls)).model_dump_json(),
    )


@metadata_router.delete(
    "/cache",
    summary="Clear the metadata cache",
    responses={
        204: {"description": "Cache cleared."},
        503: {"description": "Resolver not initialized."},
    },
)
async def clear_metadata_cache(request: Request) -> Response:
    resolver = _resolver_or_none(request)
    if resolver is None:
        return Response(status_code=503, content="Resolver not available")

    resolver.clear_cache()
    _log("cache_cleared")
    return Response(status_code=204)
