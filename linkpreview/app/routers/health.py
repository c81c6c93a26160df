from typing import Any

from fastapi import APIRouter, Request, Response
from loguru import logger

from linkpreview.app.core import SERVICE_NAME

health_router = APIRouter(tags=["Health"])

def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")

@health_router.get(
    "/health/live",
    summary="Liveness probe",
    description="Returns 200 if the service process is running.",
    responses={200: {"description": "Service is alive."}},
)
async def live() -> dict:
    return {"status": "ok"}


@health_router.get(
    "/health/ready",
    summary="Readiness probe",
    description="Returns 200 only when a metadata resolver has been wired by the lifespan.",
    responses={
        200: {"description": "Resolver is ready."},
        503: {"description": "Resolver not initialized."},
    },
)
async def ready(request: Request) -> Response:
    resolver = getattr(request.app.state, "resolver", None)
    if resolver is None:
        _log("components_not_initialized")
        return Response(status_code=503, content="Not ready")
    return Response(status_code=200, content="OK")
