"""Health check endpoints for the local catalog."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from catalog_facade.application.health import check_local

router = APIRouter()


@router.get("/actuator/health", response_class=PlainTextResponse)
async def health_check() -> PlainTextResponse:
    """Check service health.

    Returns:
        Always ``UP``.
    """
    return PlainTextResponse(check_local().value)
