"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from srtparse.core.config import Settings, get_settings
from srtparse.schemas import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Annotated[Settings, Depends(get_settings)]):
    """Report service status and the available endpoints."""
    endpoints = {
        "parse": [
            "POST /api/v1/parse - Parse an SRT file sent as the raw request body",
        ],
        "health": [
            "GET /api/v1/health - Service health check",
        ],
    }

    return HealthResponse(
        service=settings.app_name,
        status="running",
        version=settings.app_version,
        authentication="enabled" if settings.api_key else "disabled",
        endpoints=endpoints,
    )
