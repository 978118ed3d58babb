"""API v1 package initialization."""

from fastapi import APIRouter

from srtparse.api.v1 import health, parse

# Create v1 router
api_router = APIRouter()

# Include sub-routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(parse.router, prefix="/parse", tags=["parse"])

__all__ = ["api_router"]
