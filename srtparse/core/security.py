"""Security and authentication middleware."""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from srtparse.core.config import get_settings

PUBLIC_PATHS = {"/", "/api/v1/", "/api/v1/health", "/docs", "/openapi.json", "/redoc"}


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Middleware to validate API key if configured."""

    async def dispatch(self, request: Request, call_next):
        """Validate the X-API-Key header for protected endpoints."""
        api_key = get_settings().api_key
        if not api_key or request.url.path in PUBLIC_PATHS:
            return await call_next(request)

        provided = request.headers.get("X-API-Key")
        if not provided:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Missing X-API-Key header."},
            )
        if provided != api_key:
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid API key. Please check your X-API-Key header."},
            )

        return await call_next(request)
