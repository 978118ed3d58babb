"""Middleware configuration."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from srtparse.core.config import get_settings
from srtparse.core.security import AuthenticationMiddleware


def setup_middleware(app: FastAPI) -> None:
    """Configure CORS and authentication middleware.

    Args:
        app: FastAPI application instance
    """
    settings = get_settings()

    if settings.cors_enabled:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=settings.cors_allow_credentials,
            allow_methods=settings.cors_allow_methods,
            allow_headers=settings.cors_allow_headers,
        )

    app.add_middleware(AuthenticationMiddleware)
