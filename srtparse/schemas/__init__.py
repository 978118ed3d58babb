"""Pydantic schemas for API request/response validation."""

from srtparse.schemas.srt import (
    HealthResponse,
    ParseErrorSchema,
    ParseResponse,
    SubtitleEntrySchema,
    TimestampSchema,
)

__all__ = [
    "HealthResponse",
    "ParseErrorSchema",
    "ParseResponse",
    "SubtitleEntrySchema",
    "TimestampSchema",
]
