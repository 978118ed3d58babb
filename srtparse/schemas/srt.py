"""Pydantic schemas for the parse API."""

from typing import Any

from pydantic import BaseModel, Field

from srtparse.models.srt import SRTEntry, Timestamp


class TimestampSchema(BaseModel):
    """Timestamp fields as written in the source file."""

    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    text: str = Field(..., description="Fixed-width rendering (hh:mm:ss,mmm)")
    total_milliseconds: int

    @classmethod
    def from_timestamp(cls, timestamp: Timestamp) -> "TimestampSchema":
        return cls(
            hours=timestamp.hours,
            minutes=timestamp.minutes,
            seconds=timestamp.seconds,
            milliseconds=timestamp.milliseconds,
            text=str(timestamp),
            total_milliseconds=timestamp.total_milliseconds,
        )


class SubtitleEntrySchema(BaseModel):
    """A single parsed cue."""

    index: int
    start: TimestampSchema
    end: TimestampSchema
    lines: list[str] = Field(default_factory=list, description="Cue text, one item per line")
    text: str

    @classmethod
    def from_entry(cls, entry: SRTEntry) -> "SubtitleEntrySchema":
        return cls(
            index=entry.index,
            start=TimestampSchema.from_timestamp(entry.start),
            end=TimestampSchema.from_timestamp(entry.end),
            lines=list(entry.lines),
            text=entry.text,
        )


class ParseErrorSchema(BaseModel):
    """Location of the first malformed region in the input."""

    error: str = Field(..., description="Error code (e.g., 'malformed_timestamp')")
    message: str
    phase: str
    offset: int = Field(..., description="Byte offset of the offending token")
    line: int
    token: str
    side: str | None = Field(None, description="Timestamp side ('start' or 'end')")


class ParseResponse(BaseModel):
    """Response model for the parse endpoint."""

    entry_count: int = Field(..., description="Number of subtitle entries parsed")
    entries: list[SubtitleEntrySchema]
    error: ParseErrorSchema | None = Field(
        None, description="Set only in best-effort mode when parsing stopped early"
    )


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    service: str
    status: str
    version: str
    authentication: str
    endpoints: dict[str, Any] = Field(default_factory=dict)
