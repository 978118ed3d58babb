"""Parse SRT subtitle files into structured subtitle entries."""

from srtparse.core.exceptions import (
    MalformedIndexError,
    MalformedTimestampError,
    MalformedTimingLineError,
    SRTError,
    SRTFileError,
    SRTParseError,
    UnexpectedEndOfInputError,
)
from srtparse.models.srt import SRTEntry, Timestamp
from srtparse.services.srt_parser import SRTBlockParser, parse_srt

__version__ = "0.1.0"

__all__ = [
    "parse_srt",
    "SRTBlockParser",
    "SRTEntry",
    "Timestamp",
    "SRTError",
    "SRTParseError",
    "SRTFileError",
    "MalformedIndexError",
    "MalformedTimingLineError",
    "MalformedTimestampError",
    "UnexpectedEndOfInputError",
]
