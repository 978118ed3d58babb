"""Render parsed subtitle entries and parse errors for display."""

from collections.abc import Iterable

from srtparse.core.exceptions import MalformedTimestampError, SRTParseError
from srtparse.models.srt import SRTEntry


def format_entries(entries: Iterable[SRTEntry]) -> str:
    """Render entries as ``<index>: <text>`` paragraphs."""
    return "".join(f"{entry.index}: {entry.text}\n\n" for entry in entries)


def format_entry_details(entry: SRTEntry) -> str:
    """Render one entry as a full cue block."""
    block = f"{entry.index}\n{entry.start} --> {entry.end}\n"
    if entry.lines:
        block += entry.text + "\n"
    return block


def describe_error(error: SRTParseError) -> str:
    """Describe where the input diverged from the SRT grammar.

    Args:
        error: Parse error raised by the block parser

    Returns:
        Single-line description with phase, line, offset and offending token
    """
    description = (
        f"{error.code}: {error.message} "
        f"[phase={error.phase} line={error.line} offset={error.offset}"
    )
    if isinstance(error, MalformedTimestampError):
        description += f" side={error.side}"
    return description + f" token={error.token!r}]"
