"""SRT block parser.

Consumes a complete byte buffer as a sequence of cue blocks::

    <index>
    <hh:mm:ss,mmm> --> <hh:mm:ss,mmm>
    <text line>...
    <blank line>

Parsing is an explicit state machine. Each phase has its own transition
method taking the cursor position and the draft cue, and returning a ``Step``
with the next phase, the new cursor position and, once a block is complete,
the emitted entry. ``parse`` only dispatches on the phase and collects entries.
"""

from dataclasses import dataclass, field, replace
import enum

from srtparse.core.exceptions import (
    MalformedIndexError,
    MalformedTimestampError,
    MalformedTimingLineError,
    SRTParseError,
    UnexpectedEndOfInputError,
)
from srtparse.models.srt import TIMESTAMP_TOKEN_LENGTH, SRTEntry, Timestamp

_UTF8_BOM = b"\xef\xbb\xbf"
_ARROW = b"-->"


class Phase(str, enum.Enum):
    """Parser phase enum."""

    EXPECT_INDEX = "expect_index"
    EXPECT_START = "expect_start"
    EXPECT_END = "expect_end"
    EXPECT_TEXT = "expect_text"
    END = "end"


@dataclass(frozen=True)
class Draft:
    """Fields of the cue block read so far."""

    index: int | None = None
    start: Timestamp | None = None
    end: Timestamp | None = None
    # The timing line is read once in EXPECT_START; the end side waits here
    end_token: bytes = b""
    end_offset: int = 0
    end_truncated: bool = False


@dataclass(frozen=True)
class Step:
    """Result of one transition."""

    phase: Phase
    position: int
    draft: Draft = field(default_factory=Draft)
    entry: SRTEntry | None = None


class SRTBlockParser:
    """State machine parser over an immutable SRT byte buffer.

    The parser holds no cursor of its own, so one instance may be parsed
    repeatedly and each transition can be exercised in isolation.
    """

    def __init__(self, buffer: bytes | bytearray | memoryview | str, encoding: str = "utf-8"):
        if isinstance(buffer, str):
            buffer = buffer.encode("utf-8")
            encoding = "utf-8"
        # Rejects unknown and non-text codecs before any parsing happens
        b"".decode(encoding)

        self._buffer = bytes(buffer)
        self._length = len(self._buffer)
        self._encoding = encoding
        self._start_position = len(_UTF8_BOM) if self._buffer.startswith(_UTF8_BOM) else 0

    def parse(self) -> list[SRTEntry]:
        """Parse the whole buffer.

        Returns:
            Subtitle entries in source order

        Raises:
            SRTParseError: At the first block that does not match the grammar.
                Entries completed before it are attached as ``error.entries``.
        """
        transitions = {
            Phase.EXPECT_INDEX: self.expect_index,
            Phase.EXPECT_START: self.expect_start,
            Phase.EXPECT_END: self.expect_end,
            Phase.EXPECT_TEXT: self.expect_text,
        }

        entries: list[SRTEntry] = []
        step = Step(Phase.EXPECT_INDEX, self._start_position)
        while step.phase is not Phase.END:
            try:
                step = transitions[step.phase](step.position, step.draft)
            except SRTParseError as e:
                e.entries = tuple(entries)
                raise
            if step.entry is not None:
                entries.append(step.entry)

        return entries

    def expect_index(self, position: int, draft: Draft) -> Step:
        """Read the index line, skipping blank separator lines before it."""
        while position < self._length:
            line_start = position
            line, position, _ = self._read_line(position)
            token = line.strip()
            if not token:
                continue

            if not token.isdigit():
                raise self._error(
                    MalformedIndexError,
                    f"Invalid subtitle index {self._decode(token)!r}",
                    Phase.EXPECT_INDEX,
                    offset=line_start + len(line) - len(line.lstrip()),
                    token=token,
                )
            return Step(Phase.EXPECT_START, position, Draft(index=int(token)))

        return Step(Phase.END, position, draft)

    def expect_start(self, position: int, draft: Draft) -> Step:
        """Read the timing line and validate its start timestamp."""
        if position >= self._length:
            raise self._error(
                UnexpectedEndOfInputError,
                f"Input ended after index {draft.index} before its timing line",
                Phase.EXPECT_START,
                offset=self._length,
            )

        line_start = position
        line, position, terminated = self._read_line(position)

        sides = line.split(_ARROW)
        if len(sides) == 1 and not terminated and len(line.strip()) < TIMESTAMP_TOKEN_LENGTH:
            raise self._error(
                UnexpectedEndOfInputError,
                "Input ended inside the start timestamp",
                Phase.EXPECT_START,
                offset=self._length,
                token=line,
            )
        if len(sides) != 2:
            raise self._error(
                MalformedTimingLineError,
                f"Timing line must contain exactly one '-->' separator, found {len(sides) - 1}",
                Phase.EXPECT_START,
                offset=line_start,
                token=line,
            )

        left, right = sides
        start_token, end_token = left.strip(), right.strip()
        # An empty end side at end of input is a truncated end timestamp
        if not start_token or (not end_token and terminated):
            raise self._error(
                MalformedTimingLineError,
                "Timing line must contain a timestamp on both sides of '-->'",
                Phase.EXPECT_START,
                offset=line_start,
                token=line,
            )

        start_offset = line_start + len(left) - len(left.lstrip())
        start = self._parse_timestamp(start_token, "start", Phase.EXPECT_START, start_offset)

        right_start = line_start + len(left) + len(_ARROW)
        return Step(
            Phase.EXPECT_END,
            position,
            replace(
                draft,
                start=start,
                end_token=end_token,
                end_offset=right_start + len(right) - len(right.lstrip()),
                end_truncated=not terminated,
            ),
        )

    def expect_end(self, position: int, draft: Draft) -> Step:
        """Validate the end timestamp held back from the timing line."""
        try:
            end = self._parse_timestamp(draft.end_token, "end", Phase.EXPECT_END, draft.end_offset)
        except MalformedTimestampError as e:
            if not draft.end_truncated or len(draft.end_token) >= TIMESTAMP_TOKEN_LENGTH:
                raise
            raise self._error(
                UnexpectedEndOfInputError,
                "Input ended inside the end timestamp",
                Phase.EXPECT_END,
                offset=self._length,
                token=draft.end_token,
            ) from e

        return Step(Phase.EXPECT_TEXT, position, replace(draft, end=end, end_token=b""))

    def expect_text(self, position: int, draft: Draft) -> Step:
        """Accumulate text lines up to a blank line or end of input and emit the entry."""
        lines = []
        while position < self._length:
            line, position, _ = self._read_line(position)
            if not line:
                break
            lines.append(self._decode(line))

        entry = SRTEntry(draft.index, draft.start, draft.end, tuple(lines))
        phase = Phase.EXPECT_INDEX if position < self._length else Phase.END
        return Step(phase, position, Draft(), entry)

    def _read_line(self, position: int) -> tuple[bytes, int, bool]:
        """Return the line at ``position`` without its terminator.

        Returns:
            Tuple of (line, position after the terminator, terminator found)
        """
        newline = self._buffer.find(b"\n", position)
        if newline == -1:
            line, position, terminated = self._buffer[position:], self._length, False
        else:
            line, position, terminated = self._buffer[position:newline], newline + 1, True

        if line.endswith(b"\r"):
            line = line[:-1]
        return line, position, terminated

    def _parse_timestamp(self, token: bytes, side: str, phase: Phase, offset: int) -> Timestamp:
        try:
            return Timestamp.parse(token)
        except ValueError as e:
            raise self._error(
                MalformedTimestampError,
                f"Invalid {side} timestamp {self._decode(token)!r}: {e}",
                phase,
                offset=offset,
                token=token,
                side=side,
            ) from e

    def _decode(self, raw: bytes) -> str:
        return raw.decode(self._encoding, errors="replace")

    def _error(
        self,
        error_class: type[SRTParseError],
        message: str,
        phase: Phase,
        *,
        offset: int,
        token: bytes = b"",
        **kwargs,
    ) -> SRTParseError:
        return error_class(
            message,
            phase=phase.value,
            offset=offset,
            token=self._decode(token),
            line=self._buffer.count(b"\n", 0, offset) + 1,
            **kwargs,
        )


def parse_srt(
    buffer: bytes | bytearray | memoryview | str, *, encoding: str = "utf-8"
) -> list[SRTEntry]:
    """Parse SRT content into a list of subtitle entries.

    Args:
        buffer: Complete SRT file contents. ``str`` input is treated as UTF-8.
        encoding: Encoding used to decode cue text

    Returns:
        List of SRTEntry objects in source order

    Raises:
        SRTParseError: If the content does not follow the SRT block grammar
        LookupError: If ``encoding`` is unknown
    """
    return SRTBlockParser(buffer, encoding=encoding).parse()
