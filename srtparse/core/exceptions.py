"""Exception hierarchy for SRT parsing and loading."""

from typing import Any


class SRTError(Exception):
    """Base exception for all srtparse errors."""


class SRTFileError(SRTError):
    """The SRT byte buffer could not be acquired from the filesystem."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(message)
        self.path = path


class SRTParseError(SRTError):
    """The buffer diverged from the SRT grammar.

    Attributes:
        phase: Parser phase active when the error occurred
        offset: Byte offset of the offending token (buffer length for end of input)
        line: 1-based line number containing ``offset``
        token: Offending raw token, decoded with replacement characters
        entries: Entries completed before the failure, for best-effort callers
    """

    code = "parse_error"

    def __init__(
        self,
        message: str,
        *,
        phase: str,
        offset: int,
        token: str = "",
        line: int = 1,
        entries: tuple = (),
    ):
        super().__init__(message)
        self.message = message
        self.phase = phase
        self.offset = offset
        self.token = token
        self.line = line
        self.entries = entries

    def to_dict(self) -> dict[str, Any]:
        """Structured error details for callers that report them verbatim."""
        return {
            "error": self.code,
            "message": self.message,
            "phase": self.phase,
            "offset": self.offset,
            "line": self.line,
            "token": self.token,
        }

    def __str__(self) -> str:
        return f"{self.message} (phase={self.phase}, line={self.line}, offset={self.offset})"


class MalformedIndexError(SRTParseError):
    """Index token is not a plain decimal integer."""

    code = "malformed_index"


class MalformedTimingLineError(SRTParseError):
    """Timing line lacks a single ``-->`` separator or one of its sides."""

    code = "malformed_timing_line"


class MalformedTimestampError(SRTParseError):
    """A timestamp token failed fixed-width ``hh:mm:ss,mmm`` validation."""

    code = "malformed_timestamp"

    def __init__(self, message: str, *, side: str, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.side = side

    def to_dict(self) -> dict[str, Any]:
        details = super().to_dict()
        details["side"] = self.side
        return details


class UnexpectedEndOfInputError(SRTParseError):
    """Buffer ended inside a cue block before both timestamps were read."""

    code = "unexpected_end_of_input"
