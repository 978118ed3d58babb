"""SRT subtitle entry model."""

from dataclasses import dataclass

# Width and separator positions of a hh:mm:ss,mmm token
TIMESTAMP_TOKEN_LENGTH = 12
_SEPARATORS = {2: ord(":"), 5: ord(":"), 8: ord(",")}
_FIELDS = ((0, 2), (3, 5), (6, 8), (9, 12))


@dataclass(frozen=True)
class Timestamp:
    """A point in time within a subtitle track.

    Field values are kept exactly as written; ``minutes=61`` is not normalized.
    """

    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    @classmethod
    def parse(cls, token: bytes | str) -> "Timestamp":
        """Parse a fixed-width ``hh:mm:ss,mmm`` token.

        Args:
            token: Exactly 12 characters, already trimmed

        Returns:
            Parsed Timestamp

        Raises:
            ValueError: If the token is not a well-formed fixed-width timestamp
        """
        if isinstance(token, str):
            try:
                token = token.encode("ascii")
            except UnicodeEncodeError:
                raise ValueError(f"Timestamp contains non-ASCII characters: {token!r}")

        if len(token) != TIMESTAMP_TOKEN_LENGTH:
            raise ValueError(f"Timestamp must be {TIMESTAMP_TOKEN_LENGTH} characters, got {len(token)}")

        for position, separator in _SEPARATORS.items():
            if token[position] != separator:
                raise ValueError(
                    f"Expected {chr(separator)!r} at position {position} in timestamp {token!r}"
                )

        values = []
        for start, end in _FIELDS:
            field = token[start:end]
            # bytes.isdigit() only accepts ASCII digits
            if not field.isdigit():
                raise ValueError(f"Non-digit characters in timestamp field {field!r}")
            values.append(int(field))

        return cls(*values)

    @property
    def total_milliseconds(self) -> int:
        """Convert to an absolute millisecond count."""
        return (
            self.hours * 3600000 + self.minutes * 60000 + self.seconds * 1000 + self.milliseconds
        )

    def __str__(self) -> str:
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d},{self.milliseconds:03d}"


@dataclass(frozen=True)
class SRTEntry:
    """Represents a single subtitle entry."""

    index: int
    start: Timestamp
    end: Timestamp
    lines: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        """Cue text with original line boundaries joined by newlines."""
        return "\n".join(self.lines)

    @property
    def duration_milliseconds(self) -> int:
        return self.end.total_milliseconds - self.start.total_milliseconds

    def __repr__(self) -> str:
        return f"SRTEntry(index={self.index}, time={self.start} --> {self.end})"
