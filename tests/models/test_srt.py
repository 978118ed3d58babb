"""Tests for subtitle models."""

from dataclasses import FrozenInstanceError

import pytest

from srtparse.models.srt import SRTEntry, Timestamp


class TestTimestamp:
    """Tests for Timestamp."""

    def test_parse_bytes(self):
        """Test parsing a bytes token."""
        assert Timestamp.parse(b"01:02:03,004") == Timestamp(1, 2, 3, 4)

    def test_parse_str(self):
        """Test parsing a str token."""
        assert Timestamp.parse("12:34:56,789") == Timestamp(12, 34, 56, 789)

    @pytest.mark.parametrize(
        "token",
        [
            "",
            "1:02:03,004",
            "01:02:03,0040",
            "01-02-03,004",
            "01:02:03:004",
            "0a:02:03,004",
            "01:02:03,٠٠٤",
            " 01:02:03,04",
        ],
    )
    def test_parse_invalid(self, token):
        """Test tokens failing fixed-width validation."""
        with pytest.raises(ValueError):
            Timestamp.parse(token)

    def test_str_fixed_width(self):
        """Test rendering pads every field."""
        assert str(Timestamp(1, 2, 3, 4)) == "01:02:03,004"

    def test_str_round_trip(self):
        """Test rendering reproduces the parsed token."""
        assert str(Timestamp.parse("00:59:59,999")) == "00:59:59,999"

    def test_total_milliseconds(self):
        """Test conversion to milliseconds."""
        assert Timestamp(1, 30, 45, 999).total_milliseconds == 5445999

    def test_immutable(self):
        """Test timestamps are value types."""
        timestamp = Timestamp(0, 0, 1, 0)
        with pytest.raises(FrozenInstanceError):
            timestamp.seconds = 2


class TestSRTEntry:
    """Tests for SRTEntry."""

    def test_text_joins_lines(self):
        """Test text keeps line boundaries."""
        entry = SRTEntry(1, Timestamp(0, 0, 1, 0), Timestamp(0, 0, 2, 0), ("First", "Second"))
        assert entry.text == "First\nSecond"

    def test_empty_text(self):
        """Test an entry without lines has empty text."""
        entry = SRTEntry(1, Timestamp(0, 0, 1, 0), Timestamp(0, 0, 2, 0))
        assert entry.text == ""

    def test_duration(self):
        """Test duration between start and end."""
        entry = SRTEntry(1, Timestamp(0, 0, 1, 500), Timestamp(0, 0, 4, 0))
        assert entry.duration_milliseconds == 2500

    def test_repr(self):
        """Test repr shows index and timing."""
        entry = SRTEntry(3, Timestamp(0, 0, 1, 0), Timestamp(0, 0, 2, 0), ("Hi",))
        assert repr(entry) == "SRTEntry(index=3, time=00:00:01,000 --> 00:00:02,000)"
