"""Subtitle data models."""

from srtparse.models.srt import SRTEntry, Timestamp

__all__ = ["SRTEntry", "Timestamp"]
