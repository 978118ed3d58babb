"""Pytest configuration and fixtures."""

from fastapi.testclient import TestClient
import pytest

from srtparse.core.config import get_settings
from srtparse.main import create_app

# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Give every test freshly loaded settings without a configured API key."""
    monkeypatch.delenv("API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    """Create test client without authentication."""
    return TestClient(create_app())


@pytest.fixture
def authenticated_client(monkeypatch):
    """Create test client with API key authentication enabled."""
    monkeypatch.setenv("API_KEY", "test-api-key")
    get_settings.cache_clear()
    return TestClient(create_app())


# ============================================================================
# SRT Content Fixtures
# ============================================================================


@pytest.fixture
def sample_srt_bytes():
    """Sample valid SRT content with a multi-line cue."""
    return (
        b"1\n"
        b"00:00:01,000 --> 00:00:04,000\n"
        b"Hello world\n"
        b"\n"
        b"2\n"
        b"00:00:05,000 --> 00:00:08,500\n"
        b"How are you?\n"
        b"Fine, thanks.\n"
    )


@pytest.fixture
def malformed_second_block_bytes():
    """SRT content whose second block has a bad start timestamp."""
    return (
        b"1\n"
        b"00:00:01,000 --> 00:00:04,000\n"
        b"Hello world\n"
        b"\n"
        b"2\n"
        b"00:00:05;000 --> 00:00:08,000\n"
        b"Broken\n"
    )


@pytest.fixture
def srt_file(tmp_path, sample_srt_bytes):
    """Sample SRT content written to disk."""
    path = tmp_path / "sample.srt"
    path.write_bytes(sample_srt_bytes)
    return path
