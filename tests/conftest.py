"""Pytest configuration and shared fixtures."""

import pytest

from subconv.core.timetypes import TimePoint, TimeSpan
from subconv.utils.config import get_settings


def _span(start_ms: int, end_ms: int) -> TimeSpan:
    """Build a TimeSpan from two millisecond values."""
    return TimeSpan(TimePoint(start_ms), TimePoint(end_ms))


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Clear settings cache before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def no_env_file(tmp_path, monkeypatch):
    """Run test in a directory without .env file."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_pairs() -> list[tuple[TimeSpan, str]]:
    """Return timing and text pairs for building files."""
    return [
        (_span(1500, 3700), "line1"),
        (_span(4500, 8700), "line2"),
    ]


@pytest.fixture
def sample_vtt_content() -> str:
    """Return sample VTT content for testing."""
    return """WEBVTT

1
00:00:01.000 --> 00:00:04.000
Hello, this is a test.

2
00:00:05.000 --> 00:00:08.000
This is the second subtitle.
With a second line.

3
00:00:09.000 --> 00:00:12.000
And this is the third one.
"""
