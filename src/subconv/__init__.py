"""Subtitle format normalization: time model, adapter contract and WebVTT."""

from subconv.core import (
    ParsingError,
    SubtitleEntry,
    SubtitleError,
    SubtitleFile,
    TimeDelta,
    TimePoint,
    TimeSpan,
    shift_entries,
    transfer_entries,
)
from subconv.formats import (
    SubtitleFormat,
    VttFile,
    get_subtitle_format,
    parse_bytes,
)

__all__ = [
    "ParsingError",
    "SubtitleEntry",
    "SubtitleError",
    "SubtitleFile",
    "SubtitleFormat",
    "TimeDelta",
    "TimePoint",
    "TimeSpan",
    "VttFile",
    "get_subtitle_format",
    "parse_bytes",
    "shift_entries",
    "transfer_entries",
]
