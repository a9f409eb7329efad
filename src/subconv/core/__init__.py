"""Core time model, entry type and adapter contract."""

from subconv.core.errors import ParsingError, SubtitleError
from subconv.core.retime import shift_entries, transfer_entries
from subconv.core.subtitle import SubtitleEntry, SubtitleFile
from subconv.core.timetypes import TimeDelta, TimePoint, TimeSpan

__all__ = [
    "ParsingError",
    "SubtitleEntry",
    "SubtitleError",
    "SubtitleFile",
    "TimeDelta",
    "TimePoint",
    "TimeSpan",
    "shift_entries",
    "transfer_entries",
]
