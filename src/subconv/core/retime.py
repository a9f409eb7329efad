"""Retime subtitle entries and move them between format adapters."""

from collections.abc import Sequence

import structlog

from subconv.core.subtitle import SubtitleEntry, SubtitleFile
from subconv.core.timetypes import TimeDelta

logger = structlog.get_logger()


def shift_entries(
    entries: Sequence[SubtitleEntry],
    delta: TimeDelta,
) -> list[SubtitleEntry]:
    """Shift every entry's timespan by a fixed offset.

    Args:
        entries: Entries to shift
        delta: Offset to apply; negative values move entries earlier

    Returns:
        New list of entries with shifted timespans and unchanged text

    Notes:
        - Times that would become negative saturate at zero, so an entry
          shifted far enough back collapses to a zero-length span at 0
        - Input entries are not modified
    """
    return [
        SubtitleEntry(timespan=entry.timespan.shifted(delta), line=entry.line)
        for entry in entries
    ]


def transfer_entries(source: SubtitleFile, target: SubtitleFile) -> None:
    """Copy timing and text from one adapter into another.

    Args:
        source: Adapter to read entries from
        target: Adapter whose cues are overwritten in place

    Raises:
        ValueError: If the adapters hold a different number of cues
    """
    entries = source.read_entries()
    if len(entries) != len(target):
        raise ValueError(
            f"Entry count mismatch: source has {len(entries)} entries, "
            f"target has {len(target)} entries"
        )

    target.write_entries(entries)
    logger.debug(
        "entries_transferred",
        source=type(source).__name__,
        target=type(target).__name__,
        count=len(entries),
    )
