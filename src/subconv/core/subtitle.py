"""Format-neutral subtitle entry and the adapter contract."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from subconv.core.timetypes import TimeSpan


@dataclass
class SubtitleEntry:
    """Single subtitle entry with timing and optional text.

    ``line`` is ``None`` only when passed to ``SubtitleFile.write_entries``
    to update timing while keeping the existing text.
    """

    timespan: TimeSpan
    line: str | None = None


class SubtitleFile(ABC):
    """Contract every subtitle format adapter implements.

    A conversion pipeline can move data between any two formats through
    this interface alone::

        target.write_entries(source.read_entries())
        data = target.serialize()
    """

    @abstractmethod
    def read_entries(self) -> list[SubtitleEntry]:
        """Return the entries currently held, in file order."""

    @abstractmethod
    def write_entries(self, entries: Sequence[SubtitleEntry]) -> None:
        """Overwrite all cues in place.

        Each cue's timespan is always replaced. Its text is replaced only when
        the corresponding entry's ``line`` is not ``None``.

        Args:
            entries: One entry per existing cue, in file order

        Raises:
            ValueError: If ``len(entries)`` differs from the cue count
        """

    @abstractmethod
    def serialize(self) -> bytes:
        """Return the native byte representation of the current state."""

    @abstractmethod
    def __len__(self) -> int:
        """Return number of cues."""
