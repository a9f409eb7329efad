"""Millisecond-resolution time model shared by every subtitle format."""

from __future__ import annotations

from dataclasses import dataclass

_MSECS_PER_SEC = 1000
_MSECS_PER_MIN = 60 * _MSECS_PER_SEC
_MSECS_PER_HOUR = 60 * _MSECS_PER_MIN


@dataclass(frozen=True, order=True)
class TimeDelta:
    """Signed duration in milliseconds."""

    msecs: int

    @classmethod
    def from_msecs(cls, msecs: int) -> TimeDelta:
        return cls(msecs)

    @classmethod
    def from_secs(cls, secs: float) -> TimeDelta:
        return cls(round(secs * _MSECS_PER_SEC))

    @classmethod
    def from_mins(cls, mins: int) -> TimeDelta:
        return cls(mins * _MSECS_PER_MIN)

    @classmethod
    def from_hours(cls, hours: int) -> TimeDelta:
        return cls(hours * _MSECS_PER_HOUR)

    def __add__(self, other: TimeDelta) -> TimeDelta:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return TimeDelta(self.msecs + other.msecs)

    def __sub__(self, other: TimeDelta) -> TimeDelta:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return TimeDelta(self.msecs - other.msecs)

    def __neg__(self) -> TimeDelta:
        return TimeDelta(-self.msecs)

    def secs(self) -> float:
        """Return the duration in (fractional) seconds."""
        return self.msecs / _MSECS_PER_SEC


@dataclass(frozen=True, order=True)
class TimePoint:
    """Absolute, non-negative instant on a subtitle timeline.

    Arithmetic with a ``TimeDelta`` saturates at zero instead of going
    negative. Subtracting two points yields a signed ``TimeDelta``.
    """

    msecs: int

    def __post_init__(self):
        """Validate the point is not before the start of the timeline."""
        if self.msecs < 0:
            raise ValueError(f"TimePoint must be non-negative, got {self.msecs}ms")

    @classmethod
    def from_msecs(cls, msecs: int) -> TimePoint:
        """Create a point from milliseconds, clamping negative input to zero."""
        return cls(max(0, msecs))

    @classmethod
    def from_components(
        cls, hours: int = 0, mins: int = 0, secs: int = 0, msecs: int = 0
    ) -> TimePoint:
        """Create a point from hour/minute/second/millisecond parts."""
        return cls.from_msecs(
            hours * _MSECS_PER_HOUR
            + mins * _MSECS_PER_MIN
            + secs * _MSECS_PER_SEC
            + msecs
        )

    @property
    def hours(self) -> int:
        """Total hours (unbounded)."""
        return self.msecs // _MSECS_PER_HOUR

    @property
    def mins_comp(self) -> int:
        """Minutes within the current hour (0-59)."""
        return (self.msecs // _MSECS_PER_MIN) % 60

    @property
    def secs_comp(self) -> int:
        """Seconds within the current minute (0-59)."""
        return (self.msecs // _MSECS_PER_SEC) % 60

    @property
    def msecs_comp(self) -> int:
        """Milliseconds within the current second (0-999)."""
        return self.msecs % _MSECS_PER_SEC

    def secs(self) -> float:
        return self.msecs / _MSECS_PER_SEC

    def __add__(self, other: TimeDelta) -> TimePoint:
        if not isinstance(other, TimeDelta):
            return NotImplemented
        return TimePoint.from_msecs(self.msecs + other.msecs)

    def __sub__(self, other: TimePoint | TimeDelta) -> TimePoint | TimeDelta:
        if isinstance(other, TimePoint):
            return TimeDelta(self.msecs - other.msecs)
        if isinstance(other, TimeDelta):
            return TimePoint.from_msecs(self.msecs - other.msecs)
        return NotImplemented


@dataclass(frozen=True)
class TimeSpan:
    """Closed interval ``[start, end]`` on a subtitle timeline.

    An inverted pair (``start > end``) is rejected at construction with a
    ``ValueError``; zero-length spans are allowed.
    """

    start: TimePoint
    end: TimePoint

    def __post_init__(self):
        """Validate span ordering."""
        if self.start > self.end:
            raise ValueError(
                f"Start time {self.start.msecs}ms must not be after "
                f"end time {self.end.msecs}ms"
            )

    def len(self) -> TimeDelta:
        """Return the length of the span."""
        return self.end - self.start

    def shifted(self, delta: TimeDelta) -> TimeSpan:
        """Return the span moved by ``delta``, saturating each end at zero."""
        return TimeSpan(self.start + delta, self.end + delta)
