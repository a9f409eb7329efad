"""WebVTT format adapter: parser, serializer and constructor."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum, StrEnum

import structlog

from subconv.core.errors import ParsingError
from subconv.core.subtitle import SubtitleEntry, SubtitleFile
from subconv.core.timetypes import TimePoint, TimeSpan
from subconv.utils.config import get_settings

logger = structlog.get_logger()

_HEADER = "WEBVTT"
_TIMESTAMP = r"(\d+):(\d{2}):(\d{2})\.(\d{3})"
_TIMESPAN_RE = re.compile(
    rf"^\s*{_TIMESTAMP}\s+-->\s+{_TIMESTAMP}\s*$", re.ASCII
)
_INDEX_RE = re.compile(r"\d+", re.ASCII)
_NEWLINE_RE = re.compile(r"\r\n|\r|\n")


class VttErrorKind(StrEnum):
    """Kinds of VTT parse failure."""

    EXPECTED_INDEX_LINE = "expected_index_line"
    EXPECTED_TIMESTAMP_LINE = "expected_timestamp_line"
    ERROR_AT_LINE = "error_at_line"


class VttParseError(Exception):
    """Base exception for VTT parse failures at a specific 1-based line."""

    kind: VttErrorKind

    def __init__(self, message: str, *, line_num: int) -> None:
        self.line_num = line_num
        super().__init__(message)


class ExpectedIndexLineError(VttParseError):
    """Raised when a cue index line is not an integer."""

    kind = VttErrorKind.EXPECTED_INDEX_LINE

    def __init__(self, line: str, *, line_num: int) -> None:
        self.line = line
        super().__init__(
            f"line {line_num}: expected VTT index line, found '{line}'",
            line_num=line_num,
        )


class ExpectedTimestampLineError(VttParseError):
    """Raised when a cue timing line does not match the timestamp grammar."""

    kind = VttErrorKind.EXPECTED_TIMESTAMP_LINE

    def __init__(self, line: str, *, line_num: int) -> None:
        self.line = line
        super().__init__(
            f"line {line_num}: expected VTT timespan line, found '{line}'",
            line_num=line_num,
        )


class ErrorAtLineError(VttParseError):
    """Raised on a structural failure that no specific kind describes."""

    kind = VttErrorKind.ERROR_AT_LINE

    def __init__(self, line_num: int) -> None:
        super().__init__(f"parse error at line {line_num}", line_num=line_num)


@dataclass
class VttLine:
    """One VTT cue: timing, declared index and its text lines."""

    timespan: TimeSpan
    index: int
    texts: list[str] = field(default_factory=list)


class _State(Enum):
    HEADER = "header"
    HEADER_META = "header_meta"
    INDEX = "index"
    TIMESPAN = "timespan"
    TEXT = "text"


class VttFile(SubtitleFile):
    """In-memory representation of a ``.vtt`` file."""

    def __init__(self, lines: Iterable[VttLine] = ()) -> None:
        self._lines: list[VttLine] = list(lines)

    @classmethod
    def parse(cls, data: bytes | str, *, encoding: str | None = None) -> VttFile:
        """Parse VTT content into a VttFile.

        Args:
            data: Raw file bytes or already-decoded text
            encoding: Codec for ``data`` when it is bytes; defaults to the
                configured ``encoding`` setting

        Returns:
            VttFile holding every cue in file order

        Raises:
            ParsingError: If the bytes cannot be decoded or the content is
                malformed; the underlying ``UnicodeDecodeError``,
                ``LookupError`` or ``VttParseError`` is available as ``cause``
        """
        try:
            if isinstance(data, bytes):
                data = data.decode(encoding or get_settings().encoding)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug("vtt_decode_failed", error=str(e))
            raise ParsingError(format="vtt", cause=e) from e

        try:
            return parse_vtt(data)
        except VttParseError as e:
            logger.debug(
                "vtt_parse_failed", kind=str(e.kind), line_num=e.line_num
            )
            raise ParsingError(
                format="vtt", cause=e, kind=e.kind, line_num=e.line_num
            ) from e

    @classmethod
    def create(cls, pairs: Iterable[tuple[TimeSpan, str]]) -> VttFile:
        """Build a VttFile from timing and text pairs.

        Indices are assigned 1..N in input order. Overlap and chronological
        order are not validated.
        """
        return cls(
            VttLine(timespan=timespan, index=i, texts=_split_text(text))
            for i, (timespan, text) in enumerate(pairs, start=1)
        )

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> tuple[VttLine, ...]:
        """Copies of the cues in file order; edit through ``write_entries``."""
        return tuple(replace(line, texts=list(line.texts)) for line in self._lines)

    def read_entries(self) -> list[SubtitleEntry]:
        return [
            SubtitleEntry(timespan=line.timespan, line="\n".join(line.texts))
            for line in self._lines
        ]

    def write_entries(self, entries: Sequence[SubtitleEntry]) -> None:
        if len(entries) != len(self._lines):
            raise ValueError(
                f"Entry count mismatch: file has {len(self._lines)} cues, "
                f"got {len(entries)} entries"
            )

        for line, entry in zip(self._lines, entries, strict=True):
            line.timespan = entry.timespan
            if entry.line is not None:
                line.texts = _split_text(entry.line)

    def serialize(self) -> bytes:
        blocks = [f"{_HEADER}\n\n"]
        for line in self._lines:
            start = format_timestamp(line.timespan.start)
            end = format_timestamp(line.timespan.end)
            text = "\n".join(line.texts)
            blocks.append(f"{line.index}\n{start} --> {end}\n{text}\n\n")
        return "".join(blocks).encode("utf-8")


def format_timestamp(t: TimePoint) -> str:
    """Format a TimePoint as ``HH:MM:SS.mmm`` (hours may exceed two digits)."""
    return f"{t.hours:02d}:{t.mins_comp:02d}:{t.secs_comp:02d}.{t.msecs_comp:03d}"


def parse_vtt(content: str) -> VttFile:
    """Parse VTT text into a VttFile.

    Args:
        content: Decoded VTT content

    Returns:
        VttFile with cues in file order; empty if the input holds no cues

    Raises:
        ExpectedIndexLineError: If a cue does not start with an integer line
        ExpectedTimestampLineError: If a cue's second line is not a timespan
        ErrorAtLineError: If input ends between an index and its timespan, or
            a cue timing line appears inside the header block
    """
    cues: list[VttLine] = []
    state = _State.HEADER
    index = 0
    index_line_num = 0
    timespan = TimeSpan(TimePoint(0), TimePoint(0))
    texts: list[str] = []

    lines = _NEWLINE_RE.split(content.removeprefix("\ufeff"))
    for line_num, line in enumerate(lines, start=1):
        blank = not line.strip()

        if state is _State.HEADER:
            if line.startswith(_HEADER):
                state = _State.HEADER_META
                continue
            state = _State.INDEX

        if state is _State.HEADER_META:
            if "-->" in line:
                raise ErrorAtLineError(line_num)
            if blank:
                state = _State.INDEX
        elif state is _State.INDEX:
            if blank:
                continue
            if not _INDEX_RE.fullmatch(line.strip()):
                raise ExpectedIndexLineError(line, line_num=line_num)
            index = int(line.strip())
            index_line_num = line_num
            state = _State.TIMESPAN
        elif state is _State.TIMESPAN:
            timespan = _parse_timespan(line, line_num)
            state = _State.TEXT
        elif blank:
            cues.append(VttLine(timespan=timespan, index=index, texts=texts))
            texts = []
            state = _State.INDEX
        else:
            texts.append(line)

    if state is _State.TIMESPAN:
        raise ErrorAtLineError(index_line_num)
    if state is _State.TEXT:
        cues.append(VttLine(timespan=timespan, index=index, texts=texts))

    for position, cue in enumerate(cues, start=1):
        if cue.index != position:
            logger.debug("vtt_index_mismatch", index=cue.index, position=position)

    logger.debug("vtt_parsed", cues=len(cues))
    return VttFile(cues)


def _parse_timespan(line: str, line_num: int) -> TimeSpan:
    """Parse a ``start --> end`` timing line."""
    match = _TIMESPAN_RE.match(line)
    if not match:
        raise ExpectedTimestampLineError(line, line_num=line_num)

    h1, m1, s1, ms1, h2, m2, s2, ms2 = (int(g) for g in match.groups())
    if max(m1, s1, m2, s2) >= 60:
        raise ExpectedTimestampLineError(line, line_num=line_num)

    start = TimePoint.from_components(h1, m1, s1, ms1)
    end = TimePoint.from_components(h2, m2, s2, ms2)
    try:
        return TimeSpan(start, end)
    except ValueError:
        raise ExpectedTimestampLineError(line, line_num=line_num) from None


def _split_text(text: str) -> list[str]:
    """Split cue text into lines, dropping blank lines a cue cannot hold."""
    return [line for line in _NEWLINE_RE.split(text) if line.strip()]
