"""Subtitle format adapters and format lookup."""

from collections.abc import Callable
from enum import StrEnum
from pathlib import PurePath

from subconv.core.subtitle import SubtitleFile
from subconv.formats.vtt import (
    ErrorAtLineError,
    ExpectedIndexLineError,
    ExpectedTimestampLineError,
    VttErrorKind,
    VttFile,
    VttParseError,
)


class SubtitleFormat(StrEnum):
    """Subtitle formats with an adapter implementation."""

    VTT = "vtt"


_PARSERS: dict[SubtitleFormat, Callable[..., SubtitleFile]] = {
    SubtitleFormat.VTT: VttFile.parse,
}


def get_subtitle_format(path: str | PurePath) -> SubtitleFormat | None:
    """Guess the subtitle format from a file path or bare extension.

    Args:
        path: File path (``"movie.vtt"``) or extension (``".vtt"``, ``"vtt"``)

    Returns:
        Matching SubtitleFormat, or None if the extension is unknown
    """
    suffix = PurePath(path).suffix or str(path)
    try:
        return SubtitleFormat(suffix.lstrip(".").lower())
    except ValueError:
        return None


def parse_bytes(
    fmt: SubtitleFormat | str,
    data: bytes,
    *,
    encoding: str | None = None,
) -> SubtitleFile:
    """Parse raw bytes with the adapter registered for ``fmt``.

    Raises:
        ValueError: If ``fmt`` is not a known subtitle format
        ParsingError: If the adapter rejects the content
    """
    try:
        parser = _PARSERS[SubtitleFormat(str(fmt).lower())]
    except ValueError:
        raise ValueError(f"Unsupported subtitle format: {fmt!r}") from None
    return parser(data, encoding=encoding)


__all__ = [
    "ErrorAtLineError",
    "ExpectedIndexLineError",
    "ExpectedTimestampLineError",
    "SubtitleFormat",
    "VttErrorKind",
    "VttFile",
    "VttParseError",
    "get_subtitle_format",
    "parse_bytes",
]
