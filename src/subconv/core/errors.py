"""Top-level error types raised across adapter boundaries."""

from __future__ import annotations


class SubtitleError(Exception):
    """Base class for all subconv errors."""


class ParsingError(SubtitleError):
    """Raised when a subtitle file cannot be parsed.

    Wraps the format-specific error so callers can match on one type while
    still inspecting the specific failure through ``kind`` and ``cause``.
    """

    def __init__(
        self,
        *,
        format: str,
        cause: Exception,
        kind: str | None = None,
        line_num: int | None = None,
    ) -> None:
        self.format = format
        self.cause = cause
        self.kind = kind
        self.line_num = line_num
        super().__init__(f"parsing {format} file failed: {cause}")
