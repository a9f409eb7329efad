"""Tests for retiming helpers."""

import pytest

from subconv.core.retime import shift_entries, transfer_entries
from subconv.core.subtitle import SubtitleEntry
from subconv.core.timetypes import TimeDelta, TimePoint, TimeSpan
from subconv.formats.vtt import VttFile


def _span(start_ms: int, end_ms: int) -> TimeSpan:
    return TimeSpan(TimePoint(start_ms), TimePoint(end_ms))


class TestShiftEntries:
    """Test shift_entries function."""

    def test_shift_forward(self):
        """Test shifting every entry later."""
        entries = [
            SubtitleEntry(timespan=_span(0, 1000), line="Hello"),
            SubtitleEntry(timespan=_span(1500, 2500), line="World"),
        ]

        result = shift_entries(entries, TimeDelta.from_secs(2))

        assert [e.timespan for e in result] == [_span(2000, 3000), _span(3500, 4500)]
        assert [e.line for e in result] == ["Hello", "World"]

    def test_shift_backward_saturates(self):
        """Entries shifted before zero are clamped."""
        entries = [SubtitleEntry(timespan=_span(500, 1500), line="Hi")]

        result = shift_entries(entries, TimeDelta(-1000))

        assert result[0].timespan == _span(0, 500)

    def test_input_not_modified(self):
        """Shifting returns new entries."""
        entries = [SubtitleEntry(timespan=_span(0, 1000), line="Hello")]

        shift_entries(entries, TimeDelta(500))

        assert entries[0].timespan == _span(0, 1000)

    def test_keeps_missing_text(self):
        """Timing-only entries stay timing-only."""
        entries = [SubtitleEntry(timespan=_span(0, 1000))]

        result = shift_entries(entries, TimeDelta(500))

        assert result[0].line is None

    def test_empty(self):
        assert shift_entries([], TimeDelta(500)) == []


class TestTransferEntries:
    """Test transfer_entries function."""

    def test_transfer_between_files(self, sample_pairs):
        """Target takes over source timing and text."""
        source = VttFile.create(sample_pairs)
        target = VttFile.create(
            [(_span(0, 1), "old one"), (_span(2, 3), "old two")]
        )

        transfer_entries(source, target)

        assert target.read_entries() == source.read_entries()

    def test_count_mismatch_raises_error(self, sample_pairs):
        """Test that different cue counts are rejected."""
        source = VttFile.create(sample_pairs)
        target = VttFile.create([(_span(0, 1), "only one")])

        with pytest.raises(ValueError, match="Entry count mismatch"):
            transfer_entries(source, target)

        assert target.read_entries()[0].line == "only one"

    def test_parsed_source(self, sample_vtt_content):
        """Test transferring from a parsed file into a fresh one."""
        source = VttFile.parse(sample_vtt_content)
        target = VttFile.create([(_span(0, 0), "")] * len(source))

        transfer_entries(source, target)

        assert target.read_entries()[1].line == (
            "This is the second subtitle.\nWith a second line."
        )
