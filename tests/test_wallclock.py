"""
Tests for wall-clock conversion and serialization.
"""

import pytest
from datetime import datetime, timedelta, timezone

from memodate import ExtractedMatch, WallClockFormatError
from memodate.wallclock import format_wall_clock, parse_wall_clock, to_wall_clock


class TestToWallClock:

    def test_aware_fields_kept(self):
        aware = datetime(2024, 1, 2, 15, 0, 0, tzinfo=timezone(timedelta(hours=9)))
        assert to_wall_clock(aware) == datetime(2024, 1, 2, 15, 0, 0)

    def test_microseconds_dropped(self):
        assert to_wall_clock(datetime(2024, 1, 2, 15, 0, 0, 999999)) == datetime(2024, 1, 2, 15, 0, 0)


class TestSerialization:

    def test_format(self):
        assert format_wall_clock(datetime(2024, 1, 2, 9, 5, 7)) == "2024-01-02T09:05:07"

    def test_round_trip(self):
        value = datetime(2024, 11, 5, 23, 59, 59)
        assert parse_wall_clock(format_wall_clock(value)) == value

    @pytest.mark.parametrize("text", [
        "2024-01-02T15:00:00Z",
        "2024-01-02T15:00:00+09:00",
        "2024-01-02T15:00:00.000Z",
        "2024-01-02T15:00:00-05:00",
    ])
    def test_suffix_ignored(self, text):
        """Offsets never shift the wall-clock fields."""
        assert parse_wall_clock(text) == datetime(2024, 1, 2, 15, 0, 0)

    @pytest.mark.parametrize("text", ["tomorrow", "2024-01-02", "2024-13-01T00:00:00", "2024-02-30T09:00:00", ""])
    def test_invalid(self, text):
        with pytest.raises(WallClockFormatError):
            parse_wall_clock(text)

    def test_non_string(self):
        with pytest.raises(WallClockFormatError):
            parse_wall_clock(datetime(2024, 1, 2))


class TestMatchRecord:
    """Tests for ExtractedMatch.to_dict / from_dict."""

    def test_record_shape(self):
        match = ExtractedMatch(text="내일 오후 3시", start=datetime(2024, 1, 2, 15, 0), index=0, source="ko")
        assert match.to_dict() == {"text": "내일 오후 3시", "startDate": "2024-01-02T15:00:00", "index": 0}

    def test_record_with_end(self):
        match = ExtractedMatch(
            text="Nov 5 - Nov 7",
            start=datetime(2024, 11, 5, 9, 0),
            end=datetime(2024, 11, 7, 9, 0),
            index=4,
        )
        record = match.to_dict()
        assert record["endDate"] == "2024-11-07T09:00:00"
        restored = ExtractedMatch.from_dict(record)
        assert (restored.start, restored.end, restored.index) == (match.start, match.end, 4)

    def test_match_is_immutable(self):
        match = ExtractedMatch(text="내일", start=datetime(2024, 1, 2, 9, 0), index=0)
        with pytest.raises(AttributeError):
            match.index = 3
