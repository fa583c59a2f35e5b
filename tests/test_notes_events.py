"""
Tests for the note and event boundaries.
"""

import pytest
from datetime import datetime

from memodate import (
    EmptyContentError,
    EventValidationError,
    ExtractedMatch,
    InputValidationError,
    annotate_note,
    build_event,
    build_event_for_note,
)


@pytest.fixture
def korean_only():
    return {"RELATIVE_BASE": datetime(2024, 1, 1, 10, 0, 0), "ENABLE_ENGLISH": False}


class TestAnnotateNote:

    def test_note_with_date(self, korean_only):
        note = annotate_note("내일 오후 3시 치과", title="치과", settings=korean_only)
        assert note.has_date is True
        assert note.to_dict() == {
            "title": "치과",
            "content": "내일 오후 3시 치과",
            "hasDate": True,
            "extractedDates": [
                {"text": "내일 오후 3시", "startDate": "2024-01-02T15:00:00", "index": 0},
            ],
        }

    def test_note_without_date(self, korean_only):
        note = annotate_note("우유 사기", settings=korean_only)
        assert note.has_date is False
        assert note.to_dict()["extractedDates"] is None

    def test_empty_content(self, korean_only):
        with pytest.raises(EmptyContentError):
            annotate_note("", settings=korean_only)

    def test_non_text_content(self):
        with pytest.raises(InputValidationError):
            annotate_note(123)


class TestBuildEvent:

    def test_from_match(self):
        match = ExtractedMatch(text="내일", start=datetime(2024, 1, 2, 9, 0), index=0)
        event = build_event(match, "cal-1", title="회의")
        assert event.start == datetime(2024, 1, 2, 9, 0)
        assert event.end is None
        assert event.all_day is False
        assert event.to_dict()["startDate"] == "2024-01-02T09:00:00"

    def test_from_stored_record(self):
        record = {
            "text": "Nov 5 - Nov 7",
            "startDate": "2024-11-05T09:00:00",
            "endDate": "2024-11-07T18:30:00",
            "index": 0,
        }
        event = build_event(record, "cal-1", title="trip")
        assert event.start == datetime(2024, 11, 5, 9, 0, 0)
        assert event.end == datetime(2024, 11, 7, 18, 30, 0)

    def test_record_with_offset_suffix(self):
        """Stored values with a trailing offset keep their wall-clock fields."""
        record = {"text": "내일", "startDate": "2024-01-02T09:00:00.000Z", "index": 0}
        event = build_event(record, "cal-1", title="x")
        assert event.start == datetime(2024, 1, 2, 9, 0, 0)

    @pytest.mark.parametrize("calendar_id,title", [("", "회의"), (None, "회의"), ("cal-1", ""), ("cal-1", None)])
    def test_missing_fields(self, calendar_id, title):
        match = ExtractedMatch(text="내일", start=datetime(2024, 1, 2, 9, 0), index=0)
        with pytest.raises(EventValidationError):
            build_event(match, calendar_id, title=title)

    def test_missing_start(self):
        with pytest.raises(EventValidationError):
            build_event({"text": "내일", "index": 0}, "cal-1", title="회의")

    def test_unsupported_match_type(self):
        with pytest.raises(EventValidationError):
            build_event("2024-01-02T09:00:00", "cal-1", title="회의")


class TestBuildEventForNote:

    def test_title_from_note(self, korean_only):
        note = annotate_note("모레 오전 10시 병원", title="병원", settings=korean_only)
        event = build_event_for_note(note, note.matches[0], "cal-1", memo_id="memo-1")
        assert event.title == "병원"
        assert event.description == "모레 오전 10시 병원"
        assert event.start == datetime(2024, 1, 3, 10, 0, 0)
        assert event.memo_id == "memo-1"

    def test_title_from_content(self, korean_only):
        content = "내일 " + "가" * 80
        record = annotate_note(content, settings=korean_only).to_dict()
        event = build_event_for_note(record, record["extractedDates"][0], "cal-1")
        assert event.title == content[:50]
        assert event.start == datetime(2024, 1, 2, 9, 0, 0)
        assert event.to_dict()["calendarId"] == "cal-1"
