"""
Calendar event drafts built from extracted dates.

Start and end come straight from a match. When the match is a stored
record (a dict from ``NoteAnnotation.to_dict()``) its ``startDate`` /
``endDate`` strings are rebuilt field by field with
:func:`memodate.wallclock.parse_wall_clock`, so the wall-clock values
written with the note are the ones the event gets.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Union

from .exceptions import EventValidationError
from .match import ExtractedMatch
from .notes import NoteAnnotation
from .wallclock import format_wall_clock

logger = logging.getLogger(__name__)

NOTE_TITLE_LENGTH = 50


@dataclass(frozen=True)
class EventDraft:
    """An event ready to be inserted into a calendar."""
    title: str
    calendar_id: str
    start: datetime
    end: Optional[datetime] = None
    description: Optional[str] = None
    all_day: bool = False
    memo_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "startDate": format_wall_clock(self.start),
            "endDate": format_wall_clock(self.end) if self.end is not None else None,
            "allDay": self.all_day,
            "calendarId": self.calendar_id,
            "memoId": self.memo_id,
        }


def _as_match(match: Union[ExtractedMatch, Dict[str, Any]]) -> ExtractedMatch:
    if isinstance(match, ExtractedMatch):
        return match
    if isinstance(match, dict):
        if not match.get("startDate"):
            raise EventValidationError("Missing required field: startDate")
        return ExtractedMatch.from_dict(match)
    raise EventValidationError(
        "Expected an ExtractedMatch or a stored match record, got %s" % type(match).__name__
    )


def build_event(match, calendar_id, title, description=None, all_day=False, memo_id=None):
    """Draft an event for ``calendar_id`` starting at the match's start instant.

    :param match: An :class:`ExtractedMatch` or its ``to_dict()`` record.
    :raises EventValidationError: if the title, calendar id or start is missing.
    """
    if not title:
        raise EventValidationError("Missing required field: title")
    if not calendar_id:
        raise EventValidationError("Missing required field: calendarId")

    match = _as_match(match)
    draft = EventDraft(
        title=title,
        calendar_id=calendar_id,
        start=match.start,
        end=match.end,
        description=description,
        all_day=all_day,
        memo_id=memo_id,
    )
    logger.debug(f"Drafted event {title!r} at {format_wall_clock(draft.start)} in {calendar_id}")
    return draft


def build_event_for_note(note, match, calendar_id, memo_id=None):
    """Draft an event from one of a note's dates.

    The title is the note title, or the first 50 characters of the content
    when the note has none; the description is the full content.
    """
    if isinstance(note, NoteAnnotation):
        title, content = note.title, note.content
    else:
        title, content = note.get("title"), note.get("content") or ""

    return build_event(
        match,
        calendar_id,
        title=title or content[:NOTE_TITLE_LENGTH],
        description=content,
        memo_id=memo_id,
    )
