"""
Note annotation.

A note stores the dates found in its content next to the text, plus a
``hasDate`` flag used to filter notes that mention a date. This module
builds that record; persistence is left to the caller.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .conf import apply_settings
from .exceptions import EmptyContentError, InputValidationError
from .extractor import get_extractor
from .match import ExtractedMatch

logger = logging.getLogger(__name__)


@dataclass
class NoteAnnotation:
    """Dates found in a note, ready to be stored with it."""
    content: str
    title: Optional[str] = None
    matches: List[ExtractedMatch] = field(default_factory=list)

    @property
    def has_date(self) -> bool:
        return bool(self.matches)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "hasDate": self.has_date,
            "extractedDates": [m.to_dict() for m in self.matches] if self.has_date else None,
        }


@apply_settings
def annotate_note(content, title=None, settings=None):
    """
    Extract the dates of a note being created or edited.

    Args:
        content: Note body; must be a non-empty string
        title: Optional note title, carried through unchanged
        settings: Extraction settings, see memodate.conf

    Returns:
        NoteAnnotation holding the matches in extraction order
    """
    if not isinstance(content, str):
        raise InputValidationError(
            "Note content must be str, got %s" % type(content).__name__
        )
    if not content:
        raise EmptyContentError("Note content is required")

    matches = get_extractor(settings).extract(content)
    logger.debug(f"Annotated note with {len(matches)} date(s)")
    return NoteAnnotation(content=content, title=title, matches=matches)
