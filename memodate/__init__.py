__version__ = "0.1.0"

from .conf import apply_settings, Settings, SettingValidationError
from .exceptions import (
    MemodateError,
    InputValidationError,
    EmptyContentError,
    WallClockFormatError,
    EventValidationError,
)
from .extractor import DateExtractor, get_extractor
from .match import ExtractedMatch
from .merge import merge_matches
from .wallclock import to_wall_clock, format_wall_clock, parse_wall_clock

# =============================================================================
# Recognizer Exports
# =============================================================================

from .recognizers import (
    Recognizer,
    EnglishRecognizer,
    KoreanRecognizer,
)

# =============================================================================
# Note / Event Boundary Exports
# =============================================================================

from .notes import NoteAnnotation, annotate_note
from .events import EventDraft, build_event, build_event_for_note


@apply_settings
def extract_dates(text, settings=None):
    """Find date expressions in ``text`` and resolve them to wall-clock instants.

    English expressions are resolved by ``dateparser``; Korean expressions
    by the rules in :mod:`memodate.recognizers.korean`. When both find
    something at the same offset the English match is kept.

    :param text:
        Free-form text, e.g. a note body.
    :type text: str

    :param settings:
        Configure customized behavior using settings defined in
        :mod:`memodate.conf`. Pass ``{"RELATIVE_BASE": datetime(...)}`` to
        resolve relative expressions against a fixed instant.
    :type settings: dict

    :return: Matches in recognizer order, possibly empty.
    :rtype: list of :class:`memodate.match.ExtractedMatch`

    :raises:
        ``InputValidationError``: text is not a string,
        ``SettingValidationError``: a provided setting is not valid.

    Example usage::

        >>> import memodate
        >>> from datetime import datetime
        >>> matches = memodate.extract_dates(
        ...     "내일 오후 3시 회의",
        ...     settings={"RELATIVE_BASE": datetime(2024, 1, 1, 10, 0)},
        ... )
        >>> matches[0].text
        '내일 오후 3시'
        >>> matches[0].start
        datetime.datetime(2024, 1, 2, 15, 0)
    """
    return get_extractor(settings).extract(text)


@apply_settings
def has_date_references(text, settings=None):
    """Return True if :func:`extract_dates` would find at least one date in ``text``.

    Stops at the first recognizer that reports a match.
    """
    return get_extractor(settings).has_references(text)
