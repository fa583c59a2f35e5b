import logging
from datetime import datetime
from typing import List, Optional, Sequence

from tzlocal import get_localzone

from .conf import settings as default_settings
from .exceptions import InputValidationError
from .match import ExtractedMatch
from .merge import merge_matches
from .recognizers import EnglishRecognizer, KoreanRecognizer, Recognizer
from .wallclock import to_wall_clock

logger = logging.getLogger(__name__)


class DateExtractor:
    """
    Finds date expressions in short English/Korean text.

    Recognizers run in priority order; when two of them report a match at
    the same offset the earlier recognizer wins. By default English comes
    first, then Korean.

    :param settings:
        A :class:`memodate.conf.Settings` instance. ``RELATIVE_BASE`` fixes
        the reference instant; when it is ``None`` the local time at the
        moment of each call is used.

    :param recognizers:
        Recognizers to use instead of the ones enabled in ``settings``.
    """

    def __init__(self, settings=None, recognizers: Optional[Sequence[Recognizer]] = None):
        self._settings = settings or default_settings
        if recognizers is None:
            recognizers = []
            if self._settings.ENABLE_ENGLISH:
                recognizers.append(EnglishRecognizer(self._settings))
            if self._settings.ENABLE_KOREAN:
                recognizers.append(KoreanRecognizer(self._settings))
        self.recognizers = list(recognizers)

    def get_reference_instant(self) -> datetime:
        if self._settings.RELATIVE_BASE is not None:
            return to_wall_clock(self._settings.RELATIVE_BASE)
        return to_wall_clock(datetime.now(get_localzone()))

    def extract(self, text: str) -> List[ExtractedMatch]:
        _check_text(text)
        now = self.get_reference_instant()
        matches = merge_matches(r.find_matches(text, now) for r in self.recognizers)
        logger.debug(f"Extracted {len(matches)} date(s) relative to {now.isoformat()}")
        return matches

    def has_references(self, text: str) -> bool:
        _check_text(text)
        now = self.get_reference_instant()
        return any(r.has_match(text, now) for r in self.recognizers)


def _check_text(text):
    if not isinstance(text, str):
        raise InputValidationError(
            "Input text must be str, got %s" % type(text).__name__
        )


_default_extractor = DateExtractor()


def get_extractor(settings=None) -> DateExtractor:
    """Return the shared default extractor, or a new one for custom settings."""
    if settings is None or settings._default:
        return _default_extractor
    return DateExtractor(settings=settings)
