from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterator, List

from ..conf import settings as default_settings
from ..match import ExtractedMatch


class Recognizer(ABC):
    """Scans text for one family of date expressions.

    Subclasses yield matches in their own scan order. ``now`` is the
    reference instant as a naive wall-clock datetime.
    """

    name = ""

    def __init__(self, settings=None):
        self.settings = settings or default_settings

    @abstractmethod
    def iter_matches(self, text: str, now: datetime) -> Iterator[ExtractedMatch]:
        pass

    def find_matches(self, text: str, now: datetime) -> List[ExtractedMatch]:
        return list(self.iter_matches(text, now))

    def has_match(self, text: str, now: datetime) -> bool:
        for _ in self.iter_matches(text, now):
            return True
        return False

    def __repr__(self):
        return f"{type(self).__name__}()"
