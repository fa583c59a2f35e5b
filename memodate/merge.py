import logging
from typing import Iterable, List

from .match import ExtractedMatch

logger = logging.getLogger(__name__)


def merge_matches(candidate_lists: Iterable[Iterable[ExtractedMatch]]) -> List[ExtractedMatch]:
    """
    Combine recognizer outputs so that each source offset is claimed once.

    Lists are consumed in priority order: a match whose offset is already
    claimed by an earlier list (or earlier in the same list) is dropped.
    Each list keeps its own order and the result is not re-sorted.
    """
    merged = []
    seen = set()
    for candidates in candidate_lists:
        for match in candidates:
            if match.index in seen:
                logger.debug(f"Dropping {match.text!r} at {match.index}: offset already claimed")
                continue
            seen.add(match.index)
            merged.append(match)
    return merged
