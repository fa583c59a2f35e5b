"""
English Date Recognizer

Wraps ``dateparser.search.search_dates`` so English expressions such as
"tomorrow at 3pm", "next Friday" or "Nov 5" resolve forward from the
reference instant.

Before searching, the text is prepared without moving any character:

1. Words containing Hangul ("회의", "3시", "11월") are blanked out with
   spaces of the same length. Korean fragments otherwise make the grammar
   give up on the whole string.
2. Compact time tokens are swapped into a form the grammar reads as a
   time ("pm3" -> "3pm", "am11" -> "11am"). Left alone, their digits are
   taken as a month or day.

On top of the raw search results the adapter:

1. Recovers the character offset of every hit and reports the original
   text at that span.
2. Drops hits made only of digits ("3" out of "3 people").
3. Pulls a leading "next", "this" or "on" into the span, and a trailing
   compact time token left outside it ("Friday pm3").
4. Fuses two hits joined by a range connector ("Nov 5 - Nov 7",
   "from 2pm to 4pm", "between Monday and Friday") into one range match.
5. Fixes the time of day when the text does not state one. The grammar
   then falls back to the clock time of the reference instant (or
   midnight); the adapter applies a compact token like "pm3" or "am11"
   and otherwise the default time.
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterator, List, Optional, Tuple

import regex as re
from dateparser.search import search_dates

from ..match import ExtractedMatch
from ..wallclock import to_wall_clock
from .base import Recognizer

logger = logging.getLogger(__name__)

BARE_NUMBER_PATTERN = re.compile(r"^\s*\d+\s*$")
HANGUL_WORD_PATTERN = re.compile(r"[\p{Hangul}\d]*\p{Hangul}[\p{Hangul}\d]*")

RANGE_CONNECTOR_PATTERN = re.compile(r"^\s*(?:-|~|–|to|until|till|through|thru)\s*$", re.I)
BETWEEN_CONNECTOR_PATTERN = re.compile(r"^\s*and\s*$", re.I)
BETWEEN_PREFIX_PATTERN = re.compile(r"\bbetween\s*$", re.I)
MODIFIER_PREFIX_PATTERN = re.compile(r"\b(?:next|this|on)\s+$", re.I)

EXPLICIT_TIME_PATTERN = re.compile(
    r"\d{1,2}:\d{2}"
    r"|\d\s*[ap]\.?m\b\.?"
    r"|\b(?:noon|midnight|now|o'clock)\b"
    r"|\b(?:hours?|hrs?|minutes?|mins?|seconds?|secs?)\b",
    re.I,
)
COMPACT_TIME_PATTERN = re.compile(r"(?<![a-z0-9])(am|pm)(\d{1,2})(?!\d)", re.I)
TRAILING_COMPACT_TIME_PATTERN = re.compile(r"\s*(?:at\s+)?(?<![a-z0-9])(?:am|pm)\d{1,2}(?!\d)", re.I)


@dataclass
class SearchHit:
    """A single ``search_dates`` result located in the source text."""
    text: str
    start: int
    end: int
    date: datetime


def prepare_search_text(text: str) -> str:
    """Return ``text`` with Hangul words blanked and compact times swapped.

    The result has the same length as ``text``, so offsets found in it
    apply to the original unchanged.
    """
    text = HANGUL_WORD_PATTERN.sub(lambda m: " " * len(m.group(0)), text)
    return COMPACT_TIME_PATTERN.sub(lambda m: m.group(2) + m.group(1), text)


def locate_hits(search_text: str, results: List[Tuple[str, datetime]],
                text: Optional[str] = None) -> List[SearchHit]:
    """Attach source offsets to ``search_dates`` results, in scan order.

    Hits are looked up in ``search_text`` and report the span of ``text``
    (defaults to ``search_text``) at the same offsets.
    """
    if text is None:
        text = search_text

    hits = []
    cursor = 0
    for matched_text, date in results:
        if date is None:
            continue
        index = search_text.find(matched_text, cursor)
        if index < 0:
            logger.debug(f"Search result {matched_text!r} not found after offset {cursor}, skipping")
            continue
        cursor = index + len(matched_text)
        hits.append(SearchHit(text=text[index:cursor], start=index, end=cursor, date=date))
    return hits


def widen_hits(text: str, hits: List[SearchHit]) -> List[SearchHit]:
    """Pull leading modifiers and trailing compact time tokens into each hit.

    A hit that ends up inside the widened span of the previous one is
    dropped.
    """
    widened = []
    for hit in hits:
        prev_end = widened[-1].end if widened else 0
        if hit.start < prev_end:
            logger.debug(f"Dropping {hit.text!r}: covered by the previous hit")
            continue

        start, end = hit.start, hit.end
        modifier = MODIFIER_PREFIX_PATTERN.search(text[prev_end:start])
        if modifier:
            start = prev_end + modifier.start()

        if not EXPLICIT_TIME_PATTERN.search(hit.text) and not COMPACT_TIME_PATTERN.search(hit.text):
            trailing = TRAILING_COMPACT_TIME_PATTERN.match(text, end)
            if trailing:
                end = trailing.end()

        if (start, end) != (hit.start, hit.end):
            hit = replace(hit, text=text[start:end], start=start, end=end)
        widened.append(hit)
    return widened


def is_range_gap(text: str, first: SearchHit, second: SearchHit) -> bool:
    """True if only a range connector separates ``first`` from ``second``."""
    if second.start < first.end:
        return False
    gap = text[first.end:second.start]
    if RANGE_CONNECTOR_PATTERN.match(gap):
        return True
    if BETWEEN_CONNECTOR_PATTERN.match(gap):
        return bool(BETWEEN_PREFIX_PATTERN.search(text[:first.start]))
    return False


def fuse_ranges(text: str, hits: List[SearchHit]) -> List[Tuple[SearchHit, Optional[SearchHit]]]:
    """Pair each hit with the hit that closes its range, if any."""
    fused = []
    i = 0
    while i < len(hits):
        first = hits[i]
        if i + 1 < len(hits) and is_range_gap(text, first, hits[i + 1]):
            fused.append((first, hits[i + 1]))
            i += 2
        else:
            fused.append((first, None))
            i += 1
    return fused


def compact_time(text: str) -> Optional[Tuple[int, int]]:
    """Read an "am11" / "pm3" style token as (hour, minute) on a 24-hour clock."""
    match = COMPACT_TIME_PATTERN.search(text)
    if not match:
        return None

    meridiem, hour = match.group(1).lower(), int(match.group(2))
    if not 1 <= hour <= 12:
        return None
    if meridiem == "pm":
        return (12 if hour == 12 else hour + 12), 0
    return (0 if hour == 12 else hour), 0


def resolve_time_of_day(matched_text: str, date: datetime, settings) -> datetime:
    """Return ``date`` as a wall-clock instant with a definite time of day.

    A time stated in ``matched_text`` is kept as the grammar resolved it.
    """
    date = to_wall_clock(date)
    if EXPLICIT_TIME_PATTERN.search(matched_text):
        return date

    hour_minute = compact_time(matched_text)
    if hour_minute is None:
        hour_minute = (settings.DEFAULT_HOUR, settings.DEFAULT_MINUTE)
    else:
        logger.debug(f"Compact time token in {matched_text!r}: {hour_minute}")

    hour, minute = hour_minute
    return date.replace(hour=hour, minute=minute, second=0)


class EnglishRecognizer(Recognizer):
    """Recognizer backed by the ``dateparser`` search grammar."""

    name = "en"

    def search(self, text: str, now: datetime) -> List[Tuple[str, datetime]]:
        results = search_dates(
            text,
            languages=self.settings.ENGLISH_LANGUAGES,
            settings={
                "PREFER_DATES_FROM": "future",
                "RELATIVE_BASE": now,
                "RETURN_AS_TIMEZONE_AWARE": False,
            },
        )
        return results or []

    def iter_matches(self, text: str, now: datetime) -> Iterator[ExtractedMatch]:
        search_text = prepare_search_text(text)
        hits = [
            hit for hit in locate_hits(search_text, self.search(search_text, now), text)
            if not BARE_NUMBER_PATTERN.match(hit.text)
        ]
        hits = widen_hits(text, hits)

        for first, last in fuse_ranges(text, hits):
            if last is None:
                matched_text = first.text
                end = None
            else:
                matched_text = text[first.start:last.end]
                end = resolve_time_of_day(last.text, last.date, self.settings)

            start = resolve_time_of_day(first.text, first.date, self.settings)
            logger.debug(f"English date parsed: {matched_text!r} -> {start.isoformat()} at {first.start}")
            yield ExtractedMatch(
                text=matched_text,
                start=start,
                index=first.start,
                end=end,
                source=self.name,
            )
