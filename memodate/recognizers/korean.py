"""
Korean Date Recognizer

Rule-based detection of Korean date expressions:

- Relative days: "내일", "모레", "3일 후", "다음 주 금요일"
- Absolute dates: "11월 5일" and bare numeric "11.5", "11/5", "11-5"
- Time of day: "오전 9시", "오후 3시 30분"

The time of day is scanned once per call and the first phrase found is
applied to every date rule fired for that text. Without a phrase the
configured default time (09:00) is used.

Month/day dates carry no year. They are placed in the reference year and
moved to the following year when that would put them before the reference
instant, so results never point to the past.

The numeric rule accepts any pair of small numbers joined by ".", "/" or
"-", which also matches version numbers and ratios such as "3.14". This is
a known precision trade-off of the rule set and is kept as is; set
``NUMERIC_DATES`` to ``False`` to turn the rule off.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional

import regex as re
from dateutil.relativedelta import relativedelta

from ..match import ExtractedMatch
from .base import Recognizer

logger = logging.getLogger(__name__)


# =============================================================================
# Patterns
# =============================================================================

TIME_OF_DAY_PATTERN = re.compile(r"(오전|오후)\s?(\d{1,2})시?\s?(\d{1,2}분)?")

TOMORROW_PATTERN = re.compile(r"내일")
DAY_AFTER_TOMORROW_PATTERN = re.compile(r"모레")
DAYS_LATER_PATTERN = re.compile(r"(\d+)일?\s?후")
NEXT_WEEK_DAY_PATTERN = re.compile(r"다음\s?주\s?(월|화|수|목|금|토|일)요일")

MONTH_DAY_PATTERN = re.compile(r"(\d{1,2})월\s?(\d{1,2})일")
NUMERIC_DATE_PATTERN = re.compile(r"(\d{1,2})[./\-](\d{1,2})")

# Keys cover every alternative of NEXT_WEEK_DAY_PATTERN; values follow
# datetime.weekday() (Monday == 0)
WEEKDAYS = {
    "월": 0,
    "화": 1,
    "수": 2,
    "목": 3,
    "금": 4,
    "토": 5,
    "일": 6,
}

AM = "오전"
PM = "오후"


@dataclass(frozen=True)
class TimeOfDay:
    """A 오전/오후 phrase converted to a 24-hour clock."""
    text: str
    hour: int
    minute: int


def to_24_hour(meridiem: str, hour: int) -> int:
    if meridiem == PM:
        return 12 if hour == 12 else hour + 12
    return 0 if hour == 12 else hour


def find_time_of_day(text: str) -> Optional[TimeOfDay]:
    """Return the first 오전/오후 phrase in ``text``, or None."""
    match = TIME_OF_DAY_PATTERN.search(text)
    if not match:
        return None

    meridiem, hour = match.group(1), int(match.group(2))
    minute = int(match.group(3)[:-1]) if match.group(3) else 0
    hour = to_24_hour(meridiem, hour)
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        logger.debug(f"Ignoring out-of-range time of day: {match.group(0)!r}")
        return None

    # the optional space after 시 can swallow the separator before the next word
    time_of_day = TimeOfDay(text=match.group(0).rstrip(), hour=hour, minute=minute)
    logger.debug(f"Korean time of day parsed: {time_of_day}")
    return time_of_day


def days_until_next_week(target_weekday: int, current_weekday: int) -> int:
    """Days from today to ``target_weekday`` of the following week (7 to 13)."""
    return ((target_weekday - current_weekday + 7) % 7) + 7


# =============================================================================
# KoreanRecognizer
# =============================================================================

class KoreanRecognizer(Recognizer):
    """Recognizer for Korean relative and absolute date expressions."""

    name = "ko"

    def iter_matches(self, text: str, now: datetime) -> Iterator[ExtractedMatch]:
        time_of_day = find_time_of_day(text)
        if time_of_day:
            hour, minute = time_of_day.hour, time_of_day.minute
        else:
            hour, minute = self.settings.DEFAULT_HOUR, self.settings.DEFAULT_MINUTE

        today = now.replace(hour=hour, minute=minute, second=0, microsecond=0)

        # 내일 / 모레 report only their first occurrence
        for pattern, days in ((TOMORROW_PATTERN, 1), (DAY_AFTER_TOMORROW_PATTERN, 2)):
            match = pattern.search(text)
            if match:
                matched_text = match.group(0)
                if time_of_day:
                    matched_text += " " + time_of_day.text
                yield self._match(matched_text, today + relativedelta(days=days), match.start())

        for match in DAYS_LATER_PATTERN.finditer(text):
            start = self._shift(today, match.group(1))
            if start is not None:
                yield self._match(match.group(0), start, match.start())

        for match in NEXT_WEEK_DAY_PATTERN.finditer(text):
            days = days_until_next_week(WEEKDAYS[match.group(1)], now.weekday())
            yield self._match(match.group(0), today + relativedelta(days=days), match.start())

        for match in MONTH_DAY_PATTERN.finditer(text):
            month, day = int(match.group(1)), int(match.group(2))
            start = resolve_month_day(month, day, hour, minute, now)
            if start is not None:
                yield self._match(match.group(0), start, match.start())

        if not self.settings.NUMERIC_DATES:
            return

        for match in NUMERIC_DATE_PATTERN.finditer(text):
            month, day = int(match.group(1)), int(match.group(2))
            if not (1 <= month <= 12 and 1 <= day <= 31):
                continue
            start = resolve_month_day(month, day, hour, minute, now)
            if start is not None:
                yield self._match(match.group(0), start, match.start())

    def _match(self, text: str, start: datetime, index: int) -> ExtractedMatch:
        logger.debug(f"Korean date parsed: {text!r} -> {start.isoformat()} at {index}")
        return ExtractedMatch(text=text, start=start, index=index, source=self.name)

    def _shift(self, today: datetime, digits: str) -> Optional[datetime]:
        try:
            days = int(digits)
            return today + relativedelta(days=days)
        except (OverflowError, ValueError):
            logger.debug(f"Skipping day offset out of calendar range: {digits[:20]}")
            return None


def resolve_month_day(month: int, day: int, hour: int, minute: int, now: datetime) -> Optional[datetime]:
    """
    Place a month/day without a year on or after ``now``.

    The reference year is tried first and the following year when the
    date has already passed. A date that does not exist in the chosen
    year (2월 30일, 2월 29일 outside a leap year) is skipped.

    Args:
        month: Month number, 1 to 12
        day: Day of month
        hour: Hour on a 24-hour clock
        minute: Minute
        now: Reference instant

    Returns:
        The resolved instant, or None if no valid date exists
    """
    for year in (now.year, now.year + 1):
        try:
            candidate = datetime(year, month, day, hour, minute)
        except ValueError:
            continue
        if candidate >= now:
            return candidate
    logger.debug(f"No valid date for month={month} day={day} after {now.isoformat()}")
    return None
