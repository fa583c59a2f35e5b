"""
Local wall-clock instants.

A wall-clock instant is a naive ``datetime`` whose year, month, day, hour,
minute and second fields are taken at face value. It carries no offset and
is never converted between zones. This module is the only place where an
aware or string value becomes a wall-clock instant, and the only place where
a wall-clock instant becomes a string.

Serialized form::

    YYYY-MM-DDTHH:MM:SS

No ``Z`` or ``+09:00`` suffix is produced. When parsing, anything after the
seconds field (fractions, ``Z``, an offset) is ignored rather than applied,
so a value read back always has the same fields it was written with.
"""

import logging
from datetime import datetime

import regex as re

from .exceptions import WallClockFormatError

logger = logging.getLogger(__name__)

RE_WALL_CLOCK = re.compile(r"^\s*(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})")


def to_wall_clock(value: datetime) -> datetime:
    """Copy the calendar and clock fields of ``value`` into a naive datetime.

    Any ``tzinfo`` is dropped without conversion. Microseconds are dropped.
    """
    return datetime(
        value.year, value.month, value.day,
        value.hour, value.minute, value.second,
    )


def format_wall_clock(value: datetime) -> str:
    return "%04d-%02d-%02dT%02d:%02d:%02d" % (
        value.year, value.month, value.day,
        value.hour, value.minute, value.second,
    )


def parse_wall_clock(value: str) -> datetime:
    """Rebuild a wall-clock instant from its serialized fields.

    :param value: A string starting with ``YYYY-MM-DDTHH:MM:SS``.
    :return: A naive datetime with exactly those fields.
    :raises WallClockFormatError: if the string has another shape or the
        fields do not form a valid date.
    """
    if not isinstance(value, str):
        raise WallClockFormatError(
            "Wall-clock value must be a string, got %s" % type(value).__name__
        )

    match = RE_WALL_CLOCK.match(value)
    if not match:
        raise WallClockFormatError("Not a wall-clock value: %r" % value)

    year, month, day, hour, minute, second = (int(g) for g in match.groups())
    try:
        return datetime(year, month, day, hour, minute, second)
    except ValueError as e:
        raise WallClockFormatError("Invalid wall-clock value %r: %s" % (value, e)) from e
