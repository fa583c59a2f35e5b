"""
Date Recognizers

Each recognizer scans raw text for one family of date expressions and
yields ExtractedMatch candidates in its own scan order:

1. english - dateparser-backed search for English expressions
2. korean - regex rules for Korean relative and absolute dates

Usage:
    from memodate.recognizers import KoreanRecognizer

    matches = KoreanRecognizer().find_matches("내일 오후 3시", now)
"""

from .base import Recognizer
from .english import EnglishRecognizer
from .korean import KoreanRecognizer, TimeOfDay, find_time_of_day, resolve_month_day

__all__ = [
    "Recognizer",
    "EnglishRecognizer",
    "KoreanRecognizer",
    "TimeOfDay",
    "find_time_of_day",
    "resolve_month_day",
]
