"""Parsing and counting core."""

from __future__ import annotations

from .counting import DateCounter, count, count_by_day
from .errors import FormatError, LogParseError, ZoneResolutionError
from .models import Date, DateCount, Record

__all__ = [
    "Date",
    "DateCount",
    "DateCounter",
    "FormatError",
    "LogParseError",
    "Record",
    "ZoneResolutionError",
    "count",
    "count_by_day",
]
