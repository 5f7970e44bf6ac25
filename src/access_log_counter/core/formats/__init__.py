"""Access-log line parsing.

Contains the combined-format parser and the line tokenizer it relies on.
"""

from __future__ import annotations

from .access import AccessLogParser
from .base import ACCESS_TIME_FORMAT, FIELD_COUNT, RecordParser, split_fields

__all__ = [
    "ACCESS_TIME_FORMAT",
    "AccessLogParser",
    "FIELD_COUNT",
    "RecordParser",
    "split_fields",
]
