"""Parser interface and line tokenization."""

from __future__ import annotations

import shlex
from collections.abc import Sequence
from typing import Protocol

from ..errors import FormatError
from ..models import Record

__all__ = ["ACCESS_TIME_FORMAT", "FIELD_COUNT", "RecordParser", "split_fields"]

# nginx/Apache $time_local, brackets included.
ACCESS_TIME_FORMAT = "[%d/%b/%Y:%H:%M:%S %z]"

# Tokens in a combined-format line once the timestamp is split at its space.
FIELD_COUNT = 10


class RecordParser(Protocol):
    """Parser interface: return a Record or raise FormatError."""

    def parse_line(self, line: str) -> Record:
        """Parse a raw log line into a Record."""
        ...


def split_fields(line: str) -> list[str]:
    """Split a line on whitespace; only double quotes group, nothing is escaped."""
    lex = shlex.shlex(line, posix=True)
    lex.whitespace_split = True
    lex.quotes = '"'
    lex.escape = ""
    lex.commenters = ""
    try:
        return list(lex)
    except ValueError as exc:
        raise FormatError(f"cannot tokenize line: {exc}") from exc


def expect_field_count(fields: Sequence[str]) -> None:
    if len(fields) != FIELD_COUNT:
        raise FormatError(f"expected {FIELD_COUNT} fields, got {len(fields)}")
