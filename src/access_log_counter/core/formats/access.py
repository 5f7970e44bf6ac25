"""Access log parser."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from ..errors import FormatError
from ..models import Record
from .base import ACCESS_TIME_FORMAT, expect_field_count, split_fields


@dataclass(frozen=True, slots=True)
class AccessLogParser:
    """Parse nginx access logs in the default combined format."""

    _ts_re = re.compile(r"^\[[0-9]{2}/[A-Za-z]{3}/[0-9]{4}:[0-9]{2}:[0-9]{2}:[0-9]{2} [+-][0-9]{4}\]$")
    _int_re = re.compile(r"^[+-]?[0-9]+$")

    @classmethod
    def _parse_ts(cls, ts_str: str) -> tuple[datetime, timedelta]:
        """Parse '[02/Jan/2006:15:04:05 -0700]' into UTC plus the written offset."""
        if not cls._ts_re.match(ts_str):
            raise FormatError(f"invalid timestamp {ts_str!r}")
        try:
            local_ts = datetime.strptime(ts_str, ACCESS_TIME_FORMAT)
            return local_ts.astimezone(UTC), local_ts.utcoffset()
        except (ValueError, OverflowError) as exc:
            raise FormatError(f"invalid timestamp {ts_str!r}: {exc}") from exc

    @classmethod
    def _parse_int(cls, name: str, value: str) -> int:
        if not cls._int_re.match(value):
            raise FormatError(f"invalid {name} {value!r}")
        return int(value)

    @staticmethod
    def split_request(request: str) -> tuple[str, str, str]:
        """Split 'METHOD URL PROTOCOL'; anything else gives three empty strings."""
        parts = request.split(" ")
        if len(parts) == 3 and all(parts):
            return parts[0], parts[1], parts[2]
        return "", "", ""

    def parse_fields(self, fields: Sequence[str]) -> Record:
        """Build a Record from the ten tokens of a line."""
        expect_field_count(fields)

        # The timestamp was split at the space before its offset.
        timestamp, utc_offset = self._parse_ts(f"{fields[3]} {fields[4]}")
        method, url, version = self.split_request(fields[5])

        return Record(
            ip=fields[0],
            user=fields[2],
            timestamp=timestamp,
            utc_offset=utc_offset,
            request=fields[5],
            method=method,
            url=url,
            version=version,
            status=self._parse_int("status", fields[6]),
            bytes=self._parse_int("byte count", fields[7]),
            referer=fields[8],
            agent=fields[9],
        )

    def parse_line(self, line: str) -> Record:
        """Parse a raw access-log line into a Record."""
        return self.parse_fields(split_fields(line))
