"""Core data models for access-log counting."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta, timezone


@dataclass(frozen=True, slots=True)
class Record:
    """One parsed access-log line.

    The default nginx layout is::

        $remote_addr - $remote_user [$time_local] "$request" $status
        $body_bytes_sent "$http_referer" "$http_user_agent"
    """

    ip: str
    user: str
    timestamp: datetime  # always UTC
    utc_offset: timedelta  # offset as written in the log line
    request: str
    method: str
    url: str
    version: str
    status: int
    bytes: int
    referer: str
    agent: str

    def local_timestamp(self) -> datetime:
        """Return the timestamp in the offset it was logged with."""
        return self.timestamp.astimezone(timezone(self.utc_offset))

    def to_line(self) -> str:
        """Rebuild the record into the default nginx log format."""
        from .formats.base import ACCESS_TIME_FORMAT

        return '{} - {} {} "{}" {} {} "{}" "{}"'.format(
            self.ip,
            self.user,
            self.local_timestamp().strftime(ACCESS_TIME_FORMAT),
            self.request or "-",
            self.status,
            self.bytes,
            self.referer or "-",
            self.agent or "-",
        )

    def __str__(self) -> str:
        return self.to_line()


@dataclass(frozen=True, slots=True, order=True)
class Date:
    """A calendar day (year, month, day) without time-of-day or zone.

    Field order gives the total ordering: year, then month, then day.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        # Raises ValueError for days that do not exist (e.g. Feb 30).
        date(self.year, self.month, self.day)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Date:
        """Truncate a datetime to its calendar day in its own zone."""
        return cls(dt.year, dt.month, dt.day)

    def to_datetime(self) -> datetime:
        """Return midnight UTC of this day."""
        return datetime(self.year, self.month, self.day, tzinfo=UTC)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        month_name = date(self.year, self.month, 1).strftime("%B")
        return f"{month_name} {self.day}, {self.year}"


@dataclass(frozen=True, slots=True)
class DateCount:
    """A day and the number of matching records on it."""

    date: Date
    count: int
