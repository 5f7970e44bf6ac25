"""URL view counting, in total or per calendar day."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import timedelta, tzinfo

from .models import Date, DateCount, Record


class DateCounter:
    """Running counts keyed by Date; absent dates count as zero."""

    def __init__(self) -> None:
        self._counts: dict[Date, int] = {}

    def add(self, day: Date, n: int = 1) -> None:
        self._counts[day] = self.get(day) + n

    def get(self, day: Date) -> int:
        return self._counts.get(day, 0)

    def dates(self) -> list[Date]:
        """Counted dates in ascending order."""
        return sorted(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def range(self) -> list[DateCount]:
        """Return every day from the first to the last counted date, ascending.

        Days without records are filled in with a count of zero.
        """
        if not self._counts:
            return []
        if len(self._counts) == 1:
            (day,) = self._counts
            return [DateCount(day, self.get(day))]

        dates = self.dates()
        start = dates[0].to_datetime()
        end = dates[-1].to_datetime()
        # Both ends are midnight UTC, so the difference is whole days.
        days = (end - start) // timedelta(days=1)

        counts: list[DateCount] = []
        for i in range(days + 1):
            day = Date.from_datetime(start + timedelta(days=i))
            counts.append(DateCount(day, self.get(day)))
        return counts


def count(records: Iterable[Record], url: str) -> int:
    """Count the records whose URL is exactly `url`."""
    return sum(1 for record in records if record.url == url)


def count_by_day(records: Iterable[Record], url: str, tz: tzinfo) -> tuple[int, list[DateCount]]:
    """Count records for `url` per day in `tz`, returning the total and a gap-filled series."""
    total = 0
    by_day = DateCounter()
    for record in records:
        if record.url == url:
            by_day.add(Date.from_datetime(record.timestamp.astimezone(tz)))
            total += 1
    return total, by_day.range()
