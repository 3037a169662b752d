"""
Time-Bucketed Aggregation
=========================

Partition timestamped rows into dense day or month buckets for charts.

Every bucket in ``[start, end]`` is emitted, in chronological order,
whether or not any row falls into it.  Rows outside the window are
ignored.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, Callable, Iterable, Optional


class Granularity(str, Enum):
    """Bucket width."""
    DAY = "day"
    MONTH = "month"


class TimeRange(str, Enum):
    """Selectable analytics windows."""
    LAST_7_DAYS = "7days"
    LAST_30_DAYS = "30days"
    LAST_90_DAYS = "90days"
    YEAR = "year"

    @property
    def granularity(self) -> Granularity:
        if self is TimeRange.YEAR:
            return Granularity.MONTH
        return Granularity.DAY

    @property
    def bucket_count(self) -> int:
        return {
            TimeRange.LAST_7_DAYS: 7,
            TimeRange.LAST_30_DAYS: 30,
            TimeRange.LAST_90_DAYS: 90,
            TimeRange.YEAR: 12,
        }[self]

    def start(self, today: date) -> date:
        """First calendar day covered by the window ending ``today``."""
        return make_buckets(today, self.bucket_count, self.granularity)[0].start


@dataclass
class Bucket:
    """One slot of an aggregated series; ``end`` is inclusive."""

    start: date
    end: date
    count: int = 0
    total: float = 0

    @property
    def label(self) -> str:
        return self.start.isoformat()


def to_day(value: date | datetime) -> date:
    """Calendar day of a date or datetime."""
    if isinstance(value, datetime):
        return value.date()
    return value


def month_start(day: date, months_back: int = 0) -> date:
    """First day of the month ``months_back`` months before ``day``'s month."""
    index = day.year * 12 + (day.month - 1) - months_back
    return date(index // 12, index % 12 + 1, 1)


def _month_end(first: date) -> date:
    following = month_start(first, -1)
    return following - timedelta(days=1)


def make_buckets(end: date, count: int, granularity: Granularity = Granularity.DAY) -> list[Bucket]:
    """
    Build ``count`` empty buckets whose last bucket contains ``end``.
    """
    if count <= 0:
        return []

    if granularity is Granularity.DAY:
        first = end - timedelta(days=count - 1)
        return [
            Bucket(start=first + timedelta(days=i), end=first + timedelta(days=i))
            for i in range(count)
        ]

    buckets = []
    for back in range(count - 1, -1, -1):
        first = month_start(end, back)
        buckets.append(Bucket(start=first, end=_month_end(first)))
    return buckets


def _bucket_index(day: date, first: date, granularity: Granularity) -> int:
    if granularity is Granularity.DAY:
        return (day - first).days
    return (day.year - first.year) * 12 + (day.month - first.month)


def bucketize(
    rows: Iterable[Any],
    *,
    end: date,
    count: int,
    date_of: Callable[[Any], date | datetime],
    value_of: Optional[Callable[[Any], float]] = None,
    granularity: Granularity = Granularity.DAY,
) -> list[Bucket]:
    """
    Count and sum rows into a dense series of ``count`` buckets ending at ``end``.

    Args:
        rows: Source rows
        end: Day contained in the last bucket (usually today)
        count: Number of buckets to emit
        date_of: Extracts the row's date or timestamp
        value_of: Extracts the value to sum (optional; counts only when omitted)
        granularity: Day or month buckets

    Returns:
        Chronologically ordered buckets, empty ones included
    """
    buckets = make_buckets(end, count, granularity)
    if not buckets:
        return buckets

    first = buckets[0].start
    for row in rows:
        day = to_day(date_of(row))
        if day > end:
            continue
        index = _bucket_index(day, first, granularity)
        if 0 <= index < len(buckets):
            bucket = buckets[index]
            bucket.count += 1
            if value_of is not None:
                bucket.total += value_of(row)
    return buckets
