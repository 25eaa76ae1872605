"""
History calculator for the commit chart.

Buckets commit timestamps into a trailing window of days, oldest first.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class DayBucketSeries:
    """
    Commit counts per day over a trailing window.

    counts[0] is the oldest day and counts[-1] is today. total is the number
    of timestamps that were aggregated, including any that fell outside the
    window.
    """

    counts: tuple[int, ...]
    total: int

    @property
    def window_days(self) -> int:
        return len(self.counts)

    @property
    def max_count(self) -> int:
        return max(self.counts, default=0)

    @property
    def in_window(self) -> int:
        return sum(self.counts)

    @property
    def today(self) -> int:
        return self.counts[-1]


def aggregate(
    timestamps: Iterable[datetime], now: datetime, window_days: int
) -> DayBucketSeries:
    """
    Count commits per day for the window_days days ending at now.

    A timestamp lands in bucket window_days - 1 - days_ago, where days_ago is
    the whole number of days between it and now. Timestamps in the future or
    older than the window are dropped from the buckets but still counted in
    the total.

    Args:
        timestamps: Commit times. Must be comparable with now (both aware
            or both naive).
        now: Reference instant for "today"
        window_days: Number of day buckets

    Returns:
        DayBucketSeries with window_days buckets

    Raises:
        ValueError: If window_days is not a positive integer
    """
    if isinstance(window_days, bool) or not isinstance(window_days, int):
        raise ValueError(f"window_days must be an int, got {window_days!r}")
    if window_days <= 0:
        raise ValueError(f"window_days must be positive, got {window_days}")

    counts = [0] * window_days
    total = 0

    for timestamp in timestamps:
        total += 1
        days_ago = (now - timestamp) // ONE_DAY
        if 0 <= days_ago < window_days:
            counts[window_days - 1 - days_ago] += 1

    return DayBucketSeries(counts=tuple(counts), total=total)


def calculate_history(series: DayBucketSeries, now: datetime) -> dict:
    """
    Describe a series with calendar dates for display.

    Args:
        series: Aggregated series
        now: The reference instant the series was aggregated against

    Returns:
        Dictionary with:
            - days: List of {date, count} from oldest to newest
            - period: Start/end dates and total days
            - max_count: Maximum commits in a single day
            - total: Number of commits fetched
    """
    end = now.date()
    start = end - timedelta(days=series.window_days - 1)

    days = [
        {"date": (start + timedelta(days=i)).isoformat(), "count": count}
        for i, count in enumerate(series.counts)
    ]

    return {
        "days": days,
        "period": {
            "start": start.isoformat(),
            "end": end.isoformat(),
            "total_days": series.window_days,
        },
        "max_count": series.max_count,
        "total": series.total,
    }
