"""
Date utilities for price series.

Observation dates may arrive as ``date`` or ``datetime`` objects; these helpers
normalize them so regression and bucketing see one representation.
"""

from datetime import date, datetime, time, timezone
from typing import Optional, Sequence, Union

SECONDS_PER_DAY = 86400.0

DateLike = Union[date, datetime]


def as_datetime(value: DateLike) -> datetime:
    """
    Promote a date to a midnight datetime, leaving datetimes unchanged.

    Args:
        value: Observation date

    Returns:
        Equivalent datetime
    """
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def days_between(start: DateLike, end: DateLike) -> float:
    """
    Fractional days elapsed from start to end.

    Args:
        start: Earlier date
        end: Later date

    Returns:
        Elapsed days (negative when end precedes start)
    """
    return (as_datetime(end) - as_datetime(start)).total_seconds() / SECONDS_PER_DAY


def to_day_offsets(dates: Sequence[DateLike]) -> list[float]:
    """
    Convert dates to day offsets from the first date.

    Args:
        dates: Observation dates in series order

    Returns:
        Offsets in days, first element 0.0; empty for empty input
    """
    if not dates:
        return []

    first = dates[0]
    return [days_between(first, value) for value in dates]


def first_out_of_order(dates: Sequence[DateLike]) -> Optional[int]:
    """
    Find the first index whose date precedes the previous one.

    Args:
        dates: Observation dates in series order

    Returns:
        Offending index, or None when dates are non-decreasing
    """
    for i in range(1, len(dates)):
        if as_datetime(dates[i]) < as_datetime(dates[i - 1]):
            return i
    return None


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
