"""Monthly seasonal indices"""

from collections import defaultdict
from typing import Sequence

from ..data.models import MonthlyBucket
from ..models.analysis import SeasonalIndex, SeasonalInterpretation
from ..utils.time import DateLike, as_datetime
from .stats import RATIO_PLACES, mean, round_to

HIGH_SEASON_INDEX = 1.1
LOW_SEASON_INDEX = 0.9


def interpret_index(index: float) -> SeasonalInterpretation:
    if index > HIGH_SEASON_INDEX:
        return SeasonalInterpretation.HIGH
    if index < LOW_SEASON_INDEX:
        return SeasonalInterpretation.LOW
    return SeasonalInterpretation.NORMAL


def group_by_month(prices: Sequence[float], dates: Sequence[DateLike]) -> list[MonthlyBucket]:
    """
    Bucket a dated price series by calendar month

    Observations from the same month of different years share a bucket.

    Args:
        prices: Price values
        dates: Observation dates parallel to prices

    Returns:
        Buckets ordered by month number; empty on mismatched lengths
    """
    if len(prices) != len(dates):
        return []

    by_month: dict[int, list[float]] = defaultdict(list)
    for price, observed in zip(prices, dates):
        by_month[as_datetime(observed).month].append(price)

    return [MonthlyBucket(month=month, prices=by_month[month]) for month in sorted(by_month)]


def seasonal_indices(buckets: Sequence[MonthlyBucket]) -> list[SeasonalIndex]:
    """
    Compare each month's average price with the overall average

    Args:
        buckets: Monthly price buckets

    Returns:
        One SeasonalIndex per non-empty bucket, index rounded to 3 places;
        empty when there are no prices or the overall average is zero
    """
    all_prices = [price for bucket in buckets for price in bucket.prices]
    if not all_prices:
        return []

    overall_average = mean(all_prices)
    if overall_average == 0:
        return []

    indices = []
    for bucket in buckets:
        if not bucket.prices:
            continue
        index = round_to(mean(bucket.prices) / overall_average, RATIO_PLACES)
        indices.append(SeasonalIndex(
            month=bucket.month,
            seasonal_index=index,
            interpretation=interpret_index(index),
        ))

    return indices
