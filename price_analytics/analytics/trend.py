"""Linear price trend and cross-price elasticity"""

import math
from typing import Sequence

from ..models.analysis import TrendDirection, TrendResult
from ..utils.time import DateLike, to_day_offsets
from .stats import RATIO_PLACES, pearson_correlation, round_to

# Slopes below this many currency units per day count as flat
STABLE_SLOPE = 0.01


def classify_slope(slope: float) -> TrendDirection:
    if abs(slope) < STABLE_SLOPE:
        return TrendDirection.STABLE
    if slope > 0:
        return TrendDirection.INCREASING
    return TrendDirection.DECREASING


def price_trend(prices: Sequence[float], dates: Sequence[DateLike]) -> TrendResult:
    """
    Fit price against days elapsed by ordinary least squares

    Args:
        prices: Prices in chronological order
        dates: Observation dates parallel to prices

    Returns:
        TrendResult with slope (price units per day) and correlation rounded
        to 3 places; the neutral stable result for fewer than 2 points or
        mismatched lengths
    """
    if len(prices) < 2 or len(prices) != len(dates):
        return TrendResult.neutral()

    x = to_day_offsets(dates)
    y = prices
    n = len(x)

    sum_x = sum(x)
    sum_y = sum(y)
    sum_xy = sum(xi * yi for xi, yi in zip(x, y))
    sum_xx = sum(xi * xi for xi in x)

    # All observations on the same instant leave the slope undefined
    x_spread = n * sum_xx - sum_x * sum_x
    slope = (n * sum_xy - sum_x * sum_y) / x_spread if x_spread != 0 else 0.0

    correlation = pearson_correlation(x, y)

    return TrendResult(
        slope=round_to(slope, RATIO_PLACES),
        correlation=round_to(correlation, RATIO_PLACES),
        trend=classify_slope(slope),
    )


def _percent_changes(series_a: Sequence[float],
                     series_b: Sequence[float]) -> tuple[list[float], list[float]]:
    """Paired period-over-period fractional changes, skipping unusable periods"""
    changes_a = []
    changes_b = []

    for i in range(1, len(series_a)):
        prev_a = series_a[i - 1]
        prev_b = series_b[i - 1]
        if prev_a == 0 or prev_b == 0:
            continue

        change_a = (series_a[i] - prev_a) / prev_a
        change_b = (series_b[i] - prev_b) / prev_b
        if not (math.isfinite(change_a) and math.isfinite(change_b)):
            continue

        changes_a.append(change_a)
        changes_b.append(change_b)

    return changes_a, changes_b


def cross_price_elasticity(series_a: Sequence[float], series_b: Sequence[float]) -> float:
    """
    Correlate the period-over-period price changes of two products

    Args:
        series_a: Prices of the first product
        series_b: Prices of the second product over the same periods

    Returns:
        Correlation of percentage changes rounded to 3 places; 0.0 for
        mismatched or too-short series, or when no usable changes remain
    """
    if len(series_a) != len(series_b) or len(series_a) < 2:
        return 0.0

    changes_a, changes_b = _percent_changes(series_a, series_b)
    if not changes_a:
        return 0.0

    return round_to(pearson_correlation(changes_a, changes_b), RATIO_PLACES)
