"""Shared arithmetic helpers for the price analysis functions"""

import math
from typing import Sequence

PRICE_PLACES = 2
RATIO_PLACES = 3


def round_to(value: float, places: int) -> float:
    """
    Round half up to a fixed number of decimal places

    Halves round toward positive infinity, so -2.5 rounds to -2 and 2.5 to 3,
    unlike Python's round() which rounds halves to even.

    Args:
        value: Number to round
        places: Decimal places to keep

    Returns:
        Rounded value, or the value itself when it is not finite
    """
    factor = 10 ** places
    scaled = value * factor
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / factor


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; callers guarantee a non-empty sequence"""
    return sum(values) / len(values)


def population_variance(values: Sequence[float]) -> float:
    """Variance dividing by n rather than n - 1"""
    avg = mean(values)
    return sum((value - avg) * (value - avg) for value in values) / len(values)


def population_std(values: Sequence[float]) -> float:
    return math.sqrt(population_variance(values))


def pearson_correlation(xs: Sequence[float], ys: Sequence[float]) -> float:
    """
    Pearson correlation coefficient of two equal-length sequences

    Uses the raw-sums form. A zero denominator (either sequence constant)
    yields 0.0.

    Args:
        xs: First sequence
        ys: Second sequence

    Returns:
        Unrounded correlation in [-1, 1]
    """
    n = len(xs)
    if n == 0:
        return 0.0

    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_xx = sum(x * x for x in xs)
    sum_yy = sum(y * y for y in ys)

    numerator = n * sum_xy - sum_x * sum_y
    spread = (n * sum_xx - sum_x * sum_x) * (n * sum_yy - sum_y * sum_y)

    # Cancellation can leave a tiny negative spread for constant input
    if spread <= 0:
        return 0.0

    return numerator / math.sqrt(spread)
