"""Volatility and z-score anomaly detection"""

from typing import Sequence

from .stats import PRICE_PLACES, mean, population_std, round_to


def volatility(prices: Sequence[float]) -> float:
    """
    Calculate price volatility as population standard deviation

    Args:
        prices: Price values

    Returns:
        Standard deviation rounded to 2 places, 0.0 for fewer than 2 points
    """
    if len(prices) < 2:
        return 0.0

    return round_to(population_std(prices), PRICE_PLACES)


def detect_anomalies(prices: Sequence[float], threshold: float = 2.0) -> list[int]:
    """
    Detect outlier prices by z-score

    The z-score divides by the rounded volatility, so a series whose spread
    rounds to zero reports no anomalies.

    Args:
        prices: Price values
        threshold: Absolute z-score that must be exceeded

    Returns:
        Ascending indices of anomalous prices; empty for fewer than 3 points
    """
    if len(prices) < 3:
        return []

    avg = mean(prices)
    std_dev = volatility(prices)

    if std_dev == 0:
        return []

    return [
        index for index, price in enumerate(prices)
        if abs((price - avg) / std_dev) > threshold
    ]
