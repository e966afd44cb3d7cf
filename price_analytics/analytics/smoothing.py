"""Moving average and exponential smoothing forecast"""

from typing import Sequence

from .stats import PRICE_PLACES, mean, round_to


def moving_average(prices: Sequence[float], window: int) -> list[float]:
    """
    Calculate the trailing simple moving average

    Args:
        prices: Prices in chronological order
        window: Number of observations per average

    Returns:
        One average per position from window-1 to the end, rounded to 2
        places; empty when the series is shorter than the window
    """
    if window < 1 or len(prices) < window:
        return []

    return [
        round_to(mean(prices[i - window + 1:i + 1]), PRICE_PLACES)
        for i in range(window - 1, len(prices))
    ]


def forecast(prices: Sequence[float], alpha: float = 0.3, periods: int = 3) -> list[float]:
    """
    Forecast prices with single exponential smoothing

    S_0 = prices[0], S_t = alpha * prices[t] + (1 - alpha) * S_(t-1). The
    forecast is flat: every future period gets the last smoothed level.

    Args:
        prices: Prices in chronological order
        alpha: Smoothing factor, weight of the newest observation
        periods: Number of future periods

    Returns:
        ``periods`` copies of the final level rounded to 2 places; empty for
        an empty series
    """
    if not prices or periods < 1:
        return []

    level = prices[0]
    for price in prices[1:]:
        level = alpha * price + (1 - alpha) * level

    return [round_to(level, PRICE_PLACES)] * periods
