"""Tests for moving average and exponential smoothing forecast"""

import math

import pytest
from price_analytics.analytics.smoothing import forecast, moving_average


class TestMovingAverage:
    """Test moving_average function"""

    def test_empty_series(self):
        """Empty input yields no averages"""
        assert moving_average([], 3) == []

    def test_series_shorter_than_window(self):
        """A window longer than the series is not an error"""
        assert moving_average([10.0, 20.0], 3) == []

    def test_exact_window(self):
        """Window equal to length gives a single average"""
        assert moving_average([10, 20, 30], 3) == [20.0]

    def test_trailing_windows(self):
        """Each output averages the trailing window"""
        result = moving_average([1, 2, 3, 4, 5], 2)
        assert result == [1.5, 2.5, 3.5, 4.5]

    def test_output_length(self):
        """Output has len(prices) - window + 1 elements"""
        prices = [float(p) for p in range(100, 130)]
        assert len(moving_average(prices, 7)) == 24

    def test_rounds_to_two_places(self):
        """Averages are rounded to cents"""
        assert moving_average([1, 1, 2], 3) == [1.33]

    def test_window_of_one_returns_prices(self):
        """A unit window reproduces the series"""
        assert moving_average([2.5, 3.75, 4.0], 1) == [2.5, 3.75, 4.0]

    def test_non_positive_window(self):
        """Window below one returns an empty result"""
        assert moving_average([1, 2, 3], 0) == []

    def test_sum_beyond_float_range(self):
        """A window sum that overflows yields infinity"""
        assert moving_average([1e308, 1e308], 2) == [math.inf]


class TestForecast:
    """Test forecast function"""

    def test_single_price(self):
        """A single seed value is repeated"""
        assert forecast([100], 0.3, 3) == [100.0, 100.0, 100.0]

    def test_empty_series(self):
        """Empty input yields no forecast"""
        assert forecast([]) == []

    def test_smoothing(self):
        """Level follows S_t = alpha * p_t + (1 - alpha) * S_(t-1)"""
        # 10 -> 13 -> 18.1
        assert forecast([10, 20, 30], alpha=0.3, periods=2) == [18.1, 18.1]

    def test_half_alpha(self):
        """Alpha 0.5 averages the two latest levels"""
        assert forecast([100, 110], alpha=0.5) == [105.0, 105.0, 105.0]

    def test_alpha_one_tracks_last_price(self):
        """Alpha 1 ignores history"""
        assert forecast([5, 8, 12.3], alpha=1.0, periods=1) == [12.3]

    def test_periods(self):
        """Number of forecast values matches periods"""
        assert len(forecast([1, 2, 3], periods=5)) == 5
        assert forecast([1, 2, 3], periods=0) == []

    def test_flat_forecast(self):
        """All forecast values are equal"""
        result = forecast([120, 95, 130, 140, 101])
        assert len(set(result)) == 1
