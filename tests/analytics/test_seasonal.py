"""Tests for seasonal indices and monthly bucketing"""

from datetime import date, datetime

import pytest
from price_analytics.analytics.seasonal import group_by_month, interpret_index, seasonal_indices
from price_analytics.data.models import MonthlyBucket
from price_analytics.models.analysis import SeasonalInterpretation


class TestSeasonalIndices:
    """Test seasonal_indices function"""

    def test_high_normal_low(self):
        """Months are classified against the pooled average"""
        buckets = [
            MonthlyBucket(month=1, prices=[100.0, 100.0]),
            MonthlyBucket(month=2, prices=[120.0]),
            MonthlyBucket(month=3, prices=[80.0]),
        ]
        result = seasonal_indices(buckets)

        assert [r.month for r in result] == [1, 2, 3]
        assert [r.seasonal_index for r in result] == [1.0, 1.2, 0.8]
        assert [r.interpretation for r in result] == ["normal", "high", "low"]

    def test_pooled_average_weights_observations(self):
        """The overall average pools prices, not monthly averages"""
        buckets = [
            MonthlyBucket(month=6, prices=[10.0, 10.0, 10.0]),
            MonthlyBucket(month=7, prices=[30.0]),
        ]
        # overall = 60 / 4 = 15
        result = seasonal_indices(buckets)
        assert result[0].seasonal_index == 0.667
        assert result[1].seasonal_index == 2.0

    def test_no_buckets(self):
        """No data gives no indices"""
        assert seasonal_indices([]) == []

    def test_only_empty_buckets(self):
        """Buckets without prices cannot define an average"""
        assert seasonal_indices([MonthlyBucket(month=1, prices=[])]) == []

    def test_zero_prices(self):
        """A zero overall average gives no indices"""
        assert seasonal_indices([MonthlyBucket(month=4, prices=[0.0, 0.0])]) == []

    def test_empty_bucket_omitted(self):
        """Empty months are skipped, others still reported"""
        buckets = [
            MonthlyBucket(month=1, prices=[50.0]),
            MonthlyBucket(month=2, prices=[]),
            MonthlyBucket(month=3, prices=[50.0]),
        ]
        result = seasonal_indices(buckets)
        assert [r.month for r in result] == [1, 3]

    def test_to_dict(self):
        """Serialized keys match the API"""
        result = seasonal_indices([MonthlyBucket(month=5, prices=[10.0])])
        assert result[0].to_dict() == {"month": 5, "seasonalIndex": 1.0, "interpretation": "normal"}


class TestInterpretIndex:
    """Test seasonal interpretation bands"""

    def test_boundaries_are_normal(self):
        assert interpret_index(1.1) == SeasonalInterpretation.NORMAL
        assert interpret_index(0.9) == SeasonalInterpretation.NORMAL
        assert interpret_index(1.101) == SeasonalInterpretation.HIGH
        assert interpret_index(0.899) == SeasonalInterpretation.LOW


class TestGroupByMonth:
    """Test group_by_month function"""

    def test_groups_and_orders_by_month(self):
        """Buckets come back in month order"""
        dates = [date(2024, 3, 2), date(2024, 1, 15), date(2024, 3, 20), date(2024, 1, 3)]
        buckets = group_by_month([30.0, 10.0, 32.0, 12.0], dates)

        assert [b.month for b in buckets] == [1, 3]
        assert list(buckets[0].prices) == [10.0, 12.0]
        assert list(buckets[1].prices) == [30.0, 32.0]

    def test_same_month_different_years(self):
        """January 2023 and January 2024 share a bucket"""
        dates = [datetime(2023, 1, 10), datetime(2024, 1, 10)]
        buckets = group_by_month([5.0, 7.0], dates)
        assert len(buckets) == 1
        assert buckets[0].month == 1

    def test_mismatched_lengths(self):
        """Mismatched input gives no buckets"""
        assert group_by_month([1.0], []) == []
