"""
Tests for date utilities used by trend and seasonality calculations.
"""

import pytest
from datetime import date, datetime, timedelta, timezone
from unittest.mock import patch

from price_analytics.utils.time import (
    as_datetime, days_between, first_out_of_order, to_day_offsets, utc_now
)


class TestAsDatetime:
    """Test as_datetime function."""

    def test_promotes_date(self):
        assert as_datetime(date(2024, 5, 1)) == datetime(2024, 5, 1, 0, 0)

    def test_keeps_datetime(self):
        moment = datetime(2024, 5, 1, 13, 30, tzinfo=timezone.utc)
        assert as_datetime(moment) is moment


class TestDayOffsets:
    """Test days_between and to_day_offsets."""

    def test_days_between_dates(self):
        assert days_between(date(2024, 2, 28), date(2024, 3, 1)) == 2.0

    def test_fractional_days(self):
        start = datetime(2024, 1, 1)
        assert days_between(start, start + timedelta(hours=6)) == 0.25

    def test_offsets_from_first(self):
        dates = [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 11)]
        assert to_day_offsets(dates) == [0.0, 1.0, 10.0]

    def test_empty(self):
        assert to_day_offsets([]) == []


class TestFirstOutOfOrder:
    """Test first_out_of_order function."""

    def test_ordered(self):
        dates = [date(2024, 1, 1), date(2024, 1, 1), date(2024, 1, 2)]
        assert first_out_of_order(dates) is None

    def test_reports_first_offender(self):
        dates = [date(2024, 1, 3), date(2024, 1, 2), date(2024, 1, 1)]
        assert first_out_of_order(dates) == 1


class TestUtcNow:
    """Test utc_now function."""

    def test_uses_utc(self):
        with patch('price_analytics.utils.time.datetime') as mock_datetime:
            mock_now = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
            mock_datetime.now.return_value = mock_now

            assert utc_now() == mock_now
            mock_datetime.now.assert_called_once_with(timezone.utc)
