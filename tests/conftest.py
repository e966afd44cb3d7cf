"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timedelta, timezone
from typing import List

from price_analytics.data.models import MarketObservation, PriceChangeRecord, PriceSeries


@pytest.fixture
def daily_dates() -> List[datetime]:
    """Thirty consecutive daily timestamps."""
    start = datetime(2024, 3, 1, 8, 0, 0, tzinfo=timezone.utc)
    return [start + timedelta(days=i) for i in range(30)]


@pytest.fixture
def tomato_series(daily_dates) -> PriceSeries:
    """Tomato prices per kg with a mild upward drift and one spike."""
    prices = [2500.0 + 10.0 * i for i in range(30)]
    prices[20] = 4200.0
    return PriceSeries(prices=prices, dates=daily_dates)


@pytest.fixture
def market_observations() -> List[MarketObservation]:
    """Volumes of four regional markets."""
    return [
        MarketObservation(market="Bogotá", average_price=2800.0, volume=500.0),
        MarketObservation(market="Medellín", average_price=2750.0, volume=250.0),
        MarketObservation(market="Cali", average_price=2900.0, volume=150.0),
        MarketObservation(market="Tunja", average_price=2600.0, volume=100.0),
    ]


@pytest.fixture
def as_of() -> datetime:
    return datetime(2024, 6, 30, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def price_change_records(as_of) -> List[PriceChangeRecord]:
    """Base price changes for three products, newest first."""
    return [
        PriceChangeRecord(
            product_id="p-papa", product_name="Papa pastusa", current_price=1800.0,
            old_price=1700.0, timestamp=as_of - timedelta(days=2),
            unit="kg", category="Tubérculos", category_id="tuberculos",
        ),
        PriceChangeRecord(
            product_id="p-papa", product_name="Papa pastusa", current_price=1800.0,
            old_price=1500.0, timestamp=as_of - timedelta(days=20),
            unit="kg", category="Tubérculos", category_id="tuberculos",
        ),
        PriceChangeRecord(
            product_id="p-mango", product_name="Mango tommy", current_price=3000.0,
            old_price=4000.0, timestamp=as_of - timedelta(days=5),
            unit="kg", category="Frutas", category_id="frutas",
        ),
        PriceChangeRecord(
            product_id="p-leche", product_name="Leche entera", current_price=3300.0,
            old_price=3200.0, timestamp=as_of - timedelta(days=10),
            unit="l", category="Lácteos", category_id="lacteos",
        ),
        PriceChangeRecord(
            product_id="p-arroz", product_name="Arroz blanco", current_price=5000.0,
            old_price=2500.0, timestamp=as_of - timedelta(days=90),
            unit="kg", category="Granos", category_id="granos",
        ),
    ]
