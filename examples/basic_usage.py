#!/usr/bin/env python3
"""
Basic Usage Example - Agricoventas Price Analytics

This script demonstrates analyzing a product's price history. It shows how to:
- Configure logging
- Build an analyzer from category configuration
- Analyze a dated price series
- Compute seasonality and market concentration

Run: python examples/basic_usage.py
"""

import json
import random
from datetime import datetime, timedelta, timezone
from typing import List

from price_analytics.analytics import PriceAnalyzer
from price_analytics.config import ConfigLoader
from price_analytics.data.models import MarketObservation, PriceSeries
from price_analytics.logging import configure_logging


def simulate_prices(days: int, start_price: float, drift: float) -> PriceSeries:
    """Simulate a daily price history with drift, noise and one shock."""
    rng = random.Random(7)
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)

    prices: List[float] = []
    price = start_price
    for day in range(days):
        price = max(price + drift + rng.gauss(0, start_price * 0.01), 1.0)
        prices.append(round(price, 2))

    # Frost damage pushes prices up for a day
    prices[days // 2] *= 1.6

    return PriceSeries(prices=prices, dates=[start + timedelta(days=d) for d in range(days)])


def main() -> None:
    configure_logging(level="INFO")

    analyzer = PriceAnalyzer.from_loader(ConfigLoader.create(), category_id="frutas")
    series = simulate_prices(days=120, start_price=3200.0, drift=4.0)

    report = analyzer.analyze(series)
    print("Mango tommy price report:")
    print(json.dumps(report.to_dict(), indent=2))

    print("\nSeasonality:")
    for index in analyzer.seasonality(series):
        print(f"  month {index.month:2d}: {index.seasonal_index:.3f} ({index.interpretation.value})")

    markets = [
        MarketObservation(market="Corabastos", average_price=3300.0, volume=4200.0),
        MarketObservation(market="Central Mayorista", average_price=3150.0, volume=2100.0),
        MarketObservation(market="Cavasa", average_price=3280.0, volume=900.0),
    ]
    print("\nMarket concentration:", analyzer.concentration(markets).to_dict())


if __name__ == "__main__":
    main()
