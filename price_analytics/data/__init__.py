"""Input value types for price analysis."""

from .models import MarketObservation, MonthlyBucket, PriceChangeRecord, PriceSeries

__all__ = ["PriceSeries", "MonthlyBucket", "MarketObservation", "PriceChangeRecord"]
