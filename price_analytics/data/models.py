"""
Input data models for price analysis.

Callers build these per request from rows they already fetched; they are
immutable and carry no identity beyond the call.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from price_analytics.utils.time import DateLike


@dataclass(frozen=True)
class PriceSeries:
    """Chronological prices with their observation dates."""
    prices: Sequence[float]     # Oldest first
    dates: Sequence[DateLike]   # Parallel to prices

    def __len__(self) -> int:
        return len(self.prices)


@dataclass(frozen=True)
class MonthlyBucket:
    """Prices observed in one calendar month."""
    month: int                  # 1-12
    prices: Sequence[float]


@dataclass(frozen=True)
class MarketObservation:
    """Aggregate trading figures for one market."""
    market: str
    average_price: float
    volume: float


@dataclass(frozen=True)
class PriceChangeRecord:
    """One recorded base price change of a product."""
    product_id: str
    product_name: str
    current_price: float        # Product's present base price
    old_price: Optional[float]  # Price before this change, if recorded
    timestamp: datetime
    unit: str = ""
    category: str = "Sin categoría"
    category_id: str = ""
