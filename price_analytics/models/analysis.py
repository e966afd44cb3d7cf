"""Result models for price analysis"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class TrendDirection(str, Enum):
    """Direction of a fitted price trend."""
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class SeasonalInterpretation(str, Enum):
    """How a month's prices compare with the yearly average."""
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class ConcentrationLevel(str, Enum):
    """Market concentration bands of the Herfindahl-Hirschman index."""
    HIGHLY_CONCENTRATED = "highly_concentrated"
    MODERATELY_CONCENTRATED = "moderately_concentrated"
    COMPETITIVE = "competitive"


@dataclass(frozen=True)
class TrendResult:
    """Least-squares trend of price against days elapsed"""
    slope: float
    correlation: float
    trend: TrendDirection

    @classmethod
    def neutral(cls) -> "TrendResult":
        return cls(slope=0.0, correlation=0.0, trend=TrendDirection.STABLE)

    def to_dict(self) -> dict[str, Any]:
        return {
            "slope": self.slope,
            "correlation": self.correlation,
            "trend": self.trend.value,
        }


@dataclass(frozen=True)
class SeasonalIndex:
    """Ratio of one month's average price to the overall average"""
    month: int
    seasonal_index: float
    interpretation: SeasonalInterpretation

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "seasonalIndex": self.seasonal_index,
            "interpretation": self.interpretation.value,
        }


@dataclass(frozen=True)
class ConcentrationResult:
    """Herfindahl-Hirschman index over market volumes"""
    hhi: int
    interpretation: ConcentrationLevel

    def to_dict(self) -> dict[str, Any]:
        return {"hhi": self.hhi, "interpretation": self.interpretation.value}


@dataclass(frozen=True)
class PriceMover:
    """A product ranked by its recent base price change"""
    product_id: str
    name: str
    current_price: float
    old_price: float
    percent_change: float
    unit: str
    category: str
    category_id: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.product_id,
            "name": self.name,
            "currentPrice": self.current_price,
            "oldPrice": self.old_price,
            "percentChange": self.percent_change,
            "unit": self.unit,
            "category": self.category,
            "categoryId": self.category_id,
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Complete analysis of one product's price history"""
    points: int
    latest_price: float
    min_price: float
    max_price: float
    average_price: float
    volatility: float
    trend: TrendResult
    moving_average: list[float] = field(default_factory=list)
    anomalies: list[int] = field(default_factory=list)
    forecast: list[float] = field(default_factory=list)
    as_of: Optional[datetime] = None  # Date of the latest observation

    @property
    def has_anomalies(self) -> bool:
        return bool(self.anomalies)

    def anomalous_prices(self, prices: list[float]) -> list[float]:
        """Prices at the flagged indices of the series this report came from"""
        return [prices[i] for i in self.anomalies]

    def to_dict(self) -> dict[str, Any]:
        return {
            "points": self.points,
            "latestPrice": self.latest_price,
            "minPrice": self.min_price,
            "maxPrice": self.max_price,
            "averagePrice": self.average_price,
            "volatility": self.volatility,
            "trend": self.trend.to_dict(),
            "movingAverage": list(self.moving_average),
            "anomalies": list(self.anomalies),
            "forecast": list(self.forecast),
            "asOf": self.as_of.isoformat() if self.as_of else None,
        }
