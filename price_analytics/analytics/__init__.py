"""Price history analysis functions"""

from .analyzer import PriceAnalyzer
from .concentration import market_concentration
from .dispersion import detect_anomalies, volatility
from .movers import rank_price_movers
from .seasonal import group_by_month, seasonal_indices
from .smoothing import forecast, moving_average
from .stats import round_to
from .trend import cross_price_elasticity, price_trend

__all__ = [
    "PriceAnalyzer",
    "moving_average",
    "volatility",
    "price_trend",
    "detect_anomalies",
    "seasonal_indices",
    "group_by_month",
    "cross_price_elasticity",
    "forecast",
    "market_concentration",
    "rank_price_movers",
    "round_to",
]
