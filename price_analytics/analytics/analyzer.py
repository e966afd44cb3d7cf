"""Price analyzer coordinating all analysis calculations"""

import math
from datetime import datetime
from typing import Any, Optional, Sequence

from ..config.defaults import AnalyticsConfig, config_from_dict, get_default_config
from ..config.loader import ConfigLoader
from ..config.validation import ConfigValidator
from ..data.models import MarketObservation, PriceChangeRecord, PriceSeries
from ..errors import (
    AnalyticsCalculationError,
    ConfigurationError,
    InsufficientDataError,
    MalformedDataError,
    MissingDataError,
    TemporalDataError,
)
from ..logging.config import get_analytics_logger, log_metric_result
from ..models.analysis import AnalysisReport, ConcentrationResult, PriceMover, SeasonalIndex
from ..utils.time import as_datetime, first_out_of_order
from .concentration import market_concentration
from .dispersion import detect_anomalies, volatility
from .movers import rank_price_movers
from .seasonal import group_by_month, seasonal_indices
from .smoothing import forecast, moving_average
from .stats import PRICE_PLACES, mean, round_to
from .trend import cross_price_elasticity, price_trend

logger = get_analytics_logger(__name__)


class PriceAnalyzer:
    """
    Applies configured analysis parameters to product price histories

    The module-level functions stay lenient and return neutral results for
    degenerate input. The analyzer sits in front of the web layer and rejects
    input that cannot be a real price history before computing anything.
    """

    def __init__(self, config: Optional[AnalyticsConfig] = None):
        self.config = config or get_default_config()
        self.logger = logger

    @classmethod
    def from_loader(
        cls,
        loader: ConfigLoader,
        category_id: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None
    ) -> "PriceAnalyzer":
        """
        Build an analyzer from merged defaults, category and request settings

        Raises:
            ConfigurationError: if the merged configuration is invalid
        """
        merged = loader.merge_config(category_id, overrides)
        errors = ConfigValidator.validate_config(merged)
        if errors:
            logger.warning(
                "Rejected analysis configuration",
                category_id=category_id,
                errors=[f"{e.field}: {e.message}" for e in errors],
            )
            raise ConfigurationError(
                f"Invalid analysis configuration for category {category_id!r}",
                errors=errors,
                context={"category_id": category_id},
            )

        return cls(config_from_dict(merged))

    def analyze(self, series: Optional[PriceSeries]) -> AnalysisReport:
        """
        Compute the full report for one product's price history

        Args:
            series: Chronological prices and their dates

        Returns:
            AnalysisReport with every metric

        Raises:
            MissingDataError: no series or no observations
            MalformedDataError: mismatched lengths or impossible prices
            TemporalDataError: dates out of chronological order
        """
        self._validate_series(series)

        prices = list(series.prices)
        dates = list(series.dates)
        points = len(prices)

        window = self.config.moving_average.window
        averages = self._compute("moving_average", points,
                                 lambda: moving_average(prices, window),
                                 {"window": window})
        spread = self._compute("volatility", points, lambda: volatility(prices))
        trend = self._compute("trend", points, lambda: price_trend(prices, dates))

        threshold = self.config.anomaly.threshold
        anomalies = self._compute("anomalies", points,
                                  lambda: detect_anomalies(prices, threshold),
                                  {"threshold": threshold})

        alpha = self.config.forecast.alpha
        periods = self.config.forecast.periods
        projection = self._compute("forecast", points,
                                   lambda: forecast(prices, alpha, periods),
                                   {"alpha": alpha, "periods": periods})

        report = AnalysisReport(
            points=points,
            latest_price=prices[-1],
            min_price=min(prices),
            max_price=max(prices),
            average_price=round_to(mean(prices), PRICE_PLACES),
            volatility=spread,
            trend=trend,
            moving_average=averages,
            anomalies=anomalies,
            forecast=projection,
            as_of=as_datetime(dates[-1]),
        )

        self.logger.info(
            "Price analysis completed",
            points=points,
            trend=trend.trend.value,
            volatility=spread,
            anomaly_count=len(anomalies),
        )
        return report

    def seasonality(self, series: PriceSeries) -> list[SeasonalIndex]:
        """Seasonal index per calendar month of a dated series"""
        self._validate_series(series)
        buckets = group_by_month(list(series.prices), list(series.dates))
        return self._compute("seasonal_indices", len(series),
                             lambda: seasonal_indices(buckets),
                             {"months": len(buckets)})

    def concentration(self, observations: Sequence[MarketObservation]) -> ConcentrationResult:
        for obs in observations:
            if not self._is_finite_number(obs.volume) or obs.volume < 0:
                self.logger.warning("Rejected market observation", market=obs.market, volume=obs.volume)
                raise MalformedDataError(
                    f"Invalid volume for market {obs.market!r}: {obs.volume}",
                    raw_data=str(obs),
                    expected_format="non-negative finite volume",
                )

        return self._compute("market_concentration", len(observations),
                             lambda: market_concentration(observations))

    def elasticity(self, series_a: PriceSeries, series_b: PriceSeries) -> float:
        """Cross-price elasticity of two products observed over the same periods"""
        self._validate_series(series_a)
        self._validate_series(series_b)
        if len(series_a) != len(series_b):
            raise MalformedDataError(
                "Series must cover the same periods",
                context={"length_a": len(series_a), "length_b": len(series_b)},
            )
        if len(series_a) < 2:
            raise InsufficientDataError(
                "Elasticity needs at least two periods",
                required_count=2,
                available_count=len(series_a),
            )

        return self._compute("cross_price_elasticity", len(series_a),
                             lambda: cross_price_elasticity(list(series_a.prices),
                                                            list(series_b.prices)))

    def price_movers(
        self,
        records: Sequence[PriceChangeRecord],
        category_id: Optional[str] = None,
        as_of: Optional[datetime] = None
    ) -> list[PriceMover]:
        """Top products by recent price change using the configured window and limit"""
        params = self.config.movers
        return self._compute(
            "price_movers", len(records),
            lambda: rank_price_movers(records,
                                      timespan_days=params.timespan_days,
                                      category_id=category_id,
                                      limit=params.limit,
                                      as_of=as_of),
            {"timespan_days": params.timespan_days, "limit": params.limit},
        )

    def _compute(self, metric_name: str, points: int, calculation,
                 parameters: Optional[dict[str, Any]] = None):
        """Run one calculation, logging its result and wrapping failures"""
        try:
            result = calculation()
        except Exception as e:
            self.logger.error("Metric calculation failed", metric_name=metric_name, error=str(e))
            raise AnalyticsCalculationError(
                f"{metric_name} calculation failed: {str(e)}",
                metric_name=metric_name,
                calculation_input={"points": points, **(parameters or {})},
            ) from e

        log_metric_result(self.logger, metric_name, points, result, parameters)
        return result

    @staticmethod
    def _is_finite_number(value: Any) -> bool:
        return (isinstance(value, (int, float)) and not isinstance(value, bool)
                and math.isfinite(value))

    def _validate_series(self, series: Optional[PriceSeries]) -> None:
        """Validate price history integrity."""
        if series is None:
            raise MissingDataError("Price series is required for analysis", data_type="price_series")

        if len(series.prices) == 0:
            raise MissingDataError("Price series has no observations", data_type="prices")

        if len(series.prices) != len(series.dates):
            self.logger.warning("Rejected price series", reason="length_mismatch",
                                prices=len(series.prices), dates=len(series.dates))
            raise MalformedDataError(
                f"Got {len(series.prices)} prices but {len(series.dates)} dates",
                expected_format="parallel prices and dates",
            )

        for index, price in enumerate(series.prices):
            if not self._is_finite_number(price):
                self.logger.warning("Rejected price series", reason="invalid_price", index=index)
                raise MalformedDataError(f"Invalid price at index {index}: {price!r}",
                                         raw_data=repr(price))
            if price <= 0:
                self.logger.warning("Rejected price series", reason="non_positive_price", index=index)
                raise MalformedDataError(f"Non-positive price at index {index}: {price}",
                                         raw_data=repr(price))

        try:
            out_of_order = first_out_of_order(series.dates)
        except (TypeError, AttributeError) as e:
            raise MalformedDataError(f"Invalid observation dates: {str(e)}",
                                     expected_format="date or datetime values") from e

        if out_of_order is not None:
            self.logger.warning("Rejected price series", reason="unordered_dates", index=out_of_order)
            raise TemporalDataError(
                f"Date at index {out_of_order} precedes the previous observation",
                index=out_of_order,
                previous_date=series.dates[out_of_order - 1],
            )
