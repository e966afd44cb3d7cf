"""Default parameters for price history analysis."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MovingAverageParams:
    """Moving average parameters."""
    window: int = 7                     # Trailing window in observations


@dataclass(frozen=True)
class AnomalyParams:
    """Z-score anomaly detection parameters."""
    threshold: float = 2.0              # |z| must exceed this to flag


@dataclass(frozen=True)
class ForecastParams:
    """Exponential smoothing forecast parameters."""
    alpha: float = 0.3                  # Smoothing factor, weight of newest price
    periods: int = 3                    # Number of future periods emitted


@dataclass(frozen=True)
class MoversParams:
    """Price mover ranking parameters."""
    timespan_days: int = 30             # Lookback for price change records
    limit: int = 10                     # Max products returned


@dataclass(frozen=True)
class AnalyticsConfig:
    """Complete analysis configuration."""
    moving_average: MovingAverageParams
    anomaly: AnomalyParams
    forecast: ForecastParams
    movers: MoversParams


def get_default_config() -> AnalyticsConfig:
    """Get the default configuration instance."""
    return AnalyticsConfig(
        moving_average=MovingAverageParams(),
        anomaly=AnomalyParams(),
        forecast=ForecastParams(),
        movers=MoversParams(),
    )


def config_from_dict(config: dict[str, Any]) -> AnalyticsConfig:
    """Rebuild an AnalyticsConfig from a merged configuration dictionary.

    Sections or keys missing from ``config`` keep their defaults; unknown keys
    are ignored.
    """
    sections = {
        "moving_average": MovingAverageParams,
        "anomaly": AnomalyParams,
        "forecast": ForecastParams,
        "movers": MoversParams,
    }

    built = {}
    for section, params_cls in sections.items():
        values = config.get(section) or {}
        known = {key: value for key, value in values.items()
                 if key in params_cls.__dataclass_fields__}
        built[section] = params_cls(**known)

    return AnalyticsConfig(**built)
