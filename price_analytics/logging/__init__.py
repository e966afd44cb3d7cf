"""
Logging configuration and utilities for price analytics.
"""
from .config import configure_logging, get_analytics_logger, get_logger, log_metric_result

__all__ = ["configure_logging", "get_logger", "get_analytics_logger", "log_metric_result"]
