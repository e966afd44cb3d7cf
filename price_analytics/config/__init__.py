"""Analysis parameters: defaults, YAML overrides and validation."""

from .defaults import AnalyticsConfig, config_from_dict, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "AnalyticsConfig",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
    "config_from_dict",
    "get_default_config",
]
