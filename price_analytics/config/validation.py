"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_positive_int(value: Any) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates analysis parameters."""

    @staticmethod
    def validate_moving_average_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate moving average parameters."""
        errors = []

        if "window" in params:
            value = params["window"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="window",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_anomaly_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate anomaly detection parameters."""
        errors = []

        if "threshold" in params:
            value = params["threshold"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="threshold",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_forecast_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate forecast parameters."""
        errors = []

        if "alpha" in params:
            value = params["alpha"]
            if not _is_number(value) or value <= 0 or value > 1:
                errors.append(ValidationError(
                    field="alpha",
                    message="Must be a number in (0, 1]",
                    value=value
                ))

        if "periods" in params:
            value = params["periods"]
            if not _is_positive_int(value):
                errors.append(ValidationError(
                    field="periods",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_movers_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate price mover ranking parameters."""
        errors = []

        for field_name in ("timespan_days", "limit"):
            if field_name in params:
                value = params[field_name]
                if not _is_positive_int(value):
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a positive integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "moving_average" in config:
            errors.extend(ConfigValidator.validate_moving_average_params(config["moving_average"]))

        if "anomaly" in config:
            errors.extend(ConfigValidator.validate_anomaly_params(config["anomaly"]))

        if "forecast" in config:
            errors.extend(ConfigValidator.validate_forecast_params(config["forecast"]))

        if "movers" in config:
            errors.extend(ConfigValidator.validate_movers_params(config["movers"]))

        return errors
