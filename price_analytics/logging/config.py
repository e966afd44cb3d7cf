"""
Centralized logging configuration for price analytics.

Every module logs through structlog bound loggers obtained here, so the web
layer embedding this library controls format and level in one place.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the whole library.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_analytics_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with the analytics subsystem context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying ``subsystem="analytics"``
    """
    return get_logger(name).bind(subsystem="analytics")


def log_metric_result(
    logger: FilteringBoundLogger,
    metric_name: str,
    points: int,
    result: Any,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a computed metric with standardized fields.

    Args:
        logger: Structlog logger instance
        metric_name: Name of the metric computed
        points: Number of observations the metric was computed from
        result: The metric value (logged as-is)
        context: Additional context data
    """
    bound_logger = logger.bind(
        metric_name=metric_name,
        points=points,
        result=result,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Metric computed")
