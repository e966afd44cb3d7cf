"""
Data quality error classifications for price history input.

These exceptions describe problems with the series a caller hands to the
analyzer: absent data, wrong shapes, impossible prices, unordered dates.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for input problems the caller can correct."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class TemporalDataError(DataQualityError):
    """Dates out of chronological order."""

    def __init__(self, message: str, index: Optional[int] = None,
                 previous_date: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.index = index
        self.previous_date = previous_date


class MissingDataError(DataQualityError):
    """Required data is completely missing."""

    def __init__(self, message: str, data_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.data_type = data_type


class MalformedDataError(DataQualityError):
    """Data exists but has the wrong shape or impossible values."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class InsufficientDataError(DataQualityError):
    """Not enough observations for a meaningful result."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count
