"""
Utility functions module.

Date handling shared by the trend and seasonality calculations.
"""
