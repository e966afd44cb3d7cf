"""
Agricoventas Price Analytics

Statistical toolkit for agricultural product price histories. Computes
moving averages, volatility, trends, anomalies, seasonality, cross-price
elasticity, forecasts and market concentration for the marketplace API.
"""

__version__ = "0.1.0"
__author__ = "Agricoventas Team"
