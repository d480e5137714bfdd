"""
Presentation Layer Package

HTTP controllers exposing the forecasting use cases.
"""

from inventory_forecast.presentation import controllers

__all__ = ["controllers"]
