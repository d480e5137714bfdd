"""
Domain Repositories Package

Storage interfaces the application layer depends on.
"""

from .forecast_repository import IForecastRepository

__all__ = ["IForecastRepository"]
