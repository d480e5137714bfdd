"""
Repositories package - Infrastructure Layer

Concrete MongoDB implementations of the domain repository interfaces.
"""

from inventory_forecast.infrastructure.repositories.forecast_repository import (
    ForecastRepository,
)

__all__ = ["ForecastRepository"]
