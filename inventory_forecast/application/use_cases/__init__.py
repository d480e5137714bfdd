"""
Application Use Cases Package

Use cases coordinate domain services with the repository and gateway
interfaces.
"""

from .forecast_use_cases import (
    CreateForecastUseCase,
    ForecastDependencyError,
    GetLatestForecastUseCase,
)

__all__ = [
    "CreateForecastUseCase",
    "GetLatestForecastUseCase",
    "ForecastDependencyError",
]
