"""
Domain Entities Package

This package contains the core domain entities and business errors.
"""

from .errors import (
    ComputationError,
    DomainError,
    ForecastNotFoundError,
    ForecastOperationError,
    InsufficientDataError,
    InvalidInputError,
    SalesHistoryError,
)
from .forecast import (
    DEFAULT_HORIZON,
    ForecastConfig,
    ForecastMetrics,
    ForecastRecord,
    Prediction,
)
from .sales import SalesPoint

__all__ = [
    "DEFAULT_HORIZON",
    "ForecastConfig",
    "ForecastMetrics",
    "ForecastRecord",
    "Prediction",
    "SalesPoint",
    "DomainError",
    "InvalidInputError",
    "InsufficientDataError",
    "ComputationError",
    "ForecastNotFoundError",
    "ForecastOperationError",
    "SalesHistoryError",
]
