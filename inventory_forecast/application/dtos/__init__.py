"""
Application DTOs Package

Pydantic models exchanged between the presentation and application layers.
"""

from .forecast_dto import (
    ForecastConfigDTO,
    ForecastCreatedResponseDTO,
    ForecastMetricsDTO,
    ForecastRecordDTO,
    ForecastRequestDTO,
    LatestForecastResponseDTO,
    PredictionDTO,
    SalesPointDTO,
)

__all__ = [
    "ForecastConfigDTO",
    "ForecastCreatedResponseDTO",
    "ForecastMetricsDTO",
    "ForecastRecordDTO",
    "ForecastRequestDTO",
    "LatestForecastResponseDTO",
    "PredictionDTO",
    "SalesPointDTO",
]
