"""
Application DTOs - Forecast

Data Transfer Objects for forecast requests and responses, plus the
mapping from domain entities.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from inventory_forecast.domain.entities.forecast import (
    ForecastConfig,
    ForecastRecord,
    Prediction,
)
from inventory_forecast.domain.entities.sales import SalesPoint


class ForecastConfigDTO(BaseModel):
    """Optional overrides for a forecast run."""

    horizon: Optional[int] = Field(
        default=None, ge=1, le=365, description="Number of days to forecast"
    )
    model: Optional[str] = Field(
        default=None, description="Informational model label stored on the record"
    )

    def to_entity(self) -> ForecastConfig:
        return ForecastConfig(horizon=self.horizon, model=self.model)


class ForecastRequestDTO(BaseModel):
    """Payload accepted by the create forecast endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    # Left optional so a missing id is reported as a domain validation error.
    product_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("product_id", "productId"),
        description="Product (SKU) to forecast",
    )
    forecast_config: Optional[ForecastConfigDTO] = Field(
        default=None,
        validation_alias=AliasChoices("model_config", "modelConfig", "config"),
        description="Optional horizon and model label overrides",
    )

    def to_config(self) -> Optional[ForecastConfig]:
        if self.forecast_config is None:
            return None
        return self.forecast_config.to_entity()


class PredictionDTO(BaseModel):
    """Predicted demand for one day."""

    day: int = Field(ge=1, description="Offset from the forecast date (1-indexed)")
    date: date
    demand: int = Field(ge=0)
    confidence: float = Field(ge=0.0, le=1.0)

    @classmethod
    def from_entity(cls, prediction: Prediction) -> "PredictionDTO":
        return cls(
            day=prediction.day,
            date=prediction.date,
            demand=prediction.demand,
            confidence=prediction.confidence,
        )


class ForecastMetricsDTO(BaseModel):
    """Summary statistics of the history used."""

    mean: float
    variance: float
    trend: float


class ForecastRecordDTO(BaseModel):
    """Serialized forecast record."""

    product_id: str
    forecast_date: date
    created_at: datetime
    model: str
    horizon: int
    predictions: List[PredictionDTO]
    confidence: float
    accuracy: float
    metrics: ForecastMetricsDTO
    historical_data_points: int

    @classmethod
    def from_entity(cls, record: ForecastRecord) -> "ForecastRecordDTO":
        return cls(
            product_id=record.product_id,
            forecast_date=record.forecast_date,
            created_at=record.created_at,
            model=record.model,
            horizon=record.horizon,
            predictions=[PredictionDTO.from_entity(p) for p in record.predictions],
            confidence=record.confidence,
            accuracy=record.accuracy,
            metrics=ForecastMetricsDTO(
                mean=record.metrics.mean,
                variance=record.metrics.variance,
                trend=record.metrics.trend,
            ),
            historical_data_points=record.historical_data_points,
        )


class ForecastCreatedResponseDTO(BaseModel):
    """Response returned after a forecast has been generated and stored."""

    message: str = "Forecast created successfully"
    forecast: ForecastRecordDTO


class SalesPointDTO(BaseModel):
    """One day of sales history."""

    date: date
    quantity: int = Field(ge=0)
    revenue: float = Field(ge=0.0)

    @classmethod
    def from_entity(cls, point: SalesPoint) -> "SalesPointDTO":
        return cls(date=point.date, quantity=point.quantity, revenue=point.revenue)


class LatestForecastResponseDTO(BaseModel):
    """Latest stored forecast for a product with recent sales for context."""

    product_id: str
    forecast: ForecastRecordDTO
    historical_data: List[SalesPointDTO] = Field(default_factory=list)
    generated_at: datetime
