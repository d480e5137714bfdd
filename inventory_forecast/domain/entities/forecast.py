"""Domain entities for demand forecasts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Tuple

from inventory_forecast.shared.consts import DEFAULT_MODEL_LABEL

DEFAULT_HORIZON = 7


@dataclass(frozen=True, slots=True)
class ForecastConfig:
    """Caller supplied overrides for a forecast run."""

    horizon: Optional[int] = None
    model: Optional[str] = None

    def resolve_horizon(self, default: int = DEFAULT_HORIZON) -> int:
        return self.horizon if self.horizon is not None else default

    def resolve_model(self, default: str = DEFAULT_MODEL_LABEL) -> str:
        return self.model or default


@dataclass(frozen=True, slots=True)
class Prediction:
    """Predicted demand for one day of the horizon."""

    day: int
    date: date
    demand: int
    confidence: float


@dataclass(frozen=True, slots=True)
class ForecastMetrics:
    """Diagnostic summary of the sales sequence a forecast was built from."""

    mean: float
    variance: float
    trend: float


@dataclass(frozen=True, slots=True)
class ForecastRecord:
    """A complete forecast run, stored per (product_id, forecast_date)."""

    product_id: str
    forecast_date: date
    created_at: datetime
    model: str
    horizon: int
    confidence: float
    accuracy: float
    metrics: ForecastMetrics
    historical_data_points: int
    predictions: Tuple[Prediction, ...] = field(default_factory=tuple)
