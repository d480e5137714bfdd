"""
Application Use Cases - Forecasts

Orchestrates a forecast run:
  * Validation of the product id and requested horizon
  * Retrieval of the product's recent sales history
  * Statistics, confidence/accuracy scores and the generated horizon
  * Persistence of the assembled record

and retrieval of the latest stored forecast for a product.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, List, Optional

import structlog

from inventory_forecast.application.dtos.forecast_dto import (
    ForecastRecordDTO,
    LatestForecastResponseDTO,
    SalesPointDTO,
)
from inventory_forecast.domain.entities.errors import (
    ComputationError,
    ForecastNotFoundError,
    InsufficientDataError,
    InvalidInputError,
)
from inventory_forecast.domain.entities.forecast import (
    DEFAULT_HORIZON,
    ForecastConfig,
    ForecastRecord,
)
from inventory_forecast.domain.entities.sales import SalesPoint
from inventory_forecast.domain.gateways.sales_history_gateway import (
    ISalesHistoryGateway,
)
from inventory_forecast.domain.repositories.forecast_repository import (
    IForecastRepository,
)
from inventory_forecast.domain.services.estimator import (
    accuracy,
    confidence,
    round_score,
)
from inventory_forecast.domain.services.generator import ForecastGenerator
from inventory_forecast.domain.services.statistics import summarize
from inventory_forecast.shared.consts import DEFAULT_MODEL_LABEL

logger = structlog.get_logger(__name__)

DEFAULT_LOOKBACK_DAYS = 60
DEFAULT_CONTEXT_DAYS = 30
MIN_HISTORY_POINTS = 7


class ForecastDependencyError(Exception):
    """Raised when the sales ledger or the forecast store fails."""

    pass


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _require_product_id(product_id: Optional[str]) -> str:
    if product_id is None or not str(product_id).strip():
        raise InvalidInputError("Product ID is required")
    return str(product_id).strip()


class CreateForecastUseCase:
    """Generates, stores and returns a demand forecast for one product."""

    def __init__(
        self,
        sales_history_gateway: ISalesHistoryGateway,
        forecast_repository: IForecastRepository,
        generator: ForecastGenerator,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        min_history_points: int = MIN_HISTORY_POINTS,
        default_horizon: int = DEFAULT_HORIZON,
        default_model: str = DEFAULT_MODEL_LABEL,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.sales_history_gateway = sales_history_gateway
        self.forecast_repository = forecast_repository
        self.generator = generator
        self.lookback_days = lookback_days
        self.min_history_points = min_history_points
        self.default_horizon = default_horizon
        self.default_model = default_model
        self._clock = clock or _utc_now

    async def execute(
        self, product_id: Optional[str], config: Optional[ForecastConfig] = None
    ) -> ForecastRecord:
        """
        Create a forecast for ``product_id``.

        Raises:
            InvalidInputError: If the product id is blank or the horizon invalid.
            InsufficientDataError: If fewer than ``min_history_points`` days
                of sales are available.
            ComputationError: If the history holds non-numeric, fractional
                or non-finite quantities.
            ForecastDependencyError: If the ledger or the store fails.
        """
        product_id = _require_product_id(product_id)
        config = config or ForecastConfig()
        horizon = config.resolve_horizon(self.default_horizon)
        if horizon <= 0:
            raise InvalidInputError(
                "Forecast horizon must be greater than zero",
                details={"horizon": horizon},
            )

        logger.info("forecast.start", product_id=product_id, horizon=horizon)

        history = await self._fetch_history(product_id)
        if len(history) < self.min_history_points:
            logger.warning(
                "forecast.insufficient_data",
                product_id=product_id,
                available=len(history),
                required=self.min_history_points,
            )
            raise InsufficientDataError(
                product_id, required=self.min_history_points, available=len(history)
            )

        quantities = [point.quantity for point in history]
        metrics = summarize(quantities)
        # Rounded once; the same value is stamped on every prediction.
        confidence_score = round_score(confidence(quantities))
        accuracy_score = round_score(accuracy(quantities))

        now = self._clock()
        predictions = self.generator.generate(
            quantities,
            start=now.date(),
            confidence=confidence_score,
            horizon=horizon,
        )

        record = ForecastRecord(
            product_id=product_id,
            forecast_date=now.date(),
            created_at=now,
            model=config.resolve_model(self.default_model),
            horizon=horizon,
            confidence=confidence_score,
            accuracy=accuracy_score,
            metrics=metrics,
            historical_data_points=len(history),
            predictions=tuple(predictions),
        )

        await self._store(record)

        logger.info(
            "forecast.completed",
            product_id=product_id,
            forecast_date=record.forecast_date.isoformat(),
            horizon=horizon,
            confidence=confidence_score,
            accuracy=accuracy_score,
            historical_data_points=record.historical_data_points,
        )
        return record

    async def _fetch_history(self, product_id: str) -> List[SalesPoint]:
        try:
            return await self.sales_history_gateway.fetch_history(
                product_id, self.lookback_days
            )
        except ComputationError:
            raise
        except Exception as exc:
            logger.error(
                "forecast.history_failed", product_id=product_id, error=str(exc)
            )
            raise ForecastDependencyError(
                f"Failed to fetch sales history: {exc}"
            ) from exc

    async def _store(self, record: ForecastRecord) -> None:
        try:
            await self.forecast_repository.put(record)
        except Exception as exc:
            logger.error(
                "forecast.store_failed", product_id=record.product_id, error=str(exc)
            )
            raise ForecastDependencyError(f"Failed to store forecast: {exc}") from exc


class GetLatestForecastUseCase:
    """Returns the newest stored forecast of a product with recent sales."""

    def __init__(
        self,
        forecast_repository: IForecastRepository,
        sales_history_gateway: ISalesHistoryGateway,
        context_days: int = DEFAULT_CONTEXT_DAYS,
    ):
        self.forecast_repository = forecast_repository
        self.sales_history_gateway = sales_history_gateway
        self.context_days = context_days

    async def execute(self, product_id: Optional[str]) -> LatestForecastResponseDTO:
        product_id = _require_product_id(product_id)

        try:
            record = await self.forecast_repository.find_latest(product_id)
        except Exception as exc:
            raise ForecastDependencyError(
                f"Failed to read stored forecasts: {exc}"
            ) from exc

        if record is None:
            logger.info("forecast.latest_not_found", product_id=product_id)
            raise ForecastNotFoundError(product_id)

        try:
            history = await self.sales_history_gateway.fetch_history(
                product_id, self.context_days
            )
        except ComputationError:
            raise
        except Exception as exc:
            raise ForecastDependencyError(
                f"Failed to fetch sales history: {exc}"
            ) from exc

        return LatestForecastResponseDTO(
            product_id=product_id,
            forecast=ForecastRecordDTO.from_entity(record),
            historical_data=[SalesPointDTO.from_entity(point) for point in history],
            generated_at=record.created_at,
        )
