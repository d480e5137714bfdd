"""
MongoDB Forecast Repository - Infrastructure Layer

Implements IForecastRepository on the ``forecasts`` collection. Dates are
stored as ISO ``YYYY-MM-DD`` strings so that lexical order on
``forecast_date`` is chronological order.
"""

from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

import pymongo

from inventory_forecast.domain.entities.errors import ForecastOperationError
from inventory_forecast.domain.entities.forecast import (
    ForecastMetrics,
    ForecastRecord,
    Prediction,
)
from inventory_forecast.domain.repositories.forecast_repository import (
    IForecastRepository,
)
from inventory_forecast.infrastructure.database import (
    FORECASTS_COLLECTION,
    MongoDatabase,
)


def _as_utc(value: Any) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        # pymongo hands back naive datetimes that are UTC.
        return value.replace(tzinfo=timezone.utc)
    return value


class ForecastRepository(IForecastRepository):
    """MongoDB implementation of the forecast repository."""

    COLLECTION_NAME = FORECASTS_COLLECTION

    def __init__(self, mongo_database: MongoDatabase):
        self.db = mongo_database

    def _to_document(self, record: ForecastRecord) -> Dict[str, Any]:
        return {
            "product_id": record.product_id,
            "forecast_date": record.forecast_date.isoformat(),
            "created_at": record.created_at,
            "model": record.model,
            "horizon": record.horizon,
            "predictions": [
                {
                    "day": prediction.day,
                    "date": prediction.date.isoformat(),
                    "demand": prediction.demand,
                    "confidence": prediction.confidence,
                }
                for prediction in record.predictions
            ],
            "confidence": record.confidence,
            "accuracy": record.accuracy,
            "metrics": {
                "mean": record.metrics.mean,
                "variance": record.metrics.variance,
                "trend": record.metrics.trend,
            },
            "historical_data_points": record.historical_data_points,
        }

    def _to_entity(self, document: Dict[str, Any]) -> ForecastRecord:
        metrics = document.get("metrics") or {}
        predictions = tuple(
            Prediction(
                day=int(item["day"]),
                date=date.fromisoformat(item["date"]),
                demand=int(item["demand"]),
                confidence=float(item["confidence"]),
            )
            for item in document.get("predictions") or []
        )
        return ForecastRecord(
            product_id=document["product_id"],
            forecast_date=date.fromisoformat(document["forecast_date"]),
            created_at=_as_utc(document["created_at"]),
            model=document["model"],
            horizon=int(document["horizon"]),
            confidence=float(document["confidence"]),
            accuracy=float(document["accuracy"]),
            metrics=ForecastMetrics(
                mean=float(metrics.get("mean", 0.0)),
                variance=float(metrics.get("variance", 0.0)),
                trend=float(metrics.get("trend", 0.0)),
            ),
            historical_data_points=int(document.get("historical_data_points", 0)),
            predictions=predictions,
        )

    async def put(self, record: ForecastRecord) -> ForecastRecord:
        """
        Upsert a forecast keyed by (product_id, forecast_date).

        Raises:
            ForecastOperationError: If the write fails
        """
        try:
            document = self._to_document(record)
            await self.db.replace_one(
                self.COLLECTION_NAME,
                {
                    "product_id": record.product_id,
                    "forecast_date": document["forecast_date"],
                },
                document,
                upsert=True,
            )
            return record
        except Exception as e:
            raise ForecastOperationError(
                f"Failed to store forecast: {str(e)}"
            ) from e

    async def find_latest(self, product_id: str) -> Optional[ForecastRecord]:
        records = await self.find_by_product(product_id, limit=1)
        return records[0] if records else None

    async def find_by_product(
        self, product_id: str, limit: int = 30
    ) -> List[ForecastRecord]:
        try:
            documents = await self.db.find_many(
                self.COLLECTION_NAME,
                {"product_id": product_id},
                sort_by="forecast_date",
                sort_direction=pymongo.DESCENDING,
                limit=limit,
            )
        except Exception as e:
            raise ForecastOperationError(
                f"Failed to read forecasts: {str(e)}"
            ) from e
        return [self._to_entity(document) for document in documents]
