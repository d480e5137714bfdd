"""
Infrastructure Gateway - MongoDB Sales History

Reads daily sales points from the ``sales_data`` collection, one document
per product and day with the date stored as an ISO string.
"""

import math
import numbers
from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

import pymongo
import structlog

from inventory_forecast.domain.entities.errors import (
    ComputationError,
    SalesHistoryError,
)
from inventory_forecast.domain.entities.sales import SalesPoint
from inventory_forecast.domain.gateways.sales_history_gateway import (
    ISalesHistoryGateway,
)
from inventory_forecast.infrastructure.database import (
    SALES_DATA_COLLECTION,
    MongoDatabase,
)

logger = structlog.get_logger(__name__)


def _today_utc() -> date:
    return datetime.now(timezone.utc).date()


def _as_quantity(value: Any, point_date: date) -> int:
    # Missing quantities count as no sales.
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ComputationError(
            "Sales quantity is not numeric",
            details={"date": point_date.isoformat(), "quantity": repr(value)},
        )
    number = float(value)
    if not math.isfinite(number) or not number.is_integer() or number < 0:
        raise ComputationError(
            "Sales quantity must be a finite non-negative whole number",
            details={"date": point_date.isoformat(), "quantity": number},
        )
    return int(number)


class MongoSalesHistoryGateway(ISalesHistoryGateway):
    """Sales history gateway backed by MongoDB."""

    def __init__(
        self,
        mongo_database: MongoDatabase,
        today: Optional[Callable[[], date]] = None,
    ):
        self.db = mongo_database
        self._today = today or _today_utc

    async def fetch_history(
        self, product_id: str, lookback_days: int
    ) -> List[SalesPoint]:
        if lookback_days < 0:
            raise SalesHistoryError(
                "lookback_days must be non-negative",
                details={"lookback_days": lookback_days},
            )

        end = self._today()
        start = end - timedelta(days=lookback_days)
        query = {
            "product_id": product_id,
            "date": {"$gte": start.isoformat(), "$lte": end.isoformat()},
        }

        try:
            documents = await self.db.find_many(
                SALES_DATA_COLLECTION,
                query,
                sort_by="date",
                sort_direction=pymongo.ASCENDING,
            )
        except Exception as e:
            logger.error(
                "sales_history.query_failed", product_id=product_id, error=str(e)
            )
            raise SalesHistoryError(
                f"Failed to query sales history: {str(e)}",
                details={"product_id": product_id},
            ) from e

        points = [self._to_entity(document) for document in documents]
        logger.debug(
            "sales_history.fetched",
            product_id=product_id,
            start=start.isoformat(),
            end=end.isoformat(),
            points=len(points),
        )
        return points

    @staticmethod
    def _to_entity(document: Dict[str, Any]) -> SalesPoint:
        raw_date = document["date"]
        point_date = (
            raw_date.date()
            if isinstance(raw_date, datetime)
            else date.fromisoformat(str(raw_date))
        )
        return SalesPoint(
            date=point_date,
            quantity=_as_quantity(document.get("quantity"), point_date),
            revenue=float(document.get("revenue") or 0.0),
        )
