"""
Demo Sales Seeder - Infrastructure Layer

Fills the ``sales_data`` collection with plausible daily sales for a set of
sample SKUs: a per-product base quantity shaped by weekday and month
patterns and a +/-20% random variation.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, Optional

import structlog

from inventory_forecast.domain.services.generator import (
    UniformSource,
    round_half_up,
    seeded_source,
)
from inventory_forecast.infrastructure.database import (
    SALES_DATA_COLLECTION,
    MongoDatabase,
)

logger = structlog.get_logger(__name__)

DEFAULT_PRODUCT_IDS = ("SKU001", "SKU002", "SKU003", "SKU004", "SKU005")

BASE_QUANTITIES: Dict[str, int] = {
    "SKU001": 25,
    "SKU002": 18,
    "SKU003": 45,
    "SKU004": 120,
    "SKU005": 8,
}
DEFAULT_BASE_QUANTITY = 20

PRODUCT_PRICES: Dict[str, float] = {
    "SKU001": 1199.99,
    "SKU002": 1299.99,
    "SKU003": 129.99,
    "SKU004": 4.99,
    "SKU005": 1999.99,
}
DEFAULT_PRICE = 100.0

# Indexed by date.weekday(): Monday=0 .. Sunday=6.
WEEKDAY_FACTORS = (1.2, 1.1, 1.0, 1.3, 1.5, 1.4, 0.7)

# Indexed by month - 1.
MONTH_FACTORS = (0.8, 0.9, 1.0, 1.1, 1.2, 1.1, 1.0, 0.9, 1.0, 1.1, 1.3, 1.4)

VARIATION_LOW = 0.8
VARIATION_SPAN = 0.4


def _today_utc() -> date:
    return datetime.now(timezone.utc).date()


class SalesSeeder:
    """Writes generated sales history for demo and local development."""

    def __init__(
        self,
        mongo_database: MongoDatabase,
        random_source: Optional[UniformSource] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        self.db = mongo_database
        self._random_source = random_source or seeded_source()
        self._today = today or _today_utc

    def quantity_for(self, product_id: str, day: date) -> int:
        base = BASE_QUANTITIES.get(product_id, DEFAULT_BASE_QUANTITY)
        variation = VARIATION_LOW + self._random_source() * VARIATION_SPAN
        value = (
            base
            * WEEKDAY_FACTORS[day.weekday()]
            * MONTH_FACTORS[day.month - 1]
            * variation
        )
        return max(0, round_half_up(value))

    async def seed(
        self, product_ids: Optional[Iterable[str]] = None, days: int = 60
    ) -> int:
        """
        Write ``days + 1`` daily points (today included) per product.

        Existing points for the same product and day are replaced.

        Returns:
            Number of documents written.
        """
        today = self._today()
        written = 0
        for product_id in product_ids or DEFAULT_PRODUCT_IDS:
            price = PRODUCT_PRICES.get(product_id, DEFAULT_PRICE)
            for offset in range(days, -1, -1):
                day = today - timedelta(days=offset)
                quantity = self.quantity_for(product_id, day)
                document = {
                    "product_id": product_id,
                    "date": day.isoformat(),
                    "quantity": quantity,
                    "revenue": round(quantity * price, 2),
                }
                try:
                    await self.db.replace_one(
                        SALES_DATA_COLLECTION,
                        {"product_id": product_id, "date": document["date"]},
                        document,
                        upsert=True,
                    )
                    written += 1
                except Exception as exc:
                    logger.error(
                        "seed.write_failed",
                        product_id=product_id,
                        date=document["date"],
                        error=str(exc),
                    )
            logger.info("seed.product_done", product_id=product_id, days=days + 1)
        return written
