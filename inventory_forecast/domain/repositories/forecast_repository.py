"""
Forecast Repository Interface

Abstracts storage of forecast records. Records are keyed by
(product_id, forecast_date); storing a second record under the same key
replaces the first.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from inventory_forecast.domain.entities.forecast import ForecastRecord


class IForecastRepository(ABC):
    """Interface for forecast repository implementations."""

    @abstractmethod
    async def put(self, record: ForecastRecord) -> ForecastRecord:
        """
        Store a forecast record, replacing any record with the same key.

        Args:
            record: The forecast to store

        Returns:
            The stored record

        Raises:
            ForecastOperationError: If the write fails
        """
        pass

    @abstractmethod
    async def find_latest(self, product_id: str) -> Optional[ForecastRecord]:
        """
        Find the most recent forecast for a product.

        Args:
            product_id: Product identifier

        Returns:
            The record with the latest forecast date, or None
        """
        pass

    @abstractmethod
    async def find_by_product(
        self, product_id: str, limit: int = 30
    ) -> List[ForecastRecord]:
        """
        List forecasts for a product, newest first.

        Args:
            product_id: Product identifier
            limit: Maximum number of records to return

        Returns:
            Matching records ordered by forecast date, descending
        """
        pass
