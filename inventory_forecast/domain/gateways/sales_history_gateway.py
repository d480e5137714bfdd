"""
Domain Gateway - Sales History

Interface to the sales ledger that supplies the daily history a forecast is
computed from.
"""

from abc import ABC, abstractmethod
from typing import List

from inventory_forecast.domain.entities.sales import SalesPoint


class ISalesHistoryGateway(ABC):
    """Interface for sales history gateways."""

    @abstractmethod
    async def fetch_history(
        self, product_id: str, lookback_days: int
    ) -> List[SalesPoint]:
        """
        Fetch the daily sales of a product over the last ``lookback_days``.

        Args:
            product_id: Product identifier (e.g. "SKU001")
            lookback_days: Number of days before today to include

        Returns:
            Sales points in chronological order; empty when there is no data

        Raises:
            SalesHistoryError: When the ledger cannot be queried
        """
        pass
