"""
Gateways package - Infrastructure Layer

Concrete implementations of the domain gateway interfaces.
"""

from inventory_forecast.infrastructure.gateways.sales_history_gateway import (
    MongoSalesHistoryGateway,
)

__all__ = ["MongoSalesHistoryGateway"]
