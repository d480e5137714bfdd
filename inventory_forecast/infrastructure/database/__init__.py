"""
Database package - Infrastructure Layer

MongoDB connection handling shared by the repositories and gateways.
"""

from inventory_forecast.infrastructure.database.mongo_database import (
    FORECASTS_COLLECTION,
    SALES_DATA_COLLECTION,
    MongoDatabase,
)

__all__ = ["MongoDatabase", "FORECASTS_COLLECTION", "SALES_DATA_COLLECTION"]
