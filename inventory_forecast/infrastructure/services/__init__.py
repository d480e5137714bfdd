"""
Services package - Infrastructure Layer

Operational helpers that work directly against the database.
"""

from inventory_forecast.infrastructure.services.sales_seeder import SalesSeeder

__all__ = ["SalesSeeder"]
