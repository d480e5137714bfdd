"""
Domain Layer Package

Entities, forecasting services and the repository/gateway interfaces.
Nothing in here depends on frameworks or infrastructure.
"""

# Re-export submodules
from inventory_forecast.domain import entities, gateways, repositories, services

__all__ = ["entities", "gateways", "repositories", "services"]
