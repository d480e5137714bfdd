"""
Application Layer Package

Use cases and DTOs. Directs the domain services and collaborators to
produce and serve forecasts.
"""

# Re-export submodules
from inventory_forecast.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
