"""
Controllers Package - Presentation Layer

FastAPI routers: request validation, error-to-status mapping and
conversion between DTOs and use case results.
"""

from .forecasts_controller import router as forecasts_router

__all__ = ["forecasts_router"]
