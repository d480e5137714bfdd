"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(DomainError):
    """Raised when a forecast request is malformed (e.g. blank product id)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class InsufficientDataError(DomainError):
    """Raised when there is not enough sales history to forecast from."""

    def __init__(
        self,
        product_id: str,
        required: int,
        available: int,
        details: Optional[Dict[str, Any]] = None,
    ):
        message = (
            "Insufficient data for forecasting. "
            f"Need at least {required} days of sales data."
        )
        payload: Dict[str, Any] = {
            "product_id": product_id,
            "required": required,
            "available": available,
        }
        payload.update(details or {})
        super().__init__(message, payload)


class ComputationError(DomainError):
    """Raised when the statistics kernel produces or receives non-finite data."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ForecastNotFoundError(DomainError):
    """Raised when no forecast exists for a product."""

    def __init__(self, product_id: str, details: Optional[Dict[str, Any]] = None):
        message = f"No forecasts found for product {product_id}"
        super().__init__(message, details)


class ForecastOperationError(DomainError):
    """Raised when a forecast cannot be read from or written to storage."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class SalesHistoryError(DomainError):
    """Raised when the sales ledger cannot be queried."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
