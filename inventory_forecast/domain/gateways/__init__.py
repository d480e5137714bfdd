"""
Domain Gateways Package

Interfaces to external data sources.
"""

from .sales_history_gateway import ISalesHistoryGateway

__all__ = ["ISalesHistoryGateway"]
