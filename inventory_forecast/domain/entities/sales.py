"""Domain entities for the sales ledger."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class SalesPoint:
    """Units sold and revenue earned for one product on one day."""

    date: date
    quantity: int
    revenue: float = 0.0
