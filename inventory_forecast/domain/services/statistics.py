"""
Statistics Kernel - Domain Service

Summary statistics over an ordered sequence of daily quantities. Every
function validates its input and its result: non-numeric or non-finite data
raises ``ComputationError`` instead of being coerced to zero.
"""

import math
from typing import Iterable, Sequence

import numpy as np

from inventory_forecast.domain.entities.errors import ComputationError
from inventory_forecast.domain.entities.forecast import ForecastMetrics


def _as_array(values: Iterable[float]) -> np.ndarray:
    items = list(values)
    if any(isinstance(item, (str, bytes)) for item in items):
        raise ComputationError("Sales sequence contains non-numeric values")
    try:
        array = np.asarray(items, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ComputationError(
            "Sales sequence contains non-numeric values", details={"error": str(exc)}
        ) from exc

    if array.ndim != 1:
        raise ComputationError(
            "Sales sequence must be one-dimensional", details={"shape": array.shape}
        )
    if not np.all(np.isfinite(array)):
        raise ComputationError("Sales sequence contains NaN or infinite values")
    return array


def _finite(value: float, label: str) -> float:
    result = float(value)
    if not math.isfinite(result):
        raise ComputationError(
            f"Computed {label} is not finite", details={label: result}
        )
    return result


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean. The sequence must not be empty."""
    array = _as_array(values)
    if array.size == 0:
        raise ComputationError("Cannot compute the mean of an empty sequence")
    return _finite(array.mean(), "mean")


def variance(values: Sequence[float]) -> float:
    """Population variance (divides by N) around the mean."""
    array = _as_array(values)
    if array.size == 0:
        raise ComputationError("Cannot compute the variance of an empty sequence")
    return _finite(array.var(), "variance")


def trend(values: Sequence[float]) -> float:
    """
    Least-squares slope of the values against their 0-based position.

    Points are treated as equally spaced, one per day. Sequences shorter than
    two points have no slope and return 0.
    """
    y = _as_array(values)
    n = y.size
    if n < 2:
        return 0.0

    x = np.arange(n, dtype=np.float64)
    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_x2 = (x * x).sum()

    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        return 0.0
    return _finite((n * sum_xy - sum_x * sum_y) / denominator, "trend")


def summarize(values: Sequence[float]) -> ForecastMetrics:
    """Mean, variance and trend of a non-empty sequence."""
    return ForecastMetrics(
        mean=mean(values), variance=variance(values), trend=trend(values)
    )
