"""
Confidence/Accuracy Estimator - Domain Service

Maps the dispersion of a sales sequence onto bounded scores. The constants
below are calibrated by hand, not derived, and can be tuned independently.
"""

import math
from typing import Sequence

from inventory_forecast.domain.services.statistics import mean, variance

CONFIDENCE_FLOOR = 0.5
CONFIDENCE_CEILING = 0.95
# Dispersion (variance / mean) that brings confidence down by 1.0
DISPERSION_DIVISOR = 10.0

ACCURACY_FLOOR = 0.6
ACCURACY_CEILING = 0.95
ACCURACY_BASE = 0.7
STABILITY_WEIGHT = 0.25
ZERO_MEAN_ACCURACY = 0.5


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def round_score(value: float) -> float:
    """Round half-up to two decimal places."""
    return math.floor(value * 100 + 0.5) / 100


def confidence(values: Sequence[float]) -> float:
    """
    Confidence in a forecast built from ``values``.

    Higher variance relative to the mean lowers confidence. A zero mean is
    replaced by 1 so that a noisy near-zero series is still penalised.
    """
    avg = mean(values)
    dispersion = variance(values) / (avg if avg != 0 else 1.0)
    return clamp(
        1 - dispersion / DISPERSION_DIVISOR, CONFIDENCE_FLOOR, CONFIDENCE_CEILING
    )


def accuracy(values: Sequence[float]) -> float:
    """Stability based accuracy estimate; 0.5 when the series has no signal."""
    avg = mean(values)
    if avg == 0:
        return ZERO_MEAN_ACCURACY

    stability = 1 / (1 + variance(values) / avg)
    return clamp(
        ACCURACY_BASE + stability * STABILITY_WEIGHT, ACCURACY_FLOOR, ACCURACY_CEILING
    )
