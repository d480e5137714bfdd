"""
Forecast Generator - Domain Service

Builds a horizon of daily demand predictions from a moving-average baseline,
a linear trend, a fixed weekly oscillation and a small random perturbation.
The random perturbation is the only non-deterministic input and is drawn from
an injected source so callers can pin it.
"""

from __future__ import annotations

import math
import random
from datetime import date, timedelta
from typing import Callable, List, Optional, Sequence

from inventory_forecast.domain.entities.errors import InvalidInputError
from inventory_forecast.domain.entities.forecast import DEFAULT_HORIZON, Prediction
from inventory_forecast.domain.services.statistics import mean, trend

# Zero-argument callable returning a float uniformly drawn from [0, 1).
UniformSource = Callable[[], float]

DEFAULT_WINDOW = 7
SEASONAL_PERIOD = 7
SEASONAL_AMPLITUDE = 0.1
NOISE_AMPLITUDE = 0.05


def seeded_source(seed: Optional[int] = None) -> UniformSource:
    """Uniform source backed by its own ``random.Random`` instance."""
    return random.Random(seed).random


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ForecastGenerator:
    """Turns a chronological sales sequence into daily demand predictions."""

    def __init__(
        self,
        random_source: Optional[UniformSource] = None,
        window: int = DEFAULT_WINDOW,
    ):
        if window <= 0:
            raise InvalidInputError(
                "Moving average window must be greater than zero",
                details={"window": window},
            )
        self.window = window
        self._random_source = random_source or seeded_source()

    def baseline(self, values: Sequence[float]) -> float:
        """Mean of the most recent ``window`` values (fewer if the series is short)."""
        window = max(1, min(self.window, len(values)))
        return mean(values[-window:])

    def seasonal(self, step: int, baseline: float) -> float:
        # Phase follows the step index, not the calendar weekday.
        return (
            math.sin(2 * math.pi * step / SEASONAL_PERIOD)
            * baseline
            * SEASONAL_AMPLITUDE
        )

    def noise(self, baseline: float) -> float:
        return (self._random_source() - 0.5) * baseline * NOISE_AMPLITUDE

    def generate(
        self,
        values: Sequence[float],
        start: date,
        confidence: float,
        horizon: int = DEFAULT_HORIZON,
    ) -> List[Prediction]:
        """
        Predict ``horizon`` days following ``start``.

        Args:
            values: Daily quantities, oldest first.
            start: Date the forecast is made on; day 1 is the next day.
            confidence: Score attached to every prediction.
            horizon: Number of days to predict.

        Returns:
            One prediction per day, in order.
        """
        if horizon <= 0:
            raise InvalidInputError(
                "Forecast horizon must be greater than zero",
                details={"horizon": horizon},
            )

        series = list(values)
        baseline = self.baseline(series)
        slope = trend(series)

        predictions: List[Prediction] = []
        for step in range(horizon):
            raw_value = (
                baseline
                + slope * (step + 1)
                + self.seasonal(step, baseline)
                + self.noise(baseline)
            )
            predictions.append(
                Prediction(
                    day=step + 1,
                    date=start + timedelta(days=step + 1),
                    demand=max(0, round_half_up(raw_value)),
                    confidence=confidence,
                )
            )
        return predictions
