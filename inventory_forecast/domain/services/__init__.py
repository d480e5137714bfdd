"""
Domain Services Package

Pure forecasting computations: statistics kernel, confidence/accuracy
estimator and the forecast generator. None of them perform I/O.
"""

from .estimator import accuracy, confidence, round_score
from .generator import ForecastGenerator, UniformSource, seeded_source
from .statistics import mean, summarize, trend, variance

__all__ = [
    "mean",
    "variance",
    "trend",
    "summarize",
    "confidence",
    "accuracy",
    "round_score",
    "ForecastGenerator",
    "UniformSource",
    "seeded_source",
]
