"""Distribution generation, caching and error propagation."""

from __future__ import annotations

from .acceptance import AcceptanceResult, evaluate_candidate
from .cache import DistributionCache
from .distribution import ComplexDistribution, create_distribution, draw_candidate
from .propagation import ErrorEstimate, estimate_error, snr_schedule, sweep

__all__ = [
    "AcceptanceResult",
    "ComplexDistribution",
    "DistributionCache",
    "ErrorEstimate",
    "create_distribution",
    "draw_candidate",
    "estimate_error",
    "evaluate_candidate",
    "snr_schedule",
    "sweep",
]
