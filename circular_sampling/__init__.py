"""Validated complex standard-normal samples for Monte Carlo error propagation."""

from circular_sampling.constants import (
    N_SAMPLES,
    SAMPLING_FACTOR_MEAN,
    SAMPLING_FACTOR_VARIANCE,
)
from circular_sampling.sampling import (
    ComplexDistribution,
    DistributionCache,
    create_distribution,
    estimate_error,
)
from circular_sampling.stats import MomentSummary, kahan_sum, mean, moments, naive_sum

__version__ = "0.1.0"

__all__ = [
    "N_SAMPLES",
    "SAMPLING_FACTOR_MEAN",
    "SAMPLING_FACTOR_VARIANCE",
    "ComplexDistribution",
    "DistributionCache",
    "MomentSummary",
    "create_distribution",
    "estimate_error",
    "kahan_sum",
    "mean",
    "moments",
    "naive_sum",
]
