"""Moment engine: mean, variance, skewness and excess kurtosis.

Two centered passes over the data instead of raw-moment formulas, so large
sample counts do not lose precision to cancellation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Literal, Sequence

import numpy as np

from circular_sampling.exceptions import ConfigValidationError, MomentDomainError
from circular_sampling.stats.summation import DiffAccumulator
from circular_sampling.utils.logging import get_logger

log = get_logger(__name__, component="moments")

NanPolicy = Literal["omit", "propagate", "raise"]
NAN_POLICIES = ("omit", "propagate", "raise")


@dataclass(frozen=True)
class MomentSummary:
    mean: float
    variance: float
    skewness: float
    kurtosis: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.mean, self.variance, self.skewness, self.kurtosis)

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    @property
    def stddev(self) -> float:
        return math.sqrt(self.variance)


def mean(values: Sequence[float] | np.ndarray) -> float:
    """Mean over non-NaN values; 0.0 when there are none."""
    arr = np.asarray(values, dtype=np.float64)
    valid = arr[~np.isnan(arr)]
    if valid.size == 0:
        return 0.0
    return float(valid.sum() / valid.size)


def moments(values: Sequence[float] | np.ndarray, *, nan_policy: NanPolicy = "omit") -> MomentSummary:
    """Return ``(mean, variance, skewness, kurtosis)`` of ``values``.

    The variance is Bessel corrected; kurtosis is the excess kurtosis (0 for a
    Gaussian). Skewness and kurtosis are standardized by the Bessel-corrected
    standard deviation and divided by the sample count.

    Raises:
        MomentDomainError: empty input, fewer than two usable samples, zero
            variance (standardization is undefined), or, unless ``nan_policy`` is
            ``"propagate"``, infinite samples or a variance that overflows.
    """

    if nan_policy not in NAN_POLICIES:
        raise ConfigValidationError(f"nan_policy must be one of {list(NAN_POLICIES)}")

    arr = np.asarray(values, dtype=np.float64).ravel()
    if arr.size == 0:
        raise MomentDomainError("moments of an empty sequence are undefined")

    nan_mask = np.isnan(arr)
    n_nan = int(nan_mask.sum())
    avg = mean(arr)

    if n_nan:
        if nan_policy == "raise":
            raise MomentDomainError(f"sequence contains {n_nan} NaN value(s)", mean=avg)
        if nan_policy == "omit":
            log.warning(
                "NaN samples excluded from moment passes",
                extra={"nan_count": n_nan, "sample_count": int(arr.size)},
            )
            arr = arr[~nan_mask]

    if nan_policy != "propagate" and np.isinf(arr).any():
        raise MomentDomainError("sequence contains infinite value(s)", mean=avg)

    count = int(arr.size)
    if count < 2:
        raise MomentDomainError(f"moments need at least 2 samples, got {count}", mean=avg)

    if n_nan == 0 and arr.min() == arr.max():
        raise MomentDomainError("zero variance: skewness and kurtosis are undefined", mean=avg, variance=0.0)

    with np.errstate(over="ignore", invalid="ignore"):
        variance = DiffAccumulator.from_samples(arr, avg).variance()
    if variance <= 0.0:
        raise MomentDomainError("zero variance: skewness and kurtosis are undefined", mean=avg, variance=0.0)

    if nan_policy != "propagate" and not math.isfinite(variance):
        raise MomentDomainError("variance overflowed: moments are not finite", mean=avg, variance=variance)

    stddev = math.sqrt(variance)
    z = (arr - avg) / stddev
    z2 = z * z
    sum_z3 = float((z2 * z).sum())
    sum_z4 = float((z2 * z2).sum())

    return MomentSummary(
        mean=avg,
        variance=float(variance),
        skewness=sum_z3 / count,
        kurtosis=(sum_z4 / count) - 3.0,
    )


__all__ = ["MomentSummary", "NAN_POLICIES", "NanPolicy", "mean", "moments"]
