"""Cache-quality diagnostics and scipy cross-checks."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
from scipy.stats import kurtosis, skew

from circular_sampling.stats.moments import MomentSummary, NanPolicy, moments


def scipy_reference(values: Sequence[float] | np.ndarray) -> MomentSummary:
    """Recompute the four moments with scipy, in the Bessel-corrected convention.

    scipy standardizes by the population variance; rescaling by
    ``((n - 1) / n) ** (k / 2)`` matches ``moments``.
    """

    arr = np.asarray(values, dtype=np.float64)
    n = arr.size
    factor = (n - 1) / n
    skewness = float(skew(arr, bias=True)) * factor**1.5
    excess = (float(kurtosis(arr, fisher=False, bias=True))) * factor**2 - 3.0
    return MomentSummary(
        mean=float(np.mean(arr)),
        variance=float(np.var(arr, ddof=1)),
        skewness=skewness,
        kurtosis=excess,
    )


def moment_spread(distributions: Iterable, *, nan_policy: NanPolicy = "omit") -> dict[str, dict[str, MomentSummary]]:
    """Moments of the per-distribution means and variances, per component.

    A well-behaved cache has mean-of-means near 0 and mean-of-variances near 1
    for both components.
    """

    summaries = [d.moments for d in distributions]
    if not summaries:
        return {}
    report: dict[str, dict[str, MomentSummary]] = {}
    for idx, component in enumerate(("real", "imag")):
        means = np.array([pair[idx].mean for pair in summaries])
        variances = np.array([pair[idx].variance for pair in summaries])
        report[component] = {
            "mean": moments(means, nan_policy=nan_policy),
            "variance": moments(variances, nan_policy=nan_policy),
        }
    return report


__all__ = ["moment_spread", "scipy_reference"]
