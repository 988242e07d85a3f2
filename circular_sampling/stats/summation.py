"""Summation primitives.

``DiffAccumulator`` implements the difference-from-reference scheme used by
every variance in this package: accumulating ``x - ref`` and ``(x - ref)**2``
and correcting with ``sum_diff**2 / n`` keeps the variance exact even when the
reference is not the true mean.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

# elements converted to Python floats at a time
_BLOCK = 1 << 16


def naive_sum(values: Sequence[float] | np.ndarray) -> float:
    """Strict left-to-right float64 accumulation (no pairwise blocking)."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        return 0.0
    return float(np.add.accumulate(arr)[-1])


def kahan_sum(values: Sequence[float] | np.ndarray) -> float:
    """Kahan compensated summation."""
    arr = np.asarray(values, dtype=np.float64).ravel()
    total = 0.0
    compensation = 0.0
    for start in range(0, arr.size, _BLOCK):
        for value in arr[start : start + _BLOCK].tolist():
            y = value - compensation
            t = total + y
            compensation = (t - total) - y
            total = t
    return total


@dataclass(frozen=True)
class DiffAccumulator:
    count: int
    reference: float
    total: float
    sum_diff: float
    sum_diff2: float

    @classmethod
    def from_samples(cls, samples: np.ndarray, reference: float) -> "DiffAccumulator":
        arr = np.asarray(samples, dtype=np.float64)
        diff = arr - reference
        return cls(
            count=int(arr.size),
            reference=float(reference),
            total=float(arr.sum()),
            sum_diff=float(diff.sum()),
            sum_diff2=float((diff * diff).sum()),
        )

    def mean(self) -> float:
        return self.total / self.count

    def variance(self) -> float:
        """Bessel-corrected variance, stable for any reference."""
        return (self.sum_diff2 - (self.sum_diff * self.sum_diff) / self.count) / (self.count - 1)


__all__ = ["DiffAccumulator", "kahan_sum", "naive_sum"]
