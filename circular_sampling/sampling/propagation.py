"""Monte Carlo error propagation on a complex visibility.

A reference visibility of amplitude ``a`` (equal real and imaginary parts) is
perturbed by circular Gaussian noise of standard deviation ``a / snr`` per
component. The empirical average and spread of |V| or |V|^2 are compared to
the first-order expectations: ``(a, err)`` for the amplitude and
``(a**2, 2*a*err)`` for the squared amplitude (d(v^2) = 2v dv).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Literal, Sequence

import numpy as np

from circular_sampling.exceptions import CacheNotInitializedError, ConfigValidationError
from circular_sampling.stats.summation import DiffAccumulator
from circular_sampling.utils.logging import get_logger

log = get_logger(__name__, component="propagation")

Quantity = Literal["squared", "amplitude"]
QUANTITIES = ("squared", "amplitude")


@dataclass(frozen=True)
class ErrorEstimate:
    amplitude: float
    snr: float
    quantity: Quantity
    average: float
    variance: float
    expected: float
    expected_err: float

    @property
    def stddev(self) -> float:
        return math.sqrt(self.variance) if self.variance > 0 else 0.0

    @property
    def ratio_average(self) -> float:
        return self.average / self.expected

    @property
    def ratio_stddev(self) -> float:
        return self.stddev / self.expected_err

    @property
    def ratio_variance(self) -> float:
        return self.variance / (self.expected_err * self.expected_err)


@dataclass(frozen=True)
class SweepRow:
    snr: float
    index: int
    estimate: ErrorEstimate


def _validate(amplitude: float, snr: float, quantity: str) -> None:
    if not (math.isfinite(amplitude) and amplitude > 0):
        raise ConfigValidationError("amplitude must be a positive finite number")
    if not (math.isfinite(snr) and snr > 0):
        raise ConfigValidationError("snr must be a positive finite number")
    if quantity not in QUANTITIES:
        raise ConfigValidationError(f"quantity must be one of {list(QUANTITIES)}")


def estimate_error(
    real: np.ndarray,
    imag: np.ndarray,
    amplitude: float,
    snr: float,
    *,
    quantity: Quantity = "squared",
) -> ErrorEstimate:
    """Propagate standard-normal draws through the visibility transform."""

    _validate(amplitude, snr, quantity)
    real = np.asarray(real, dtype=np.float64)
    imag = np.asarray(imag, dtype=np.float64)
    if real.shape != imag.shape or real.ndim != 1:
        raise ConfigValidationError("real and imag must be 1-D arrays of the same length")
    if real.size < 2:
        raise ConfigValidationError("at least 2 samples are required")

    err = amplitude / snr
    ref = amplitude / math.sqrt(2.0)

    re = ref + err * real
    im = ref + err * imag
    samples = re * re + im * im

    if quantity == "amplitude":
        samples = np.sqrt(samples)
        expected, expected_err = amplitude, err
    else:
        expected, expected_err = amplitude * amplitude, 2.0 * amplitude * err

    acc = DiffAccumulator.from_samples(samples, expected)
    return ErrorEstimate(
        amplitude=amplitude,
        snr=snr,
        quantity=quantity,
        average=acc.mean(),
        variance=acc.variance(),
        expected=expected,
        expected_err=expected_err,
    )


def snr_schedule(start: float = 10.0, stop: float = 1e-2) -> Iterator[float]:
    """Decreasing SNR values: steps of 1.0 above 2.5, then steps of 0.1."""

    snr = start
    while snr > stop:
        yield snr
        snr -= 1.0 if snr > 2.5 else 0.1


def sweep(
    cache,
    amplitude: float,
    snrs: Iterable[float],
    *,
    quantity: Quantity = "squared",
    per_snr: int | None = None,
) -> list[SweepRow]:
    """Run ``estimate_error`` over cached distributions for each SNR.

    ``per_snr`` defaults to the cache size, so every cached distribution is
    used once per SNR.
    """

    if len(cache) == 0:
        raise CacheNotInitializedError("distribution cache is empty; call ensure_capacity() first")
    count = per_snr if per_snr is not None else len(cache)
    if count <= 0:
        raise ConfigValidationError("per_snr must be > 0")
    rows: list[SweepRow] = []
    for snr in snrs:
        for index in range(count):
            distrib = cache.next()
            estimate = estimate_error(distrib.real, distrib.imag, amplitude, snr, quantity=quantity)
            rows.append(SweepRow(snr=snr, index=index, estimate=estimate))
        log.debug("SNR step done", extra={"snr": snr, "quantity": quantity})
    return rows


def ratio_table(rows: Sequence[SweepRow]) -> list[dict]:
    return [
        {
            "snr": row.snr,
            "index": row.index,
            "average": row.estimate.average,
            "expected": row.estimate.expected,
            "ratio_average": row.estimate.ratio_average,
            "stddev": row.estimate.stddev,
            "expected_err": row.estimate.expected_err,
            "ratio_stddev": row.estimate.ratio_stddev,
        }
        for row in rows
    ]


__all__ = ["ErrorEstimate", "QUANTITIES", "Quantity", "SweepRow", "estimate_error", "ratio_table", "snr_schedule", "sweep"]
