"""Acceptance test for candidate complex-normal sample sets.

A candidate is probed with a unit visibility at SNR 100: the squared amplitude
it produces must reproduce the expected mean and propagated variance within
``EPSILON_MEAN`` and ``EPSILON_VARIANCE``. The moments of a complex normal
draw are invariant to the affine transform, so the probe values validate the
draw itself, not a particular downstream use.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from circular_sampling.constants import (
    EPSILON_MEAN,
    EPSILON_VARIANCE,
    N_SAMPLES,
    REFERENCE_AMPLITUDE,
    REFERENCE_SNR,
)
from circular_sampling.sampling.propagation import ErrorEstimate, estimate_error


@dataclass(frozen=True)
class AcceptanceResult:
    estimate: ErrorEstimate

    @property
    def mean(self) -> float:
        return self.estimate.average

    @property
    def variance(self) -> float:
        return self.estimate.variance

    @property
    def ratio_mean(self) -> float:
        return self.estimate.ratio_average

    @property
    def ratio_variance(self) -> float:
        return self.estimate.ratio_variance

    @property
    def accepted(self) -> bool:
        return abs(self.ratio_mean - 1.0) < EPSILON_MEAN and abs(self.ratio_variance - 1.0) < EPSILON_VARIANCE

    def describe(self) -> str:
        est = self.estimate
        return (
            f"Sampling[{N_SAMPLES}] snr={est.snr} (err(re,im)= {est.amplitude / est.snr})"
            f" avg= {est.average} norm= {est.expected} ratio: {self.ratio_mean}"
            f" stddev= {est.stddev} err(norm)= {est.expected_err} ratio: {self.ratio_variance}"
            f" good = {self.accepted}"
        )


def evaluate_candidate(real: np.ndarray, imag: np.ndarray) -> AcceptanceResult:
    """Run the fixed-probe acceptance test on one candidate."""
    estimate = estimate_error(real, imag, REFERENCE_AMPLITUDE, REFERENCE_SNR, quantity="squared")
    return AcceptanceResult(estimate=estimate)


__all__ = ["AcceptanceResult", "evaluate_candidate"]
