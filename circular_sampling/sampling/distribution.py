"""Validated complex standard-normal distributions."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from circular_sampling.constants import DEFAULT_MAX_ITERATIONS, N_SAMPLES
from circular_sampling.exceptions import ConfigValidationError, ValidationNotConvergedError
from circular_sampling.interfaces.random_source import RandomSource
from circular_sampling.sampling.acceptance import AcceptanceResult, evaluate_candidate
from circular_sampling.stats.moments import MomentSummary, moments
from circular_sampling.utils.logging import get_logger
from circular_sampling.utils.profiling import elapsed_ms, track_time

log = get_logger(__name__, component="generator")


@dataclass(frozen=True, eq=False)
class ComplexDistribution:
    """One accepted bivariate draw with its per-component moments.

    Sample arrays are read-only; instances are shared by reference.
    """

    real: np.ndarray
    imag: np.ndarray
    real_moments: MomentSummary
    imag_moments: MomentSummary
    acceptance: AcceptanceResult
    iterations: int

    def __post_init__(self) -> None:
        self.real.flags.writeable = False
        self.imag.flags.writeable = False

    @property
    def samples(self) -> tuple[np.ndarray, np.ndarray]:
        return self.real, self.imag

    @property
    def moments(self) -> tuple[MomentSummary, MomentSummary]:
        return self.real_moments, self.imag_moments


def draw_candidate(random_source: RandomSource) -> tuple[np.ndarray, np.ndarray]:
    """Draw one candidate: N real then N imaginary standard-normal values."""
    real = np.asarray(random_source.standard_normal(N_SAMPLES), dtype=np.float64)
    imag = np.asarray(random_source.standard_normal(N_SAMPLES), dtype=np.float64)
    return real, imag


def create_distribution(
    random_source: RandomSource,
    *,
    max_iterations: int | None = DEFAULT_MAX_ITERATIONS,
) -> ComplexDistribution:
    """Redraw candidates until one passes the acceptance test.

    ``max_iterations=None`` loops until acceptance with no cap.

    Raises:
        ValidationNotConvergedError: no candidate passed within ``max_iterations``.
    """

    if max_iterations is not None and max_iterations <= 0:
        raise ConfigValidationError("max_iterations must be > 0 when set")

    with track_time("create_distribution") as start:
        n = 0
        while True:
            real, imag = draw_candidate(random_source)
            n += 1
            result = evaluate_candidate(real, imag)
            if result.accepted:
                break
            if max_iterations is not None and n >= max_iterations:
                raise ValidationNotConvergedError(
                    f"no candidate passed validation after {n} iterations", iterations=n
                )

        if log.isEnabledFor(logging.DEBUG):
            log.debug(result.describe())

        distrib = ComplexDistribution(
            real=real,
            imag=imag,
            real_moments=moments(real),
            imag_moments=moments(imag),
            acceptance=result,
            iterations=n,
        )
        duration = elapsed_ms(start)

    log.info(
        f"done: {duration:.3f} ms ({n} iterations).",
        extra={"iterations": n, "duration_ms": round(duration, 3)},
    )
    return distrib


__all__ = ["ComplexDistribution", "create_distribution", "draw_candidate"]
