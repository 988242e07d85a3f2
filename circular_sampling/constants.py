"""Shared sampling constants.

Dependent computations (error-propagation sweeps, dumps) must use these exact
values to reproduce the expected ratios.
"""

from __future__ import annotations

import math

# number of samples per component
N_SAMPLES = 1024
# normalization factor = 1/N_SAMPLES
SAMPLING_FACTOR_MEAN = 1.0 / N_SAMPLES
# normalization factor for variance = 1/(N_SAMPLES - 1) (Bessel correction)
SAMPLING_FACTOR_VARIANCE = 1.0 / (N_SAMPLES - 1)

# acceptance tolerances on |ratio - 1|
EPSILON_MEAN = 5e-4
EPSILON_VARIANCE = 5e-5

# probe used by the acceptance test
REFERENCE_AMPLITUDE = 1.0
REFERENCE_SNR = 100.0
REFERENCE_COMPONENT = REFERENCE_AMPLITUDE / math.sqrt(2.0)

# initial cache size = number of baselines (15 for 6 telescopes)
INITIAL_CAPACITY = 15

# ~500x the expected number of candidates per accepted distribution
DEFAULT_MAX_ITERATIONS = 1_000_000

__all__ = [
    "N_SAMPLES",
    "SAMPLING_FACTOR_MEAN",
    "SAMPLING_FACTOR_VARIANCE",
    "EPSILON_MEAN",
    "EPSILON_VARIANCE",
    "REFERENCE_AMPLITUDE",
    "REFERENCE_SNR",
    "REFERENCE_COMPONENT",
    "INITIAL_CAPACITY",
    "DEFAULT_MAX_ITERATIONS",
]
