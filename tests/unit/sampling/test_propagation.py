import numpy as np
import pytest

from circular_sampling.constants import N_SAMPLES
from circular_sampling.exceptions import CacheNotInitializedError, ConfigValidationError
from circular_sampling.sampling.cache import DistributionCache
from circular_sampling.sampling.propagation import estimate_error, ratio_table, snr_schedule, sweep


@pytest.fixture(scope="module")
def cache():
    return DistributionCache.initialize(2, seed=13)


def test_snr_schedule_steps():
    values = list(snr_schedule())
    assert values[:9] == [10.0, 9.0, 8.0, 7.0, 6.0, 5.0, 4.0, 3.0, 2.0]
    assert values[9] == pytest.approx(1.9)
    assert all(a > b for a, b in zip(values, values[1:]))
    assert values[-1] > 1e-2
    assert values[-1] < 0.11


def test_noise_free_estimate_hits_expectation():
    zeros = np.zeros(N_SAMPLES)
    squared = estimate_error(zeros, zeros, 0.5, 10.0)
    assert squared.average == pytest.approx(0.25)
    assert squared.expected == 0.25
    assert squared.expected_err == pytest.approx(2 * 0.5 * 0.05)
    assert squared.variance == pytest.approx(0.0, abs=1e-20)

    amp = estimate_error(zeros, zeros, 0.5, 10.0, quantity="amplitude")
    assert amp.average == pytest.approx(0.5)
    assert (amp.expected, amp.expected_err) == (0.5, pytest.approx(0.05))


def test_acceptance_probe_is_a_propagation_estimate(cache):
    distrib = cache.entries()[0]
    estimate = estimate_error(distrib.real, distrib.imag, 1.0, 100.0)
    assert estimate.average == distrib.acceptance.mean
    assert estimate.ratio_variance == distrib.acceptance.ratio_variance


def test_squared_ratios_do_not_depend_on_amplitude(cache):
    distrib = cache.entries()[1]
    reference = estimate_error(distrib.real, distrib.imag, 1.0, 20.0)
    scaled = estimate_error(distrib.real, distrib.imag, 0.00137, 20.0)
    assert scaled.ratio_average == pytest.approx(reference.ratio_average, rel=1e-9)
    assert scaled.ratio_stddev == pytest.approx(reference.ratio_stddev, rel=1e-6)


@pytest.mark.parametrize(
    "amplitude, snr, quantity",
    [(0.0, 10.0, "squared"), (1.0, -1.0, "squared"), (1.0, float("inf"), "squared"), (1.0, 10.0, "phase")],
)
def test_invalid_inputs(amplitude, snr, quantity):
    zeros = np.zeros(8)
    with pytest.raises(ConfigValidationError):
        estimate_error(zeros, zeros, amplitude, snr, quantity=quantity)


def test_mismatched_components_rejected():
    with pytest.raises(ConfigValidationError):
        estimate_error(np.zeros(8), np.zeros(4), 1.0, 10.0)


def test_sweep_uses_every_cached_distribution(cache):
    rows = sweep(cache, 0.00137, [10.0, 5.0], quantity="amplitude")
    assert [(r.snr, r.index) for r in rows] == [(10.0, 0), (10.0, 1), (5.0, 0), (5.0, 1)]
    table = ratio_table(rows)
    assert set(table[0]) >= {"snr", "ratio_average", "ratio_stddev"}
    for row in rows:
        assert row.estimate.quantity == "amplitude"
        assert row.estimate.ratio_average == pytest.approx(1.0, abs=0.05)


def test_sweep_rejects_empty_batches(cache):
    with pytest.raises(ConfigValidationError):
        sweep(cache, 1.0, [10.0], per_snr=0)


def test_sweep_on_empty_cache_fails_fast():
    with pytest.raises(CacheNotInitializedError):
        sweep(DistributionCache(), 1.0, [10.0])
