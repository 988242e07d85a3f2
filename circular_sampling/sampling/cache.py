"""Round-robin cache of validated distributions.

The cache is an explicitly constructed service: build one (usually with
``DistributionCache.initialize``) and pass it to the code that needs noise
samples. A single lock serializes growth and retrieval, so no caller sees a
partially appended collection or an out-of-range cursor.
"""

from __future__ import annotations

import threading

from circular_sampling.constants import DEFAULT_MAX_ITERATIONS, INITIAL_CAPACITY
from circular_sampling.exceptions import CacheNotInitializedError, ConfigValidationError
from circular_sampling.sampling.distribution import ComplexDistribution, create_distribution
from circular_sampling.utils.logging import get_logger
from circular_sampling.utils.profiling import budget_checker, elapsed_ms, track_time
from circular_sampling.utils.rng import spawn_generators

log = get_logger(__name__, component="cache")


class DistributionCache:
    def __init__(
        self,
        *,
        seed: int | None = None,
        max_iterations: int | None = DEFAULT_MAX_ITERATIONS,
        time_budget: float | None = None,
    ) -> None:
        if seed is not None and seed < 0:
            raise ConfigValidationError("seed must be non-negative")
        if max_iterations is not None and max_iterations <= 0:
            raise ConfigValidationError("max_iterations must be > 0 when set")
        if time_budget is not None and time_budget <= 0:
            raise ConfigValidationError("time_budget must be > 0 when set")
        self.seed = seed
        self.max_iterations = max_iterations
        self.time_budget = time_budget
        self._lock = threading.Lock()
        self._entries: list[ComplexDistribution] = []
        self._current = 0

    @classmethod
    def initialize(cls, capacity: int = INITIAL_CAPACITY, **kwargs) -> "DistributionCache":
        """Build a cache pre-filled with ``capacity`` distributions."""
        cache = cls(**kwargs)
        cache.ensure_capacity(capacity)
        return cache

    @classmethod
    def from_config(cls, config) -> "DistributionCache":
        return cls.initialize(
            config.initial_capacity,
            seed=config.seed,
            max_iterations=config.max_iterations,
            time_budget=config.time_budget,
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def entries(self) -> tuple[ComplexDistribution, ...]:
        """Snapshot of the cached distributions in insertion order."""
        with self._lock:
            return tuple(self._entries)

    def ensure_capacity(self, count: int) -> int:
        """Generate distributions until at least ``count`` are cached.

        Each new distribution gets its own independently seeded generator.
        With a ``time_budget`` set, crossing 50% and 90% of it is logged.
        Returns the number of distributions generated.
        """

        if count < 0:
            raise ConfigValidationError("count must be non-negative")
        with self._lock:
            existing = len(self._entries)
            needed = count - existing
            if needed <= 0:
                return 0
            log.info(f"prepare: {needed} needed distributions", extra={"needed": needed, "capacity": count})
            check = budget_checker("ensure_capacity", self.time_budget) if self.time_budget is not None else None
            with track_time("ensure_capacity") as start:
                for offset, rng in enumerate(spawn_generators(self.seed, needed, offset=existing)):
                    distrib = create_distribution(rng, max_iterations=self.max_iterations)
                    self._entries.append(distrib)
                    log.debug(
                        "Distribution cached",
                        extra={"distribution_index": existing + offset, "iterations": distrib.iterations},
                    )
                    if check is not None:
                        check(elapsed_ms(start) / 1e3)
                duration = elapsed_ms(start)
            log.info(
                f"prepare done: {duration:.3f} ms.",
                extra={"duration_ms": round(duration, 3), "capacity": len(self._entries)},
            )
            return needed

    def next(self) -> ComplexDistribution:
        """Return the distribution at the cursor and advance it (round robin)."""
        with self._lock:
            if not self._entries:
                raise CacheNotInitializedError("distribution cache is empty; call ensure_capacity() first")
            idx = self._current
            distrib = self._entries[idx]
            self._current = (idx + 1) % len(self._entries)
            return distrib


__all__ = ["DistributionCache"]
