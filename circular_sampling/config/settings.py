"""Sampling configuration schema and validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from circular_sampling.constants import DEFAULT_MAX_ITERATIONS, INITIAL_CAPACITY
from circular_sampling.exceptions import ConfigValidationError
from circular_sampling.stats.moments import NAN_POLICIES, NanPolicy

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(slots=True)
class SamplingConfig:
    initial_capacity: int = INITIAL_CAPACITY
    max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS
    seed: Optional[int] = None
    nan_policy: NanPolicy = "omit"
    log_level: str = "INFO"
    time_budget: Optional[float] = None

    def __post_init__(self) -> None:
        if self.initial_capacity <= 0:
            raise ConfigValidationError("initial_capacity must be > 0")
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise ConfigValidationError("max_iterations must be positive when set")
        if self.seed is not None and self.seed < 0:
            raise ConfigValidationError("seed must be non-negative")
        if self.nan_policy not in NAN_POLICIES:
            raise ConfigValidationError(f"nan_policy must be one of {list(NAN_POLICIES)}")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigValidationError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        if self.time_budget is not None and self.time_budget <= 0:
            raise ConfigValidationError("time_budget must be positive when set")

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: dict) -> "SamplingConfig":
        known = {"initial_capacity", "max_iterations", "seed", "nan_policy", "log_level", "time_budget"}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(f"unknown configuration keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict:
        return {
            "initial_capacity": self.initial_capacity,
            "max_iterations": self.max_iterations,
            "seed": self.seed,
            "nan_policy": self.nan_policy,
            "log_level": self.log_level,
            "time_budget": self.time_budget,
        }


__all__ = ["SamplingConfig"]
