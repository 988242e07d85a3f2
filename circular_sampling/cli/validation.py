"""CLI validation and configuration helpers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from circular_sampling.config.loader import ENV_PREFIX, load_config_with_precedence
from circular_sampling.config.settings import SamplingConfig
from circular_sampling.exceptions import ConfigValidationError


def require_positive(name: str, value: int | float) -> None:
    if value <= 0:
        raise ConfigValidationError(f"{name} must be > 0")


def resolve_sampling_config(config_path: Path | None, cli_values: dict[str, Any]) -> SamplingConfig:
    """Build a SamplingConfig from CLI > ENV > file > defaults."""
    defaults = SamplingConfig().to_dict()
    casters = {
        "initial_capacity": int,
        "max_iterations": int,
        "seed": int,
        "nan_policy": str,
        "log_level": str,
        "time_budget": float,
    }
    cfg = load_config_with_precedence(
        config_path=config_path,
        env_prefix=ENV_PREFIX,
        cli_values=cli_values,
        defaults=defaults,
        casters=casters,
    )
    if cfg.get("initial_capacity") is None:
        raise ConfigValidationError("initial_capacity is required")
    settings = SamplingConfig.from_dict(cfg)
    logging.getLogger().setLevel(settings.logging_level)
    return settings


__all__ = ["require_positive", "resolve_sampling_config"]
