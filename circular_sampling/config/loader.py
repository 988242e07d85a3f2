"""Configuration loading with precedence CLI > ENV > file > defaults."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Mapping

import yaml

from circular_sampling.exceptions import ConfigValidationError
from circular_sampling.utils.logging import get_logger

log = get_logger(__name__, component="config")

ENV_PREFIX = "CIRCULAR_SAMPLING_"
NONE_LITERALS = {"", "none", "null"}


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        content = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"Invalid YAML in {path}: {exc}") from exc
    return content or {}


def load_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            content = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigValidationError(f"Invalid JSON in {path}: {exc}") from exc
    elif suffix in {".yml", ".yaml"}:
        content = _load_yaml(path)
    else:
        raise ConfigValidationError("Config file must be JSON or YAML")
    if not isinstance(content, dict):
        raise ConfigValidationError(f"Config file {path} must contain a mapping")
    return content


def _cast(key: str, value: Any, casters: Mapping[str, Callable[[Any], Any]]) -> Any:
    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() in NONE_LITERALS:
        return None
    caster = casters.get(key)
    if caster is None:
        return value
    try:
        return caster(value)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Invalid value for {key}: {value!r}") from exc


def load_config_with_precedence(
    config_path: Path | None,
    env_prefix: str,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Mapping[str, Callable[[Any], Any]] | None = None,
) -> dict[str, Any]:
    """Merge configuration sources; later sources override earlier ones.

    Only keys present in ``defaults`` are read from the file and environment.
    CLI values of ``None`` mean "not given" and do not override.
    """

    casters = casters or {}
    merged: dict[str, Any] = dict(defaults)
    sources = {key: "default" for key in defaults}

    if config_path is not None:
        file_values = load_config_file(Path(config_path))
        for key, value in file_values.items():
            if key not in defaults:
                raise ConfigValidationError(f"Unknown config key in {config_path}: {key}")
            merged[key] = _cast(key, value, casters)
            sources[key] = "file"

    for key in defaults:
        env_key = f"{env_prefix}{key.upper()}"
        if env_key in os.environ:
            merged[key] = _cast(key, os.environ[env_key], casters)
            sources[key] = "env"

    for key, value in cli_values.items():
        if value is not None:
            merged[key] = _cast(key, value, casters)
            sources[key] = "cli"

    log.debug("Configuration resolved", extra={"sources": sources})
    return merged


__all__ = ["ENV_PREFIX", "load_config_file", "load_config_with_precedence"]
