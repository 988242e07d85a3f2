"""Dump CLI command: write cached distributions as TSV files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from circular_sampling.cli.validation import resolve_sampling_config
from circular_sampling.sampling.cache import DistributionCache
from circular_sampling.sampling.export import dump_cache
from circular_sampling.utils.logging import get_logger

log = get_logger(__name__, component="cli.dump")


def dump(
    target: Path = typer.Option(Path("dist"), "--target", help="Directory for dist_<N>_<i>.txt files"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    capacity: Optional[int] = typer.Option(None, "--capacity", help="Number of distributions to dump"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Root seed for reproducible caches"),
) -> None:
    """Generate a cache and write each distribution to its own file."""
    cfg = resolve_sampling_config(config, {"initial_capacity": capacity, "seed": seed})
    cache = DistributionCache.from_config(cfg)
    written = dump_cache(cache, target)
    for path in written:
        typer.echo(f"Writing: {path}")
    log.info("Dump completed", extra={"capacity": len(written)})
