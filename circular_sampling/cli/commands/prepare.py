"""Prepare CLI command: fill a cache and report its moments."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from circular_sampling.cli.validation import resolve_sampling_config
from circular_sampling.sampling.cache import DistributionCache
from circular_sampling.stats.diagnostics import moment_spread
from circular_sampling.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli.prepare")


def _fmt(value: float) -> str:
    return f"{value:.6g}"


def prepare(
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    capacity: Optional[int] = typer.Option(None, "--capacity", help="Number of distributions to generate"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Root seed for reproducible caches"),
    max_iterations: Optional[int] = typer.Option(None, "--max-iterations", help="Rejection-sampling cap per distribution"),
    time_budget: Optional[float] = typer.Option(None, "--time-budget", help="Seconds; log when cache filling nears it"),
) -> None:
    """Generate validated distributions and print their moments."""
    cfg = resolve_sampling_config(
        config,
        {
            "initial_capacity": capacity,
            "seed": seed,
            "max_iterations": max_iterations,
            "time_budget": time_budget,
        },
    )
    cache = DistributionCache.from_config(cfg)
    entries = cache.entries()

    table = Table(title=f"Distribution cache ({len(entries)} entries)")
    for column in ("#", "iter", "mean(re)", "var(re)", "skew(re)", "kurt(re)", "mean(im)", "var(im)", "skew(im)", "kurt(im)"):
        table.add_column(column, justify="right")
    for idx, distrib in enumerate(entries):
        re_m, im_m = distrib.moments
        table.add_row(str(idx), str(distrib.iterations), *map(_fmt, re_m), *map(_fmt, im_m))
    console.print(table)

    if len(entries) >= 2:
        spread = Table(title="Moment spread across cache")
        for column in ("component", "statistic", "mean", "variance", "skewness", "kurtosis"):
            spread.add_column(column)
        for component, stats in moment_spread(entries, nan_policy=cfg.nan_policy).items():
            for statistic, summary in stats.items():
                spread.add_row(component, statistic, *map(_fmt, summary))
        console.print(spread)
    log.info("Prepare completed", extra={"capacity": len(entries)})
