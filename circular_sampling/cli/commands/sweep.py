"""Sweep CLI command: error-propagation ratios over decreasing SNR."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import numpy as np
import typer
from rich.console import Console
from rich.table import Table

from circular_sampling.cli.validation import require_positive, resolve_sampling_config
from circular_sampling.exceptions import ConfigValidationError
from circular_sampling.sampling.cache import DistributionCache
from circular_sampling.sampling.propagation import QUANTITIES, ratio_table, snr_schedule, sweep as run_sweep
from circular_sampling.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli.sweep")


def sweep(
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    amplitude: float = typer.Option(0.00137, "--amplitude", help="Reference visibility amplitude"),
    quantity: str = typer.Option("squared", "--quantity", help="squared (|V|^2) or amplitude (|V|)"),
    start: float = typer.Option(10.0, "--start", help="First SNR value"),
    stop: float = typer.Option(1e-2, "--stop", help="Stop once SNR falls to this value"),
    capacity: Optional[int] = typer.Option(None, "--capacity", help="Number of cached distributions"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Root seed for reproducible caches"),
    output: Optional[Path] = typer.Option(None, "--output", help="Optional JSON file for per-distribution rows"),
) -> None:
    """Propagate cached noise through a visibility for each SNR and print ratios."""
    require_positive("amplitude", amplitude)
    require_positive("start", start)
    if quantity not in QUANTITIES:
        raise ConfigValidationError(f"quantity must be one of {list(QUANTITIES)}")

    cfg = resolve_sampling_config(config, {"initial_capacity": capacity, "seed": seed})
    cache = DistributionCache.from_config(cfg)
    rows = run_sweep(cache, amplitude, snr_schedule(start, stop), quantity=quantity)

    table = Table(title=f"{quantity} @ amplitude={amplitude}")
    for column in ("snr", "expected", "avg ratio", "expected err", "stddev ratio"):
        table.add_column(column, justify="right")
    by_snr: dict[float, list] = {}
    for row in rows:
        by_snr.setdefault(row.snr, []).append(row.estimate)
    for snr, estimates in by_snr.items():
        table.add_row(
            f"{snr:.2f}",
            f"{estimates[0].expected:.6g}",
            f"{np.mean([e.ratio_average for e in estimates]):.5f}",
            f"{estimates[0].expected_err:.6g}",
            f"{np.mean([e.ratio_stddev for e in estimates]):.5f}",
        )
    console.print(table)

    if output:
        output.write_text(json.dumps(ratio_table(rows), indent=2))
        typer.echo(f"Rows written to {output}")
    log.info("Sweep completed", extra={"capacity": len(cache)})
