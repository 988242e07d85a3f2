"""Sumcheck CLI command: naive vs compensated summation."""

from __future__ import annotations

from typing import List, Optional

import numpy as np
import typer

from circular_sampling.cli.validation import require_positive
from circular_sampling.stats.summation import kahan_sum, naive_sum


def sumcheck(
    length: int = typer.Option(10 * 1024 * 1024, "--length", help="Array length"),
    value: Optional[List[float]] = typer.Option(None, "--value", help="Fill value (repeatable)"),
) -> None:
    """Sum ``1 + value x (length - 1)`` naively and with Kahan compensation."""
    require_positive("length", length)
    values = np.empty(length, dtype=np.float64)
    for val in value or [1.0e-8, 1.0, 1.0e8]:
        values.fill(val)
        values[0] = 1.0
        naive = naive_sum(values)
        kahan = kahan_sum(values)
        typer.echo(f"naiveSum[1 + {val} x {length}]: {naive!r}")
        typer.echo(f"kahanSum[1 + {val} x {length}]: {kahan!r}")
        typer.echo(f"delta: {naive - kahan!r}")
