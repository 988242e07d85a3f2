"""Moment and summation primitives."""

from __future__ import annotations

from .moments import MomentSummary, mean, moments
from .summation import DiffAccumulator, kahan_sum, naive_sum

__all__ = ["DiffAccumulator", "MomentSummary", "kahan_sum", "mean", "moments", "naive_sum"]
