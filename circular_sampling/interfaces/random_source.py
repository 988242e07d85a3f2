"""Random source interface consumed by the generator."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Supplier of independent standard-normal draws.

    ``numpy.random.Generator`` satisfies this protocol.
    """

    def standard_normal(self, size: int) -> np.ndarray:
        """Return ``size`` independent N(0, 1) draws as float64."""
        ...


__all__ = ["RandomSource"]
