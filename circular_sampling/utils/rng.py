"""Seeded random generators for independent distributions."""

from __future__ import annotations

import numpy as np
from numpy.random import PCG64, Generator, SeedSequence


def make_generator(seed: int | SeedSequence | None = None) -> Generator:
    """Return a PCG64 generator; OS entropy when ``seed`` is None."""
    return Generator(PCG64(seed)) if seed is not None else np.random.default_rng()


def spawn_generators(seed: int | None, count: int, *, offset: int = 0) -> list[Generator]:
    """Return ``count`` statistically independent generators.

    Children are derived from one root ``SeedSequence`` so that generator ``i``
    is the same whatever ``offset`` batch it is requested in.
    """

    if count < 0:
        raise ValueError("count must be non-negative")
    root = SeedSequence(seed)
    children = root.spawn(offset + count)[offset:]
    return [Generator(PCG64(child)) for child in children]


__all__ = ["make_generator", "spawn_generators"]
