"""Profiling utilities for generation timing."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator

from circular_sampling.utils.logging import get_logger

log = get_logger(__name__, component="profiling")


@dataclass
class Timing:
    wall: float
    cpu: float


def _now() -> Timing:
    return Timing(wall=time.perf_counter(), cpu=time.process_time())


def elapsed_ms(start: Timing) -> float:
    """Wall-clock milliseconds since ``start``."""
    return 1e3 * (time.perf_counter() - start.wall)


@contextmanager
def track_time(name: str) -> Iterator[Timing]:
    """Log wall and CPU seconds spent in the block at DEBUG."""
    start = _now()
    try:
        yield start
    finally:
        end = _now()
        log.debug(
            "Segment timing",
            extra={
                "segment": name,
                "wall_seconds": round(end.wall - start.wall, 4),
                "cpu_seconds": round(end.cpu - start.cpu, 4),
            },
        )


def budget_checker(
    name: str, total_budget: float, *, warn_ratio: float = 0.5, error_ratio: float = 0.9
) -> Callable[[float], str | None]:
    """Return a check of elapsed seconds against ``total_budget``.

    The check logs once per threshold crossed and returns the level it logged
    at (``"warning"``/``"error"``) or None.
    """

    if total_budget <= 0:
        raise ValueError("total_budget must be > 0")
    fired: set[str] = set()

    def check(elapsed_seconds: float) -> str | None:
        if elapsed_seconds >= total_budget * error_ratio:
            level, ratio = "error", error_ratio
        elif elapsed_seconds >= total_budget * warn_ratio:
            level, ratio = "warning", warn_ratio
        else:
            return None
        if level not in fired:
            fired.add(level)
            getattr(log, level)(
                f"{name} exceeded {ratio:.0%} of its time budget",
                extra={
                    "segment": name,
                    "elapsed_seconds": round(elapsed_seconds, 3),
                    "budget_seconds": total_budget,
                },
            )
        return level

    return check


__all__ = ["Timing", "budget_checker", "elapsed_ms", "track_time"]
