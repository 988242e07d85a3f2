"""Tab-separated dumps of cached distributions."""

from __future__ import annotations

from pathlib import Path

from circular_sampling.constants import N_SAMPLES
from circular_sampling.exceptions import ExportError
from circular_sampling.sampling.distribution import ComplexDistribution
from circular_sampling.utils.logging import get_logger

log = get_logger(__name__, component="export")

HEADER = "# RE\tIM\n"


def format_distribution(distribution: ComplexDistribution) -> str:
    lines = [HEADER]
    for re, im in zip(distribution.real.tolist(), distribution.imag.tolist()):
        lines.append(f"{re!r}\t{im!r}\n")
    return "".join(lines)


def write_distribution_tsv(distribution: ComplexDistribution, path: Path) -> Path:
    """Write one distribution as ``re<TAB>im`` lines under a ``# RE\\tIM`` header."""
    path = Path(path)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp_path.write_text(format_distribution(distribution), encoding="utf-8")
        tmp_path.replace(path)
    except OSError as exc:
        raise ExportError(f"Failed to write {path}: {exc}") from exc
    log.info(f"Writing: {path.resolve()}")
    return path


def dump_cache(cache, target_dir: Path) -> list[Path]:
    """Write every cached distribution to ``target_dir/dist_<N>_<i>.txt``."""
    target_dir = Path(target_dir)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExportError(f"Cannot create dump directory {target_dir}: {exc}") from exc
    return [
        write_distribution_tsv(distrib, target_dir / f"dist_{N_SAMPLES}_{i}.txt")
        for i, distrib in enumerate(cache.entries())
    ]


__all__ = ["HEADER", "dump_cache", "format_distribution", "write_distribution_tsv"]
