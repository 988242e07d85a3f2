import json
import sys

import pytest

pytest.importorskip("typer")
from typer.testing import CliRunner

import circular_sampling.cli.commands.sumcheck as sumcheck_module
import circular_sampling.cli.main as cli_main
import circular_sampling.sampling.cache as cache_module
from circular_sampling.cli.main import app
from circular_sampling.constants import N_SAMPLES
from circular_sampling.exceptions import (
    ConfigValidationError,
    ExportError,
    MomentDomainError,
    ValidationNotConvergedError,
)


def test_sumcheck_reports_delta():
    runner = CliRunner()
    res = runner.invoke(app, ["sumcheck", "--length", "1000", "--value", "1e-8"])
    assert res.exit_code == 0
    assert "naiveSum[1 + 1e-08 x 1000]" in res.stdout
    assert "kahanSum[1 + 1e-08 x 1000]" in res.stdout
    assert "delta:" in res.stdout


def test_prepare_prints_cache_table():
    runner = CliRunner()
    res = runner.invoke(app, ["prepare", "--capacity", "2", "--seed", "3"])
    assert res.exit_code == 0, res.output
    assert "Distribution cache (2 entries)" in res.stdout
    assert "Moment spread" in res.stdout


def test_dump_writes_files(tmp_path):
    runner = CliRunner()
    res = runner.invoke(app, ["dump", "--target", str(tmp_path), "--capacity", "1", "--seed", "4"])
    assert res.exit_code == 0, res.output
    assert (tmp_path / f"dist_{N_SAMPLES}_0.txt").exists()


def test_sweep_writes_rows(tmp_path):
    out = tmp_path / "rows.json"
    runner = CliRunner()
    res = runner.invoke(
        app,
        ["sweep", "--capacity", "2", "--seed", "5", "--start", "3", "--stop", "1.75", "--output", str(out)],
    )
    assert res.exit_code == 0, res.output
    rows = json.loads(out.read_text())
    assert rows[0]["snr"] == 3.0
    assert len(rows) % 2 == 0


def test_sweep_rejects_unknown_quantity():
    runner = CliRunner()
    res = runner.invoke(app, ["sweep", "--quantity", "phase", "--capacity", "1"])
    assert res.exit_code != 0
    assert isinstance(res.exception, ConfigValidationError)


def _run_main(monkeypatch, *argv):
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(sys, "argv", ["circular-sampling", *argv])
    with pytest.raises(SystemExit) as excinfo:
        cli_main.main()
    return excinfo.value.code


def test_main_exits_zero_on_success(monkeypatch):
    assert _run_main(monkeypatch, "sumcheck", "--length", "10", "--value", "1.0") == 0


def test_main_maps_config_errors_to_1(monkeypatch):
    assert _run_main(monkeypatch, "sweep", "--quantity", "phase", "--capacity", "1") == 1


def test_main_maps_non_convergence_to_3(monkeypatch):
    def never_converges(random_source, *, max_iterations):
        raise ValidationNotConvergedError("no acceptable candidate", iterations=max_iterations)

    monkeypatch.setattr(cache_module, "create_distribution", never_converges)
    assert _run_main(monkeypatch, "prepare", "--capacity", "1", "--max-iterations", "5") == 3


def test_main_maps_export_errors_to_4(monkeypatch, tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("occupied")
    assert _run_main(monkeypatch, "dump", "--target", str(blocker), "--capacity", "1", "--seed", "4") == 4


@pytest.mark.parametrize(
    "error, code",
    [
        (ConfigValidationError("bad"), 1),
        (MomentDomainError("degenerate"), 2),
        (ValidationNotConvergedError("stuck", iterations=3), 3),
        (ExportError("disk full"), 4),
        (RuntimeError("boom"), 255),
    ],
)
def test_main_exit_code_mapping(monkeypatch, error, code):
    def failing_sum(values):
        raise error

    monkeypatch.setattr(sumcheck_module, "kahan_sum", failing_sum)
    assert _run_main(monkeypatch, "sumcheck", "--length", "10", "--value", "1.0") == code
