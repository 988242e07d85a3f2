import json

import pytest

from circular_sampling.cli.validation import resolve_sampling_config
from circular_sampling.config.loader import load_config_with_precedence
from circular_sampling.exceptions import ConfigValidationError

DEFAULTS = {"initial_capacity": 15, "seed": None, "max_iterations": 1000}
CASTERS = {"initial_capacity": int, "seed": int, "max_iterations": int}


def test_precedence_cli_over_env_over_file(tmp_path, monkeypatch):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"initial_capacity": 4, "seed": 1, "max_iterations": 50}))
    monkeypatch.setenv("TEST_SEED", "2")
    monkeypatch.setenv("TEST_MAX_ITERATIONS", "none")

    cfg = load_config_with_precedence(
        config_path=path,
        env_prefix="TEST_",
        cli_values={"initial_capacity": 9, "seed": None},
        defaults=DEFAULTS,
        casters=CASTERS,
    )
    assert cfg == {"initial_capacity": 9, "seed": 2, "max_iterations": None}


def test_yaml_file_supported(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("initial_capacity: 6\nseed: 42\n")
    cfg = load_config_with_precedence(path, "TEST_", {}, DEFAULTS, CASTERS)
    assert cfg["initial_capacity"] == 6
    assert cfg["seed"] == 42
    assert cfg["max_iterations"] == 1000


@pytest.mark.parametrize(
    "name, content",
    [
        ("cfg.json", "{not json"),
        ("cfg.json", json.dumps({"unknown": 1})),
        ("cfg.json", json.dumps([1, 2])),
        ("cfg.toml", "x = 1"),
    ],
)
def test_bad_files_rejected(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)
    with pytest.raises(ConfigValidationError):
        load_config_with_precedence(path, "TEST_", {}, DEFAULTS, CASTERS)


def test_missing_file_and_bad_cast(tmp_path, monkeypatch):
    with pytest.raises(ConfigValidationError):
        load_config_with_precedence(tmp_path / "absent.json", "TEST_", {}, DEFAULTS, CASTERS)
    monkeypatch.setenv("TEST_SEED", "abc")
    with pytest.raises(ConfigValidationError):
        load_config_with_precedence(None, "TEST_", {}, DEFAULTS, CASTERS)


def test_resolve_sampling_config_reads_environment(monkeypatch):
    monkeypatch.setenv("CIRCULAR_SAMPLING_INITIAL_CAPACITY", "2")
    monkeypatch.setenv("CIRCULAR_SAMPLING_NAN_POLICY", "propagate")
    cfg = resolve_sampling_config(None, {"seed": 5})
    assert cfg.initial_capacity == 2
    assert cfg.nan_policy == "propagate"
    assert cfg.seed == 5
