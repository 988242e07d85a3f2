import time

import pytest

from circular_sampling.utils.profiling import budget_checker, elapsed_ms, track_time


def test_budget_checker_logs_warning(caplog):
    checker = budget_checker("fill", 10.0, warn_ratio=0.5, error_ratio=0.9)
    assert checker(1.0) is None
    assert checker(6.0) == "warning"
    assert any("fill exceeded 50%" in r.message for r in caplog.records)


def test_budget_checker_logs_each_threshold_once(caplog):
    checker = budget_checker("fill", 10.0)
    assert checker(9.5) == "error"
    assert checker(9.9) == "error"
    errors = [r for r in caplog.records if r.levelname == "ERROR"]
    assert len(errors) == 1
    assert errors[0].budget_seconds == 10.0


def test_budget_checker_rejects_empty_budget():
    with pytest.raises(ValueError):
        budget_checker("fill", 0.0)


def test_track_time_logs_segment_at_debug(caplog):
    with caplog.at_level("DEBUG"):
        with track_time("segment") as start:
            time.sleep(0.01)
    assert elapsed_ms(start) >= 10.0
    timing = [r for r in caplog.records if r.message == "Segment timing"]
    assert timing and timing[-1].levelname == "DEBUG"
    assert timing[-1].segment == "segment"
    assert timing[-1].wall_seconds >= 0.01
