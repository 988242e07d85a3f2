import json
import logging

from circular_sampling.utils.logging import JSONFormatter, get_logger


def test_json_formatter_includes_context_fields():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "done: %s", ("ok",), None)
    record.component = "generator"
    record.iterations = 12
    payload = json.loads(JSONFormatter().format(record))
    assert payload["message"] == "done: ok"
    assert payload["component"] == "generator"
    assert payload["iterations"] == 12
    assert payload["timestamp"].endswith("Z")


def test_get_logger_stamps_component_once(caplog):
    log = get_logger("circular_sampling.test_component", component="unit")
    get_logger("circular_sampling.test_component", component="unit")
    assert len(log.filters) == 1
    with caplog.at_level("INFO"):
        log.info("hello")
    assert caplog.records[-1].component == "unit"

