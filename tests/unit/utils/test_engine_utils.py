import json
import logging

import numpy as np
import pytest

from statistical_engine.exceptions import InvalidParameterError
from statistical_engine.utils.logging import JSONFormatter, get_logger
from statistical_engine.utils.profiling import track_time
from statistical_engine.utils.rng import make_rng
from statistical_engine.utils.rounding import round_half_away
from statistical_engine.utils.series import as_series


def test_json_formatter_includes_context_fields():
    record = logging.LogRecord("engine", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    record.component = "handlers"
    record.operation = "regression"
    record.n = 12
    payload = json.loads(JSONFormatter().format(record))
    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["component"] == "handlers"
    assert payload["operation"] == "regression"
    assert payload["n"] == 12
    assert payload["timestamp"].endswith("Z")


def test_get_logger_sets_default_component(caplog):
    logger = get_logger("statistical_engine.tests.component", component="unit")
    with caplog.at_level(logging.INFO, logger="statistical_engine.tests.component"):
        logger.info("ping")
    assert caplog.records[-1].component == "unit"


def test_track_time_logs_duration(caplog):
    with caplog.at_level(logging.DEBUG, logger="statistical_engine.utils.profiling"):
        with track_time("distribution"):
            pass
    record = caplog.records[-1]
    assert record.levelno == logging.DEBUG
    assert record.operation == "distribution"
    assert record.duration_ms >= 0


def test_track_time_warns_over_budget(caplog):
    with caplog.at_level(logging.DEBUG, logger="statistical_engine.utils.profiling"):
        with track_time("regression", warn_ms=0):
            pass
    assert caplog.records[-1].levelno == logging.WARNING


@pytest.mark.parametrize(
    "value,expected",
    [(2.5, 3.0), (-2.5, -3.0), (3.5, 4.0), (2.4, 2.0), (0.5, 1.0), (-0.4, -0.0), (7.0, 7.0)],
)
def test_round_half_away(value, expected):
    assert round_half_away(value) == expected


def test_round_half_away_on_arrays():
    np.testing.assert_array_equal(round_half_away([0.5, 1.5, 2.5]), [1.0, 2.0, 3.0])


def test_as_series():
    arr = as_series("data", [1, 2, 3])
    assert arr.dtype == float
    for bad in (None, [[1, 2], [3, 4]], [1, float("inf")], ["x"]):
        with pytest.raises(InvalidParameterError):
            as_series("data", bad)


def test_make_rng_seeded():
    assert make_rng(4).random() == make_rng(4).random()
