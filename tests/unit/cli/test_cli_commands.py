import json

import pandas as pd
import pytest
from typer.testing import CliRunner

from statistical_engine.cli import main as cli_main
from statistical_engine.cli.main import app
from statistical_engine.exceptions import ConfigValidationError

runner = CliRunner()

SAMPLE = "10,12,11,13,14,12,11,10,13,12"


def _json(result):
    return json.loads(result.stdout)


def test_distribution_density():
    result = runner.invoke(app, ["distribution", "normal", "-p", "mean=0", "-p", "stdDev=1", "--x", "0"])
    assert result.exit_code == 0, result.stdout
    payload = _json(result)
    assert payload["probability"] == pytest.approx(0.3989423, abs=1e-7)
    assert len(payload["plotGrid"]["xValues"]) == 201


def test_distribution_cumulative_writes_csv(tmp_path):
    out = tmp_path / "grid.csv"
    result = runner.invoke(
        app,
        ["distribution", "exponential", "-p", "lambda=2", "--x", "1", "--cumulative", "--points", "10", "--csv", str(out)],
    )
    assert result.exit_code == 0, result.stdout
    assert _json(result)["cumulative"] is True
    frame = pd.read_csv(out)
    assert list(frame.columns) == ["x", "density"]
    assert len(frame) == 11


def test_distribution_error_exits_nonzero():
    result = runner.invoke(app, ["distribution", "normal", "-p", "mean=0", "-p", "stdDev=-1"])
    assert result.exit_code == 1
    assert "stdDev" in _json(result)["error"]


def test_malformed_param_is_a_config_error():
    result = runner.invoke(app, ["distribution", "normal", "-p", "mean"])
    assert result.exit_code != 0
    assert isinstance(result.exception, ConfigValidationError)


def test_ttest_one():
    result = runner.invoke(app, ["ttest-one", "--data", SAMPLE, "--mu", "11.5"])
    assert result.exit_code == 0, result.stdout
    payload = _json(result)
    assert payload["degreesOfFreedom"] == 9
    assert payload["reject"] is False


def test_ttest_two_with_alternative():
    result = runner.invoke(
        app, ["ttest-two", "--data1", "1 2 3 4", "--data2", "2 3 4 5", "--alternative", "less", "--alpha", "0.1"]
    )
    assert result.exit_code == 0, result.stdout
    payload = _json(result)
    assert payload["alternative"] == "less"
    assert payload["alpha"] == 0.1


def test_regress_writes_csv(tmp_path):
    out = tmp_path / "fit.csv"
    result = runner.invoke(app, ["regress", "--x", "1,2,3,4", "--y", "3,5,7,9", "--csv", str(out)])
    assert result.exit_code == 0, result.stdout
    assert _json(result)["slope"] == pytest.approx(2.0)
    frame = pd.read_csv(out)
    assert list(frame.columns) == ["x", "y", "predicted", "residual"]


def test_regress_length_mismatch():
    result = runner.invoke(app, ["regress", "--x", "1,2,3", "--y", "1,2"])
    assert result.exit_code == 1
    assert "same length" in _json(result)["error"]


def test_generate_is_reproducible_with_seed():
    args = ["generate", "normal", "--size", "5", "-p", "mean=0", "-p", "stdDev=1", "--seed", "3"]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args)
    assert first.exit_code == 0, first.stdout
    assert _json(first)["data"] == _json(second)["data"]
    assert _json(first)["size"] == 5


def test_config_file_supplies_alpha(tmp_path):
    cfg = tmp_path / "engine.yaml"
    cfg.write_text("alpha: 0.5\n")
    result = runner.invoke(app, ["ttest-one", "--data", SAMPLE, "--mu", "11.5", "--config", str(cfg)])
    assert result.exit_code == 0, result.stdout
    payload = _json(result)
    assert payload["alpha"] == 0.5
    assert payload["reject"] is True


def test_environment_sets_grid_points(monkeypatch):
    monkeypatch.setenv("STATENGINE_GRID_POINTS", "10")
    result = runner.invoke(app, ["distribution", "t", "-p", "df=4"])
    assert result.exit_code == 0, result.stdout
    assert len(_json(result)["plotGrid"]["xValues"]) == 11


@pytest.mark.parametrize(
    "exc,code",
    [
        (ConfigValidationError("bad"), 1),
        (KeyboardInterrupt(), 130),
        (RuntimeError("boom"), 255),
    ],
)
def test_main_maps_exceptions_to_exit_codes(monkeypatch, exc, code):
    def _raise():
        raise exc

    monkeypatch.setattr(cli_main, "configure_logging", lambda **_kwargs: None)
    monkeypatch.setattr(cli_main, "app", _raise)
    with pytest.raises(SystemExit) as info:
        cli_main.main()
    assert info.value.code == code


def test_regress_fits_once_for_csv(tmp_path, monkeypatch):
    from statistical_engine import handlers

    calls = []
    original = handlers.fit_linear

    def _counting(x_data, y_data):
        calls.append(len(x_data))
        return original(x_data, y_data)

    monkeypatch.setattr(handlers, "fit_linear", _counting)
    out = tmp_path / "fit.csv"
    result = runner.invoke(app, ["regress", "--x", "1,2,3,4", "--y", "2,4,5,9", "--csv", str(out)])
    assert result.exit_code == 0, result.stdout
    assert calls == [4]
    frame = pd.read_csv(out)
    assert frame["predicted"].tolist() == pytest.approx(_json(result)["predictions"])
    assert frame["residual"].tolist() == pytest.approx(_json(result)["residuals"])


def test_null_config_value_is_a_config_error(tmp_path):
    cfg = tmp_path / "engine.yaml"
    cfg.write_text("alpha: null\n")
    result = runner.invoke(app, ["ttest-one", "--data", SAMPLE, "--mu", "11.5", "--config", str(cfg)])
    assert result.exit_code == 1
    assert isinstance(result.exception, ConfigValidationError)
