import json
import logging

import pytest

from statistical_engine.config import load_config_file, load_config_with_precedence
from statistical_engine.exceptions import ConfigValidationError
from statistical_engine.schema.engine_config import EngineConfig, load_engine_config


def test_defaults():
    cfg = EngineConfig()
    assert cfg.grid_points == 200
    assert cfg.alpha == 0.05
    assert cfg.seed is None
    assert cfg.log_level == "INFO"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"grid_points": 0},
        {"grid_points": 500, "max_grid_points": 100},
        {"alpha": 1.0},
        {"alpha": 0.0},
        {"seed": -1},
        {"max_dataset_size": 0},
        {"log_level": "chatty"},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ConfigValidationError):
        EngineConfig(**kwargs)


def test_log_level_is_normalised():
    assert EngineConfig(log_level="debug").log_level == "DEBUG"


def test_precedence_cli_over_env_over_file(tmp_path, monkeypatch):
    path = tmp_path / "engine.yaml"
    path.write_text("grid_points: 50\nalpha: 0.1\nseed: 3\n")
    monkeypatch.setenv("STATENGINE_ALPHA", "0.2")
    monkeypatch.setenv("STATENGINE_SEED", "4")
    cfg = load_engine_config(path, cli_values={"seed": 5, "alpha": None})
    assert cfg.grid_points == 50
    assert cfg.alpha == 0.2
    assert cfg.seed == 5


def test_json_config_file(tmp_path):
    path = tmp_path / "engine.json"
    path.write_text(json.dumps({"max_dataset_size": 10, "log_level": "warning"}))
    cfg = load_engine_config(path)
    assert cfg.max_dataset_size == 10
    assert cfg.log_level == "WARNING"


def test_unknown_file_keys_are_ignored_with_warning(tmp_path, caplog):
    path = tmp_path / "engine.yaml"
    path.write_text("grid_points: 20\ncolour: blue\n")
    with caplog.at_level(logging.WARNING):
        cfg = load_engine_config(path)
    assert cfg.grid_points == 20
    assert any("unknown config keys" in r.getMessage() for r in caplog.records)


def test_bad_env_value(monkeypatch):
    monkeypatch.setenv("STATENGINE_GRID_POINTS", "lots")
    with pytest.raises(ConfigValidationError, match="grid_points"):
        load_engine_config()


def test_file_errors(tmp_path):
    with pytest.raises(ConfigValidationError, match="not found"):
        load_config_file(tmp_path / "missing.yaml")
    toml = tmp_path / "engine.toml"
    toml.write_text("alpha = 0.1")
    with pytest.raises(ConfigValidationError):
        load_config_file(toml)
    listing = tmp_path / "list.yaml"
    listing.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigValidationError, match="mapping"):
        load_config_file(listing)
    broken = tmp_path / "broken.yaml"
    broken.write_text("alpha: [0.1\n")
    with pytest.raises(ConfigValidationError, match="Invalid YAML"):
        load_config_file(broken)


def test_empty_yaml_is_empty_mapping(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config_file(path) == {}


def test_generic_precedence_without_file(monkeypatch):
    monkeypatch.setenv("APP_LIMIT", "7")
    merged = load_config_with_precedence(
        config_path=None,
        env_prefix="APP_",
        cli_values={},
        defaults={"limit": 1, "name": "x"},
        casters={"limit": int},
    )
    assert merged == {"limit": 7, "name": "x"}


@pytest.mark.parametrize("key", ["alpha", "grid_points", "log_level"])
def test_null_file_value_is_a_validation_error(tmp_path, key):
    path = tmp_path / "engine.yaml"
    path.write_text(f"{key}: null\n")
    with pytest.raises(ConfigValidationError, match=key):
        load_engine_config(path)


def test_null_seed_is_allowed(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("seed: null\n")
    assert load_engine_config(path).seed is None
