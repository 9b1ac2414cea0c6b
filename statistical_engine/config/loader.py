"""Configuration loading with CLI > ENV > file > defaults precedence."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from statistical_engine.exceptions import ConfigValidationError
from statistical_engine.utils.logging import get_logger

log = get_logger(__name__, component="config")

Caster = Callable[[Any], Any]


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        content = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"Invalid YAML in {path}: {exc}") from exc
    return content or {}


def load_config_file(path: Path | str) -> Dict[str, Any]:
    """Read a YAML or JSON mapping from ``path``."""
    path = Path(path)
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    suffix = path.suffix.lower()
    if suffix == ".json":
        try:
            content = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigValidationError(f"Invalid JSON in {path}: {exc}") from exc
    elif suffix in {".yml", ".yaml"}:
        content = _load_yaml(path)
    else:
        raise ConfigValidationError("Config file must be JSON or YAML")
    if not isinstance(content, dict):
        raise ConfigValidationError(f"Config file {path} must contain a mapping")
    return content


def _cast(key: str, value: Any, casters: Mapping[str, Caster], source: str) -> Any:
    caster = casters.get(key)
    if caster is None or value is None:
        return value
    try:
        return caster(value)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Invalid value for {key} from {source}: {value!r}") from exc


def load_config_with_precedence(
    *,
    config_path: Optional[Path | str],
    env_prefix: str,
    cli_values: Mapping[str, Any],
    defaults: Mapping[str, Any],
    casters: Optional[Mapping[str, Caster]] = None,
) -> Dict[str, Any]:
    """Merge configuration sources; later sources win.

    Only keys present in ``defaults`` are read from the file and environment.
    CLI values of ``None`` are treated as "not supplied".
    """
    casters = casters or {}
    merged: Dict[str, Any] = dict(defaults)

    if config_path:
        file_values = load_config_file(config_path)
        unknown = sorted(set(file_values) - set(defaults))
        if unknown:
            log.warning("Ignoring unknown config keys", extra={"error": ", ".join(unknown)})
        for key in defaults:
            if key in file_values:
                merged[key] = _cast(key, file_values[key], casters, "config file")

    for key in defaults:
        env_value = os.environ.get(f"{env_prefix}{key.upper()}")
        if env_value is not None and env_value != "":
            merged[key] = _cast(key, env_value, casters, "environment")

    for key, value in cli_values.items():
        if value is not None:
            merged[key] = _cast(key, value, casters, "command line")

    return merged


__all__ = ["load_config_file", "load_config_with_precedence"]
