"""Engine configuration schema and validation."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

from statistical_engine.config.loader import load_config_with_precedence
from statistical_engine.exceptions import ConfigValidationError

ENV_PREFIX = "STATENGINE_"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
OPTIONAL_KEYS = {"seed"}


@dataclass(slots=True)
class EngineConfig:
    grid_points: int = 200
    alpha: float = 0.05
    seed: Optional[int] = None
    max_grid_points: int = 100_000
    max_dataset_size: int = 100_000
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name not in OPTIONAL_KEYS and getattr(self, f.name) is None:
                raise ConfigValidationError(f"{f.name} must not be null")
        if self.grid_points <= 0:
            raise ConfigValidationError("grid_points must be > 0")
        if self.max_grid_points <= 0:
            raise ConfigValidationError("max_grid_points must be > 0")
        if self.grid_points > self.max_grid_points:
            raise ConfigValidationError("grid_points must not exceed max_grid_points")
        if not 0.0 < self.alpha < 1.0:
            raise ConfigValidationError("alpha must lie in (0, 1)")
        if self.seed is not None and self.seed < 0:
            raise ConfigValidationError("seed must be non-negative")
        if self.max_dataset_size <= 0:
            raise ConfigValidationError("max_dataset_size must be > 0")
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigValidationError(f"log_level must be one of {sorted(LOG_LEVELS)}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EngineConfig":
        return cls(**dict(data))

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


CASTERS = {
    "grid_points": int,
    "alpha": float,
    "seed": int,
    "max_grid_points": int,
    "max_dataset_size": int,
    "log_level": str,
}


def load_engine_config(
    config_path: Optional[Path | str] = None,
    cli_values: Optional[Mapping[str, Any]] = None,
) -> EngineConfig:
    """Resolve the engine configuration (CLI > ``STATENGINE_*`` env > file > defaults)."""
    defaults = EngineConfig().to_dict()
    merged = load_config_with_precedence(
        config_path=config_path,
        env_prefix=ENV_PREFIX,
        cli_values=dict(cli_values or {}),
        defaults=defaults,
        casters=CASTERS,
    )
    return EngineConfig.from_dict(merged)


__all__ = ["ENV_PREFIX", "EngineConfig", "load_engine_config"]
