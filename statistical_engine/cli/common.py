"""Shared CLI plumbing: config resolution and JSON output."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from statistical_engine.schema.engine_config import EngineConfig, load_engine_config


def resolve_config(config: Optional[Path], **cli_values: Any) -> EngineConfig:
    cfg = load_engine_config(config, cli_values=cli_values)
    logging.getLogger().setLevel(cfg.log_level)
    return cfg


def emit(result: Dict[str, Any]) -> None:
    """Print ``result`` as JSON; exit with code 1 when it is an error envelope."""
    typer.echo(json.dumps(result, indent=2))
    if "error" in result:
        raise typer.Exit(code=1)


__all__ = ["emit", "resolve_config"]
