"""Random dataset CLI wiring."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from statistical_engine.cli.common import emit, resolve_config
from statistical_engine.cli.validation import parse_params
from statistical_engine.handlers import handle


def generate(
    kind: str = typer.Argument(..., help="normal, exponential or uniform"),
    size: int = typer.Option(100, "--size", help="Number of values to draw"),
    param: Optional[List[str]] = typer.Option(
        None, "--param", "-p", help="Distribution parameter as name=value (repeatable)"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for reproducibility"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
) -> None:
    cfg = resolve_config(config, seed=seed)
    payload = {"kind": kind, "size": size, "parameters": parse_params(param), "seed": cfg.seed}
    emit(handle("dataset", payload, cfg))
