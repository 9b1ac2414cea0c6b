"""Hypothesis test CLI wiring."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from statistical_engine.cli.common import emit, resolve_config
from statistical_engine.cli.validation import parse_float_list
from statistical_engine.handlers import handle


def ttest_one(
    data: str = typer.Option(..., "--data", help="Sample values, comma or space separated"),
    mu: float = typer.Option(..., "--mu", help="Hypothesised population mean"),
    alpha: Optional[float] = typer.Option(None, "--alpha", help="Significance level (default from config)"),
    alternative: str = typer.Option("two-sided", "--alternative", help="two-sided, greater or less"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
) -> None:
    cfg = resolve_config(config, alpha=alpha)
    payload = {
        "data": parse_float_list("data", data),
        "mu": mu,
        "alpha": cfg.alpha,
        "alternative": alternative,
    }
    emit(handle("ttest-one", payload, cfg))


def ttest_two(
    data1: str = typer.Option(..., "--data1", help="First sample, comma or space separated"),
    data2: str = typer.Option(..., "--data2", help="Second sample, comma or space separated"),
    alpha: Optional[float] = typer.Option(None, "--alpha", help="Significance level (default from config)"),
    alternative: str = typer.Option("two-sided", "--alternative", help="two-sided, greater or less"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
) -> None:
    cfg = resolve_config(config, alpha=alpha)
    payload = {
        "data1": parse_float_list("data1", data1),
        "data2": parse_float_list("data2", data2),
        "alpha": cfg.alpha,
        "alternative": alternative,
    }
    emit(handle("ttest-two", payload, cfg))
