"""Distribution evaluation CLI wiring."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import numpy as np
import typer

from statistical_engine.cli.common import emit, resolve_config
from statistical_engine.cli.validation import parse_params
from statistical_engine.distributions.plot_grid import PlotGrid
from statistical_engine.handlers import handle
from statistical_engine.utils.logging import get_logger

log = get_logger(__name__, component="cli_distribution")


def distribution(
    kind: str = typer.Argument(..., help="normal, exponential, uniform, binomial, poisson, chisquare or t"),
    param: Optional[List[str]] = typer.Option(
        None, "--param", "-p", help="Distribution parameter as name=value (repeatable, e.g. -p mean=0 -p stdDev=1)"
    ),
    x: float = typer.Option(0.0, "--x", help="Evaluation point"),
    cumulative: bool = typer.Option(False, "--cumulative/--density", help="Return P(X <= x) instead of the density"),
    start: Optional[float] = typer.Option(None, help="Plot grid start (defaults to the family range)"),
    end: Optional[float] = typer.Option(None, help="Plot grid end (defaults to the family range)"),
    points: Optional[int] = typer.Option(None, "--points", help="Number of grid intervals"),
    csv: Optional[Path] = typer.Option(None, "--csv", help="Write the plot grid to this CSV file"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
) -> None:
    cfg = resolve_config(config, grid_points=points)
    payload = {
        "kind": kind,
        "parameters": parse_params(param),
        "x": x,
        "cumulative": cumulative,
        "start": start,
        "end": end,
        "numPoints": cfg.grid_points,
    }
    result = handle("distribution", payload, cfg)
    if csv is not None and "error" not in result:
        grid = PlotGrid(
            x_values=np.asarray(result["plotGrid"]["xValues"]),
            y_values=np.asarray(result["plotGrid"]["yValues"]),
        )
        grid.to_frame().to_csv(csv, index=False)
        log.info("Plot grid written", extra={"kind": result["kind"], "n": len(grid)})
    emit(result)
