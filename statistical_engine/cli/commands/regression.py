"""Linear regression CLI wiring."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
import typer

from statistical_engine.cli.common import emit, resolve_config
from statistical_engine.cli.validation import parse_float_list
from statistical_engine.handlers import handle
from statistical_engine.regression.linear import RegressionResult
from statistical_engine.utils.logging import get_logger

log = get_logger(__name__, component="cli_regression")


def regress(
    x: str = typer.Option(..., "--x", help="Independent values, comma or space separated"),
    y: str = typer.Option(..., "--y", help="Dependent values, comma or space separated"),
    csv: Optional[Path] = typer.Option(None, "--csv", help="Write x, y, predictions and residuals to this CSV file"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
) -> None:
    cfg = resolve_config(config)
    x_data = parse_float_list("x", x)
    y_data = parse_float_list("y", y)
    result = handle("regression", {"xData": x_data, "yData": y_data}, cfg)
    if csv is not None and "error" not in result:
        fit = RegressionResult(
            slope=result["slope"],
            intercept=result["intercept"],
            r_squared=result["rSquared"],
            correlation=result["correlation"],
            predictions=np.asarray(result["predictions"]),
            residuals=np.asarray(result["residuals"]),
            x_data=np.asarray(x_data),
            y_data=np.asarray(y_data),
        )
        fit.to_frame().to_csv(csv, index=False)
        log.info("Regression table written", extra={"n": fit.n})
    emit(result)
