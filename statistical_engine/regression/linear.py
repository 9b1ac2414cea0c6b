"""Simple linear regression (ordinary least squares) with fit diagnostics."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from statistical_engine.exceptions import (
    DegenerateInputError,
    InsufficientDataError,
    InvalidParameterError,
    LengthMismatchError,
)
from statistical_engine.utils.logging import get_logger
from statistical_engine.utils.series import as_series

log = get_logger(__name__, component="regression")


@dataclass(frozen=True)
class RegressionResult:
    slope: float
    intercept: float
    r_squared: float
    correlation: float
    predictions: np.ndarray
    residuals: np.ndarray
    x_data: np.ndarray
    y_data: np.ndarray

    @property
    def n(self) -> int:
        return int(self.x_data.shape[0])

    @property
    def equation(self) -> str:
        return f"y = {self.slope:.4f}x + {self.intercept:.4f}"

    def predict(self, x) -> np.ndarray:
        return self.slope * np.asarray(x, dtype=float) + self.intercept

    def to_dict(self) -> dict:
        return {
            "slope": self.slope,
            "intercept": self.intercept,
            "rSquared": self.r_squared,
            "correlation": self.correlation,
            "equation": self.equation,
            "n": self.n,
            "predictions": self.predictions.tolist(),
            "residuals": self.residuals.tolist(),
        }

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "x": self.x_data,
                "y": self.y_data,
                "predicted": self.predictions,
                "residual": self.residuals,
            }
        )


def fit_linear(x_data: Sequence[float], y_data: Sequence[float]) -> RegressionResult:
    """Fit ``y = slope * x + intercept`` by ordinary least squares.

    Args:
        x_data: Independent variable, at least two finite values.
        y_data: Dependent variable, same length as ``x_data``.

    Returns:
        RegressionResult with slope, intercept, R², Pearson correlation and the
        per-point predictions and residuals.

    Raises:
        LengthMismatchError: If the sequences differ in length.
        InsufficientDataError: If fewer than two points are supplied.
        DegenerateInputError: If all x values are equal (slope undefined) or all
            y values are equal (total sum of squares is zero, R² undefined).
    """
    try:
        nx, ny = len(x_data), len(y_data)
    except TypeError:
        raise InvalidParameterError("xData and yData must be sequences of numbers") from None
    if nx != ny:
        raise LengthMismatchError(f"xData and yData must have the same length, got {nx} and {ny}")
    x = as_series("xData", x_data)
    y = as_series("yData", y_data)
    n = int(x.shape[0])
    if n < 2:
        raise InsufficientDataError(f"Regression needs at least 2 points, got {n}")

    xbar = float(x.mean())
    ybar = float(y.mean())
    dx = x - xbar
    dy = y - ybar
    ssxx = float(np.dot(dx, dx))
    ssyy = float(np.dot(dy, dy))
    ssxy = float(np.dot(dx, dy))
    if ssxx == 0.0:
        raise DegenerateInputError("All x values are identical; slope is undefined")
    if ssyy == 0.0:
        raise DegenerateInputError("All y values are identical; R-squared is undefined")

    slope = ssxy / ssxx
    intercept = ybar - slope * xbar
    predictions = slope * x + intercept
    residuals = y - predictions

    sse = float(np.dot(residuals, residuals))
    r_squared = 1.0 - sse / ssyy
    correlation = max(-1.0, min(1.0, ssxy / math.sqrt(ssxx * ssyy)))
    log.debug("Linear regression fitted", extra={"n": n})

    return RegressionResult(
        slope=slope,
        intercept=intercept,
        r_squared=r_squared,
        correlation=correlation,
        predictions=predictions,
        residuals=residuals,
        x_data=x,
        y_data=y,
    )


__all__ = ["RegressionResult", "fit_linear"]
