"""Evenly spaced (x, density) grids for charting a distribution."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional, Tuple

import numpy as np
import pandas as pd

from statistical_engine.distributions.factory import get_distribution
from statistical_engine.exceptions import InvalidRangeError, ResourceLimitError
from statistical_engine.interfaces.distribution import DistributionKind, ProbabilityDistribution
from statistical_engine.utils.logging import get_logger

log = get_logger(__name__, component="plot_grid")

DEFAULT_NUM_POINTS = 200


@dataclass(frozen=True)
class PlotGrid:
    x_values: np.ndarray
    y_values: np.ndarray

    def __len__(self) -> int:
        return int(self.x_values.shape[0])

    def to_dict(self) -> dict:
        return {"xValues": self.x_values.tolist(), "yValues": self.y_values.tolist()}

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"x": self.x_values, "density": self.y_values})


def _check_points(num_points: object, max_points: Optional[int]) -> int:
    if isinstance(num_points, bool) or not isinstance(num_points, (int, np.integer)):
        raise InvalidRangeError(f"num_points must be an integer, got {num_points!r}")
    if num_points < 1:
        raise InvalidRangeError(f"num_points must be >= 1, got {num_points}")
    if max_points is not None and num_points > max_points:
        raise ResourceLimitError(f"num_points {num_points} exceeds the configured maximum of {max_points}")
    return int(num_points)


def _resolve_range(
    dist: ProbabilityDistribution, start: Optional[float], end: Optional[float]
) -> Tuple[float, float]:
    default_start, default_end = dist.default_range()
    lo = default_start if start is None else float(start)
    hi = default_end if end is None else float(end)
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise InvalidRangeError(f"Grid bounds must be finite, got [{lo}, {hi}]")
    if lo > hi:
        raise InvalidRangeError(f"Grid start {lo:g} must not exceed end {hi:g}")
    return lo, hi


def _x_values(start: float, end: float, num_points: int) -> np.ndarray:
    step = (end - start) / num_points
    return start + np.arange(num_points + 1, dtype=float) * step


def grid_for(
    dist: ProbabilityDistribution,
    start: Optional[float] = None,
    end: Optional[float] = None,
    num_points: int = DEFAULT_NUM_POINTS,
    max_points: Optional[int] = None,
) -> PlotGrid:
    """Evaluate ``dist.density`` on ``num_points + 1`` points from start to end inclusive."""
    n = _check_points(num_points, max_points)
    lo, hi = _resolve_range(dist, start, end)
    xs = _x_values(lo, hi, n)
    ys = np.atleast_1d(np.asarray(dist.density(xs), dtype=float))
    log.debug("Plot grid generated", extra={"kind": dist.kind.value, "n": n + 1})
    return PlotGrid(x_values=xs, y_values=ys)


def generate_grid(
    kind: DistributionKind | str,
    params: Mapping[str, object],
    start: Optional[float] = None,
    end: Optional[float] = None,
    num_points: int = DEFAULT_NUM_POINTS,
    max_points: Optional[int] = None,
) -> PlotGrid:
    """Build the plotting grid for ``kind``; omitted bounds use the family's default range."""
    return grid_for(get_distribution(kind, params), start, end, num_points, max_points)


def iter_grid(
    kind: DistributionKind | str,
    params: Mapping[str, object],
    start: Optional[float] = None,
    end: Optional[float] = None,
    num_points: int = DEFAULT_NUM_POINTS,
) -> Iterator[Tuple[float, float]]:
    """Lazily yield the same (x, density) pairs as ``generate_grid``.

    Validation happens eagerly; each call returns a fresh iterator.
    """
    dist = get_distribution(kind, params)
    n = _check_points(num_points, None)
    lo, hi = _resolve_range(dist, start, end)
    step = (hi - lo) / n

    def _pairs() -> Iterator[Tuple[float, float]]:
        for i in range(n + 1):
            x = lo + i * step
            yield x, float(dist.density(x))

    return _pairs()


__all__ = ["DEFAULT_NUM_POINTS", "PlotGrid", "generate_grid", "grid_for", "iter_grid"]
