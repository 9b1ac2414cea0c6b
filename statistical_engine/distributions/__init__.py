"""Probability distribution families, evaluation functions and plot grids."""

from .engine import (
    cumulative,
    default_range,
    density,
    inverse_cumulative,
    mean,
    sample,
    sample_many,
    variance,
)
from .factory import REGISTRY, from_spec, get_distribution
from .plot_grid import DEFAULT_NUM_POINTS, PlotGrid, generate_grid, grid_for, iter_grid

__all__ = [
    "DEFAULT_NUM_POINTS",
    "PlotGrid",
    "REGISTRY",
    "cumulative",
    "default_range",
    "density",
    "from_spec",
    "generate_grid",
    "get_distribution",
    "grid_for",
    "inverse_cumulative",
    "iter_grid",
    "mean",
    "sample",
    "sample_many",
    "variance",
]
