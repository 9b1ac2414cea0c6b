"""Statistical computation engine.

Distribution evaluation and plot grids, t-tests, simple linear regression and
random dataset generation as pure, single-shot computations.
"""

from statistical_engine.datasets import GeneratedDataset, generate_dataset
from statistical_engine.distributions import (
    PlotGrid,
    cumulative,
    density,
    generate_grid,
    get_distribution,
    inverse_cumulative,
    iter_grid,
    mean,
    sample,
    variance,
)
from statistical_engine.hypothesis import one_sample_ttest, two_sample_ttest
from statistical_engine.interfaces import DistributionKind, DistributionSpec
from statistical_engine.regression import RegressionResult, fit_linear
from statistical_engine.utils.rng import make_rng

__version__ = "0.1.0"

__all__ = [
    "DistributionKind",
    "DistributionSpec",
    "GeneratedDataset",
    "PlotGrid",
    "RegressionResult",
    "cumulative",
    "density",
    "fit_linear",
    "generate_dataset",
    "generate_grid",
    "get_distribution",
    "inverse_cumulative",
    "iter_grid",
    "make_rng",
    "mean",
    "one_sample_ttest",
    "sample",
    "two_sample_ttest",
    "variance",
]
