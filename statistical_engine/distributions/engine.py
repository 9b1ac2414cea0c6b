"""Stateless evaluation functions over (kind, parameters) pairs.

Each call validates the parameters, builds the family and evaluates it; nothing
is cached between calls. ``kind`` accepts a ``DistributionKind`` or its name.
"""

from __future__ import annotations

import math
from typing import Mapping, Optional

import numpy as np
from numpy.random import Generator

from statistical_engine.distributions.factory import get_distribution
from statistical_engine.exceptions import InvalidParameterError
from statistical_engine.interfaces.distribution import DistributionKind
from statistical_engine.utils.rng import make_rng

Params = Mapping[str, object]


def _point(name: str, value: object, allow_nan: bool = False) -> float:
    try:
        x = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{name} must be numeric, got {value!r}") from None
    if math.isnan(x) and not allow_nan:
        raise InvalidParameterError(f"{name} must not be NaN")
    return x


def density(kind: DistributionKind | str, params: Params, x: float) -> float:
    """pdf (continuous) or pmf (discrete, x rounded half away from zero) at ``x``."""
    return get_distribution(kind, params).density(_point("x", x))


def cumulative(kind: DistributionKind | str, params: Params, x: float) -> float:
    """P(X <= x)."""
    return get_distribution(kind, params).cumulative(_point("x", x))


def inverse_cumulative(kind: DistributionKind | str, params: Params, q: float) -> float:
    """Quantile function; raises ``DomainError`` unless 0 < q < 1."""
    # NaN falls through to the (0, 1) check and fails with DomainError
    return get_distribution(kind, params).inverse_cumulative(_point("q", q, allow_nan=True))


def sample(kind: DistributionKind | str, params: Params, rng: Optional[Generator] = None) -> float:
    """Draw one variate from ``rng`` (a fresh unseeded generator when omitted)."""
    return get_distribution(kind, params).sample(rng if rng is not None else make_rng())


def sample_many(
    kind: DistributionKind | str,
    params: Params,
    size: int,
    rng: Optional[Generator] = None,
) -> np.ndarray:
    return get_distribution(kind, params).sample_many(rng if rng is not None else make_rng(), size)


def mean(kind: DistributionKind | str, params: Params) -> Optional[float]:
    return get_distribution(kind, params).mean()


def variance(kind: DistributionKind | str, params: Params) -> Optional[float]:
    return get_distribution(kind, params).variance()


def default_range(kind: DistributionKind | str, params: Params) -> tuple[float, float]:
    return get_distribution(kind, params).default_range()


__all__ = [
    "cumulative",
    "default_range",
    "density",
    "inverse_cumulative",
    "mean",
    "sample",
    "sample_many",
    "variance",
]
