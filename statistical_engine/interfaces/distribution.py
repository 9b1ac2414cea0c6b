"""Distribution interface shared by all probability families."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Dict, Mapping, Optional, Tuple

import numpy as np
from numpy.random import Generator

from statistical_engine.exceptions import (
    DomainError,
    UnsupportedDistributionError,
    UnsupportedOperationError,
)
from statistical_engine.utils.rounding import round_half_away

_ALIASES = {
    "gaussian": "normal",
    "chi2": "chisquare",
    "chi-square": "chisquare",
    "chi_square": "chisquare",
    "student_t": "t",
    "student-t": "t",
    "studentt": "t",
}


class DistributionKind(str, Enum):
    NORMAL = "normal"
    EXPONENTIAL = "exponential"
    UNIFORM = "uniform"
    BINOMIAL = "binomial"
    POISSON = "poisson"
    CHISQUARE = "chisquare"
    T = "t"

    @classmethod
    def parse(cls, value: "DistributionKind | str") -> "DistributionKind":
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        name = _ALIASES.get(name, name)
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedDistributionError(f"Unknown distribution: {value}") from None


@dataclass(frozen=True)
class DistributionSpec:
    """A distribution kind with its read-only parameter mapping.

    Construction validates the parameters against the family, so a spec that
    exists is always evaluable.
    """

    kind: DistributionKind
    parameters: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        from statistical_engine.distributions.factory import REGISTRY

        kind = DistributionKind.parse(self.kind)
        REGISTRY[kind].from_params(self.parameters or {})
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters or {})))


class ProbabilityDistribution(ABC):
    """Base class for a parameterised distribution family.

    Subclasses validate their parameters in ``from_params`` and expose a frozen
    scipy distribution; evaluation, rounding and quantile checks live here.
    Sampling is opt-in: families without a sampler raise
    ``UnsupportedOperationError``.
    """

    kind: ClassVar[DistributionKind]
    parameter_names: ClassVar[Tuple[str, ...]]
    discrete: ClassVar[bool] = False

    @classmethod
    @abstractmethod
    def from_params(cls, params: Mapping[str, object]) -> "ProbabilityDistribution":
        """Validate a raw parameter mapping and build the distribution."""

    @abstractmethod
    def frozen(self):
        """Return the equivalent frozen ``scipy.stats`` distribution."""

    @abstractmethod
    def params(self) -> Dict[str, float]:
        """Validated parameters keyed by wire name."""

    @abstractmethod
    def mean(self) -> Optional[float]:
        """Closed-form mean, or None where undefined."""

    @abstractmethod
    def variance(self) -> Optional[float]:
        """Closed-form variance, or None where undefined."""

    @abstractmethod
    def default_range(self) -> Tuple[float, float]:
        """Plotting range used when the caller supplies none."""

    def density(self, x):
        """pdf, or pmf at the nearest integer (half away from zero) for discrete kinds."""
        if self.discrete:
            values = self.frozen().pmf(round_half_away(x))
        else:
            values = self.frozen().pdf(x)
        return _as_output(values)

    def cumulative(self, x):
        return _as_output(self.frozen().cdf(x))

    def inverse_cumulative(self, q: float) -> float:
        if not 0.0 < q < 1.0:
            raise DomainError(f"Quantile probability must lie in (0, 1), got {q}")
        return float(self.frozen().ppf(q))

    def sample_many(self, rng: Generator, size: int) -> np.ndarray:
        raise UnsupportedOperationError(f"Sampling is not supported for the {self.kind.value} distribution")

    def sample(self, rng: Generator) -> float:
        return float(self.sample_many(rng, 1)[0])


def _as_output(values):
    arr = np.asarray(values, dtype=float)
    if arr.ndim == 0:
        return float(arr)
    return arr


__all__ = ["DistributionKind", "DistributionSpec", "ProbabilityDistribution"]
