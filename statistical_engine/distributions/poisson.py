"""Poisson distribution model."""

from __future__ import annotations

from typing import Mapping

from scipy.stats import poisson

from statistical_engine.distributions.validation import read_parameters, require_greater
from statistical_engine.interfaces.distribution import DistributionKind, ProbabilityDistribution


class PoissonDistribution(ProbabilityDistribution):
    kind = DistributionKind.POISSON
    parameter_names = ("lambda",)
    discrete = True

    def __init__(self, rate: float) -> None:
        require_greater("lambda", rate, 0.0)
        self.rate = float(rate)

    @classmethod
    def from_params(cls, params: Mapping[str, object]) -> "PoissonDistribution":
        values = read_parameters(cls.kind.value, params, cls.parameter_names)
        return cls(values["lambda"])

    def frozen(self):
        return poisson(self.rate)

    def params(self) -> dict[str, float]:
        return {"lambda": self.rate}

    def mean(self) -> float:
        return self.rate

    def variance(self) -> float:
        return self.rate

    def default_range(self) -> tuple[float, float]:
        return 0.0, 3.0 * self.rate
