"""Binomial distribution model."""

from __future__ import annotations

from typing import Mapping

from scipy.stats import binom

from statistical_engine.distributions.validation import (
    read_parameters,
    require_at_least,
    require_between,
    require_integer,
)
from statistical_engine.interfaces.distribution import DistributionKind, ProbabilityDistribution


class BinomialDistribution(ProbabilityDistribution):
    kind = DistributionKind.BINOMIAL
    parameter_names = ("n", "p")
    discrete = True

    def __init__(self, n: float, p: float) -> None:
        require_at_least("n", n, 0.0)
        self.n = require_integer("n", n)
        require_between("p", p, 0.0, 1.0)
        self.p = float(p)

    @classmethod
    def from_params(cls, params: Mapping[str, object]) -> "BinomialDistribution":
        values = read_parameters(cls.kind.value, params, cls.parameter_names)
        return cls(values["n"], values["p"])

    def frozen(self):
        return binom(self.n, self.p)

    def params(self) -> dict[str, float]:
        return {"n": self.n, "p": self.p}

    def mean(self) -> float:
        return self.n * self.p

    def variance(self) -> float:
        return self.n * self.p * (1.0 - self.p)

    def default_range(self) -> tuple[float, float]:
        return 0.0, float(self.n)
