"""Exponential distribution model."""

from __future__ import annotations

from typing import Mapping

import numpy as np
from numpy.random import Generator
from scipy.stats import expon

from statistical_engine.distributions.validation import read_parameters, require_greater
from statistical_engine.interfaces.distribution import DistributionKind, ProbabilityDistribution


class ExponentialDistribution(ProbabilityDistribution):
    kind = DistributionKind.EXPONENTIAL
    parameter_names = ("lambda",)

    def __init__(self, rate: float) -> None:
        require_greater("lambda", rate, 0.0)
        self.rate = float(rate)

    @classmethod
    def from_params(cls, params: Mapping[str, object]) -> "ExponentialDistribution":
        values = read_parameters(cls.kind.value, params, cls.parameter_names)
        return cls(values["lambda"])

    def frozen(self):
        return expon(scale=1.0 / self.rate)

    def params(self) -> dict[str, float]:
        return {"lambda": self.rate}

    def mean(self) -> float:
        return 1.0 / self.rate

    def variance(self) -> float:
        return 1.0 / (self.rate * self.rate)

    def default_range(self) -> tuple[float, float]:
        return 0.0, 5.0 / self.rate

    def sample_many(self, rng: Generator, size: int) -> np.ndarray:
        u = rng.random(size)
        return -np.log(1.0 - u) / self.rate
