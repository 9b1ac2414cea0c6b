"""Continuous uniform distribution model."""

from __future__ import annotations

from typing import Mapping

import numpy as np
from numpy.random import Generator
from scipy.stats import uniform

from statistical_engine.distributions.validation import read_parameters
from statistical_engine.exceptions import InvalidParameterError
from statistical_engine.interfaces.distribution import DistributionKind, ProbabilityDistribution


class UniformDistribution(ProbabilityDistribution):
    kind = DistributionKind.UNIFORM
    parameter_names = ("min", "max")

    def __init__(self, lower: float, upper: float) -> None:
        if upper <= lower:
            raise InvalidParameterError(f"Parameter max must be > min ({lower:g}), got {upper:g}")
        self.lower = float(lower)
        self.upper = float(upper)

    @classmethod
    def from_params(cls, params: Mapping[str, object]) -> "UniformDistribution":
        values = read_parameters(cls.kind.value, params, cls.parameter_names)
        return cls(values["min"], values["max"])

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def frozen(self):
        return uniform(loc=self.lower, scale=self.width)

    def params(self) -> dict[str, float]:
        return {"min": self.lower, "max": self.upper}

    def mean(self) -> float:
        return 0.5 * (self.lower + self.upper)

    def variance(self) -> float:
        return self.width**2 / 12.0

    def default_range(self) -> tuple[float, float]:
        # a quarter-width margin shows both edges of the step
        margin = 0.25 * self.width
        return self.lower - margin, self.upper + margin

    def sample_many(self, rng: Generator, size: int) -> np.ndarray:
        return self.lower + self.width * rng.random(size)
