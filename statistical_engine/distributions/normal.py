"""Normal distribution model."""

from __future__ import annotations

from typing import Mapping

import numpy as np
from numpy.random import Generator
from scipy.stats import norm

from statistical_engine.distributions.validation import read_parameters, require_greater
from statistical_engine.interfaces.distribution import DistributionKind, ProbabilityDistribution


class NormalDistribution(ProbabilityDistribution):
    kind = DistributionKind.NORMAL
    parameter_names = ("mean", "stdDev")

    def __init__(self, mean: float, std_dev: float) -> None:
        require_greater("stdDev", std_dev, 0.0)
        self.loc = float(mean)
        self.scale = float(std_dev)

    @classmethod
    def from_params(cls, params: Mapping[str, object]) -> "NormalDistribution":
        values = read_parameters(cls.kind.value, params, cls.parameter_names)
        return cls(values["mean"], values["stdDev"])

    def frozen(self):
        return norm(loc=self.loc, scale=self.scale)

    def params(self) -> dict[str, float]:
        return {"mean": self.loc, "stdDev": self.scale}

    def mean(self) -> float:
        return self.loc

    def variance(self) -> float:
        return self.scale**2

    def default_range(self) -> tuple[float, float]:
        return self.loc - 4 * self.scale, self.loc + 4 * self.scale

    def sample_many(self, rng: Generator, size: int) -> np.ndarray:
        # Box-Muller; 1 - u keeps the log argument in (0, 1]
        u1 = rng.random(size)
        u2 = rng.random(size)
        z = np.sqrt(-2.0 * np.log(1.0 - u1)) * np.cos(2.0 * np.pi * u2)
        return self.loc + self.scale * z
