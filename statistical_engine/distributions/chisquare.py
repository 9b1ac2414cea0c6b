"""Chi-square distribution model."""

from __future__ import annotations

from typing import Mapping

from scipy.stats import chi2

from statistical_engine.distributions.validation import read_parameters, require_at_least
from statistical_engine.interfaces.distribution import DistributionKind, ProbabilityDistribution


class ChiSquareDistribution(ProbabilityDistribution):
    kind = DistributionKind.CHISQUARE
    parameter_names = ("df",)

    def __init__(self, df: float) -> None:
        require_at_least("df", df, 1.0)
        self.df = float(df)

    @classmethod
    def from_params(cls, params: Mapping[str, object]) -> "ChiSquareDistribution":
        values = read_parameters(cls.kind.value, params, cls.parameter_names)
        return cls(values["df"])

    def frozen(self):
        return chi2(self.df)

    def params(self) -> dict[str, float]:
        return {"df": self.df}

    def mean(self) -> float:
        return self.df

    def variance(self) -> float:
        return 2.0 * self.df

    def default_range(self) -> tuple[float, float]:
        return 0.0, 3.0 * self.df
