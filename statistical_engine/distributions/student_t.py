"""Student-T distribution model."""

from __future__ import annotations

from typing import Mapping, Optional

from scipy import stats

from statistical_engine.distributions.validation import read_parameters, require_at_least
from statistical_engine.interfaces.distribution import DistributionKind, ProbabilityDistribution


class StudentTDistribution(ProbabilityDistribution):
    kind = DistributionKind.T
    parameter_names = ("df",)

    def __init__(self, df: float) -> None:
        require_at_least("df", df, 1.0)
        self.df = float(df)

    @classmethod
    def from_params(cls, params: Mapping[str, object]) -> "StudentTDistribution":
        values = read_parameters(cls.kind.value, params, cls.parameter_names)
        return cls(values["df"])

    def frozen(self):
        return stats.t(self.df)

    def params(self) -> dict[str, float]:
        return {"df": self.df}

    def mean(self) -> Optional[float]:
        # undefined for df <= 1 (Cauchy)
        return 0.0 if self.df > 1 else None

    def variance(self) -> Optional[float]:
        return self.df / (self.df - 2.0) if self.df > 2 else None

    def default_range(self) -> tuple[float, float]:
        return -5.0, 5.0
