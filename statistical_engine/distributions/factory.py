"""Factory for probability distributions."""

from __future__ import annotations

from typing import Dict, Mapping, Type

from statistical_engine.distributions.binomial import BinomialDistribution
from statistical_engine.distributions.chisquare import ChiSquareDistribution
from statistical_engine.distributions.exponential import ExponentialDistribution
from statistical_engine.distributions.normal import NormalDistribution
from statistical_engine.distributions.poisson import PoissonDistribution
from statistical_engine.distributions.student_t import StudentTDistribution
from statistical_engine.distributions.uniform import UniformDistribution
from statistical_engine.interfaces.distribution import (
    DistributionKind,
    DistributionSpec,
    ProbabilityDistribution,
)
from statistical_engine.utils.logging import get_logger

log = get_logger(__name__, component="distribution_factory")

REGISTRY: Dict[DistributionKind, Type[ProbabilityDistribution]] = {
    DistributionKind.NORMAL: NormalDistribution,
    DistributionKind.EXPONENTIAL: ExponentialDistribution,
    DistributionKind.UNIFORM: UniformDistribution,
    DistributionKind.BINOMIAL: BinomialDistribution,
    DistributionKind.POISSON: PoissonDistribution,
    DistributionKind.CHISQUARE: ChiSquareDistribution,
    DistributionKind.T: StudentTDistribution,
}


def get_distribution(kind: DistributionKind | str, params: Mapping[str, object] | None = None) -> ProbabilityDistribution:
    """Validate ``params`` for ``kind`` and return the distribution instance."""
    resolved = DistributionKind.parse(kind)
    dist = REGISTRY[resolved].from_params(params or {})
    log.debug("Distribution built", extra={"kind": resolved.value})
    return dist


def from_spec(spec: DistributionSpec) -> ProbabilityDistribution:
    return get_distribution(spec.kind, spec.parameters)


__all__ = ["REGISTRY", "from_spec", "get_distribution"]
