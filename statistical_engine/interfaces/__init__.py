"""Interfaces shared across engine components."""

from .distribution import DistributionKind, DistributionSpec, ProbabilityDistribution

__all__ = ["DistributionKind", "DistributionSpec", "ProbabilityDistribution"]
