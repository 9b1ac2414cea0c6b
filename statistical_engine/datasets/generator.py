"""Random dataset generation with summary statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

import numpy as np
from numpy.random import Generator

from statistical_engine.distributions.factory import get_distribution
from statistical_engine.exceptions import InvalidParameterError, ResourceLimitError
from statistical_engine.interfaces.distribution import DistributionKind
from statistical_engine.utils.logging import get_logger
from statistical_engine.utils.rng import make_rng

log = get_logger(__name__, component="datasets")


@dataclass(frozen=True)
class GeneratedDataset:
    kind: DistributionKind
    data: np.ndarray
    mean: float
    std_dev: float
    min: float
    max: float

    @property
    def size(self) -> int:
        return int(self.data.shape[0])

    def to_dict(self) -> dict:
        return {
            "data": self.data.tolist(),
            "size": self.size,
            "mean": self.mean,
            "stdDev": self.std_dev,
            "min": self.min,
            "max": self.max,
        }


def _check_size(size: object, max_size: Optional[int]) -> int:
    if isinstance(size, bool):
        raise InvalidParameterError(f"size must be an integer, got {size!r}")
    try:
        value = float(size)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidParameterError(f"size must be an integer, got {size!r}") from None
    if not value.is_integer() or value < 1:
        raise InvalidParameterError(f"size must be a positive integer, got {size!r}")
    if max_size is not None and value > max_size:
        raise ResourceLimitError(f"size {int(value)} exceeds the configured maximum of {max_size}")
    return int(value)


def generate_dataset(
    kind: DistributionKind | str,
    size: int,
    params: Mapping[str, object],
    rng: Optional[Generator] = None,
    max_size: Optional[int] = None,
) -> GeneratedDataset:
    """Draw ``size`` variates of ``kind`` and summarise them.

    Only families with a sampler (normal, exponential, uniform) are accepted.
    ``std_dev`` is the population standard deviation (divisor n).
    """
    n = _check_size(size, max_size)
    dist = get_distribution(kind, params)
    data = dist.sample_many(rng if rng is not None else make_rng(), n)
    log.debug("Dataset generated", extra={"kind": dist.kind.value, "n": n})
    return GeneratedDataset(
        kind=dist.kind,
        data=data,
        mean=float(np.mean(data)),
        std_dev=float(np.std(data)),
        min=float(np.min(data)),
        max=float(np.max(data)),
    )


__all__ = ["GeneratedDataset", "generate_dataset"]
