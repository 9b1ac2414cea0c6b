"""Random generator construction."""

from __future__ import annotations

import numpy as np
from numpy.random import PCG64, Generator


def make_rng(seed: int | None = None) -> Generator:
    """Return a PCG64 generator; unseeded when ``seed`` is None."""
    return Generator(PCG64(seed)) if seed is not None else np.random.default_rng()


__all__ = ["make_rng"]
