"""Rounding rule applied to discrete evaluation points."""

from __future__ import annotations

import numpy as np


def round_half_away(x):
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3).

    Python's ``round`` and ``np.round`` round ties to even, which would evaluate
    a pmf at 2 for x=2.5 but at 4 for x=3.5.
    """
    arr = np.asarray(x, dtype=float)
    rounded = np.sign(arr) * np.floor(np.abs(arr) + 0.5)
    if rounded.ndim == 0:
        return float(rounded)
    return rounded


__all__ = ["round_half_away"]
