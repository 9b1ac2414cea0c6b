"""Coercion of caller-supplied numeric sequences."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from statistical_engine.exceptions import InvalidParameterError


def as_series(name: str, values: Sequence[float] | np.ndarray) -> np.ndarray:
    """Return ``values`` as a 1-D float64 array, rejecting non-numeric or non-finite entries."""
    if values is None:
        raise InvalidParameterError(f"{name} is required")
    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{name} must be a sequence of numbers") from None
    if arr.ndim != 1:
        raise InvalidParameterError(f"{name} must be one-dimensional, got shape {arr.shape}")
    if not np.isfinite(arr).all():
        raise InvalidParameterError(f"{name} contains non-finite values")
    return arr


__all__ = ["as_series"]
