"""Parameter validation helpers for distributions."""

from __future__ import annotations

import math
from typing import Dict, Iterable, Mapping

from statistical_engine.exceptions import InvalidParameterError


def read_parameters(kind: str, params: Mapping[str, object], names: Iterable[str]) -> Dict[str, float]:
    """Pull the named parameters out of ``params`` as finite floats."""
    values: Dict[str, float] = {}
    for name in names:
        if params is None or name not in params or params[name] is None:
            raise InvalidParameterError(f"Missing parameter {name} for {kind} distribution")
        raw = params[name]
        try:
            value = float(raw)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            raise InvalidParameterError(f"Parameter {name} must be numeric, got {raw!r}") from None
        if not math.isfinite(value):
            raise InvalidParameterError(f"Parameter {name} must be finite, got {value}")
        values[name] = value
    return values


def require_greater(name: str, value: float, lower: float) -> None:
    if value <= lower:
        raise InvalidParameterError(f"Parameter {name} must be > {lower:g}, got {value:g}")


def require_at_least(name: str, value: float, lower: float) -> None:
    if value < lower:
        raise InvalidParameterError(f"Parameter {name} must be >= {lower:g}, got {value:g}")


def require_between(name: str, value: float, lower: float, upper: float) -> None:
    if value < lower or value > upper:
        raise InvalidParameterError(f"Parameter {name} must lie in [{lower:g}, {upper:g}], got {value:g}")


def require_integer(name: str, value: float) -> int:
    if not float(value).is_integer():
        raise InvalidParameterError(f"Parameter {name} must be an integer, got {value:g}")
    return int(value)


__all__ = [
    "read_parameters",
    "require_at_least",
    "require_between",
    "require_greater",
    "require_integer",
]
