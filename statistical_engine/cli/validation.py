"""CLI input parsing helpers."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from statistical_engine.exceptions import ConfigValidationError


def parse_float_list(name: str, raw: str) -> List[float]:
    """Parse ``"1, 2.5, 3"`` (commas and/or whitespace) into floats."""
    tokens = [tok for tok in raw.replace(",", " ").split() if tok]
    if not tokens:
        raise ConfigValidationError(f"{name} must contain at least one number")
    try:
        return [float(tok) for tok in tokens]
    except ValueError as exc:
        raise ConfigValidationError(f"{name} must be a list of numbers: {exc}") from exc


def parse_params(pairs: Optional[Iterable[str]]) -> Dict[str, float]:
    """Parse repeated ``name=value`` options into a parameter mapping."""
    params: Dict[str, float] = {}
    for pair in pairs or []:
        name, sep, value = pair.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ConfigValidationError(f"Parameters must look like name=value, got {pair!r}")
        try:
            params[name] = float(value)
        except ValueError as exc:
            raise ConfigValidationError(f"Parameter {name} must be numeric, got {value!r}") from exc
    return params


__all__ = ["parse_float_list", "parse_params"]
