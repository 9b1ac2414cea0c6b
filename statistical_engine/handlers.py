"""Request/response boundary around the engine.

Handlers take an already-decoded payload mapping (wire field names, e.g.
``stdDev``, ``xData``), call the engine and return JSON-ready dicts. ``handle``
additionally converts engine failures into the ``{"error": message}`` envelope.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Mapping, Optional

from numpy.random import Generator

from statistical_engine.datasets.generator import generate_dataset as _generate_dataset
from statistical_engine.distributions.factory import get_distribution
from statistical_engine.distributions.plot_grid import grid_for
from statistical_engine.exceptions import InvalidParameterError, StatisticalEngineError
from statistical_engine.hypothesis.ttest import one_sample_ttest, two_sample_ttest
from statistical_engine.regression.linear import fit_linear
from statistical_engine.schema.engine_config import EngineConfig
from statistical_engine.utils.logging import get_logger
from statistical_engine.utils.profiling import track_time
from statistical_engine.utils.rng import make_rng

log = get_logger(__name__, component="handlers")

Payload = Mapping[str, Any]

_RESERVED = {"kind", "distribution", "x", "cumulative", "start", "end", "numPoints", "size", "seed"}


def _require(payload: Payload, key: str) -> Any:
    if key not in payload or payload[key] is None:
        raise InvalidParameterError(f"Missing required field: {key}")
    return payload[key]


def _number(payload: Payload, key: str, default: Optional[float] = None) -> float:
    raw = payload.get(key)
    if raw is None:
        raw = default if default is not None else _require(payload, key)
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{key} must be numeric, got {raw!r}") from None
    if math.isnan(value):
        raise InvalidParameterError(f"{key} must not be NaN")
    return value


def _optional_number(payload: Payload, key: str) -> Optional[float]:
    if payload.get(key) is None:
        return None
    return _number(payload, key)


def _seed(raw: Any) -> Optional[int]:
    if raw is None:
        return None
    value = _number({"seed": raw}, "seed")
    if not value.is_integer() or value < 0:
        raise InvalidParameterError(f"seed must be a non-negative integer, got {raw!r}")
    return int(value)


def _count(raw: Any) -> Any:
    # JSON numbers such as 50.0 arrive as floats
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    return raw


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


def _parameters(payload: Payload) -> Dict[str, Any]:
    params = payload.get("parameters", payload.get("params"))
    if params is None:
        # flat bodies carry the parameters beside the request fields
        return {k: v for k, v in payload.items() if k not in _RESERVED}
    if not isinstance(params, Mapping):
        raise InvalidParameterError("parameters must be a mapping of name to value")
    return dict(params)


def _kind(payload: Payload) -> Any:
    if payload.get("kind") is not None:
        return payload["kind"]
    return _require(payload, "distribution")


def evaluate_distribution(payload: Payload, config: Optional[EngineConfig] = None) -> Dict[str, Any]:
    """Probability at ``x`` plus mean, variance and the plotting grid."""
    cfg = config or EngineConfig()
    dist = get_distribution(_kind(payload), _parameters(payload))
    x = _number(payload, "x")
    cumulative = _flag(payload.get("cumulative", False))
    probability = dist.cumulative(x) if cumulative else dist.density(x)
    num_points = _count(payload.get("numPoints"))
    grid = grid_for(
        dist,
        start=_optional_number(payload, "start"),
        end=_optional_number(payload, "end"),
        num_points=cfg.grid_points if num_points is None else num_points,
        max_points=cfg.max_grid_points,
    )
    return {
        "kind": dist.kind.value,
        "parameters": dist.params(),
        "x": x,
        "cumulative": cumulative,
        "probability": probability,
        "mean": dist.mean(),
        "variance": dist.variance(),
        "plotGrid": grid.to_dict(),
    }


def one_sample_test(payload: Payload, config: Optional[EngineConfig] = None) -> Dict[str, Any]:
    cfg = config or EngineConfig()
    result = one_sample_ttest(
        _require(payload, "data"),
        mu=_number(payload, "mu"),
        alpha=_number(payload, "alpha", cfg.alpha),
        alternative=payload.get("alternative") or "two-sided",
    )
    return result.to_dict()


def two_sample_test(payload: Payload, config: Optional[EngineConfig] = None) -> Dict[str, Any]:
    cfg = config or EngineConfig()
    result = two_sample_ttest(
        _require(payload, "data1"),
        _require(payload, "data2"),
        alpha=_number(payload, "alpha", cfg.alpha),
        alternative=payload.get("alternative") or "two-sided",
    )
    return result.to_dict()


def linear_regression(payload: Payload, config: Optional[EngineConfig] = None) -> Dict[str, Any]:
    result = fit_linear(_require(payload, "xData"), _require(payload, "yData"))
    return result.to_dict()


def generate_dataset(
    payload: Payload,
    config: Optional[EngineConfig] = None,
    rng: Optional[Generator] = None,
) -> Dict[str, Any]:
    """Draw a dataset; ``rng`` wins over ``seed`` in the payload, which wins over the config seed."""
    cfg = config or EngineConfig()
    if rng is None:
        seed = payload.get("seed")
        rng = make_rng(_seed(seed if seed is not None else cfg.seed))
    dataset = _generate_dataset(
        _kind(payload),
        _require(payload, "size"),
        _parameters(payload),
        rng=rng,
        max_size=cfg.max_dataset_size,
    )
    return dataset.to_dict()


OPERATIONS: Dict[str, Callable[..., Dict[str, Any]]] = {
    "distribution": evaluate_distribution,
    "ttest-one": one_sample_test,
    "ttest-two": two_sample_test,
    "regression": linear_regression,
    "dataset": generate_dataset,
}


def handle(
    operation: str,
    payload: Payload,
    config: Optional[EngineConfig] = None,
    rng: Optional[Generator] = None,
) -> Dict[str, Any]:
    """Run ``operation`` and return its result, or ``{"error": message}`` on failure."""
    handler = OPERATIONS.get(operation)
    if handler is None:
        return {"error": f"Unknown operation: {operation}"}
    try:
        with track_time(operation):
            if handler is generate_dataset:
                return generate_dataset(payload, config, rng=rng)
            return handler(payload, config)
    except StatisticalEngineError as exc:
        log.warning(
            "Request failed",
            extra={"operation": operation, "error": f"{exc.__class__.__name__}: {exc}"},
        )
        return {"error": str(exc)}


__all__ = [
    "OPERATIONS",
    "evaluate_distribution",
    "generate_dataset",
    "handle",
    "linear_regression",
    "one_sample_test",
    "two_sample_test",
]
