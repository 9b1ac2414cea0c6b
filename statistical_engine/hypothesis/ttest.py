"""One-sample and pooled two-sample Student t-tests."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Literal, Sequence

import numpy as np

from statistical_engine.distributions.student_t import StudentTDistribution
from statistical_engine.exceptions import (
    DegenerateInputError,
    InsufficientDataError,
    InvalidParameterError,
)
from statistical_engine.utils.logging import get_logger
from statistical_engine.utils.series import as_series

log = get_logger(__name__, component="hypothesis")

Alternative = Literal["two-sided", "greater", "less"]
ALTERNATIVES: tuple[str, ...] = ("two-sided", "greater", "less")


@dataclass(frozen=True)
class OneSampleTTestResult:
    statistic: float
    p_value: float
    critical_value: float
    degrees_of_freedom: int
    sample_mean: float
    sample_std: float
    reject: bool
    conclusion: str
    alpha: float
    alternative: Alternative

    def to_dict(self) -> dict:
        return {
            "statistic": self.statistic,
            "pValue": self.p_value,
            "criticalValue": self.critical_value,
            "degreesOfFreedom": self.degrees_of_freedom,
            "sampleMean": self.sample_mean,
            "sampleStd": self.sample_std,
            "reject": self.reject,
            "conclusion": self.conclusion,
            "alpha": self.alpha,
            "alternative": self.alternative,
        }


@dataclass(frozen=True)
class TwoSampleTTestResult:
    statistic: float
    p_value: float
    critical_value: float
    degrees_of_freedom: int
    mean1: float
    mean2: float
    std1: float
    std2: float
    reject: bool
    conclusion: str
    alpha: float
    alternative: Alternative

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["pValue"] = payload.pop("p_value")
        payload["criticalValue"] = payload.pop("critical_value")
        payload["degreesOfFreedom"] = payload.pop("degrees_of_freedom")
        return payload


def validate_alpha(alpha: float) -> float:
    try:
        value = float(alpha)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"alpha must be numeric, got {alpha!r}") from None
    if not 0.0 < value < 1.0:
        raise InvalidParameterError(f"alpha must lie in (0, 1), got {alpha}")
    return value


def normalize_alternative(alternative: str) -> Alternative:
    name = str(alternative).strip().lower().replace("_", "-")
    if name not in ALTERNATIVES:
        raise InvalidParameterError(f"alternative must be one of {list(ALTERNATIVES)}, got {alternative!r}")
    return name  # type: ignore[return-value]


def p_value(statistic: float, df: float, alternative: Alternative = "two-sided") -> float:
    """p-value of a t statistic with ``df`` degrees of freedom."""
    dist = StudentTDistribution(df)
    if alternative == "two-sided":
        return 2.0 * (1.0 - dist.cumulative(abs(statistic)))
    if alternative == "greater":
        return 1.0 - dist.cumulative(statistic)
    return dist.cumulative(statistic)


def critical_value(df: float, alpha: float) -> float:
    """Two-sided critical magnitude t_{1 - alpha/2, df}."""
    return StudentTDistribution(df).inverse_cumulative(1.0 - alpha / 2.0)


def conclusion_text(reject: bool, alpha: float) -> str:
    if reject:
        return f"Reject null hypothesis at α = {alpha:g}"
    return f"Fail to reject null hypothesis at α = {alpha:g}"


def _require_points(name: str, arr: np.ndarray, minimum: int = 2) -> int:
    n = int(arr.shape[0])
    if n < minimum:
        raise InsufficientDataError(f"{name} needs at least {minimum} values, got {n}")
    return n


def one_sample_ttest(
    data: Sequence[float],
    mu: float,
    alpha: float = 0.05,
    alternative: str = "two-sided",
) -> OneSampleTTestResult:
    """Test H0: population mean == ``mu`` against ``alternative``.

    Args:
        data: Observations (at least two, all finite).
        mu: Hypothesised mean.
        alpha: Significance level in (0, 1).
        alternative: ``"two-sided"``, ``"greater"`` or ``"less"``.

    Raises:
        InsufficientDataError: Fewer than two observations.
        DegenerateInputError: All observations identical (zero standard error).
    """
    alpha = validate_alpha(alpha)
    alt = normalize_alternative(alternative)
    arr = as_series("data", data)
    n = _require_points("data", arr)
    try:
        mu = float(mu)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"mu must be numeric, got {mu!r}") from None
    if not math.isfinite(mu):
        raise InvalidParameterError(f"mu must be finite, got {mu}")

    sample_mean = float(arr.mean())
    sample_std = float(arr.std(ddof=1))
    se = sample_std / math.sqrt(n)
    if se == 0.0:
        raise DegenerateInputError("Sample standard deviation is zero; t statistic is undefined")

    statistic = (sample_mean - mu) / se
    df = n - 1
    pval = p_value(statistic, df, alt)
    crit = critical_value(df, alpha)
    reject = bool(pval < alpha)
    log.debug("One-sample t-test computed", extra={"n": n, "df": df})

    return OneSampleTTestResult(
        statistic=float(statistic),
        p_value=float(pval),
        critical_value=float(crit),
        degrees_of_freedom=df,
        sample_mean=sample_mean,
        sample_std=sample_std,
        reject=reject,
        conclusion=conclusion_text(reject, alpha),
        alpha=alpha,
        alternative=alt,
    )


def two_sample_ttest(
    data1: Sequence[float],
    data2: Sequence[float],
    alpha: float = 0.05,
    alternative: str = "two-sided",
) -> TwoSampleTTestResult:
    """Independent two-sample t-test assuming equal variances (pooled).

    ``alternative`` refers to mean1 - mean2: ``"greater"`` tests mean1 > mean2.
    """
    alpha = validate_alpha(alpha)
    alt = normalize_alternative(alternative)
    arr1 = as_series("data1", data1)
    arr2 = as_series("data2", data2)
    n1 = _require_points("data1", arr1)
    n2 = _require_points("data2", arr2)

    mean1, mean2 = float(arr1.mean()), float(arr2.mean())
    var1, var2 = float(arr1.var(ddof=1)), float(arr2.var(ddof=1))
    df = n1 + n2 - 2
    pooled = ((n1 - 1) * var1 + (n2 - 1) * var2) / df
    se = math.sqrt(pooled * (1.0 / n1 + 1.0 / n2))
    if se == 0.0:
        raise DegenerateInputError("Pooled variance is zero; t statistic is undefined")

    statistic = (mean1 - mean2) / se
    pval = p_value(statistic, df, alt)
    crit = critical_value(df, alpha)
    reject = bool(pval < alpha)
    log.debug("Two-sample t-test computed", extra={"n": n1 + n2, "df": df})

    return TwoSampleTTestResult(
        statistic=float(statistic),
        p_value=float(pval),
        critical_value=float(crit),
        degrees_of_freedom=df,
        mean1=mean1,
        mean2=mean2,
        std1=math.sqrt(var1),
        std2=math.sqrt(var2),
        reject=reject,
        conclusion=conclusion_text(reject, alpha),
        alpha=alpha,
        alternative=alt,
    )


__all__ = [
    "ALTERNATIVES",
    "Alternative",
    "OneSampleTTestResult",
    "TwoSampleTTestResult",
    "conclusion_text",
    "critical_value",
    "normalize_alternative",
    "one_sample_ttest",
    "p_value",
    "two_sample_ttest",
    "validate_alpha",
]
