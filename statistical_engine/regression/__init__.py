"""Linear regression."""

from .linear import RegressionResult, fit_linear

__all__ = ["RegressionResult", "fit_linear"]
