"""Hypothesis tests built on the Student-t distribution."""

from .ttest import (
    ALTERNATIVES,
    OneSampleTTestResult,
    TwoSampleTTestResult,
    conclusion_text,
    critical_value,
    one_sample_ttest,
    p_value,
    two_sample_ttest,
)

__all__ = [
    "ALTERNATIVES",
    "OneSampleTTestResult",
    "TwoSampleTTestResult",
    "conclusion_text",
    "critical_value",
    "one_sample_ttest",
    "p_value",
    "two_sample_ttest",
]
