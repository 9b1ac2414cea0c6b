import pytest
from scipy import stats

from statistical_engine.exceptions import (
    DegenerateInputError,
    InsufficientDataError,
    InvalidParameterError,
)
from statistical_engine.hypothesis import (
    conclusion_text,
    critical_value,
    one_sample_ttest,
    two_sample_ttest,
)

SAMPLE = [10, 12, 11, 13, 14, 12, 11, 10, 13, 12]


def test_one_sample_scenario():
    result = one_sample_ttest(SAMPLE, mu=11.5, alpha=0.05)
    assert result.sample_mean == pytest.approx(11.8)
    assert result.sample_std == pytest.approx(1.3166, abs=1e-4)
    assert result.statistic == pytest.approx(0.7206, abs=1e-3)
    assert result.degrees_of_freedom == 9
    assert result.p_value == pytest.approx(0.489, abs=2e-3)
    assert result.critical_value == pytest.approx(2.262157, abs=1e-6)
    assert result.reject is False
    assert result.conclusion == "Fail to reject null hypothesis at α = 0.05"


@pytest.mark.parametrize("alternative", ["two-sided", "greater", "less"])
def test_one_sample_matches_scipy(alternative):
    result = one_sample_ttest(SAMPLE, mu=11.0, alternative=alternative)
    expected = stats.ttest_1samp(SAMPLE, 11.0, alternative=alternative)
    assert result.statistic == pytest.approx(expected.statistic)
    assert result.p_value == pytest.approx(expected.pvalue, abs=1e-9)


def test_one_sample_rejects_far_mean():
    result = one_sample_ttest(SAMPLE, mu=20.0)
    assert result.statistic < 0
    assert result.reject is True
    assert result.conclusion.startswith("Reject null hypothesis")


def test_mean_equal_to_mu_gives_p_value_one():
    result = one_sample_ttest([1.0, 2.0, 3.0], mu=2.0)
    assert result.statistic == pytest.approx(0.0)
    assert result.p_value == pytest.approx(1.0)
    assert result.reject is False


def test_one_sample_result_dict_keys():
    payload = one_sample_ttest(SAMPLE, mu=11.5).to_dict()
    assert payload["degreesOfFreedom"] == 9
    assert {"statistic", "pValue", "criticalValue", "reject", "conclusion"} <= set(payload)


A = [20.1, 22.3, 19.8, 21.5, 23.0, 20.7]
B = [18.2, 17.9, 19.5, 18.8, 17.4, 18.1, 19.0]


@pytest.mark.parametrize("alternative", ["two-sided", "greater", "less"])
def test_two_sample_matches_pooled_scipy(alternative):
    result = two_sample_ttest(A, B, alternative=alternative)
    expected = stats.ttest_ind(A, B, equal_var=True, alternative=alternative)
    assert result.statistic == pytest.approx(expected.statistic)
    assert result.p_value == pytest.approx(expected.pvalue, abs=1e-9)
    assert result.degrees_of_freedom == len(A) + len(B) - 2


def test_two_sample_is_antisymmetric():
    forward = two_sample_ttest(A, B)
    backward = two_sample_ttest(B, A)
    assert forward.statistic == pytest.approx(-backward.statistic)
    assert forward.p_value == pytest.approx(backward.p_value)


def test_two_sample_summary_and_dict():
    result = two_sample_ttest(A, B)
    assert result.mean1 == pytest.approx(sum(A) / len(A))
    assert result.mean2 == pytest.approx(sum(B) / len(B))
    assert result.reject is True
    payload = result.to_dict()
    assert {"pValue", "criticalValue", "degreesOfFreedom", "mean1", "mean2", "std1", "std2"} <= set(payload)
    assert "p_value" not in payload


def test_critical_value_and_conclusion_text():
    assert critical_value(9, 0.05) == pytest.approx(2.262157, abs=1e-6)
    assert critical_value(20, 0.01) == pytest.approx(stats.t.ppf(0.995, 20))
    assert conclusion_text(True, 0.01) == "Reject null hypothesis at α = 0.01"


@pytest.mark.parametrize("data", [[], [4.2]])
def test_one_sample_insufficient_data(data):
    with pytest.raises(InsufficientDataError):
        one_sample_ttest(data, mu=0.0)


def test_two_sample_insufficient_data():
    with pytest.raises(InsufficientDataError, match="data2"):
        two_sample_ttest([1.0, 2.0], [3.0])


def test_constant_sample_is_degenerate():
    with pytest.raises(DegenerateInputError):
        one_sample_ttest([5.0, 5.0, 5.0], mu=4.0)
    with pytest.raises(DegenerateInputError):
        two_sample_ttest([1.0, 1.0], [2.0, 2.0])


@pytest.mark.parametrize("alpha", [0.0, 1.0, -0.5, "high"])
def test_invalid_alpha(alpha):
    with pytest.raises(InvalidParameterError, match="alpha"):
        one_sample_ttest(SAMPLE, mu=11.0, alpha=alpha)


def test_invalid_alternative_and_data():
    with pytest.raises(InvalidParameterError, match="alternative"):
        one_sample_ttest(SAMPLE, mu=11.0, alternative="sideways")
    with pytest.raises(InvalidParameterError):
        one_sample_ttest([1.0, float("nan"), 2.0], mu=1.0)
    assert one_sample_ttest(SAMPLE, mu=11.0, alternative="two_sided").alternative == "two-sided"
