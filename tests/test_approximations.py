"""Tests for the chi-square, F, Beta and Gamma approximations."""

import logging
import math

import pytest
from scipy import stats

from kwapprox.core.errors import NumericDomainError
from kwapprox.stats.schemes.kruskal_wallis.approximations import (
    approximate,
    beta_approximation,
    beta_scale,
    chi_square_approximation,
    f_approximation,
    gamma_approximation,
    moment_variance,
)

H = 9167 / 1209
K = 3
N = 31
SIZES = [13, 9, 9]


def expected_s2():
    return (
        2 * (K - 1)
        - 2 * (3 * K**2 - 6 * K + N * (2 * K**2 - 6 * K + 1)) / (5 * N * (N + 1))
        - 6 / 5 * sum(1 / n for n in SIZES)
    )


def expected_eta():
    return (N**3 - sum(n**3 for n in SIZES)) / (N * (N + 1))


def test_moments_match_float_formulas():
    assert float(moment_variance(K, N, SIZES)) == pytest.approx(expected_s2(), rel=1e-12)
    assert float(beta_scale(N, SIZES)) == pytest.approx(26136 / 992, rel=1e-12)
    assert float(beta_scale(N, SIZES)) == pytest.approx(expected_eta(), rel=1e-12)


def test_chi_square():
    chi = chi_square_approximation(H, K)
    assert chi.chi2 == H
    assert chi.df == 2
    # with 2 degrees of freedom the chi-square tail is exp(-x/2)
    assert chi.pvalue == pytest.approx(math.exp(-H / 2), rel=1e-10)


def test_f():
    f = f_approximation(H, K, N)
    assert f.dfn == 2
    assert f.dfd == 29
    assert f.f == pytest.approx(30 * H / (2 * (30 - H)), rel=1e-12)
    assert f.pvalue == pytest.approx(stats.f.sf(f.f, 2, 27), rel=1e-10)


def test_f_is_less_conservative_than_chi_square():
    assert f_approximation(H, K, N).pvalue < chi_square_approximation(H, K).pvalue


def test_f_with_zero_denominator_is_not_fatal(caplog):
    with caplog.at_level(logging.WARNING):
        f = f_approximation(9.0, 3, 10)
    assert f.f == math.inf
    assert f.pvalue == 0.0
    assert "not positive" in caplog.text


def test_f_with_negative_denominator_is_returned_as_is(caplog):
    with caplog.at_level(logging.WARNING):
        f = f_approximation(5.0, 3, 5)
    assert f.f == pytest.approx(-10.0)
    assert f.pvalue == 1.0
    assert caplog.records


def test_beta():
    beta = beta_approximation(H, K, N, SIZES)
    s2, eta, m = expected_s2(), expected_eta(), K - 1
    alpha = m * (m * (eta - m) - s2) / (eta * s2)
    b = alpha * (eta - m) / m
    assert beta.m == 2
    assert beta.s2 == pytest.approx(s2, rel=1e-12)
    assert beta.eta == pytest.approx(eta, rel=1e-12)
    assert beta.b == pytest.approx(H / eta, rel=1e-12)
    assert beta.alpha == pytest.approx(alpha, rel=1e-10)
    assert beta.beta == pytest.approx(b, rel=1e-10)
    assert beta.pvalue == pytest.approx(stats.beta.sf(H / eta, alpha, b), rel=1e-8)


def test_gamma():
    gamma = gamma_approximation(H, K, N, SIZES)
    s2, m = expected_s2(), K - 1
    assert gamma.g == H
    assert gamma.alpha == pytest.approx(m**2 / s2, rel=1e-12)
    assert gamma.beta == pytest.approx(s2 / m, rel=1e-12)
    assert gamma.pvalue == pytest.approx(
        stats.gamma.sf(H, m**2 / s2, scale=s2 / m), rel=1e-8
    )


def test_p_values_are_probabilities():
    approx = approximate(H, K, N, SIZES)
    for p in (approx.chi_square.pvalue, approx.f.pvalue, approx.beta.pvalue, approx.gamma.pvalue):
        assert 0.0 <= p <= 1.0


def test_singleton_groups_make_beta_and_gamma_undefined(caplog):
    assert moment_variance(3, 3, [1, 1, 1]) == 0
    with caplog.at_level(logging.WARNING):
        with pytest.raises(NumericDomainError) as excinfo:
            approximate(2.0, 3, 3, [1, 1, 1])
    assert excinfo.value.approximations == ("beta", "gamma")
    assert "s2 must be positive" in str(excinfo.value)
    assert "N - k - 1 = -1 is not positive" in caplog.text


def test_non_positive_f_denominator_df_warns_and_gives_nan(caplog):
    with caplog.at_level(logging.WARNING):
        f = f_approximation(0.0, 3, 4)
    assert "N - k - 1 = 0 is not positive" in caplog.text
    assert f.f == 0.0
    assert f.dfd == 2
    assert math.isnan(f.pvalue)


def test_single_group_fails_every_approximation():
    with pytest.raises(NumericDomainError) as excinfo:
        approximate(0.0, 1, 5, [5])
    assert excinfo.value.approximations == ("chi_square", "f", "beta", "gamma")
