"""
kwapprox.stats.common.distributions
===================================

Upper-tail probabilities of the reference distributions.

Thin wrappers around `scipy.stats` survival functions, returning plain
floats. The survival function equals 1 - CDF but keeps precision far in the
tail.

Examples
--------
>>> round(chi2_upper_tail(5.991464547107979, 2), 6)
0.05
>>> gamma_upper_tail(0.0, 2.0, 1.0)
1.0
"""

from __future__ import annotations

from scipy import stats


def chi2_upper_tail(x: float, df: float) -> float:
    """P(X > x) for X ~ chi-square(df)."""
    return float(stats.chi2.sf(x, df))


def f_upper_tail(x: float, dfn: float, dfd: float) -> float:
    """P(X > x) for X ~ F(dfn, dfd)."""
    return float(stats.f.sf(x, dfn, dfd))


def beta_upper_tail(x: float, a: float, b: float) -> float:
    """P(X > x) for X ~ Beta(a, b)."""
    return float(stats.beta.sf(x, a, b))


def gamma_upper_tail(x: float, shape: float, scale: float) -> float:
    """P(X > x) for X ~ Gamma(shape, scale); scale is the inverse rate."""
    return float(stats.gamma.sf(x, shape, scale=scale))
