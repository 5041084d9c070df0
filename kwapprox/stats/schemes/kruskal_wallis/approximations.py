"""
kwapprox.stats.schemes.kruskal_wallis.approximations
====================================================

Significance approximations for the Kruskal-Wallis H statistic.

The exact null distribution of H is intractable, so four continuous
distributions are matched to it. All of them use df = k - 1.

- Chi-square: H ~ chi2(df). The most conservative.
- F: a monotone transform of H compared to F(df, N - k - 1). The least
  conservative.
- Beta: H / eta ~ Beta(alpha, beta), matching the first two moments of H.
- Gamma: H ~ Gamma(alpha, scale=beta), matching the same moments.

The moment quantities (s2, eta and the shape parameters) are rational
functions of k, N and the group sizes. They are evaluated exactly with
`fractions.Fraction`, so the sign checks that guard the Beta and Gamma
shapes do not depend on rounding.

Examples
--------
>>> chi = chi_square_approximation(h=0.0, k=3)
>>> chi.df, chi.pvalue
(2, 1.0)
>>> float(moment_variance(k=3, n_total=3, sizes=[1, 1, 1]))
0.0
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Callable, Dict, List, Sequence

from kwapprox.core.errors import NumericDomainError
from kwapprox.core.names import APPROXIMATIONS, ApproximationName
from kwapprox.stats.common.distributions import (
    beta_upper_tail,
    chi2_upper_tail,
    f_upper_tail,
    gamma_upper_tail,
)
from kwapprox.stats.schemes.kruskal_wallis.model import (
    BetaApproximation,
    ChiSquareApproximation,
    FApproximation,
    GammaApproximation,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Approximations:
    chi_square: ChiSquareApproximation
    f: FApproximation
    beta: BetaApproximation
    gamma: GammaApproximation


def _require_groups(name: str, k: int) -> int:
    df = k - 1
    if df < 1:
        raise NumericDomainError((name,), f"need at least 2 groups, got k={k}")
    return df


# --- Moments of H under H0 ---


def moment_variance(k: int, n_total: int, sizes: Sequence[int]) -> Fraction:
    """Variance s2 of H under the null, used by the Beta and Gamma fits.

    s2 = 2 df - 2 (3k^2 - 6k + N (2k^2 - 6k + 1)) / (5 N (N+1)) - 6/5 sum(1/n_g)
    """
    df = k - 1
    n = n_total
    inv_sizes = sum((Fraction(1, s) for s in sizes), Fraction(0))
    return (
        2 * df
        - Fraction(2 * (3 * k**2 - 6 * k + n * (2 * k**2 - 6 * k + 1)), 5 * n * (n + 1))
        - Fraction(6, 5) * inv_sizes
    )


def beta_scale(n_total: int, sizes: Sequence[int]) -> Fraction:
    """eta = (N^3 - sum n_g^3) / (N (N+1)), the upper bound of H."""
    n = n_total
    return Fraction(n**3 - sum(s**3 for s in sizes), n * (n + 1))


# --- Approximations ---


def chi_square_approximation(h: float, k: int) -> ChiSquareApproximation:
    """Chi-square approximation with df = k - 1."""
    df = _require_groups("chi_square", k)
    return ChiSquareApproximation(chi2=h, df=df, pvalue=chi2_upper_tail(h, df))


def f_approximation(h: float, k: int, n_total: int) -> FApproximation:
    """F approximation.

    The reported denominator df is N - df. The p-value uses N - k - 1
    instead. A non-positive N - 1 - H yields a negative or infinite F, which
    is returned as-is.
    """
    df = _require_groups("f", k)
    dfd = n_total - df
    numerator = (dfd + 1) * h
    denominator = df * (n_total - 1 - h)

    if denominator == 0:
        f = math.nan if numerator == 0 else math.copysign(math.inf, numerator)
    else:
        f = numerator / denominator
    if denominator <= 0:
        logger.warning(
            "F approximation: N - 1 - H = %g is not positive; F=%g is not interpretable",
            n_total - 1 - h,
            f,
        )

    p_dfd = n_total - k - 1
    if p_dfd <= 0:
        logger.warning(
            "F approximation: denominator df N - k - 1 = %d is not positive", p_dfd
        )
    return FApproximation(f=f, dfn=df, dfd=dfd, pvalue=f_upper_tail(f, df, p_dfd))


def beta_approximation(
    h: float, k: int, n_total: int, sizes: Sequence[int]
) -> BetaApproximation:
    """Beta approximation of B = H / eta.

    Raises:
        NumericDomainError: s2, alpha or beta is not positive
    """
    m = _require_groups("beta", k)
    s2 = moment_variance(k, n_total, sizes)
    if s2 <= 0:
        raise NumericDomainError(("beta",), f"s2 must be positive, got {float(s2)}")
    eta = beta_scale(n_total, sizes)
    alpha = m * (m * (eta - m) - s2) / (eta * s2)
    beta = alpha * (eta - m) / m
    if alpha <= 0 or beta <= 0:
        raise NumericDomainError(
            ("beta",),
            f"shape parameters must be positive, got alpha={float(alpha)}, beta={float(beta)}",
        )
    b = h / float(eta)
    return BetaApproximation(
        m=m,
        s2=float(s2),
        eta=float(eta),
        b=b,
        alpha=float(alpha),
        beta=float(beta),
        pvalue=beta_upper_tail(b, float(alpha), float(beta)),
    )


def gamma_approximation(
    h: float, k: int, n_total: int, sizes: Sequence[int]
) -> GammaApproximation:
    """Gamma approximation with shape alpha = m^2/s2 and scale beta = s2/m.

    Raises:
        NumericDomainError: s2 is not positive
    """
    m = _require_groups("gamma", k)
    s2 = moment_variance(k, n_total, sizes)
    if s2 <= 0:
        raise NumericDomainError(("gamma",), f"s2 must be positive, got {float(s2)}")
    alpha = Fraction(m**2) / s2
    beta = s2 / m
    return GammaApproximation(
        m=m,
        s2=float(s2),
        g=h,
        alpha=float(alpha),
        beta=float(beta),
        pvalue=gamma_upper_tail(h, float(alpha), float(beta)),
    )


def approximate(h: float, k: int, n_total: int, sizes: Sequence[int]) -> Approximations:
    """Evaluate all four approximations.

    Every approximation is attempted even when an earlier one fails. The
    failures are then reported together in a single NumericDomainError.
    """
    steps: Dict[str, Callable[[], object]] = {
        "chi_square": lambda: chi_square_approximation(h, k),
        "f": lambda: f_approximation(h, k, n_total),
        "beta": lambda: beta_approximation(h, k, n_total, sizes),
        "gamma": lambda: gamma_approximation(h, k, n_total, sizes),
    }
    results: Dict[str, object] = {}
    failed: List[ApproximationName] = []
    reasons: List[str] = []
    for name in APPROXIMATIONS:
        try:
            results[name] = steps[name]()
        except NumericDomainError as e:
            failed.append(name)
            reasons.append(f"{name}: {e.reason}")

    if failed:
        raise NumericDomainError(failed, "; ".join(reasons))

    return Approximations(
        chi_square=results["chi_square"],  # type: ignore[arg-type]
        f=results["f"],  # type: ignore[arg-type]
        beta=results["beta"],  # type: ignore[arg-type]
        gamma=results["gamma"],  # type: ignore[arg-type]
    )
