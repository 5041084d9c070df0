"""
kwapprox.stats.schemes.kruskal_wallis.statistics
================================================

The Kruskal-Wallis H statistic and its tie correction.

- Rbar = (N+1)/2 is the mean rank expected under H0
- D = sum n_g (meanrank_g - Rbar)^2 measures the spread of mean ranks
- Hbiased = 12 D / (N (N+1))
- CF = 1 - T / (N (N^2 - 1)), with T = sum(t^3 - t) over tied runs
- H = Hbiased / CF

Examples
--------
>>> from kwapprox.stats.schemes.kruskal_wallis.model import GroupSummary
>>> groups = (
...     GroupSummary(group=1, samples=2, median=1.5, ranks_sum=3.0, mean_rank=1.5),
...     GroupSummary(group=2, samples=2, median=3.5, ranks_sum=7.0, mean_rank=3.5),
... )
>>> stat = h_statistic(groups, n_total=4, tie_term=0.0)
>>> stat.h_biased, stat.cf, stat.h
(2.4, 1.0, 2.4)
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Sequence

from kwapprox.core.errors import NumericDomainError
from kwapprox.stats.schemes.kruskal_wallis.model import GroupSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HStatistic:
    h_biased: float
    cf: float
    h: float


def expected_mean_rank(n_total: int) -> float:
    """Mean rank under the null hypothesis of no group effect."""
    return (n_total + 1) / 2


def rank_dispersion(groups: Sequence[GroupSummary], n_total: int) -> float:
    """D = sum over groups of n_g * (meanrank_g - Rbar)**2."""
    rbar = expected_mean_rank(n_total)
    return sum(g.samples * (g.mean_rank - rbar) ** 2 for g in groups)


def tie_correction_factor(n_total: int, tie_term: float) -> float:
    """Return CF = 1 - T / (N (N^2 - 1)); 1 when there are no ties.

    Raises:
        NumericDomainError: N <= 1, where N (N^2 - 1) vanishes
    """
    if n_total <= 1:
        raise NumericDomainError(
            ("tie_correction",), f"need at least 2 observations, got N={n_total}"
        )
    if tie_term == 0:
        return 1.0
    return 1 - tie_term / (n_total * (n_total**2 - 1))


def h_statistic(
    groups: Sequence[GroupSummary], n_total: int, tie_term: float
) -> HStatistic:
    """Compute the uncorrected and tie-corrected H statistics.

    When every observation is tied, CF = 0 and every mean rank equals Rbar,
    so H is reported as 0.
    """
    cf = tie_correction_factor(n_total, tie_term)
    d = rank_dispersion(groups, n_total)
    h_biased = 12 * d / (n_total * (n_total + 1))

    if cf == 1.0:
        h = h_biased
    elif h_biased == 0:
        h = 0.0
    else:
        h = h_biased / cf

    logger.debug("D=%g Hbiased=%g CF=%g H=%g", d, h_biased, cf, h)
    return HStatistic(h_biased=h_biased, cf=cf, h=h)
