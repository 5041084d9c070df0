"""
kwapprox.stats.schemes.kruskal_wallis.core
==========================================

The Kruskal-Wallis pipeline: validated observations -> result bundle.

Stages, in order:
1. pooled mid-rank transform and tie term (`rank_observations`)
2. per-group aggregation (`aggregate_groups`)
3. uncorrected and tie-corrected H (`h_statistic`)
4. chi-square, F, Beta and Gamma approximations (`approximate`)

The pipeline is a pure function of its input and never prints.

Examples
--------
>>> res = kruskal_wallis([[1.0, 1], [2.0, 1], [3.0, 2], [4.0, 2], [5.0, 3], [6.0, 3]])
>>> res.n_total, res.k, res.labels
(6, 3, (1, 2, 3))
>>> round(res.h, 6)
4.571429
"""

from __future__ import annotations
import logging
from typing import Any

import polars as pl

from kwapprox.core.names import GroupLabel
from kwapprox.stats.schemes.kruskal_wallis.aggregate import (
    aggregate_groups,
    rank_observations,
)
from kwapprox.stats.schemes.kruskal_wallis.approximations import approximate
from kwapprox.stats.schemes.kruskal_wallis.model import KruskalWallisResult
from kwapprox.stats.schemes.kruskal_wallis.statistics import h_statistic
from kwapprox.stats.schemes.kruskal_wallis.validation import validate_observations

logger = logging.getLogger(__name__)


def kruskal_wallis_frame(frame: pl.DataFrame) -> KruskalWallisResult:
    """Run the pipeline on an already validated observation frame."""
    n_total = frame.height
    ranked, tie_term = rank_observations(frame)
    groups = aggregate_groups(ranked)
    k = len(groups)
    logger.debug("N=%d k=%d T=%g", n_total, k, tie_term)

    stat = h_statistic(groups, n_total, tie_term)
    approx = approximate(stat.h, k, n_total, [g.samples for g in groups])

    return KruskalWallisResult(
        n_total=n_total,
        k=k,
        labels=tuple(GroupLabel(g.group) for g in groups),
        groups=groups,
        h_biased=stat.h_biased,
        cf=stat.cf,
        h=stat.h,
        chi_square=approx.chi_square,
        f=approx.f,
        beta=approx.beta,
        gamma=approx.gamma,
    )


def kruskal_wallis(data: Any) -> KruskalWallisResult:
    """Validate `data` and compute the Kruskal-Wallis result bundle.

    Args:
        data: N-by-2 (value, group) array-like, sequence of Observation, or
            a two-column polars DataFrame

    Returns:
        KruskalWallisResult

    Raises:
        InputValidationError, InvalidGroupLabelsError: before any computation
        NumericDomainError: tie correction or an approximation is undefined
    """
    return kruskal_wallis_frame(validate_observations(data))
