"""
kwapprox.stats.schemes.kruskal_wallis.model
===========================================

Typed records for the Kruskal-Wallis scheme.

- `Observation`: one (value, group) pair
- `GroupSummary`: per-group aggregate (size, median, rank sum, mean rank)
- `ChiSquareApproximation`, `FApproximation`, `BetaApproximation`,
  `GammaApproximation`: one record per significance approximation
- `KruskalWallisResult`: the immutable result bundle
- TypedDict contracts for the plain-dict view returned by `to_dict()`

Examples
--------
>>> from kwapprox.stats.schemes.kruskal_wallis.model import GroupSummary
>>> g = GroupSummary(group=2, samples=3, median=1.5, ranks_sum=6.0, mean_rank=2.0)
>>> g.mean_rank
2.0
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Tuple, TypedDict

import polars as pl

from kwapprox.core.names import GroupLabel, GROUP_TABLE_COLUMNS


# --- Typed payloads for the dict view (mypy-friendly) ---


class GroupTablePayload(TypedDict):
    group: List[int]
    samples: List[int]
    median: List[float]
    ranks_sum: List[float]
    mean_rank: List[float]


class ChiSquarePayload(TypedDict):
    chi2: float
    df: int
    pvalue: float


class FPayload(TypedDict):
    F: float
    dfn: int
    dfd: int
    pvalue: float


class BetaPayload(TypedDict):
    m: int
    s2: float
    eta: float
    B: float
    alpha: float
    beta: float
    pvalue: float


class GammaPayload(TypedDict):
    m: int
    s2: float
    G: float
    alpha: float
    beta: float
    pvalue: float


# --- Typed records ---


@dataclass(frozen=True)
class Observation:
    value: float
    group: GroupLabel


@dataclass(frozen=True)
class GroupSummary:
    group: GroupLabel
    samples: int
    median: float
    ranks_sum: float
    mean_rank: float


@dataclass(frozen=True)
class ChiSquareApproximation:
    """Chi-square approximation (the most conservative)."""

    chi2: float
    df: int
    pvalue: float

    def to_dict(self) -> ChiSquarePayload:
        return {"chi2": self.chi2, "df": self.df, "pvalue": self.pvalue}


@dataclass(frozen=True)
class FApproximation:
    """F approximation (the least conservative).

    `dfd` is reported as N - df while the p-value uses N - k - 1 as the
    denominator degrees of freedom. Both are kept as distinct fields.
    `f` may be negative or infinite when N - 1 - H <= 0.
    """

    f: float
    dfn: int
    dfd: int
    pvalue: float

    def to_dict(self) -> FPayload:
        return {"F": self.f, "dfn": self.dfn, "dfd": self.dfd, "pvalue": self.pvalue}


@dataclass(frozen=True)
class BetaApproximation:
    """Moment-matched Beta approximation of H / eta."""

    m: int
    s2: float
    eta: float
    b: float
    alpha: float
    beta: float
    pvalue: float

    def to_dict(self) -> BetaPayload:
        return {
            "m": self.m,
            "s2": self.s2,
            "eta": self.eta,
            "B": self.b,
            "alpha": self.alpha,
            "beta": self.beta,
            "pvalue": self.pvalue,
        }


@dataclass(frozen=True)
class GammaApproximation:
    """Moment-matched Gamma approximation of H (shape alpha, scale beta)."""

    m: int
    s2: float
    g: float
    alpha: float
    beta: float
    pvalue: float

    def to_dict(self) -> GammaPayload:
        return {
            "m": self.m,
            "s2": self.s2,
            "G": self.g,
            "alpha": self.alpha,
            "beta": self.beta,
            "pvalue": self.pvalue,
        }


@dataclass(frozen=True)
class KruskalWallisResult:
    """
    Result bundle of a single Kruskal-Wallis run.

    Attributes
    ----------
    n_total : int
        Total number of observations N
    k : int
        Number of distinct groups
    labels : tuple of int
        Sorted unique group labels
    groups : tuple of GroupSummary
        One row per group, ascending by label
    h_biased : float
        H statistic without tie correction
    cf : float
        Correction factor for ties (1 when there are no ties)
    h : float
        Tie-corrected H statistic
    chi_square, f, beta, gamma
        The four significance approximations
    """

    n_total: int
    k: int
    labels: Tuple[GroupLabel, ...]
    groups: Tuple[GroupSummary, ...]
    h_biased: float
    cf: float
    h: float
    chi_square: ChiSquareApproximation
    f: FApproximation
    beta: BetaApproximation
    gamma: GammaApproximation

    def group_table(self) -> pl.DataFrame:
        """Return the group table as a polars DataFrame (ascending label)."""
        rows = [asdict(g) for g in self.groups]
        return pl.DataFrame(
            rows,
            schema={
                "group": pl.Int64,
                "samples": pl.Int64,
                "median": pl.Float64,
                "ranks_sum": pl.Float64,
                "mean_rank": pl.Float64,
            },
        ).select(list(GROUP_TABLE_COLUMNS))

    def to_dict(self) -> Dict[str, Any]:
        """Nested plain-dict view, keyed like the classic kwtest output."""
        table: GroupTablePayload = {
            "group": [int(g.group) for g in self.groups],
            "samples": [g.samples for g in self.groups],
            "median": [g.median for g in self.groups],
            "ranks_sum": [g.ranks_sum for g in self.groups],
            "mean_rank": [g.mean_rank for g in self.groups],
        }
        return {
            "N": self.n_total,
            "k": self.k,
            "groups": [int(label) for label in self.labels],
            "GroupTable": table,
            "Hbiased": self.h_biased,
            "CF": self.cf,
            "H": self.h,
            "Chi_square": self.chi_square.to_dict(),
            "F": self.f.to_dict(),
            "Beta": self.beta.to_dict(),
            "Gamma": self.gamma.to_dict(),
        }
