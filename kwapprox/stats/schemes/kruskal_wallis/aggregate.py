"""
kwapprox.stats.schemes.kruskal_wallis.aggregate
===============================================

Per-group reduction of pooled ranks.

- `rank_observations(frame)`: attach pooled mid-ranks to the observation frame
- `aggregate_groups(frame)`: one `GroupSummary` per label, ascending by label

Examples
--------
>>> import polars as pl
>>> frame = pl.DataFrame({"value": [3.0, 1.0, 2.0, 4.0], "group": [5, 1, 1, 5]})
>>> ranked, t = rank_observations(frame)
>>> [(g.group, g.samples, g.median, g.ranks_sum) for g in aggregate_groups(ranked)]
[(1, 2, 1.5, 3.0), (5, 2, 3.5, 7.0)]
"""

from __future__ import annotations
from typing import Tuple

import polars as pl

from kwapprox.core.names import GroupLabel, GROUP_COL, RANK_COL, VALUE_COL
from kwapprox.stats.common.ranking import tied_rank
from kwapprox.stats.schemes.kruskal_wallis.model import GroupSummary


def rank_observations(frame: pl.DataFrame) -> Tuple[pl.DataFrame, float]:
    """Return (frame with a `rank` column, tie term T); labels are ignored."""
    ranks, tie_term = tied_rank(frame[VALUE_COL].to_numpy())
    return frame.with_columns(pl.Series(RANK_COL, ranks, dtype=pl.Float64)), tie_term


def aggregate_groups(ranked: pl.DataFrame) -> Tuple[GroupSummary, ...]:
    """Reduce a ranked observation frame to per-group summaries.

    Rows sharing a label collapse into one summary wherever they appear in
    the input. Summaries are ordered by ascending label, not input order.
    """
    table = (
        ranked.group_by(GROUP_COL)
        .agg(
            pl.len().alias("samples"),
            pl.col(VALUE_COL).median().alias("median"),
            pl.col(RANK_COL).sum().alias("ranks_sum"),
        )
        .with_columns((pl.col("ranks_sum") / pl.col("samples")).alias("mean_rank"))
        .sort(GROUP_COL)
    )
    return tuple(
        GroupSummary(
            group=GroupLabel(int(row[GROUP_COL])),
            samples=int(row["samples"]),
            median=float(row["median"]),
            ranks_sum=float(row["ranks_sum"]),
            mean_rank=float(row["mean_rank"]),
        )
        for row in table.iter_rows(named=True)
    )
