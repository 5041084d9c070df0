"""
kwapprox.core.names
===================

Typed names shared across the package.

- `GroupLabel`: NewType wrapper for positive whole-number group labels.
- `ApproximationName`: Literal tags naming each approximation of H.
- Column names used by the polars frames that flow through the pipeline.

Examples
--------
>>> from kwapprox.core.names import GroupLabel, APPROXIMATIONS
>>> g = GroupLabel(3); isinstance(g, int)
True
>>> APPROXIMATIONS
('chi_square', 'f', 'beta', 'gamma')
"""

from __future__ import annotations
from typing import Literal, NewType, Tuple

# Thin wrapper over int for group identifiers.
GroupLabel = NewType("GroupLabel", int)

# Approximation tags (also used to name failures in NumericDomainError).
ApproximationName = Literal["tie_correction", "chi_square", "f", "beta", "gamma"]
APPROXIMATIONS: Tuple[ApproximationName, ...] = ("chi_square", "f", "beta", "gamma")

# Column names of the validated observation frame.
VALUE_COL = "value"
GROUP_COL = "group"
RANK_COL = "rank"

# Column names of the group table.
GROUP_TABLE_COLUMNS: Tuple[str, ...] = (
    "group",
    "samples",
    "median",
    "ranks_sum",
    "mean_rank",
)
