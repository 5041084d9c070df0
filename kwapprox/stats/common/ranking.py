"""
kwapprox.stats.common.ranking
=============================

Pooled ranking with mid-rank tie handling.

The rank transform is theory-agnostic: it ignores group labels and only
needs the raw values. Tied values share the average of the ranks they would
jointly occupy, so the ranks always sum to N(N+1)/2.

Examples
--------
>>> ranks, t = tied_rank([10.0, 20.0, 20.0, 5.0])
>>> ranks.tolist()
[2.0, 3.5, 3.5, 1.0]
>>> t
6.0
"""

from __future__ import annotations
from typing import Sequence, Tuple, Union

import numpy as np
from scipy.stats import rankdata

ArrayLike = Union[Sequence[float], np.ndarray]


def tie_adjustment(values: ArrayLike) -> float:
    """Return T = sum(t**3 - t) over every run of tied values.

    Runs of length one contribute nothing, so T == 0 iff all values are
    distinct.

    Args:
        values: Raw observations (any order)

    Returns:
        Tie correction term as a float
    """
    _, counts = np.unique(np.asarray(values, dtype=float), return_counts=True)
    tied = counts[counts > 1].astype(float)
    return float(np.sum(tied**3 - tied))


def tied_rank(values: ArrayLike) -> Tuple[np.ndarray, float]:
    """Rank values ascending with mid-ranks for ties.

    Args:
        values: Raw observations, length >= 1

    Returns:
        Tuple of (ranks, tie_term) where ranks[i] is the pooled rank of
        values[i] and tie_term is `tie_adjustment(values)`.
    """
    arr = np.asarray(values, dtype=float)
    ranks = rankdata(arr, method="average").astype(float)
    return ranks, tie_adjustment(arr)
