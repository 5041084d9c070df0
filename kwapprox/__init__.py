"""
kwapprox: the Kruskal-Wallis test with four significance approximations.

The Kruskal-Wallis H statistic is the rank-based, non-parametric analogue of
one-way ANOVA. Its exact null distribution is intractable, and the usual
chi-square approximation is the most conservative one available. kwapprox
reports the chi-square, F, Beta and Gamma approximations side by side.

The package is a single pure pipeline:

- `stats.common`: pooled mid-ranking and upper-tail probabilities
- `stats.schemes.kruskal_wallis`: validation, group aggregation, the H
  statistic and its approximations, and the immutable result bundle
- `reporting`: the console report (and an optional plot)
- `api`: the `kwtest` facade

Example
-------
>>> import kwapprox
>>> assert hasattr(kwapprox, "kwtest")
>>> assert hasattr(kwapprox, "stats")
"""

import logging

from kwapprox import stats
from kwapprox.api.kw_test import (
    KruskalWallisConfig,
    kwtest,
    kwtest_from_frame,
    kwtest_from_source,
)
from kwapprox.core.errors import (
    InputValidationError,
    InvalidGroupLabelsError,
    KruskalWallisError,
    NumericDomainError,
)
from kwapprox.stats.schemes.kruskal_wallis.model import KruskalWallisResult, Observation

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "KruskalWallisConfig",
    "KruskalWallisResult",
    "Observation",
    "kwtest",
    "kwtest_from_frame",
    "kwtest_from_source",
    "KruskalWallisError",
    "InputValidationError",
    "InvalidGroupLabelsError",
    "NumericDomainError",
]
