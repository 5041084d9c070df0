"""
kwapprox.core.errors
====================

Error taxonomy for the Kruskal-Wallis pipeline.

Every error derives from `KruskalWallisError`, itself a `ValueError`, so
callers that already guard argument errors keep working.

- `InputValidationError`: data is empty, malformed, non-real or non-finite.
- `InvalidGroupLabelsError`: group labels are not positive whole numbers.
- `NumericDomainError`: a quantity is mathematically undefined for the data
  (tie correction with N <= 1, non-positive Beta/Gamma shape parameters).

Examples
--------
>>> err = NumericDomainError(("beta", "gamma"), "s2 must be positive, got 0.0")
>>> err.approximations
('beta', 'gamma')
>>> str(err)
'beta, gamma approximation undefined: s2 must be positive, got 0.0'
>>> isinstance(err, ValueError)
True
"""

from __future__ import annotations
from typing import Iterable, Tuple

from kwapprox.core.names import ApproximationName


class KruskalWallisError(ValueError):
    """Base class for every error raised by kwapprox."""


class InputValidationError(KruskalWallisError):
    """Observations are malformed, non-real or non-finite."""


class InvalidGroupLabelsError(KruskalWallisError):
    """Group labels are not strictly positive whole numbers."""

    def __init__(self, message: str = "invalid group labels") -> None:
        super().__init__(message)


class NumericDomainError(KruskalWallisError):
    """An approximation (or the tie correction) is undefined for the data.

    Attributes:
        approximations: names of every failed computation, in pipeline order
        reason: human-readable description of the failure(s)
    """

    def __init__(self, approximations: Iterable[ApproximationName], reason: str) -> None:
        self.approximations: Tuple[ApproximationName, ...] = tuple(approximations)
        self.reason = reason
        names = ", ".join(self.approximations)
        super().__init__(f"{names} approximation undefined: {reason}")
