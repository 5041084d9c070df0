"""
kwapprox.stats.schemes.kruskal_wallis.validation
================================================

Input validation for the Kruskal-Wallis pipeline.

Each rule is a named predicate that can be tested on its own;
`validate_observations` applies them in order and returns a typed polars
frame (`value: Float64`, `group: Int64`) or raises before any computation.

Accepted inputs:
- an N-by-2 array-like of (value, group) rows
- a sequence of `Observation` records
- a polars DataFrame with exactly two numeric columns (value first)

Examples
--------
>>> frame = validate_observations([[1.5, 1], [2.5, 2], [0.5, 1]])
>>> frame.columns
['value', 'group']
>>> frame["group"].to_list()
[1, 2, 1]
>>> validate_observations([[1.5, 1.5]])
Traceback (most recent call last):
...
kwapprox.core.errors.InvalidGroupLabelsError: invalid group labels: all group labels must be whole numbers
"""

from __future__ import annotations
import logging
from typing import Any, Sequence

import numpy as np
import polars as pl

from kwapprox.core.errors import InputValidationError, InvalidGroupLabelsError
from kwapprox.core.names import GROUP_COL, VALUE_COL
from kwapprox.stats.schemes.kruskal_wallis.model import Observation

logger = logging.getLogger(__name__)


# --- Named predicates ---


def is_nonempty(matrix: np.ndarray) -> bool:
    return matrix.shape[0] >= 1


def has_two_columns(matrix: np.ndarray) -> bool:
    return matrix.ndim == 2 and matrix.shape[1] == 2


def is_real(matrix: np.ndarray) -> bool:
    """Integer or floating dtype; booleans, complex and objects are rejected."""
    return matrix.dtype.kind in "iuf"


def is_finite(matrix: np.ndarray) -> bool:
    return bool(np.all(np.isfinite(matrix)))


def are_whole_numbers(labels: np.ndarray) -> bool:
    return bool(np.all(labels == np.trunc(labels)))


def are_positive(labels: np.ndarray) -> bool:
    return bool(np.all(labels > 0))


def fits_label_range(labels: np.ndarray) -> bool:
    """Labels must survive the cast to Int64 unchanged."""
    if labels.dtype.kind == "f":
        return bool(np.all(labels < 2.0**63))
    return bool(np.all(labels <= np.iinfo(np.int64).max))


# --- Coercion ---


def _frame_to_matrix(frame: pl.DataFrame) -> np.ndarray:
    if frame.width != 2:
        raise InputValidationError(
            f"data must have exactly 2 columns (value, group), got {frame.width}"
        )
    for name, dtype in zip(frame.columns, frame.dtypes):
        if not dtype.is_numeric():
            raise InputValidationError(
                f"column {name!r} must be real-valued, got {dtype}"
            )
    return frame.select(pl.all().cast(pl.Float64)).to_numpy()


def _as_matrix(data: Any) -> np.ndarray:
    if isinstance(data, pl.DataFrame):
        return _frame_to_matrix(data)
    if isinstance(data, Sequence) and data and isinstance(data[0], Observation):
        return np.array([[o.value, o.group] for o in data], dtype=float)
    try:
        return np.asarray(data)
    except (TypeError, ValueError) as e:
        raise InputValidationError(f"data is not an N-by-2 numeric matrix: {e}") from e


def validate_observations(data: Any) -> pl.DataFrame:
    """Validate raw input and return the observation frame.

    Args:
        data: N-by-2 array-like, sequence of Observation, or polars DataFrame

    Returns:
        DataFrame with columns `value` (Float64) and `group` (Int64),
        in input order

    Raises:
        InputValidationError: empty, wrong shape, non-real or non-finite data
        InvalidGroupLabelsError: non-integral, non-positive or out-of-range
            group labels
    """
    matrix = _as_matrix(data)

    if not has_two_columns(matrix):
        raise InputValidationError(
            f"data must be an N-by-2 matrix (value, group), got shape {matrix.shape}"
        )
    if not is_nonempty(matrix):
        raise InputValidationError("data must contain at least one observation")
    if not is_real(matrix):
        raise InputValidationError(f"data must be real-valued, got dtype {matrix.dtype}")
    if not is_finite(matrix):
        raise InputValidationError("data must be finite (no NaN or infinite values)")

    labels = matrix[:, 1]
    if not are_whole_numbers(labels):
        raise InvalidGroupLabelsError(
            "invalid group labels: all group labels must be whole numbers"
        )
    if not are_positive(labels):
        raise InvalidGroupLabelsError(
            "invalid group labels: group labels must be positive whole numbers"
        )
    if not fits_label_range(labels):
        raise InvalidGroupLabelsError(
            "invalid group labels: group labels must be below 2**63"
        )

    logger.debug("validated %d observations", matrix.shape[0])
    return pl.DataFrame(
        {
            VALUE_COL: matrix[:, 0].astype(float),
            GROUP_COL: labels.astype(np.int64),
        }
    )
