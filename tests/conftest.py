"""Shared fixtures for the kwapprox test suite."""

import pytest


CANONICAL_VALUES = [
    7.79, 9.16, 7.64, 10.28, 9.12, 9.24, 8.40, 8.60, 8.04, 8.45, 9.51, 8.15, 7.69,
    8.84, 9.92, 7.20, 9.25, 9.45, 9.14, 9.99, 9.21, 9.06,
    8.65, 10.70, 10.24, 8.62, 9.94, 10.55, 10.13, 9.78, 9.01,
]
CANONICAL_GROUPS = [1] * 13 + [2] * 9 + [3] * 9


@pytest.fixture
def canonical():
    """The classic 31-point, 3-group example as an N-by-2 list of rows."""
    return [[v, g] for v, g in zip(CANONICAL_VALUES, CANONICAL_GROUPS)]


@pytest.fixture
def tied():
    """Observations with ties inside and across groups."""
    values = [1.0, 2.0, 2.0, 3.0, 4.0, 4.0, 4.0, 5.0, 6.0, 6.0, 7.0, 8.0]
    groups = [1, 1, 2, 1, 2, 2, 3, 3, 3, 1, 3, 2]
    return [[v, g] for v, g in zip(values, groups)]
