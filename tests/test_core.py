"""End-to-end properties of the Kruskal-Wallis pipeline."""

import math

import numpy as np
import polars as pl
import pytest
from scipy import stats

from kwapprox.core.errors import InvalidGroupLabelsError, NumericDomainError
from kwapprox.stats.schemes.kruskal_wallis.core import kruskal_wallis


def test_canonical_dataset(canonical):
    res = kruskal_wallis(canonical)
    assert res.n_total == 31
    assert res.k == 3
    assert res.labels == (1, 2, 3)
    assert [g.samples for g in res.groups] == [13, 9, 9]
    assert res.cf == 1.0
    assert res.h_biased == res.h
    assert res.h == pytest.approx(9167 / 1209, rel=1e-12)

    values = [row[0] for row in canonical]
    samples = [values[:13], values[13:22], values[22:]]
    ref = stats.kruskal(*samples)
    assert res.h == pytest.approx(ref.statistic, rel=1e-12)
    assert res.chi_square.pvalue == pytest.approx(ref.pvalue, rel=1e-10)


def test_rank_sums_total(tied):
    res = kruskal_wallis(tied)
    n = res.n_total
    assert sum(g.ranks_sum for g in res.groups) == pytest.approx(n * (n + 1) / 2)


def test_no_ties_means_no_correction():
    rng = np.random.default_rng(3)
    data = np.column_stack([rng.normal(size=40), rng.integers(1, 5, size=40)])
    res = kruskal_wallis(data)
    assert res.cf == 1.0
    assert res.h == res.h_biased


def test_ties_inflate_h(tied):
    res = kruskal_wallis(tied)
    assert 0 < res.cf < 1
    assert res.h >= res.h_biased


def test_row_permutation_gives_identical_bundle(canonical):
    order = np.random.default_rng(11).permutation(len(canonical))
    shuffled = [canonical[i] for i in order]
    assert kruskal_wallis(shuffled) == kruskal_wallis(canonical)


def test_idempotent(tied):
    assert kruskal_wallis(tied) == kruskal_wallis(tied)


def test_non_consecutive_labels_are_reported_ascending():
    data = [[1.0, 12], [2.0, 5], [3.0, 1], [4.0, 12], [5.0, 5], [6.0, 1], [7.0, 12]]
    res = kruskal_wallis(data)
    assert res.labels == (1, 5, 12)
    assert res.group_table()["group"].to_list() == [1, 5, 12]


def test_repeated_label_blocks_collapse():
    data = [[1.0, 1], [2.0, 1], [3.0, 2], [4.0, 2], [5.0, 3], [6.0, 3], [7.0, 1], [8.0, 2]]
    res = kruskal_wallis(data)
    assert res.k == 3
    assert [g.samples for g in res.groups] == [3, 3, 2]


def test_all_values_identical():
    data = [[2.5, g] for g in (1, 1, 2, 2, 2, 3, 3)]
    res = kruskal_wallis(data)
    assert all(g.mean_rank == 4.0 for g in res.groups)
    assert res.h_biased == 0.0
    assert res.h == 0.0
    assert res.chi_square.pvalue == 1.0
    assert res.gamma.pvalue == 1.0


def test_three_singletons_raise_domain_error():
    with pytest.raises(NumericDomainError) as excinfo:
        kruskal_wallis([[1.0, 1], [2.0, 2], [3.0, 3]])
    assert set(excinfo.value.approximations) == {"beta", "gamma"}


def test_single_observation_raises_domain_error():
    with pytest.raises(NumericDomainError) as excinfo:
        kruskal_wallis([[1.0, 1]])
    assert excinfo.value.approximations == ("tie_correction",)


def test_invalid_labels_raise_before_computation():
    with pytest.raises(InvalidGroupLabelsError):
        kruskal_wallis([[1.0, 1], [2.0, 0]])


def test_to_dict_mirrors_result(canonical):
    res = kruskal_wallis(canonical)
    d = res.to_dict()
    assert d["N"] == 31 and d["k"] == 3
    assert d["groups"] == [1, 2, 3]
    assert d["GroupTable"]["samples"] == [13, 9, 9]
    assert d["Chi_square"]["chi2"] == res.h
    assert d["F"]["dfd"] == 29
    assert d["Beta"]["B"] == res.beta.b
    assert d["Gamma"]["G"] == res.h
    assert all(math.isfinite(d[name]["pvalue"]) for name in ("Chi_square", "F", "Beta", "Gamma"))


def test_group_table_frame(canonical):
    table = kruskal_wallis(canonical).group_table()
    assert table.columns == ["group", "samples", "median", "ranks_sum", "mean_rank"]
    assert table.schema["samples"] == pl.Int64
    assert table["ranks_sum"].sum() == 496.0
