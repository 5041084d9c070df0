"""
Kruskal-Wallis one-way analysis of variance by ranks.

**Module Organization:**

- `model`: observation, group summary, approximation records, result bundle
- `validation`: named input predicates and `validate_observations`
- `aggregate`: pooled ranking and per-group reduction
- `statistics`: uncorrected and tie-corrected H
- `approximations`: chi-square, F, Beta and Gamma approximations
- `core`: the pipeline tying the stages together

Example Usage
-------------
>>> from kwapprox.stats.schemes.kruskal_wallis.core import kruskal_wallis
>>> res = kruskal_wallis([[1.0, 1], [2.0, 1], [3.0, 2], [4.0, 2], [5.0, 3], [6.0, 3]])
>>> [g.mean_rank for g in res.groups]
[1.5, 3.5, 5.5]
>>> res.cf
1.0
"""
