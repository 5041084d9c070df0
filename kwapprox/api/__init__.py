"""
kwapprox.api - User-Friendly Facade
===================================

Off-the-shelf entry points for running the Kruskal-Wallis test. In terms of
design patterns, this is the facade pattern: callers hand over data and get
back a result bundle without touching the pipeline stages.

Examples
--------
>>> from kwapprox.api.kw_test import kwtest, KruskalWallisConfig
>>> res = kwtest([[1.0, 1], [2.0, 1], [3.0, 2], [4.0, 2], [5.0, 3], [6.0, 3]],
...              KruskalWallisConfig(display=False))
>>> res.chi_square.df
2

Unified Interface
-----------------
- `kwtest()`: N-by-2 data (values, group labels)
- `kwtest_from_frame()`: two named columns of a polars DataFrame
- `kwtest_from_source()`: a CSV or Parquet observation source
"""
