"""
kwapprox.backends.polars.io
===========================

Pluggable observation **sources** for reading (value, group) data.

- CSV file
- Parquet file

This module contains no statistics, only I/O. Sources return a polars
DataFrame; `kwapprox.api.kw_test.kwtest_from_source` selects the value and
group columns from it.

Doctest (smoke):
>>> from kwapprox.backends.polars.io import CsvFileSource
>>> _ = CsvFileSource("_obs.csv").read()  # doctest: +SKIP
"""

from __future__ import annotations
from typing import Optional, Protocol, Sequence

import polars as pl


class ObservationSource(Protocol):
    """A read-only source: storage -> DataFrame."""
    def read(self) -> pl.DataFrame: ...


class CsvFileSource:
    def __init__(self, path: str, separator: str = ",", has_header: bool = True) -> None:
        self.path = path
        self.separator = separator
        self.has_header = has_header
    def read(self) -> pl.DataFrame:
        return pl.read_csv(self.path, separator=self.separator, has_header=self.has_header)


class ParquetFileSource:
    def __init__(self, path: str, columns: Optional[Sequence[str]] = None) -> None:
        self.path = path
        self.columns = columns
    def read(self) -> pl.DataFrame:
        if self.columns is None:
            return pl.read_parquet(self.path)
        return pl.read_parquet(self.path, columns=list(self.columns))
