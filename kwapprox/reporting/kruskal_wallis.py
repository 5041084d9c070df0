"""
kwapprox.reporting.kruskal_wallis
=================================

Console reporter for a Kruskal-Wallis result bundle.

The reporter only reads a `KruskalWallisResult`; the statistical pipeline
never depends on it. Tables are polars DataFrames so they can be reused
outside the text report.

Examples
--------
>>> from kwapprox.stats.schemes.kruskal_wallis.core import kruskal_wallis
>>> from kwapprox.reporting.kruskal_wallis import KruskalWallisReporter
>>> res = kruskal_wallis([[1.0, 1], [2.0, 1], [3.0, 2], [4.0, 2], [5.0, 3], [6.0, 3]])
>>> rep = KruskalWallisReporter(res)
>>> rep.approximation_tables()["chi_square"].columns
['Chi_square', 'df', 'p_value']
>>> rep.render().splitlines()[0]
'KRUSKAL-WALLIS TEST'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, TYPE_CHECKING

import polars as pl

try:
    import matplotlib.pyplot as plt

    MATPLOTLIB_AVAILABLE = True
except ImportError:
    plt = None  # type: ignore[assignment]
    MATPLOTLIB_AVAILABLE = False

if TYPE_CHECKING:
    from kwapprox.stats.schemes.kruskal_wallis.model import KruskalWallisResult

RULE = "-" * 80

TITLES = {
    "chi_square": "Chi-square approximation (the most conservative)",
    "f": "F-statistic approximation (the less conservative)",
    "beta": "Beta distribution approximation",
    "gamma": "Gamma distribution approximation",
}


def _format(df: pl.DataFrame) -> str:
    with pl.Config(
        tbl_hide_dataframe_shape=True,
        tbl_hide_column_data_types=True,
        float_precision=4,
        tbl_cols=-1,
        tbl_rows=-1,
    ):
        return str(df)


@dataclass
class KruskalWallisReporter:
    """Text (and optional plot) view of a Kruskal-Wallis result."""

    result: "KruskalWallisResult"

    def group_table(self) -> pl.DataFrame:
        """Group, Samples, Median, Ranks_sum, Mean_rank; ascending by group."""
        return self.result.group_table().rename(
            {
                "group": "Group",
                "samples": "Samples",
                "median": "Median",
                "ranks_sum": "Ranks_sum",
                "mean_rank": "Mean_rank",
            }
        )

    def approximation_tables(self) -> Dict[str, pl.DataFrame]:
        """One single-row table per approximation, keyed by approximation name."""
        r = self.result
        return {
            "chi_square": pl.DataFrame(
                {
                    "Chi_square": [r.chi_square.chi2],
                    "df": [r.chi_square.df],
                    "p_value": [r.chi_square.pvalue],
                }
            ),
            "f": pl.DataFrame(
                {
                    "F": [r.f.f],
                    "df_num": [r.f.dfn],
                    "df_denom": [r.f.dfd],
                    "p_value": [r.f.pvalue],
                }
            ),
            "beta": pl.DataFrame(
                {
                    "mean": [r.beta.m],
                    "variance": [r.beta.s2],
                    "B": [r.beta.b],
                    "alpha": [r.beta.alpha],
                    "beta": [r.beta.beta],
                    "p_value": [r.beta.pvalue],
                }
            ),
            "gamma": pl.DataFrame(
                {
                    "mean": [r.gamma.m],
                    "variance": [r.gamma.s2],
                    "G": [r.gamma.g],
                    "alpha": [r.gamma.alpha],
                    "beta": [r.gamma.beta],
                    "p_value": [r.gamma.pvalue],
                }
            ),
        }

    def render(self) -> str:
        """Return the full text report."""
        lines: List[str] = ["KRUSKAL-WALLIS TEST", RULE, _format(self.group_table())]
        lines.append(
            f"Correction factor for ties: {self.result.cf:0.4f}\tH: {self.result.h:0.4f}"
        )
        lines.extend([RULE, ""])
        for name, table in self.approximation_tables().items():
            lines.extend([TITLES[name], RULE, _format(table), ""])
        return "\n".join(lines)

    def print(self) -> None:
        """Write the text report to standard output."""
        print(self.render())

    def plot(self, show: bool = True) -> None:
        """
        Bar chart of the mean rank per group against Rbar = (N+1)/2.

        Bars far from the dashed line drive the H statistic.
        """
        if not MATPLOTLIB_AVAILABLE:
            raise ImportError("matplotlib is required for plotting (install the 'plot' extra)")

        table = self.result.group_table()
        labels = [str(g) for g in table["group"].to_list()]
        rbar = (self.result.n_total + 1) / 2

        plt.figure(figsize=(6.5, 4.2))
        plt.bar(labels, table["mean_rank"].to_list(), label="Mean rank")
        plt.axhline(rbar, linestyle="--", linewidth=1, color="red", label="Rbar (H0)")
        plt.xlabel("Group")
        plt.ylabel("Mean rank")
        plt.title(f"Kruskal-Wallis (H = {self.result.h:0.4f})")
        plt.legend()
        plt.tight_layout()
        if show:
            plt.show()
