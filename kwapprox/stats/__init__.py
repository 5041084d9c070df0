"""
Statistical building blocks for the Kruskal-Wallis test.

1. **Common** (kwapprox.stats.common):
   Theory-agnostic pieces: pooled mid-ranking with a tie term, and upper-tail
   probabilities of the reference distributions.

2. **Schemes** (kwapprox.stats.schemes):
   The Kruskal-Wallis scheme composed from the common pieces: validation,
   aggregation, the H statistic and its approximations.

Example:
--------
>>> from kwapprox.stats.common.ranking import tied_rank
>>> ranks, t = tied_rank([1.0, 1.0, 2.0])
>>> from kwapprox.stats.schemes.kruskal_wallis.core import kruskal_wallis
"""
