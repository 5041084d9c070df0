"""
kwapprox.stats.common.__init__.py
=================================

Common statistical methods and utilities.

Generic, reusable implementations that do not know about groups or the H
statistic: ranking with ties and distribution tail probabilities.
"""
