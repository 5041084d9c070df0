"""
Problem-specific implementations.

Available schemes:
- `kruskal_wallis`: Kruskal-Wallis one-way analysis of variance by ranks
"""
