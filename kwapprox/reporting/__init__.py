"""Reporters that render a Kruskal-Wallis result bundle."""
