"""Fritter: short posts, quotes, likes and highlights."""

__version__ = "1.0.0"
