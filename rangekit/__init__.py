"""Segment trees, coordinate compression, permutations and rectangle-union area."""

__version__ = "0.1.0"