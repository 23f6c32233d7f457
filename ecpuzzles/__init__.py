"""Solvers for a score-tree puzzle and a four-dimensional debris-field puzzle."""

__version__ = "0.1.0"
__all__ = ["point", "problem19", "problem22", "ranges", "rule", "tree"]