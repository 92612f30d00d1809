"""Classic algorithms and data structures for graphs, trees, strings, math, DP and search."""

__version__ = "0.1.0"