"""Classic algorithm exercises as plain functions: sorting, search, greedy, DP and graphs."""

__version__ = "0.1.0"