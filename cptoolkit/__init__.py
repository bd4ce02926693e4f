"""Competitive-programming algorithms: modular math, graphs, strings, geometry and matrices."""

__version__ = "0.1.0"