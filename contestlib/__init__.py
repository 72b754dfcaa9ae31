"""Algorithms and data structures for programming contests: graphs, trees,
strings, geometry, number theory and range queries."""

__version__ = "0.1.0"