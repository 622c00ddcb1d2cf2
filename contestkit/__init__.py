"""Data structures and algorithms for competitive programming: range trees,
disjoint sets, string matching, graphs, flows, number theory and combinatorics."""

__version__ = "0.1.0"