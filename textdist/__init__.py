"""Algorithms to compare how similar two sequences are, with string helpers and a command line."""

__version__ = "1.0.2"