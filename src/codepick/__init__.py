"""Heuristic, regex-based extraction of source code elements."""

__version__ = "0.1.0"
