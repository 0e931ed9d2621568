"""Compact implementations of classic array, string, number, search and graph algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "graphs", "numbers", "search", "strings"]