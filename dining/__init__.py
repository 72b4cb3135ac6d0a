"""Threaded dining philosophers simulation: parameters, table and command line."""

__version__ = "0.1.0"
__all__ = ["params", "table", "cli"]